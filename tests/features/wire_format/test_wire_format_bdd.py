"""BDD tests for the 0-Core wire format.

Step definitions are in conftest.py.
"""

import pytest
from pytest_bdd import scenarios

scenarios("wire_format.feature")

pytestmark = [
    pytest.mark.tier(2),
    pytest.mark.tra("Wire.Format"),
]
