"""BDD step definitions for wire format scenarios."""

from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from zerolog.adapters.sinks import InMemorySink
from zerolog.core.errors import ErrorKind, ZeroLogError
from zerolog.core.logger import log
from zerolog.core.models import Level, StatisticsRecord


@dataclass
class WireScenarioContext:
    """Mutable state shared between the steps of one scenario."""

    sink: InMemorySink = field(default_factory=InMemorySink)
    key: str = ""
    value: float = 0.0
    aggregation: str = "A"
    tags: dict[str, Any] = field(default_factory=dict)
    error: ZeroLogError | None = None


@pytest.fixture
def ctx() -> WireScenarioContext:
    """Fresh scenario context for each test."""
    return WireScenarioContext()


def _log(ctx: WireScenarioContext, level: int, message: Any) -> None:
    try:
        log(level, message, ctx.sink)
    except ZeroLogError as exc:
        ctx.error = exc


@given("an empty sink")
def given_empty_sink(ctx: WireScenarioContext) -> None:
    ctx.sink.clear()


@given(
    parsers.re(
        r'a statistics record "(?P<key>.*)" with value (?P<value>[-0-9.e]+)'
        r' aggregated by "(?P<aggregation>.*)"'
    ),
    converters={"value": float},
)
def given_statistics_record(
    ctx: WireScenarioContext, key: str, value: float, aggregation: str
) -> None:
    ctx.key = key
    ctx.value = value
    ctx.aggregation = aggregation


@given(parsers.parse('the record is tagged "{tag}" = "{tag_value}"'))
def given_tag(ctx: WireScenarioContext, tag: str, tag_value: str) -> None:
    ctx.tags[tag] = tag_value


@when(
    parsers.re(r'the message "(?P<message>.*)" is logged at level (?P<level>\d+)'),
    converters={"level": int},
)
def when_message_logged(ctx: WireScenarioContext, message: str, level: int) -> None:
    _log(ctx, level, message)


@when(
    parsers.parse(
        'the lines "{first}" and "{second}" are logged at level {level:d}'
    )
)
def when_lines_logged(
    ctx: WireScenarioContext, first: str, second: str, level: int
) -> None:
    _log(ctx, level, f"{first}\n{second}")


@when(
    parsers.parse(
        'the mapping with "{key}" = "{value}" is logged at level {level:d}'
    )
)
def when_mapping_logged(
    ctx: WireScenarioContext, key: str, value: str, level: int
) -> None:
    _log(ctx, level, {key: value})


@when("the statistics record is logged")
def when_statistics_logged(ctx: WireScenarioContext) -> None:
    record = StatisticsRecord(
        key=ctx.key, value=ctx.value, aggregation=ctx.aggregation, tags=ctx.tags
    )
    _log(ctx, Level.STATISTICS, record)


@then(parsers.parse('the sink receives the line "{line}"'))
def then_sink_receives_line(ctx: WireScenarioContext, line: str) -> None:
    assert ctx.error is None
    assert ctx.sink.lines == [line + "\n"]


@then(
    parsers.parse(
        'the sink receives a block at level {level:d} containing "{first}" and "{second}"'
    )
)
def then_sink_receives_block(
    ctx: WireScenarioContext, level: int, first: str, second: str
) -> None:
    assert ctx.error is None
    assert ctx.sink.lines == [f"{level}:::\n{first}\n{second}\n:::\n"]


@then(parsers.parse('the call fails with "{kind}"'))
def then_call_fails(ctx: WireScenarioContext, kind: str) -> None:
    assert ctx.error is not None
    assert ctx.error.kind is ErrorKind[kind]


@then("the sink receives nothing")
def then_sink_receives_nothing(ctx: WireScenarioContext) -> None:
    assert ctx.sink.lines == []
