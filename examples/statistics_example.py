"""Report host statistics and status to the 0-Core log monitor.

Run with:
    python examples/statistics_example.py

Every record is written to stdout in the monitor's wire format, e.g.::

    10::host.load:0.42|A|host=node1
"""

import logging
import os
import time

from zerolog import Level, Logger, ZeroLogHandler, average, differentiate

logger = Logger()


def report_load(host: str) -> None:
    """Report the 1-minute load average, averaged by the monitor."""
    load1, _, _ = os.getloadavg()
    logger.statistics(average("host.load", load1, {"host": host}))


def report_uptime(host: str, started: float) -> None:
    """Report process uptime as a counter the monitor differentiates."""
    uptime = time.monotonic() - started
    logger.statistics(differentiate("process.uptime", uptime, {"host": host}))


def main() -> None:
    host = os.uname().nodename
    started = time.monotonic()

    # Route stdlib logging through the wire format as well
    app_log = logging.getLogger("statistics_example")
    app_log.addHandler(ZeroLogHandler())
    app_log.setLevel(logging.INFO)

    app_log.info("collecting statistics for %s", host)
    report_load(host)
    report_uptime(host, started)

    logger.json({"host": host, "status": "ok"})
    logger.log(Level.YAML, {"host": host, "checks": ["load", "uptime"]})


if __name__ == "__main__":
    main()
