import sys

from .base import (
    Reporter,
    TaskStatus,
    get_reporter,
    set_reporter,
    task,
)
from .base import (
    set_verbosity,
    get_verbosity,
)
from .plain import PlainReporter
from .silent import SilentReporter
from .rich_reporter import RichReporter

REPORTER_KINDS = ("plain", "rich", "silent")

__all__ = [
    "Reporter",
    "TaskStatus",
    "get_reporter",
    "set_reporter",
    "task",
    "set_verbosity",
    "get_verbosity",
    "PlainReporter",
    "SilentReporter",
    "RichReporter",
    "REPORTER_KINDS",
    "create_reporter",
]


def create_reporter(kind: str) -> Reporter:
    """Build the reporter named on the command line.

    ``rich`` falls back to ``plain`` when stderr is not a terminal.
    """
    if kind == "silent":
        return SilentReporter()
    if kind == "rich" and sys.stderr.isatty():
        return RichReporter()
    if kind not in REPORTER_KINDS:
        raise ValueError(f"Unknown reporter {kind!r}")
    return PlainReporter()
