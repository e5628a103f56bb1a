from __future__ import annotations

from typing import Any

from .base import Reporter


class SilentReporter(Reporter):
    """Discards everything (``--reporter silent`` and tests)."""

    def _discard(self, *args: Any, **kwargs: Any) -> None:
        return None

    start_task = advance = end_task = _discard
    status = verbose = warning = error = section = _discard
