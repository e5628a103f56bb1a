import io
import logging

import pytest

from assetcodec.logging import configure_logging, get_logger
from assetcodec.reporting import (
    PlainReporter,
    TaskStatus,
    set_reporter,
    set_verbosity,
    task,
)


def _plain():
    stream = io.StringIO()
    rep = PlainReporter(stream=stream, use_color=False)
    set_reporter(rep)
    return stream


def test_task_success_line_includes_stats():
    stream = _plain()
    with task("t", "Write level.map") as stats:
        stats.update(entities=2, brushes=5, bytes=100)
    out = stream.getvalue()
    assert "Write level.map" in out
    assert "[entities=2 brushes=5 bytes=100]" in out


def test_task_failure_marks_and_reraises():
    stream = _plain()
    with pytest.raises(RuntimeError):
        with task("t", "Decode"):
            raise RuntimeError("boom")
    assert "Decode" in stream.getvalue()


def test_advance_only_shown_when_verbose():
    stream = _plain()
    rep = PlainReporter(stream=stream, use_color=False)
    rep.start_task("t", "Write", total=2)
    rep.advance("t", current_item="worldspawn")
    assert "worldspawn" not in stream.getvalue()
    set_verbosity(1)
    rep.advance("t", current_item="func_wall")
    rep.end_task("t", TaskStatus.SUCCESS)
    out = stream.getvalue()
    assert "Write: func_wall (2/2)" in out
    assert " 2/2 " in out


def test_logger_records_route_to_reporter():
    stream = _plain()
    configure_logging(0)
    log = get_logger()
    log.warning("Tried to create brush from %d sides!", 2)
    log.info("hello")
    log.debug("hidden")
    out = stream.getvalue()
    assert "WARN: Tried to create brush from 2 sides!" in out
    assert "INFO: hello" in out
    assert "hidden" not in out


def test_debug_records_need_verbosity():
    stream = _plain()
    set_verbosity(1)
    configure_logging(1)
    get_logger().debug("detail")
    assert "VERB1: detail" in stream.getvalue()
    assert get_logger().level == logging.DEBUG


def test_rich_reporter_prints_completion_and_status():
    from rich.console import Console

    from assetcodec.reporting import RichReporter

    buf = io.StringIO()
    rep = RichReporter(console=Console(file=buf, force_terminal=False, width=100))
    set_reporter(rep)
    with task("m", "Load stub.mat") as stats:
        stats["parameters"] = 3
    rep.status("Material summary: shader=unlitgeneric")
    out = buf.getvalue()
    assert "Load stub.mat" in out
    assert "[parameters=3]" in out
    assert "INFO: Material summary: shader=unlitgeneric" in out


def test_summary_line():
    stream = _plain()
    from assetcodec.reporting import get_reporter

    get_reporter().summary("Map", entities=1, brushes=4)
    assert stream.getvalue() == "INFO: Map summary: entities=1 brushes=4\n"


def test_create_reporter_kinds():
    from assetcodec.reporting import create_reporter, SilentReporter

    assert isinstance(create_reporter("silent"), SilentReporter)
    assert isinstance(create_reporter("plain"), PlainReporter)
    with pytest.raises(ValueError):
        create_reporter("jsonl")
