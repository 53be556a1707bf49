import json
import logging

import pytest
import structlog

from zb_core.logging import _level_from_str, configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_records_are_json_lines_on_stderr(capsys):
    configure_logging("debug")
    get_logger("zb_core.test").info("encoded text", code_points=3)
    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["msg"] == "encoded text"
    assert record["component"] == "zb_core.test"
    assert record["level"] == "info"
    assert record["code_points"] == 3
    assert "ts" in record


def test_level_filters_records(capsys):
    configure_logging("warning")
    get_logger("zb_core.test").info("hidden")
    assert capsys.readouterr().err == ""


@pytest.mark.parametrize(
    "name, level",
    [("debug", logging.DEBUG), ("error", logging.ERROR), ("verbose", logging.INFO)],
)
def test_level_from_str(name, level):
    assert _level_from_str(name) == level
