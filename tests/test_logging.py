import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from problem_details.logging import LoggingSettings, configure_logging, get_logger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_configure_logging_renders_json(
    restore_logging: None, capsys: pytest.CaptureFixture[str]
) -> None:
    configure_logging(LoggingSettings(LOG_LEVEL="INFO", LOG_JSON=True))
    get_logger("tests.logging").warning("problem_raised", problem_type="not_found", status=404)

    event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert event["event"] == "problem_raised"
    assert event["problem_type"] == "not_found"
    assert event["status"] == 404
    assert event["level"] == "warning"
    assert "timestamp" in event


def test_configure_logging_filters_below_level(
    restore_logging: None, capsys: pytest.CaptureFixture[str]
) -> None:
    configure_logging(LoggingSettings(LOG_LEVEL="ERROR", LOG_JSON=True))
    get_logger("tests.logging.quiet").info("request_validation_failed", errors=2)

    assert "request_validation_failed" not in capsys.readouterr().out
