"""Tests for structlog configuration."""

import json
import logging

import pytest
import structlog

from lightbnb.logging import configure_logging, get_logger, parse_level


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True)
        get_logger("lightbnb.test").info("property_query_built", params=[1, 10])

        line = capsys.readouterr().err.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "property_query_built"
        assert event["level"] == "info"
        assert event["params"] == [1, 10]
        assert "timestamp" in event

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=True, level=logging.INFO)
        get_logger("lightbnb.test").debug("hidden_event")
        assert "hidden_event" not in capsys.readouterr().err

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(json_output=False, level=logging.DEBUG)
        get_logger("lightbnb.test").debug("visible_event", user_id=3)
        assert "visible_event" in capsys.readouterr().err

    def test_logger_is_filtering_not_stdlib(self) -> None:
        configure_logging(level=logging.WARNING)
        bound = get_logger("lightbnb.test").bind()
        assert isinstance(bound, structlog.BoundLoggerBase)
        assert not isinstance(bound, structlog.stdlib.BoundLogger)


class TestParseLevel:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("debug", logging.DEBUG),
            (" WARNING ", logging.WARNING),
            ("error", logging.ERROR),
            ("nonsense", logging.INFO),
        ],
    )
    def test_parse_level(self, name: str, expected: int) -> None:
        assert parse_level(name) == expected
