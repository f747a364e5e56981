"""Unit tests for the log formatters."""
import json
import logging

import pytest

from roleplay.core.logging import ConsoleFormatter, JSONFormatter, prompt_context, setup_logging
from roleplay.models.prompt import LevelId, PracticeMode


def make_record(level=logging.INFO, **extra):
    record = logging.LogRecord(
        name="roleplay.test",
        level=level,
        pathname=__file__,
        lineno=10,
        msg="Prompt resolved",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.unit
class TestJSONFormatter:
    def test_includes_context_fields(self):
        record = make_record(scenario_id="atTheCafe", turn_number=4, latency_ms=0.4)
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "Prompt resolved"
        assert data["level"] == "INFO"
        assert data["scenario_id"] == "atTheCafe"
        assert data["turn_number"] == 4
        assert data["latency_ms"] == 0.4
        assert "location" not in data

    def test_warnings_carry_location(self):
        data = json.loads(JSONFormatter().format(make_record(logging.WARNING)))
        assert data["location"].endswith(":10")


@pytest.mark.unit
class TestConsoleFormatter:
    def test_context_prefix(self):
        record = make_record(scenario_id="jobInterview", level_id="beginner", turn_number=2)
        line = ConsoleFormatter().format(record)
        assert "scenario=jobInterview level=beginner turn=2 Prompt resolved" in line

    def test_latency_suffix(self):
        line = ConsoleFormatter().format(make_record(mode="free", latency_ms=1.5))
        assert line.endswith(" mode=free Prompt resolved (1.5ms)")


@pytest.mark.unit
class TestSetupLogging:
    def test_installs_single_handler(self, restore_root_logger):
        setup_logging("DEBUG", json_logs=True)
        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1
        assert isinstance(restore_root_logger.handlers[0].formatter, JSONFormatter)
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_console_by_default(self, restore_root_logger):
        setup_logging()
        assert isinstance(restore_root_logger.handlers[0].formatter, ConsoleFormatter)


@pytest.mark.unit
class TestPromptContext:
    def test_enums_logged_by_value(self):
        extra = prompt_context("jobInterview", LevelId.BEGINNER, PracticeMode.FREE, 3)
        assert extra == {
            "scenario_id": "jobInterview",
            "level_id": "beginner",
            "mode": "free",
            "turn_number": 3,
        }

    def test_unset_fields_left_out(self):
        assert prompt_context(None, "advanced") == {"level_id": "advanced"}
