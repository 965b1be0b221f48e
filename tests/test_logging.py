"""Tests for structured log formatting."""

import logging

from idea_engine.core.logging import StructuredFormatter, log_with_context


def _record(msg="Idea moved", **extra):
    logger = logging.getLogger("idea_engine.tests")
    return logger.makeRecord(
        logger.name, logging.INFO, __file__, 10, msg, None, None, extra=extra
    )


class TestStructuredFormatter:
    def test_renders_core_fields(self):
        line = StructuredFormatter().format(_record())

        assert "level=INFO" in line
        assert "message=Idea moved" in line

    def test_renders_extra_context(self):
        record = _record(session_id="s-1", idea_id="i-1", status="under_review")

        line = StructuredFormatter().format(record)

        assert "session_id=s-1" in line
        assert "idea_id=i-1" in line
        assert "status=under_review" in line

    def test_omits_unset_context(self):
        line = StructuredFormatter().format(_record())

        assert "idea_id=" not in line
        assert "session_id=" not in line


class TestLogWithContext:
    def test_context_reaches_formatted_output(self):
        logger = logging.getLogger("idea_engine.tests.context")
        records = []

        class _Capture(logging.Handler):
            def emit(self, record):
                records.append(record)

        handler = _Capture()
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        try:
            log_with_context(
                logger, logging.INFO, "Assessment submitted",
                session_id="s-1", idea_id="i-1", priority="quick_win",
            )
        finally:
            logger.removeHandler(handler)

        assert len(records) == 1
        line = StructuredFormatter().format(records[0])
        assert "session_id=s-1" in line
        assert "idea_id=i-1" in line
        assert "priority=quick_win" in line
