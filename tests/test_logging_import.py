"""
Test that passop_logging can be imported without circular import and logger works.
"""

from __future__ import annotations


def test_logging_import():
    """Import get_logger from passop_logging and use the logger."""
    from backend_passop.passop_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    # Smoke test: call info (should not raise)
    logger.info("test_message", key="value")


def test_event_renamed_to_event_type():
    """The normalizer moves structlog's 'event' key to event_type and mirrors it as message."""
    from backend_passop.passop_logging.logger import _normalize_event

    out = _normalize_event(None, "info", {"event": "password_created", "inserted_id": "abc"})
    assert out == {"event_type": "password_created", "message": "password_created", "inserted_id": "abc"}


def test_configure_structlog_level_and_format(capsys):
    """configure_structlog takes a level name and renderer; events below the level are dropped."""
    import json

    import structlog

    from backend_passop.passop_logging import configure_structlog, get_logger

    saved = structlog.get_config()
    try:
        configure_structlog(level="warning", fmt="json")
        logger = get_logger("test.level")
        logger.info("hidden_event")
        logger.warning("shown_event", count=2)
        lines = capsys.readouterr().out.strip().splitlines()
    finally:
        structlog.configure(**saved)

    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["event_type"] == "shown_event"
    assert payload["level"] == "warning"
    assert payload["count"] == 2
    assert payload["logger"] == "test.level"
