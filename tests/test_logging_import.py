"""
Test that solkit_logging can be imported without circular import and logger works.
"""

from __future__ import annotations


def test_logging_import():
    """Import get_logger from solkit_logging and use the logger."""
    from backend_solkit.solkit_logging import get_logger

    logger = get_logger("test")
    assert logger is not None
    assert hasattr(logger, "info")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")
    assert hasattr(logger, "error")
    # Smoke test: call info (should not raise)
    logger.info("test_message", key="value", secret="must-not-appear")


def test_short_key_truncates():
    from backend_solkit.solkit_logging import short_key

    assert short_key("9QCfNuQuxct1Xk9ytFYgxc5fThmTzL4pHQnSjjrVUrka") == "9QCfNuQu..."
    assert short_key("abc") == "abc"


def test_drop_secrets_processor():
    from backend_solkit.solkit_logging.logger import _drop_secrets

    event = _drop_secrets(None, "info", {"event": "x", "secret": "abc", "pubkey": "p"})
    assert event["secret"] == "***"
    assert event["pubkey"] == "p"
