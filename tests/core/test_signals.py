import pytest
from unittest.mock import MagicMock
from src.core.events import Signal

def test_signal_event():
    """Verify Signal connect/emit/disconnect."""
    sig = Signal("test_signal")
    mock_handler = MagicMock()

    sig.connect(mock_handler)
    sig.emit("data", 123)

    mock_handler.assert_called_once_with("data", 123)

    sig.disconnect(mock_handler)
    sig.emit("data2")
    assert mock_handler.call_count == 1

def test_signal_connect_twice_is_noop():
    sig = Signal("dup")
    handler = MagicMock()

    sig.connect(handler)
    sig.connect(handler)
    sig.emit()

    assert sig.subscriber_count == 1
    handler.assert_called_once()

def test_signal_error_safety(caplog):
    """Error in one subscriber doesn't block others"""
    sig = Signal("err_evt")
    results = []

    def buggy_callback():
        raise ValueError("Bug")

    def worker_callback():
        results.append("ok")

    sig.connect(buggy_callback)
    sig.connect(worker_callback)

    sig.emit()

    assert results == ["ok"]
    assert "Bug" in caplog.text

def test_subscriber_may_disconnect_during_emit():
    sig = Signal("self_remove")
    calls = []

    def once():
        calls.append("once")
        sig.disconnect(once)

    def always():
        calls.append("always")

    sig.connect(once)
    sig.connect(always)
    sig.emit()
    sig.emit()

    assert calls == ["once", "always", "always"]
