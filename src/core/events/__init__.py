"""
Event System.

Provides:
- Signal: synchronous observer used for config changes and dispatcher state

Usage:
    from src.core.events import Signal

    changed = Signal("HistoryChanged")
    changed.connect(lambda count: print(count))
    changed.emit(3)
"""
from .observer import Signal


__all__ = ["Signal"]
