"""
Command System.

Provides Command pattern infrastructure:
- UndoableCommand: commands with execute/undo and a display name
- CommandDispatcher: bounded, ordered undo history
- run_macro: submit an ordered list of commands one by one
- Result models returned by the dispatcher
"""
from .base import UndoableCommand, CommandStateError
from .dispatcher import CommandDispatcher, DEFAULT_CAPACITY
from .macro import run_macro
from .results import CommandResult, HistoryEntry, ResultKind, UndoManyResult

__all__ = [
    # Base interfaces
    "UndoableCommand",
    "CommandStateError",
    # Dispatcher
    "CommandDispatcher",
    "DEFAULT_CAPACITY",
    "run_macro",
    # Results
    "CommandResult",
    "HistoryEntry",
    "ResultKind",
    "UndoManyResult",
]
