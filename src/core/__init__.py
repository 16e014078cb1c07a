"""
Core - Application Infrastructure.

Provides:
- ConfigManager: configuration with persistence and change signals
- setup_logging: Loguru console/file sinks
- Signal: synchronous observer
- CommandDispatcher: undoable commands with bounded history

Usage:
    from src.core import ConfigManager, CommandDispatcher, setup_logging

    config = ConfigManager("config.json")
    setup_logging(config.data.general.debug_mode, config.data.general.log_dir)
    dispatcher = CommandDispatcher(config.data.history.capacity)
"""
from .config import (
    ConfigManager,
    AppConfig,
    GeneralSettings,
    HistorySettings,
    HomeSettings,
)
from .logging import setup_logging
from .events import Signal
from .commands import (
    UndoableCommand,
    CommandStateError,
    CommandDispatcher,
    CommandResult,
    HistoryEntry,
    ResultKind,
    UndoManyResult,
    run_macro,
)

__all__ = [
    # Configuration
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "HistorySettings",
    "HomeSettings",
    "setup_logging",

    # Events
    "Signal",

    # Commands
    "UndoableCommand",
    "CommandStateError",
    "CommandDispatcher",
    "CommandResult",
    "HistoryEntry",
    "ResultKind",
    "UndoManyResult",
    "run_macro",
]
