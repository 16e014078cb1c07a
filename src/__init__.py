"""
Home Remote - Smart home remote with undo

Executes device commands through a dispatcher that keeps a bounded undo
history, driven from an interactive numbered menu.
"""

# Core systems
from src.core.config import ConfigManager, AppConfig
from src.core.logging import setup_logging
from src.core.commands import CommandDispatcher, UndoableCommand, run_macro

# Home
from src.home import build_home, RemoteMenu

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigManager",
    "AppConfig",
    "setup_logging",
    "CommandDispatcher",
    "UndoableCommand",
    "run_macro",

    # Home
    "build_home",
    "RemoteMenu",
]
