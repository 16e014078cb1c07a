"""
Macro helpers.

A macro is an ordered list of commands submitted one by one. Each command
becomes its own history entry, so undoing a macro takes as many undos as
it has commands. Nothing here groups or rolls back a macro atomically.
"""
from typing import Iterable, List

from loguru import logger

from .base import UndoableCommand
from .dispatcher import CommandDispatcher
from .results import CommandResult


def run_macro(dispatcher: CommandDispatcher,
              commands: Iterable[UndoableCommand]) -> List[CommandResult]:
    """
    Execute commands through the dispatcher in order.

    A failing command does not stop the macro; its result is reported and
    the next command runs.

    Returns:
        One result per submitted command, in submission order
    """
    results = [dispatcher.execute(command) for command in commands]
    failed = sum(1 for r in results if not r.success)
    if failed:
        logger.warning(f"Macro finished with {failed} of {len(results)} commands failed")
    else:
        logger.debug(f"Macro executed {len(results)} commands")
    return results
