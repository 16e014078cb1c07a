"""
Command Dispatcher - Bounded undo history.

Executes UndoableCommands, records them in a bounded history and reverses
the most recent ones on request. Observers bind through the signals
property.
"""
from collections import deque
from typing import Deque, List, Optional

from loguru import logger

from ..events import Signal
from .base import UndoableCommand
from .results import CommandResult, HistoryEntry, ResultKind, UndoManyResult


DEFAULT_CAPACITY = 50


class _DispatcherSignals:
    """Signal holder for dispatcher state."""

    def __init__(self):
        self.history_changed = Signal("HistoryChanged")
        self.can_undo_changed = Signal("CanUndoChanged")


class CommandDispatcher:
    """
    Executes commands and keeps a bounded history for undo.

    The history is ordered oldest to newest. Executing past capacity drops
    the oldest entry without undoing it; undo always pops the newest entry.
    Evicted and undone commands are gone for good (there is no redo).

    Usage:
        dispatcher = CommandDispatcher(capacity=50)

        dispatcher.execute(LightOnCommand(light))
        dispatcher.execute(ThermostatSetCommand(thermostat, 26))

        dispatcher.undo_one()     # thermostat back to previous value
        dispatcher.undo_many(5)   # undoes the rest, reports 1 undone

        for entry in dispatcher.history():
            print(entry.rank, entry.name)

    Every operation returns a result object; nothing here raises for
    invalid input, empty history or a receiver failure.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize dispatcher.

        Args:
            capacity: Maximum commands kept in history (must be >= 1)

        Raises:
            ValueError: If capacity is less than 1
        """
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")

        self._capacity = capacity
        self._history: Deque[UndoableCommand] = deque()
        self._signals = _DispatcherSignals()
        self._last_can_undo = False

    @property
    def signals(self) -> _DispatcherSignals:
        """Signals object for observers (menu, tests)."""
        return self._signals

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def can_undo(self) -> bool:
        return len(self._history) > 0

    @property
    def undo_name(self) -> Optional[str]:
        """Name of the command the next undo would reverse."""
        if self._history:
            return self._history[-1].name
        return None

    def count(self) -> int:
        """Current history length, between 0 and capacity."""
        return len(self._history)

    def history(self) -> List[HistoryEntry]:
        """Snapshot of history, newest first."""
        return [
            HistoryEntry(name=command.name, rank=rank)
            for rank, command in enumerate(reversed(self._history))
        ]

    def execute(self, command: Optional[UndoableCommand]) -> CommandResult:
        """
        Execute a command and record it in history.

        Args:
            command: UndoableCommand to execute

        Returns:
            CommandResult; EXECUTE_FAILED leaves history untouched
        """
        if command is None:
            logger.warning("Execute called without a command")
            return CommandResult(ResultKind.INVALID_ARGUMENT, "Command must not be None")

        name = command.name
        try:
            command.execute()
        except Exception as e:
            logger.error(f"Command execution failed: {name}: {e}")
            return CommandResult(ResultKind.EXECUTE_FAILED,
                                 f"Failed to execute {name}: {e}", name)

        self._history.append(command)

        while len(self._history) > self._capacity:
            evicted = self._history.popleft()
            logger.debug(f"History full, dropped oldest: {evicted.name}")

        logger.debug(f"Executed: {name}")
        self._emit_state_changes()
        return CommandResult(ResultKind.OK, f"Executed: {name}", name)

    def undo_one(self) -> CommandResult:
        """
        Undo the most recent command.

        The entry is removed from history even when its undo raises;
        a failed reversal is reported, not retried.
        """
        if not self._history:
            logger.info("Nothing to undo")
            return CommandResult(ResultKind.EMPTY_HISTORY, "Nothing to undo")

        command = self._history.pop()
        name = command.name

        try:
            command.undo()
        except Exception as e:
            logger.error(f"Undo failed: {name}: {e}")
            result = CommandResult(ResultKind.UNDO_FAILED,
                                   f"Failed to undo {name}: {e}", name)
        else:
            logger.debug(f"Undone: {name}")
            result = CommandResult(ResultKind.OK, f"Undone: {name}", name)

        self._emit_state_changes()
        return result

    def undo_many(self, n: int) -> UndoManyResult:
        """
        Undo up to n of the most recent commands.

        Stops early, without error, when history runs out.

        Args:
            n: Number of commands to undo (must be > 0)
        """
        if n <= 0:
            logger.warning(f"Undo count must be positive, got {n}")
            return UndoManyResult(requested=n, kind=ResultKind.INVALID_ARGUMENT,
                                  message="Enter a positive number of commands to undo")

        outcome = UndoManyResult(requested=n)
        for _ in range(n):
            if not self._history:
                break
            outcome.results.append(self.undo_one())

        if outcome.consumed == 0:
            outcome.kind = ResultKind.EMPTY_HISTORY
            outcome.message = "Nothing to undo"
        elif outcome.consumed < n:
            outcome.message = (f"Undid {outcome.undone} of {n} requested; "
                               f"no more commands to undo")
        else:
            outcome.message = f"Undid {outcome.undone} of {n} requested"

        if outcome.failed:
            outcome.message += f" ({outcome.failed} failed)"
        return outcome

    def _emit_state_changes(self) -> None:
        """Emit history_changed always, can_undo_changed when it flips."""
        current_can_undo = self.can_undo

        if current_can_undo != self._last_can_undo:
            self._last_can_undo = current_can_undo
            self._signals.can_undo_changed.emit(current_can_undo)

        self._signals.history_changed.emit(len(self._history))
