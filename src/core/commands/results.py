"""
Dispatch Result Models

Structured outcomes returned by CommandDispatcher. Failures are reported
through these objects instead of propagating to the caller.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ResultKind(Enum):
    """Outcome category of a dispatcher operation."""
    OK = "ok"
    INVALID_ARGUMENT = "invalid_argument"
    EMPTY_HISTORY = "empty_history"
    EXECUTE_FAILED = "execute_failed"
    UNDO_FAILED = "undo_failed"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """
    Outcome of a single execute or undo.

    Attributes:
        kind: Outcome category
        message: Human-readable summary for the caller
        command_name: Name of the command involved, if any
    """
    kind: ResultKind
    message: str
    command_name: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.kind is ResultKind.OK

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """Read-only view of one history slot. Rank 0 is the newest entry."""
    name: str
    rank: int


@dataclass(slots=True)
class UndoManyResult:
    """
    Outcome of undoing several commands.

    Attributes:
        requested: Number of undos the caller asked for
        results: Per-entry results, newest entry first
        kind: OK unless the request itself was rejected
        message: Human-readable summary
    """
    requested: int
    kind: ResultKind = ResultKind.OK
    message: str = ""
    results: List[CommandResult] = field(default_factory=list)

    @property
    def undone(self) -> int:
        """Entries whose reversal succeeded."""
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        """Entries removed from history whose reversal raised."""
        return sum(1 for r in self.results if r.kind is ResultKind.UNDO_FAILED)

    @property
    def consumed(self) -> int:
        """Entries removed from history regardless of outcome."""
        return len(self.results)

    @property
    def success(self) -> bool:
        return self.kind is ResultKind.OK and self.failed == 0

    def __str__(self) -> str:
        return self.message
