"""
Command Pattern - Base Interfaces.

Provides:
- UndoableCommand: unit of work with execute/undo and a display name
- CommandStateError: raised when a command is reversed out of order
"""
from abc import ABC, abstractmethod


class CommandStateError(RuntimeError):
    """Raised when a command is asked to undo state it never captured."""


class UndoableCommand(ABC):
    """
    Command that can reverse its own effect.

    A command is bound to exactly one receiver for its lifetime. Commands
    whose forward action is not self-inverse capture the receiver's state
    inside execute() so undo() can restore it exactly.

    Example:
        class RenameCommand(UndoableCommand):
            def __init__(self, target, new_name):
                self.target = target
                self.new_name = new_name
                self._old_name = None

            @property
            def name(self) -> str:
                return f"Rename({self.new_name})"

            def execute(self):
                self._old_name = self.target.name
                self.target.name = self.new_name

            def undo(self):
                self.target.name = self._old_name
    """

    @property
    def name(self) -> str:
        """
        Human-readable identifier for history display and logs.

        Must be stable for the lifetime of the instance. It is never used
        for equality or lookup.
        """
        return self.__class__.__name__

    @abstractmethod
    def execute(self) -> None:
        """Apply the forward action to the receiver."""
        pass

    @abstractmethod
    def undo(self) -> None:
        """
        Reverse the effect of the most recent execute().

        Must restore state to exactly what it was before execute().
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"
