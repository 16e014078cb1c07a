import pytest
from loguru import logger

from src.core.commands import CommandDispatcher, UndoableCommand
from src.home import build_home


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level="DEBUG")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def home():
    return build_home()


@pytest.fixture
def dispatcher():
    return CommandDispatcher(capacity=50)


class RecordingCommand(UndoableCommand):
    """Command that appends to a shared log; optionally fails."""

    def __init__(self, label, log, fail_execute=False, fail_undo=False):
        self.label = label
        self.log = log
        self.fail_execute = fail_execute
        self.fail_undo = fail_undo

    @property
    def name(self) -> str:
        return self.label

    def execute(self):
        if self.fail_execute:
            raise RuntimeError("receiver offline")
        self.log.append(("execute", self.label))

    def undo(self):
        if self.fail_undo:
            raise RuntimeError("receiver offline")
        self.log.append(("undo", self.label))


@pytest.fixture
def make_command():
    """Factory for RecordingCommand sharing one log list (make_command.log)."""
    log = []

    def factory(label, **kwargs):
        return RecordingCommand(label, log, **kwargs)

    factory.log = log
    return factory
