import sys
import threading
import pytest
from loguru import logger
from commander.core.commands import (
    Command,
    BlockCommand,
    CommandDispatcher,
    AppValidator,
    AppMode,
)


class Shape:
    """Movable, displayable domain object used as a mutation target."""
    def __init__(self):
        self.center = (0, 0)
        self.title = ""


class MoveCommand(Command):
    def __init__(self, shape, dx, dy):
        super().__init__()
        self.shape = shape
        self.dx = dx
        self.dy = dy

    @property
    def description(self) -> str:
        return f"Move ({self.dx}, {self.dy})"

    def execute(self):
        x, y = self.shape.center
        self.shape.center = (x + self.dx, y + self.dy)

    def inversed(self):
        return MoveCommand(self.shape, -self.dx, -self.dy)


class Counter:
    def __init__(self):
        self.value = 0
        self._lock = threading.Lock()

    def add(self, amount):
        with self._lock:
            self.value += amount


@pytest.fixture
def shape():
    return Shape()


@pytest.fixture
def make_move():
    return MoveCommand


@pytest.fixture
def counter():
    return Counter()


@pytest.fixture
def make_add(counter):
    """Factory for BlockCommands adding a fixed amount to the counter."""
    def _make(amount, is_mutating=True):
        return BlockCommand(lambda: counter.add(amount),
                            lambda: counter.add(-amount),
                            is_mutating=is_mutating,
                            description=f"Add {amount}")
    return _make


@pytest.fixture
def dispatcher():
    return CommandDispatcher(AppValidator(AppMode.FULL))


@pytest.fixture
def read_only_dispatcher():
    return CommandDispatcher(AppValidator(AppMode.READ_ONLY))


@pytest.fixture
def log_messages():
    """Capture loguru output for the duration of a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)
