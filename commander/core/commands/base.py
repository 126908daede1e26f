"""
Foundation Command Pattern - Base Command.

Provides:
- CommandState: Lifecycle of a single command run
- Command: Reversible unit of work executed through CommandDispatcher
"""
import threading
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from loguru import logger

from ..events import Signal
from .errors import InvalidCommandStateError


class CommandState(Enum):
    """Command lifecycle states."""
    READY = "ready"
    EXECUTING = "executing"
    FINISHED = "finished"
    FORBIDDEN = "forbidden"


class Command(ABC):
    """
    Reversible command with an explicit inverse.

    Subclasses implement execute() (the forward behaviour) and inversed()
    (a new command that undoes it). Callers run commands through invoke(),
    normally via CommandDispatcher.

    Synchronous commands are FINISHED when invoke() returns. Asynchronous
    commands stay EXECUTING until their background work calls finish().

    Example:
        class RenameCommand(Command):
            def __init__(self, file, old_name, new_name):
                super().__init__()
                self.file = file
                self.old_name = old_name
                self.new_name = new_name

            def execute(self):
                self.file.name = self.new_name

            def inversed(self):
                return RenameCommand(self.file, self.new_name, self.old_name)
    """

    def __init__(self, is_asynchronous: bool = False, is_mutating: bool = True):
        self._is_asynchronous = is_asynchronous
        self._is_mutating = is_mutating
        self._state = CommandState.READY
        self._lock = threading.Lock()
        self._done = threading.Event()
        self.finished = Signal(f"{self.__class__.__name__}.finished")

    @property
    def is_asynchronous(self) -> bool:
        return self._is_asynchronous

    @property
    def is_mutating(self) -> bool:
        """Hint for validators: does this command change application state?"""
        return self._is_mutating

    @property
    def state(self) -> CommandState:
        return self._state

    @property
    def description(self) -> str:
        """
        Human-readable description for UI display.

        Returns:
            Description string (default: class name)
        """
        return self.__class__.__name__

    @abstractmethod
    def execute(self) -> None:
        """
        Perform the forward operation.

        Called by invoke(). Asynchronous commands start their background
        work here and call finish() once it completes.
        """
        pass

    @abstractmethod
    def inversed(self) -> "Command":
        """
        Return a new command that undoes this one.

        Must not mutate self.
        """
        pass

    def invoke(self) -> None:
        """
        Execute the command.

        Raises:
            InvalidCommandStateError: If the command is already executing
                or was forbidden.
        """
        with self._lock:
            if self._state in (CommandState.EXECUTING, CommandState.FORBIDDEN):
                raise InvalidCommandStateError(self, "invoke")
            self._state = CommandState.EXECUTING
            self._done.clear()

        try:
            self.execute()
        except Exception as e:
            logger.error(f"Command '{self.description}' failed: {e}")
            with self._lock:
                self._state = CommandState.READY
            raise

        # finish() must be called explicitly for asynchronous commands
        if not self._is_asynchronous:
            self.finish()

    def finish(self) -> None:
        """
        Mark the current run as complete.

        Raises:
            InvalidCommandStateError: If the command is not executing.
        """
        with self._lock:
            if self._state is not CommandState.EXECUTING:
                raise InvalidCommandStateError(self, "finish")
            self._state = CommandState.FINISHED
            self._done.set()

        logger.debug(f"Finished: {self.description}")
        self.finished.emit(self)

    def forbid(self) -> None:
        """
        Mark a ready command as denied by validation. It will not run.

        Raises:
            InvalidCommandStateError: If the command is not ready.
        """
        with self._lock:
            if self._state is not CommandState.READY:
                raise InvalidCommandStateError(self, "forbid")
            self._state = CommandState.FORBIDDEN

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the current run finishes.

        Returns immediately for a command that was never invoked or was
        forbidden.

        Args:
            timeout: Seconds to wait (None waits indefinitely)

        Returns:
            True if the command is finished
        """
        if self._state in (CommandState.READY, CommandState.FORBIDDEN):
            return False
        return self._done.wait(timeout)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} '{self.description}' {self._state.value}>"
