"""
Command Dispatcher - Validated invocation with undo/redo history.

Provides CommandDispatcher for running Commands through a Validator and
keeping stack-based undo/redo history, with signals for UI binding.
"""
from typing import TYPE_CHECKING, List, Optional, Tuple

from loguru import logger

from ..events import Signal
from .base import Command, CommandState
from .errors import EmptyHistoryError, EmptyRedoHistoryError
from .validation import AppMode, AppValidator, Validator

if TYPE_CHECKING:
    from ..config import AppConfig


class CommandDispatcher:
    """
    Runs commands and manages undo/redo stacks.

    Features:
    - Validation gate (denied commands become FORBIDDEN, nothing raised)
    - Counted undo/redo
    - Optional max history size
    - Signals for UI binding

    Undo and redo are not re-validated: a command that was allowed when
    invoked can always be undone and redone.

    Not thread-safe; call from a single coordinating thread or wrap
    access in a lock.

    Usage:
        dispatcher = CommandDispatcher(AppValidator(AppMode.FULL))

        dispatcher.invoke(SetPropertyCommand(shape, "title", "A Shape"))

        dispatcher.undo()
        dispatcher.redo()
        dispatcher.undo(number_of_commands=3)

        # Connect UI
        dispatcher.can_undo_changed.connect(undo_action.setEnabled)
    """

    def __init__(self, validator: Optional[Validator] = None,
                 max_history: Optional[int] = None):
        """
        Initialize CommandDispatcher.

        Args:
            validator: Policy gate (default: AppValidator in FULL mode)
            max_history: Maximum commands kept in undo stack (None = unbounded)
        """
        if max_history is not None and max_history < 1:
            raise ValueError(f"max_history must be at least 1, got {max_history}")

        self._validator = validator if validator is not None else AppValidator(AppMode.FULL)
        self._max_history = max_history

        self._undo_stack: List[Command] = []
        self._redo_stack: List[Command] = []

        self.can_undo_changed = Signal("CanUndoChanged")
        self.can_redo_changed = Signal("CanRedoChanged")
        self.state_changed = Signal("HistoryStateChanged")
        self.command_forbidden = Signal("CommandForbidden")

        # Track previous state for signal emission
        self._last_can_undo = False
        self._last_can_redo = False

    @classmethod
    def from_config(cls, config: "AppConfig") -> "CommandDispatcher":
        """Build a dispatcher from application configuration."""
        history = config.history
        return cls(AppValidator.from_config(history), max_history=history.max_history)

    @property
    def validator(self) -> Validator:
        return self._validator

    @property
    def commands(self) -> Tuple[Command, ...]:
        """Undo stack, most recent last."""
        return tuple(self._undo_stack)

    @property
    def undone_commands(self) -> Tuple[Command, ...]:
        """Redo stack, most recent last."""
        return tuple(self._redo_stack)

    @property
    def can_undo(self) -> bool:
        return len(self._undo_stack) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._redo_stack) > 0

    @property
    def undo_description(self) -> Optional[str]:
        """Get description of next undo action."""
        if self._undo_stack:
            return self._undo_stack[-1].description
        return None

    @property
    def redo_description(self) -> Optional[str]:
        """Get description of next redo action."""
        if self._redo_stack:
            return self._redo_stack[-1].description
        return None

    def invoke(self, command: Command) -> bool:
        """
        Validate and execute a command, recording it in history.

        Asynchronous commands are recorded as soon as they start; observe
        the command itself for completion.

        Args:
            command: Command to execute

        Returns:
            True if the command ran, False if validation denied it
        """
        if not self._validator.can_invoke(command):
            # A command already in history keeps its state so redo still works
            if command.state is CommandState.READY:
                command.forbid()
            logger.info(f"Forbidden: {command.description} (validator={self._validator!r})")
            self.command_forbidden.emit(command)
            return False

        command.invoke()

        self._undo_stack.append(command)

        # Enforce max history
        if self._max_history is not None:
            while len(self._undo_stack) > self._max_history:
                dropped = self._undo_stack.pop(0)
                logger.debug(f"History limit reached, dropped: {dropped.description}")

        # Clear redo stack (new action breaks redo chain)
        self._redo_stack.clear()

        logger.debug(f"Invoked: {command.description} (history={len(self._undo_stack)})")
        self._emit_state_changes()
        return True

    def undo(self, number_of_commands: int = 1) -> None:
        """
        Undo the most recent commands.

        Each step is committed on its own; if history runs out partway,
        the steps already taken stay undone.

        Args:
            number_of_commands: How many commands to undo

        Raises:
            EmptyHistoryError: If there is nothing (left) to undo
        """
        self._check_count(number_of_commands)
        for _ in range(number_of_commands):
            self._undo_one()

    def redo(self, number_of_commands: int = 1) -> None:
        """
        Redo the most recently undone commands.

        Args:
            number_of_commands: How many commands to redo

        Raises:
            EmptyRedoHistoryError: If there is nothing (left) to redo
        """
        self._check_count(number_of_commands)
        for _ in range(number_of_commands):
            self._redo_one()

    def clear(self) -> None:
        """Clear all undo/redo history."""
        self._undo_stack.clear()
        self._redo_stack.clear()
        logger.debug("Command history cleared")
        self._emit_state_changes()

    def _undo_one(self) -> None:
        if not self._undo_stack:
            raise EmptyHistoryError("No command to undo")

        command = self._undo_stack.pop()

        try:
            command.inversed().invoke()
        except Exception as e:
            logger.error(f"Undo failed: {e}")
            # Put it back on undo stack
            self._undo_stack.append(command)
            raise

        self._redo_stack.append(command)
        logger.debug(f"Undone: {command.description}")
        self._emit_state_changes()

    def _redo_one(self) -> None:
        if not self._redo_stack:
            raise EmptyRedoHistoryError("No command to redo")

        command = self._redo_stack.pop()

        try:
            command.invoke()
        except Exception as e:
            logger.error(f"Redo failed: {e}")
            # Put it back on redo stack
            self._redo_stack.append(command)
            raise

        self._undo_stack.append(command)
        logger.debug(f"Redone: {command.description}")
        self._emit_state_changes()

    @staticmethod
    def _check_count(number_of_commands: int) -> None:
        if number_of_commands < 0:
            raise ValueError(f"number_of_commands must not be negative, got {number_of_commands}")

    def _emit_state_changes(self) -> None:
        """Emit signals if can_undo/can_redo state changed."""
        current_can_undo = self.can_undo
        current_can_redo = self.can_redo

        if current_can_undo != self._last_can_undo:
            self._last_can_undo = current_can_undo
            self.can_undo_changed.emit(current_can_undo)

        if current_can_redo != self._last_can_redo:
            self._last_can_redo = current_can_redo
            self.can_redo_changed.emit(current_can_redo)

        self.state_changed.emit()
