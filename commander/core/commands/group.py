"""
GroupCommand - Ordered composite of commands executed as one unit.
"""
import threading
from typing import Iterable, List, Optional, Tuple

from loguru import logger

from .base import Command


class GroupCommand(Command):
    """
    Groups multiple commands as a single undoable unit.

    Children execute in insertion order. The inverse group holds the
    inverted children in reverse order, so dependent effects undo last
    applied first.

    A group with any asynchronous child is itself asynchronous and
    finishes once every asynchronous child has called finish().

    Example:
        group = GroupCommand([
            SetPropertyCommand(shape, "title", "Moved"),
            MoveCommand(shape, dx=10, dy=5),
        ], "Move and rename")
        dispatcher.invoke(group)

        # Single undo reverts both changes
        dispatcher.undo()
    """

    def __init__(self, commands: Iterable[Command], description: str = "Group",
                 is_mutating: Optional[bool] = None):
        """
        Initialize group command.

        Args:
            commands: Commands to execute together, in order
            description: Description for this group
            is_mutating: Override; defaults to True if any child mutates
        """
        commands = tuple(commands)
        if is_mutating is None:
            is_mutating = any(cmd.is_mutating for cmd in commands)
        super().__init__(
            is_asynchronous=any(cmd.is_asynchronous for cmd in commands),
            is_mutating=is_mutating,
        )
        self._commands = commands
        self._description = description
        self._pending = 0
        self._subscribed: List[Command] = []
        self._pending_lock = threading.Lock()

    @property
    def description(self) -> str:
        return self._description

    @property
    def commands(self) -> Tuple[Command, ...]:
        return self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def execute(self) -> None:
        """Execute all children in order."""
        if not self.is_asynchronous:
            for cmd in self._commands:
                cmd.invoke()
            return

        # One count per asynchronous position; a child listed twice finishes twice
        pending = [cmd for cmd in self._commands if cmd.is_asynchronous]
        # +1 holds the group open until every child has been started
        with self._pending_lock:
            self._pending = len(pending) + 1
            self._subscribed = list(dict.fromkeys(pending))
        for cmd in self._subscribed:
            cmd.finished.connect(self._on_child_finished)

        try:
            for cmd in self._commands:
                cmd.invoke()
        except Exception:
            self._disconnect_children()
            raise

        self._release()

    def _on_child_finished(self, command: Command) -> None:
        logger.debug(f"Group '{self._description}': child finished: {command.description}")
        self._release()

    def _disconnect_children(self) -> None:
        for cmd in self._subscribed:
            cmd.finished.disconnect(self._on_child_finished)
        self._subscribed = []

    def _release(self) -> None:
        with self._pending_lock:
            self._pending -= 1
            done = self._pending == 0
        if done:
            self._disconnect_children()
            self.finish()

    def inversed(self) -> "GroupCommand":
        return GroupCommand([cmd.inversed() for cmd in reversed(self._commands)],
                            description=f"Undo {self._description}",
                            is_mutating=self.is_mutating)
