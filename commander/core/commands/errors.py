"""
Command framework exceptions.

Validation denial is not represented here: a denied command is marked
FORBIDDEN and nothing is raised.
"""


class CommandError(Exception):
    """Base class for all command framework errors."""
    pass


class HistoryError(CommandError):
    """Raised when an undo/redo request cannot be satisfied."""
    pass


class EmptyHistoryError(HistoryError):
    """Raised by undo when no command remains to undo."""
    pass


class EmptyRedoHistoryError(HistoryError):
    """Raised by redo when no undone command remains to redo."""
    pass


class InvalidCommandStateError(CommandError):
    """Raised for an invalid command state transition."""

    def __init__(self, command, action: str):
        self.command = command
        self.action = action
        super().__init__(
            f"Cannot {action} '{command.description}' in state {command.state.name}"
        )
