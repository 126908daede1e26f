"""
Commander - Undo/redo command framework.

Express mutations as reversible, composable commands and run them through
a CommandDispatcher that keeps history and applies an application-mode
policy.
"""
from .core import (
    Command,
    CommandState,
    BlockCommand,
    GroupCommand,
    SetPropertyCommand,
    AppMode,
    Validator,
    AppValidator,
    CommandDispatcher,
    CommandError,
    EmptyHistoryError,
    EmptyRedoHistoryError,
    InvalidCommandStateError,
)

__version__ = "0.1.0"

__all__ = [
    "Command",
    "CommandState",
    "BlockCommand",
    "GroupCommand",
    "SetPropertyCommand",
    "AppMode",
    "Validator",
    "AppValidator",
    "CommandDispatcher",
    "CommandError",
    "EmptyHistoryError",
    "EmptyRedoHistoryError",
    "InvalidCommandStateError",
]
