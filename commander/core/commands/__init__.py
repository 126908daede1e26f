"""
Foundation Command System.

Provides Command pattern infrastructure:
- Command: Reversible command with an explicit inverse
- BlockCommand: Command built from a do/undo pair of callables
- GroupCommand: Ordered group of commands run as one unit
- SetPropertyCommand: Generic attribute setter
- Validator / AppValidator: Application mode policy gate
- CommandDispatcher: Validated invocation with undo/redo history
"""
from .base import Command, CommandState
from .block import BlockCommand
from .group import GroupCommand
from .property import SetPropertyCommand
from .validation import AppMode, Validator, AppValidator
from .dispatcher import CommandDispatcher
from .errors import (
    CommandError,
    HistoryError,
    EmptyHistoryError,
    EmptyRedoHistoryError,
    InvalidCommandStateError,
)

__all__ = [
    # Base interfaces
    "Command",
    "CommandState",
    # Implementations
    "BlockCommand",
    "GroupCommand",
    "SetPropertyCommand",
    # Validation
    "AppMode",
    "Validator",
    "AppValidator",
    # Systems
    "CommandDispatcher",
    # Errors
    "CommandError",
    "HistoryError",
    "EmptyHistoryError",
    "EmptyRedoHistoryError",
    "InvalidCommandStateError",
]
