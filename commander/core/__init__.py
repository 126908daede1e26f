"""
Commander core: commands, dispatcher, configuration and logging.
"""
from .commands import (
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
    HistoryError,
    EmptyHistoryError,
    EmptyRedoHistoryError,
    InvalidCommandStateError,
)
from .config import AppConfig, ConfigManager
from .events import Signal
from .logging import setup_logging

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
    "HistoryError",
    "EmptyHistoryError",
    "EmptyRedoHistoryError",
    "InvalidCommandStateError",
    "AppConfig",
    "ConfigManager",
    "Signal",
    "setup_logging",
]
