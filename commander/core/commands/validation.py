"""
Command validation - Application mode policy gate.

The dispatcher asks a Validator before running a command. Denied commands
are marked FORBIDDEN and never executed.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict

from .base import Command

if TYPE_CHECKING:
    from ..config import HistorySettings


class AppMode(Enum):
    """Application editing modes."""
    FULL = "full"
    READ_ONLY = "read_only"


class Validator(ABC):
    """Decides whether a command may run."""

    @abstractmethod
    def can_invoke(self, command: Command) -> bool:
        pass


def _allow_all(command: Command) -> bool:
    return True


def _deny_mutating(command: Command) -> bool:
    return not command.is_mutating


class AppValidator(Validator):
    """
    Validator driven by the current AppMode.

    FULL allows every command; READ_ONLY denies mutating commands. A mode
    without a registered policy denies everything.

    Subclasses add modes by extending POLICIES:

        class ReviewValidator(AppValidator):
            POLICIES = {**AppValidator.POLICIES, ReviewMode.COMMENT: allow_comments}
    """

    POLICIES: Dict[AppMode, Callable[[Command], bool]] = {
        AppMode.FULL: _allow_all,
        AppMode.READ_ONLY: _deny_mutating,
    }

    def __init__(self, mode: AppMode = AppMode.FULL):
        self._mode = mode

    @classmethod
    def from_config(cls, settings: "HistorySettings") -> "AppValidator":
        return cls(settings.mode)

    @property
    def mode(self) -> AppMode:
        return self._mode

    def can_invoke(self, command: Command) -> bool:
        policy = self.POLICIES.get(self._mode)
        if policy is None:
            return False
        return policy(command)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} mode={self._mode.value}>"
