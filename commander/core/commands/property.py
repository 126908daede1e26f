"""
SetPropertyCommand - Generic attribute setter with an exact inverse.
"""
from typing import Any

from .base import Command

_UNSET = object()


class SetPropertyCommand(Command):
    """
    Generic command to set a property with undo support.

    Captures the old value on construction, not on execute; the inverse
    sets it back. Two commands on the same property built before either
    runs will both capture the same old value, so build each command right
    before invoking it, or pass old_value explicitly.

    Example:
        # Change shape title
        cmd = SetPropertyCommand(shape, "title", "A Shape")
        dispatcher.invoke(cmd)

        # Later: undo restores original title
        dispatcher.undo()
    """

    def __init__(self, target: Any, property_name: str, new_value: Any,
                 old_value: Any = _UNSET):
        """
        Initialize property change command.

        Args:
            target: Object to modify
            property_name: Name of property to change
            new_value: New value to set
            old_value: Previous value (captured from target if omitted)
        """
        super().__init__(is_asynchronous=False, is_mutating=True)
        self.target = target
        self.property_name = property_name
        self.new_value = new_value

        if old_value is _UNSET:
            self.old_value = getattr(target, property_name, None)
        else:
            self.old_value = old_value

    @property
    def description(self) -> str:
        return f"Set {self.property_name} to {self.new_value!r}"

    def execute(self) -> None:
        setattr(self.target, self.property_name, self.new_value)

    def inversed(self) -> "SetPropertyCommand":
        return SetPropertyCommand(self.target, self.property_name,
                                  self.old_value, old_value=self.new_value)
