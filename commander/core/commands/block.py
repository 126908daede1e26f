"""
BlockCommand - Command built from a pair of callables.

Covers the common case where a dedicated Command subclass is not worth it.
"""
from typing import Callable

from .base import Command


class BlockCommand(Command):
    """
    Command that executes a block and inverts by swapping it with its
    inverse block.

    Synchronous blocks take no arguments. Asynchronous blocks receive the
    running command's finish callable and must call it exactly once when
    their background work completes.

    Example:
        counter = Counter()
        add_ten = BlockCommand(lambda: counter.add(10),
                               lambda: counter.add(-10),
                               description="Add 10")
        dispatcher.invoke(add_ten)

        def start_upload(finish):
            threading.Thread(target=lambda: (upload(), finish())).start()

        upload_cmd = BlockCommand(start_upload, start_delete,
                                  is_asynchronous=True)
    """

    def __init__(self, block: Callable, inverse_block: Callable,
                 is_asynchronous: bool = False, is_mutating: bool = True,
                 description: str = "Block"):
        super().__init__(is_asynchronous=is_asynchronous, is_mutating=is_mutating)
        self._block = block
        self._inverse_block = inverse_block
        self._description = description

    @property
    def description(self) -> str:
        return self._description

    def execute(self) -> None:
        if self.is_asynchronous:
            self._block(self.finish)
        else:
            self._block()

    def inversed(self) -> "BlockCommand":
        return BlockCommand(self._inverse_block, self._block,
                            is_asynchronous=self.is_asynchronous,
                            is_mutating=self.is_mutating,
                            description=f"Undo {self._description}")
