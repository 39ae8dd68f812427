# --------------------------------------------------------------------
import typing as tp

from typing import Optional as Opt

T = tp.TypeVar('T')

# ====================================================================
# Peekable cursor with one step of push back

class Stream(tp.Generic[T]):
    def __init__(self, elements: tp.Iterable[T]):
        self._elements = list(elements)
        self._index    = 0

        # Counts consumed elements; the owner may reset it (e.g. per line)
        self.visual_index = 0

    index = property(lambda self: self._index)

    def at_end(self) -> bool:
        return self._index >= len(self._elements)

    def peek(self) -> Opt[T]:
        if self.at_end():
            return None
        return self._elements[self._index]

    def consume(self) -> Opt[T]:
        element = self.peek()

        if not self.at_end():
            self._index       += 1
            self.visual_index += 1

        return element

    def unconsume(self):
        if self._index > 0:
            self._index       -= 1
            self.visual_index -= 1

    def rewind(self, mark: int):
        while self._index > mark:
            self.unconsume()
