"""
Iterator helpers with an explicit has_next() look-ahead
"""
from typing import Iterable, Iterator, Sequence, TypeVar

from hostkit.core.exceptions import IteratorError

__all__ = ["ListIterator", "MultiIterator"]

T = TypeVar("T")


class ListIterator(Iterator[T]):
    """
    A cursor over a sequence. The sequence is read by index, so it is never copied.
    """

    def __init__(self, items: Sequence[T]):
        self.items = items
        self._cursor = 0

    def has_next(self) -> bool:
        return self._cursor < len(self.items)

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        result = self.items[self._cursor]
        self._cursor += 1
        return result


class MultiIterator(Iterator[T]):
    """
    Iterates serially over the contents of several iterables. It is exhausted once every source is exhausted.
    """

    def __init__(self, *iterables: Iterable[T]):
        self._sources = [iter(i) for i in iterables]
        self._pending = []  # look-ahead item taken from the current source by has_next()

    def has_next(self) -> bool:
        if self._pending:
            return True
        while self._sources:
            try:
                self._pending.append(next(self._sources[0]))
                return True
            except StopIteration:
                self._sources.pop(0)
        return False

    def next_item(self) -> T:
        """
        Get the next element.

        Raises:
            IteratorError: every source is exhausted
        """
        if not self.has_next():
            raise IteratorError("MultiIterator is exhausted")
        return self._pending.pop()

    def __next__(self) -> T:
        try:
            return self.next_item()
        except IteratorError:
            raise StopIteration from None
