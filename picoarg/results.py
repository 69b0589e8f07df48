import dataclasses as dt

from collections import deque
from typing import Iterator, Optional


@dt.dataclass(frozen=True)
class ParsedOccurrence:
    """
    One appearance of an option on the command line.

    Attributes:
        key: The option character.
        value: The inline value, or None if the option takes no value.
    """

    key: str
    value: Optional[str] = None


class Results:
    """
    The options recognized by a parse, queried with `has` and `popValue`.

    Each key owns a queue of pending occurrences in arrival order, popping a
    value consumes the oldest one, so a repeatable flag is drained with:

        while results.has("f"):
            process(results.popValue("f"))
    """

    _order: list[ParsedOccurrence]
    _pending: dict[str, deque[tuple[int, ParsedOccurrence]]]
    _taken: set[int]

    def __init__(self, occurrences: list[ParsedOccurrence] = []):
        self._order = []
        self._pending = {}
        self._taken = set()
        for occurrence in occurrences:
            self.append(occurrence)

    def append(self, occurrence: ParsedOccurrence):
        index = len(self._order)
        self._order.append(occurrence)
        self._pending.setdefault(occurrence.key, deque()).append((index, occurrence))

    def __len__(self) -> int:
        return len(self._order) - len(self._taken)

    def __iter__(self) -> Iterator[ParsedOccurrence]:
        return iter(self.pending())

    def __repr__(self) -> str:
        return f"Results({self.pending()!r})"

    def has(self, key: str) -> bool:
        return len(self._pending.get(key, ())) > 0

    def count(self, key: str) -> int:
        return len(self._pending.get(key, ()))

    def keys(self) -> list[str]:
        """Returns the keys with pending occurrences, in order of first appearance."""
        return [key for key, queue in self._pending.items() if queue]

    def pending(self) -> list[ParsedOccurrence]:
        """Returns the occurrences not yet popped, in arrival order."""
        return [o for i, o in enumerate(self._order) if i not in self._taken]

    def popValue(self, key: str) -> Optional[str]:
        """
        Removes the oldest pending occurrence of `key` and returns its value.

        Returns:
            The value, or None if the key has no pending occurrence or the
            option takes no value.
        """
        queue = self._pending.get(key)
        if not queue:
            return None

        index, occurrence = queue.popleft()
        self._taken.add(index)
        return occurrence.value

    def popAll(self, key: str) -> list[Optional[str]]:
        """Drains every pending occurrence of `key`, oldest first."""
        values = []
        while self.has(key):
            values.append(self.popValue(key))
        return values
