from __future__ import annotations

from typing import Iterable, Iterator, Optional


class Cursor:
    """
    Single-pass cursor over a sequence of characters with one character of
    lookahead. Consumed characters are never revisited.
    """

    def __init__(self, text: Iterable[str]) -> None:
        self._it: Iterator[str] = iter(text)
        self._lookahead: Optional[str] = None
        self._consumed: int = 0

    @property
    def consumed(self) -> int:
        return self._consumed

    @property
    def exhausted(self) -> bool:
        return self.peek() is None

    def peek(self) -> Optional[str]:
        if self._lookahead is None:
            self._lookahead = next(self._it, None)
        return self._lookahead

    def next(self) -> Optional[str]:
        ch = self.peek()
        if ch is None:
            return None
        self._lookahead = None
        self._consumed += 1
        return ch

    def take(self, count: int) -> str:
        chars: list[str] = []
        while len(chars) < count:
            ch = self.next()
            if ch is None:
                break
            chars.append(ch)
        return "".join(chars)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        ch = self.next()
        if ch is None:
            raise StopIteration
        return ch
