from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class CharCount:
    """One character observed after a window, with its count.

    `p` and `cp` stay `None` until the owning distribution is finalized.
    """

    character: str
    count: int = 0
    p: float | None = None
    cp: float | None = None

    def __str__(self) -> str:
        return f"({self.character} {self.count} {self.p} {self.cp})"


class Distribution:
    """Next-character counts for a single window, in first-occurrence order."""

    def __init__(self) -> None:
        # dicts keep insertion order, which fixes the cp traversal order
        self._entries: dict[str, CharCount] = {}

    def bump(self, c: str) -> CharCount:
        entry = self._entries.get(c)
        if entry is None:
            entry = CharCount(character=c)
            self._entries[c] = entry
        entry.count += 1
        return entry

    def finalize(self) -> None:
        """Set p and cp on every entry from the current counts."""

        total = self.total
        cp = 0.0
        for entry in self._entries.values():
            entry.p = entry.count / total
            cp = entry.p + cp
            entry.cp = cp

    @property
    def total(self) -> int:
        return sum(e.count for e in self._entries.values())

    def get(self, c: str) -> CharCount | None:
        return self._entries.get(c)

    def characters(self) -> list[str]:
        return list(self._entries)

    def entries(self) -> list[CharCount]:
        return list(self._entries.values())

    def __iter__(self) -> Iterator[CharCount]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __str__(self) -> str:
        return "(" + " ".join(str(e) for e in self._entries.values()) + ")"
