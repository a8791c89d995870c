from __future__ import annotations

import logging
from typing import Iterator

from .distribution import Distribution

logger = logging.getLogger(__name__)


class ModelTable:
    """Maps each window to the distribution of characters seen after it.

    Built by the trainer through `observe`/`finalize_all`, then only read
    by the generator through `distribution_for`.
    """

    def __init__(self) -> None:
        self._table: dict[str, Distribution] = {}

    def observe(self, window: str, next_char: str) -> None:
        dist = self._table.get(window)
        if dist is None:
            dist = Distribution()
            self._table[window] = dist
        dist.bump(next_char)

    def finalize_all(self) -> None:
        for dist in self._table.values():
            dist.finalize()
        logger.debug(f"Finalized {len(self._table)} distributions")

    def distribution_for(self, window: str) -> Distribution | None:
        """Return the distribution for `window`, or None if it was never observed."""

        return self._table.get(window)

    def windows(self) -> list[str]:
        return list(self._table)

    def render(self) -> str:
        """One line per window: `<window> : <distribution>`."""

        return "".join(f"{window} : {dist}\n" for window, dist in self._table.items())

    def __contains__(self, window: object) -> bool:
        return window in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)
