from __future__ import annotations

import logging
from typing import Iterable

from .model_table import ModelTable

logger = logging.getLogger(__name__)


class InsufficientCorpusError(ValueError):
    """Raised when the corpus ends before the first window is filled."""

    def __init__(self, window_length: int, chars_read: int):
        self.window_length = window_length
        self.chars_read = chars_read
        super().__init__(
            f"Corpus has {chars_read} characters, need at least {window_length} "
            f"to seed a window"
        )


def train_model(
    chars: Iterable[str],
    window_length: int,
    *,
    table: ModelTable | None = None,
) -> ModelTable:
    """Single streaming pass over `chars`, recording one observation per
    character after the seed window, then finalizing every distribution.

    Passing an existing `table` accumulates into it.
    """

    if window_length < 1:
        raise ValueError("window_length must be >= 1")

    model = table if table is not None else ModelTable()
    stream = iter(chars)

    seed_chars: list[str] = []
    for c in stream:
        seed_chars.append(c)
        if len(seed_chars) == window_length:
            break
    if len(seed_chars) < window_length:
        raise InsufficientCorpusError(window_length, len(seed_chars))

    window = "".join(seed_chars)
    observed = 0
    try:
        for c in stream:
            model.observe(window, c)
            window = window[1:] + c
            observed += 1
    finally:
        # keep p/cp in step with the counts even if the stream fails midway
        model.finalize_all()

    logger.info(
        f"Trained on {observed + window_length} characters: "
        f"{observed} observations, {len(model)} windows"
    )
    return model
