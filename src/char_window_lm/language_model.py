from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import numpy as np

from .config import LanguageModelConfig
from .corpus import iter_file_chars, iter_text_chars
from .generator import generate_text
from .model_table import ModelTable
from .trainer import train_model

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Character-level sliding-window language model.

    The model owns its window table and its random source. With a `seed`
    the random source is deterministic, so the same sequence of `generate`
    calls reproduces the same texts; with `seed=None` every run differs.

    Usage:
        lm = LanguageModel(3, seed=20)
        lm.train_text("abcabcabcabc")
        lm.generate("abc", 3)  # 'abcabc'
    """

    def __init__(self, window_length: int, seed: int | None = None):
        if window_length < 1:
            raise ValueError("window_length must be >= 1")
        self.window_length = window_length
        self.seed = seed
        self.table = ModelTable()
        self._rng = np.random.default_rng(seed)

    @classmethod
    def from_config(cls, config: LanguageModelConfig) -> "LanguageModel":
        return cls(config.window_length, seed=config.effective_seed)

    def train(self, chars: Iterable[str]) -> "LanguageModel":
        """Train on a character stream; repeated calls accumulate counts."""

        train_model(chars, self.window_length, table=self.table)
        return self

    def train_text(self, text: str) -> "LanguageModel":
        return self.train(iter_text_chars(text))

    def train_file(self, path: str | Path, encoding: str = "utf-8") -> "LanguageModel":
        logger.info(f"Training window_length={self.window_length} model on {path}")
        return self.train(iter_file_chars(path, encoding=encoding))

    def generate(self, initial_text: str, text_length: int) -> str:
        """Generate `text_length` characters after the last window of `initial_text`.

        The result starts with that window, so it is at most
        `window_length + text_length` characters long.
        """

        return generate_text(self.table, self.window_length, initial_text, text_length, self._rng)

    def __str__(self) -> str:
        return self.table.render()

    def __repr__(self) -> str:
        return (
            f"LanguageModel(window_length={self.window_length}, seed={self.seed}, "
            f"windows={len(self.table)})"
        )
