"""Character stream providers for training.

The trainer only needs an iterable of single characters; these helpers
produce one from a plain text file, an in-memory string, or a text column
of a CSV file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pandas as pd

from .config import CorpusConfig
from .text_cleaning import clean_text

logger = logging.getLogger(__name__)

_READ_CHUNK = 64 * 1024


def iter_text_chars(text: str) -> Iterator[str]:
    return iter(text)


def iter_file_chars(path: str | Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the characters of a text file without reading it all at once."""

    with open(path, "r", encoding=encoding, newline="") as f:
        while True:
            chunk = f.read(_READ_CHUNK)
            if not chunk:
                break
            yield from chunk


def load_csv_corpus(path: str | Path, column: str = "text", sep: str = "\n") -> str:
    df = pd.read_csv(path)
    if column not in df.columns:
        raise ValueError(f"CSV must have a '{column}' column")
    texts = df[column].dropna().astype(str).tolist()
    logger.info(f"Loaded {len(texts)} rows from {path}")
    return sep.join(texts)


def open_corpus(path: str | Path, config: CorpusConfig | None = None) -> Iterator[str]:
    """Pick a character stream for `path` according to `config`.

    CSV files (or any file when `csv_column` is set) are loaded through
    pandas. Cleaning needs the whole text, so it disables streaming.
    """

    cfg = config or CorpusConfig()
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Corpus not found: {path}")

    if cfg.csv_column is not None or path.suffix.lower() == ".csv":
        text = load_csv_corpus(path, column=cfg.csv_column or "text")
    elif cfg.clean:
        text = path.read_text(encoding=cfg.encoding)
    else:
        return iter_file_chars(path, encoding=cfg.encoding)

    if cfg.clean:
        text = clean_text(text)
    return iter_text_chars(text)
