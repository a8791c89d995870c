from __future__ import annotations

import logging

import numpy as np

from .distribution import CharCount, Distribution
from .model_table import ModelTable

logger = logging.getLogger(__name__)


def sample_next(distribution: Distribution, r: float) -> CharCount:
    """Inverse-CDF lookup: first entry whose cp >= r.

    Falls back to the last entry when rounding leaves the final cp just below r.
    """

    last = None
    for entry in distribution:
        if entry.cp >= r:
            return entry
        last = entry
    if last is None:
        raise ValueError("cannot sample from an empty distribution")
    return last


def generate_text(
    table: ModelTable,
    window_length: int,
    initial_text: str,
    text_length: int,
    rng: np.random.Generator,
) -> str:
    """Extend the last `window_length` characters of `initial_text` by up to
    `text_length` sampled characters.

    Returns `initial_text` untouched when it is shorter than a window, and
    stops early as soon as the current window was never seen in training.
    """

    if len(initial_text) < window_length:
        return initial_text

    window = initial_text[-window_length:]
    out = [window]
    size = window_length
    target = text_length + window_length

    while size < target:
        dist = table.distribution_for(window)
        if dist is None:
            logger.debug(f"Window {window!r} not in model, stopping at {size} chars")
            break
        nxt = sample_next(dist, float(rng.random())).character
        out.append(nxt)
        size += 1
        window = (window + nxt)[-window_length:]

    return "".join(out)
