from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

import regex  # type: ignore


_WHITESPACE_RE = re.compile(r"[ \t\r\n\f\v]+")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


@dataclass(frozen=True)
class CleanTextConfig:
    lowercase: bool = False
    strip_accents: bool = False
    remove_control_chars: bool = True
    normalize_whitespace: bool = True
    keep_newlines: bool = True


def clean_text(text: str, config: CleanTextConfig | None = None) -> str:
    """Light normalization of a training corpus.

    The model works on raw characters, so everything here is optional and
    the defaults only tidy control characters and runs of blanks.
    """

    cfg = config or CleanTextConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    if cfg.remove_control_chars:
        s = _CONTROL_RE.sub(" ", s)

    if cfg.normalize_whitespace:
        if cfg.keep_newlines:
            s = "\n".join(re.sub(r"[ \t\f\v]+", " ", line).strip() for line in s.splitlines())
        else:
            s = _WHITESPACE_RE.sub(" ", s).strip()

    return s
