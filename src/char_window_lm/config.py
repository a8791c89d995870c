from __future__ import annotations

from dataclasses import asdict, dataclass, fields

# Seed used by the deterministic ("fixed") generation mode.
DEFAULT_SEED = 20


@dataclass(frozen=True)
class LanguageModelConfig:
    window_length: int
    random_generation: bool = False
    seed: int | None = DEFAULT_SEED

    def __post_init__(self):
        if self.window_length < 1:
            raise ValueError("window_length must be >= 1")

    @property
    def effective_seed(self) -> int | None:
        """None in random mode, so the model draws from an unseeded source."""

        return None if self.random_generation else self.seed

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LanguageModelConfig":
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CorpusConfig:
    encoding: str = "utf-8"
    clean: bool = False
    csv_column: str | None = None
