"""Character-level sliding-window language model.

Learn which characters follow each fixed-length window of a corpus, then
generate new text by sampling from those distributions.
"""

from .config import CorpusConfig, LanguageModelConfig
from .distribution import CharCount, Distribution
from .generator import generate_text, sample_next
from .language_model import LanguageModel
from .model_table import ModelTable
from .trainer import InsufficientCorpusError, train_model

__version__ = "0.1.0"

__all__ = [
    "CharCount",
    "CorpusConfig",
    "Distribution",
    "InsufficientCorpusError",
    "LanguageModel",
    "LanguageModelConfig",
    "ModelTable",
    "generate_text",
    "sample_next",
    "train_model",
]
