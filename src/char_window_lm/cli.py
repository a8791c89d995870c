"""
Command-line entry point.

Usage:
    char-window-lm 3 "The " 200 fixed corpus.txt
    char-window-lm 5 "Once upon" 500 random corpus.txt --clean
    char-window-lm 2 "ab" 10 fixed reviews.csv --csv-column text --show-model
    char-window-lm 4 "abcd" 50 fixed corpus.txt --config model.json
"""

import argparse
import json
import logging
import sys

from .config import DEFAULT_SEED, CorpusConfig, LanguageModelConfig
from .corpus import open_corpus
from .language_model import LanguageModel
from .trainer import InsufficientCorpusError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Train a character window language model and generate text"
    )

    parser.add_argument("window_length", type=int, help="Number of characters per window")
    parser.add_argument("initial_text", help="Text to start generating from")
    parser.add_argument("text_length", type=int, help="Number of characters to add")
    parser.add_argument(
        "mode",
        choices=["random", "fixed"],
        help="'random' for unseeded generation, 'fixed' for reproducible output",
    )
    parser.add_argument("corpus", help="Path to the training corpus (.txt or .csv)")

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help=f"Seed used in fixed mode (default {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--config", "-c",
        help="JSON file with model settings such as the seed",
    )
    parser.add_argument("--encoding", default="utf-8", help="Corpus file encoding")
    parser.add_argument(
        "--clean",
        action="store_true",
        help="Normalize control characters and whitespace before training",
    )
    parser.add_argument(
        "--csv-column",
        default=None,
        help="Read the corpus from this column of a CSV file",
    )
    parser.add_argument(
        "--show-model",
        action="store_true",
        help="Print the learned window table before the generated text",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    return parser


def load_model_config(args) -> LanguageModelConfig:
    """Build the model config from an optional JSON file plus the command line."""

    config_dict = {}
    if args.config:
        with open(args.config, 'r') as f:
            config_dict = json.load(f)

    config_dict["window_length"] = args.window_length
    config_dict["random_generation"] = args.mode == "random"
    if args.seed is not None:
        config_dict["seed"] = args.seed
    return LanguageModelConfig.from_dict(config_dict)


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        lm_config = load_model_config(args)
        logger.debug(f"Model config: {lm_config.to_dict()}")
        corpus_config = CorpusConfig(
            encoding=args.encoding,
            clean=args.clean,
            csv_column=args.csv_column,
        )

        lm = LanguageModel.from_config(lm_config)
        lm.train(open_corpus(args.corpus, corpus_config))
    except InsufficientCorpusError as e:
        logger.error(f"Cannot train: {e}")
        return 1
    except OSError as e:
        logger.error(str(e))
        return 1
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1

    if args.show_model:
        print(lm, end="")

    print(lm.generate(args.initial_text, args.text_length))
    return 0


if __name__ == "__main__":
    sys.exit(main())
