from __future__ import annotations

from char_window_lm import LanguageModel


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
        "language models learn which letters follow which. "
    )

    lm = LanguageModel(window_length=4, seed=20).train_text(text)
    print(lm)
    print(lm.generate("nlp ", 120))


if __name__ == "__main__":
    main()
