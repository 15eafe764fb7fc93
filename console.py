# console.py
from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable, List, Optional

from corpus import CorpusError, load_corpus
from model import FrequencyModel
from settings import Settings, SettingsError
from spell import SpellCorrector

logger = logging.getLogger(__name__)

PROMPT = "Input a list of words: "


def read_words(line: str) -> List[str]:
    return line.lower().split()


def is_exit(words: List[str]) -> bool:
    """A blank line or a lone 'exit' ends the session."""
    return not words or (len(words) == 1 and words[0].lower() == "exit")


def run(
    corrector: SpellCorrector,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print
) -> int:
    """Correct lines until the exit sentinel or end of input. Returns lines handled."""
    handled = 0
    while True:
        try:
            words = read_words(read(PROMPT))
        except (EOFError, KeyboardInterrupt):
            break
        if is_exit(words):
            break
        write(" ".join(corrector.correct_words(words)))
        handled += 1
    return handled


def positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: {raw!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Norvig-style spelling corrector over a word frequency corpus"
    )
    parser.add_argument("--corpus", dest="corpus_path",
                        help="Local corpus file (downloaded when missing)")
    parser.add_argument("--url", dest="corpus_url",
                        help="Where to download the corpus from")
    parser.add_argument("--timeout", type=positive_float,
                        help="Download timeout in seconds")
    parser.add_argument("--workers", dest="max_workers", type=positive_int,
                        help="Threads used to correct a batch of words")
    parser.add_argument("--no-download", dest="download", action="store_false", default=None,
                        help="Fail instead of downloading a missing corpus")
    parser.add_argument("--words", nargs="+",
                        help="Correct these words once and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log per-word decisions")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    for name in ("corpus_path", "corpus_url", "timeout", "max_workers", "download"):
        value = getattr(args, name)
        if value is not None:
            setattr(settings, name, value)
    return settings


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    try:
        settings = load_settings(args)
    except SettingsError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        text = load_corpus(settings.corpus_path, settings.corpus_url,
                           settings.timeout, settings.download)
    except CorpusError as e:
        logger.error(f"Corpus unavailable: {e}")
        return 1

    model = FrequencyModel.from_text(text)
    corrector = SpellCorrector(model, settings.max_workers)

    if args.words:
        print(" ".join(corrector.correct_words(read_words(" ".join(args.words)))))
        return 0
    run(corrector, input, print)
    return 0


if __name__ == "__main__":
    sys.exit(main())
