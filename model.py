# model.py
from __future__ import annotations
from collections import Counter
from collections.abc import Iterator, Mapping
import logging
import re

logger = logging.getLogger(__name__)

WORD_RE = re.compile(r"[a-z]+")


def words(text: str) -> list[str]:
    """Lower-case `text` and return every maximal run of a-z letters."""
    return WORD_RE.findall(text.lower())


class FrequencyModel(Mapping):
    """Read-only word -> occurrence count table built from a corpus."""

    def __init__(self, counts: Mapping[str, int]) -> None:
        """
        counts : word frequencies; entries that are not a-z words or
                 have a count below 1 are dropped
        """
        self._counts: dict[str, int] = {
            w: c for w, c in counts.items() if c >= 1 and WORD_RE.fullmatch(w)
        }
        self._total = sum(self._counts.values())

    @classmethod
    def from_text(cls, text: str) -> FrequencyModel:
        model = cls(Counter(words(text)))
        logger.info(f"Built frequency model: {len(model)} words, {model.total} tokens")
        return model

    def __getitem__(self, word: str) -> int:
        return self._counts[word]

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} words, {self._total} tokens)"

    @property
    def total(self) -> int:
        return self._total

    def count(self, word: str) -> int:
        return self._counts.get(word, 0)

    def probability(self, word: str) -> float:
        "Probability of `word`."
        return self.count(word) / self._total if self._total else 0.0

    def most_common(self, n: int | None = None) -> list[tuple[str, int]]:
        return Counter(self._counts).most_common(n)


def build(corpus_text: str) -> FrequencyModel:
    """Count every a-z word of `corpus_text`, case-insensitively."""
    return FrequencyModel.from_text(corpus_text)
