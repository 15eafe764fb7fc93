# spell.py
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Set, Tuple
import logging

from model import FrequencyModel

logger = logging.getLogger(__name__)

# Peter Norvig style edit distance candidate generation
letters = 'abcdefghijklmnopqrstuvwxyz'


def edits1(word: str) -> set:
    splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]
    deletes    = [L + R[1:] for L, R in splits if R]
    transposes = [L + R[1] + R[0] + R[2:] for L, R in splits if len(R) > 1]
    replaces   = [L + c + R[1:] for L, R in splits if R for c in letters]
    inserts    = [L + c + R     for L, R in splits for c in letters]
    return set(deletes + transposes + replaces + inserts)


def edits2(word: str) -> Iterator[str]:
    return (e2 for e1 in edits1(word) for e2 in edits1(e1))


def known(words: Iterable[str], model: FrequencyModel) -> Set[str]:
    "The subset of `words` that appear in the model."
    return {w for w in words if w in model}


def rank(words: Iterable[str], model: FrequencyModel) -> List[str]:
    """Most frequent first; equal counts fall back to alphabetical order."""
    return sorted(words, key=lambda w: (-model.count(w), w))


def candidates(word: str, model: FrequencyModel) -> Tuple[Optional[int], Set[str]]:
    """
    Known candidates at the smallest edit distance that has any,
    together with that distance. (None, set()) when nothing is known
    within two edits.
    """
    if word in model:
        return 0, {word}
    c1 = known(edits1(word), model)
    if c1:
        return 1, c1
    c2 = known(edits2(word), model)
    if c2:
        return 2, c2
    return None, set()


def correction(word: str, model: FrequencyModel) -> str:
    "Most frequent known spelling of `word`, or `word` itself."
    distance, cands = candidates(word, model)
    if distance is None:
        logger.debug(f"'{word}': no candidate within two edits")
        return word
    # same result as rank(cands)[0] without sorting the whole set
    best = min(cands, key=lambda w: (-model.count(w), w))
    logger.debug(f"'{word}' -> '{best}' (distance {distance}, {len(cands)} candidates)")
    return best


def suggestions(word: str, model: FrequencyModel, limit: int = 5) -> List[str]:
    _, cands = candidates(word, model)
    return rank(cands, model)[:limit]


def correct(
    words: Sequence[str],
    model: FrequencyModel,
    max_workers: Optional[int] = None
) -> Dict[str, str]:
    """
    Map every distinct word of `words` to its correction.

    Words are corrected independently on a thread pool; each task
    returns its own pair and the mapping is assembled once all of
    them are done.
    """
    distinct = list(dict.fromkeys(words))
    if not distinct:
        return {}
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        fixed = pool.map(lambda w: correction(w, model), distinct)
        return dict(zip(distinct, fixed))


class SpellCorrector:
    def __init__(
        self,
        model: FrequencyModel,
        max_workers: Optional[int] = None
    ) -> None:
        """
        model       : word frequencies used to pick and rank corrections
        max_workers : thread pool size for batch correction (None = executor default)
        """
        self.model = model
        self.max_workers = max_workers

    def correct(self, words: Sequence[str]) -> Dict[str, str]:
        return correct(words, self.model, self.max_workers)

    def correct_words(self, words: Sequence[str]) -> List[str]:
        """Corrections in input order; repeated words share one lookup."""
        mapping = self.correct(words)
        return [mapping[w] for w in words]

    def correct_line(self, line: str) -> str:
        return " ".join(self.correct_words(line.lower().split()))

    def suggestions(self, word: str, limit: int = 5) -> List[str]:
        return suggestions(word, self.model, limit)
