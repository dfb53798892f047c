"""
Text Normalization + Fuzzy Matching

Shared by every scorer that compares text:
- normalize(): lowercase, strip punctuation, collapse whitespace
- similarity(): bigram Dice coefficient in [0, 1]
- best_match(): highest-rated candidate for a target string
"""

import re
from collections import Counter
from typing import List, NamedTuple, Optional


# Punctuation removed before any comparison: . , / # ! $ % ^ & * ; : { } = - _ ` ~ ( )
PUNCTUATION_PATTERN = re.compile(r"[.,/#!$%^&*;:{}=\-_`~()]")
MULTI_SPACE_PATTERN = re.compile(r"\s{2,}")


class BestMatch(NamedTuple):
    best_index: int
    rating: float


def normalize(text: Optional[str]) -> str:
    """Lowercase, remove punctuation, collapse runs of whitespace and trim"""
    if not text:
        return ""
    cleaned = PUNCTUATION_PATTERN.sub("", str(text).lower())
    cleaned = MULTI_SPACE_PATTERN.sub(" ", cleaned)
    return cleaned.strip()


def word_list(text: Optional[str]) -> List[str]:
    """Normalized words of a text (empty list for empty text)"""
    return normalize(text).split()


def _bigrams(text: str) -> Counter:
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def similarity(first: Optional[str], second: Optional[str]) -> float:
    """
    Dice coefficient over character bigrams (whitespace ignored).

    Identical non-empty strings rate 1.0. Anything shorter than two
    characters can't form a bigram and rates 0.0 unless identical.
    An empty side always rates 0.0.
    """
    first = re.sub(r"\s+", "", first or "")
    second = re.sub(r"\s+", "", second or "")

    if not first or not second:
        return 0.0
    if first == second:
        return 1.0
    if len(first) < 2 or len(second) < 2:
        return 0.0

    remaining = _bigrams(first)
    intersection = 0
    for i in range(len(second) - 1):
        bigram = second[i:i + 2]
        if remaining[bigram] > 0:
            remaining[bigram] -= 1
            intersection += 1

    return (2.0 * intersection) / (len(first) + len(second) - 2)


def best_match(target: str, candidates: List[str]) -> BestMatch:
    """
    Find the candidate most similar to target.

    Ties keep the earliest candidate. An empty candidate list is compared
    against a single empty string, so the result is always defined.
    """
    pool = candidates if candidates else [""]

    best_index = 0
    best_rating = -1.0
    for index, candidate in enumerate(pool):
        rating = similarity(target, candidate)
        if rating > best_rating:
            best_index, best_rating = index, rating

    return BestMatch(best_index=best_index, rating=best_rating)
