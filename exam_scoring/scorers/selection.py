"""
Selection Scoring - multi-select, highlight words, single choice

Multi-select style answers earn one point per correct pick and lose one per
wrong pick, never dropping below zero.
"""

from typing import Hashable, Iterable, List, Optional

from .report import ScoreReport


def _unique(items: Iterable[Hashable]) -> List[Hashable]:
    """De-duplicate while keeping submission order"""
    seen = set()
    ordered = []
    for item in items:
        if item not in seen:
            seen.add(item)
            ordered.append(item)
    return ordered


def score_set_overlap(submitted: Iterable[Hashable], correct: Iterable[Hashable]) -> ScoreReport:
    """
    Score = max(0, hits - misses); max = number of correct tokens.

    Detail lists each submitted token with whether it was a hit.
    """
    picks = _unique(submitted or [])
    correct_set = set(correct or [])

    detail = [{'token': token, 'hit': token in correct_set} for token in picks]
    hits = sum(1 for item in detail if item['hit'])
    misses = len(detail) - hits
    missed = len(correct_set - set(picks))

    return ScoreReport(
        score=float(max(0, hits - misses)),
        max_score=float(len(correct_set)),
        subscores={
            'hits': float(hits),
            'misses': float(misses),
            'missed': float(missed),
        },
        detail=detail,
    )


def score_single_choice(selected: Optional[str], correct_option: str) -> ScoreReport:
    """One point for picking exactly the correct option"""
    is_correct = selected is not None and selected == correct_option

    return ScoreReport(
        score=1.0 if is_correct else 0.0,
        max_score=1.0,
        detail=[{'selected': selected, 'expected': correct_option, 'correct': is_correct}],
    )
