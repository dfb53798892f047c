"""
Ordering Scoring - reorder paragraphs

Only adjacent pairs are rewarded: a pair (a, b) in the submission earns a
point when b directly follows a in the correct order. Items in the right
absolute position but with wrong neighbours earn nothing.
"""

from typing import Hashable, Sequence

from .report import ScoreReport


def adjacent_pairs(order: Sequence[Hashable]):
    return list(zip(order, order[1:]))


def score_pairwise_order(submitted: Sequence[Hashable], correct: Sequence[Hashable]) -> ScoreReport:
    """
    Score = matching adjacent pairs; max = len(correct) - 1 (0 for a single item).

    Each correct pair earns at most one point; a repeated pair is marked
    incorrect after its first appearance.
    """
    submitted = list(submitted or [])
    correct = list(correct or [])
    remaining = set(adjacent_pairs(correct))

    detail = []
    for pair in adjacent_pairs(submitted):
        is_correct = pair in remaining
        remaining.discard(pair)
        detail.append({
            'pair': f"{pair[0]}-{pair[1]}",
            'correct': is_correct,
        })

    return ScoreReport(
        score=float(sum(1 for item in detail if item['correct'])),
        max_score=float(max(0, len(correct) - 1)),
        detail=detail,
    )
