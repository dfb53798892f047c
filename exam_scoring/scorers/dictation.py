"""
Dictation Scoring - write from dictation

Multiset word overlap: each submitted word can use up one remaining
occurrence of the same word in the reference. Position is ignored.
"""

from collections import Counter
from typing import Optional

from .report import ScoreReport
from .text import word_list

CORRECT = 'correct'
EXTRA = 'extra'
MISSING = 'missing'

# Practice screens show dictation out of 10
DISPLAY_SCALE = 10.0


def score_dictation(reference_text: str, submitted_text: Optional[str]) -> ScoreReport:
    """
    Score = words matched against the reference; max = reference word count.

    Detail lists submitted words as correct/extra in order, then any
    reference words left unmatched as missing.
    """
    reference_words = word_list(reference_text)
    submitted_words = word_list(submitted_text)

    remaining = Counter(reference_words)
    detail = []
    matched = 0
    for word in submitted_words:
        if remaining[word] > 0:
            remaining[word] -= 1
            matched += 1
            detail.append({'word': word, 'status': CORRECT})
        else:
            detail.append({'word': word, 'status': EXTRA})

    # Unmatched reference words, in reference order
    for word in reference_words:
        if remaining[word] > 0:
            remaining[word] -= 1
            detail.append({'word': word, 'status': MISSING})

    max_score = len(reference_words)
    scaled = round(DISPLAY_SCALE * matched / max(1, max_score), 1)

    return ScoreReport(
        score=float(matched),
        max_score=float(max_score),
        subscores={'scaled': scaled},
        detail=detail,
        metrics={
            'reference_words': max_score,
            'transcript_words': len(submitted_words),
        }
    )
