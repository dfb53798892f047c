"""
Blank-Fill Scoring - dropdown and drag-drop fill in the blanks

Exact, case-sensitive comparison per blank. A blank with no answer is
simply wrong.
"""

from typing import Dict, Hashable, Iterable, Optional, Tuple

from .report import ScoreReport


def _lookup(answers: Dict, index: Hashable) -> Optional[str]:
    # Answers decoded from JSON arrive keyed by strings
    if index in answers:
        return answers[index]
    return answers.get(str(index))


def score_blanks(blanks: Iterable[Tuple[Hashable, str]], answers: Optional[Dict]) -> ScoreReport:
    """
    Args:
        blanks: (blank_index, correct_value) pairs from the reference
        answers: blank_index -> submitted value

    Returns:
        ScoreReport with one detail record per reference blank
    """
    answers = answers or {}

    detail = []
    for index, expected in blanks:
        submitted = _lookup(answers, index)
        detail.append({
            'index': index,
            'submitted': submitted,
            'expected': expected,
            'correct': submitted == expected,
        })

    return ScoreReport(
        score=float(sum(1 for item in detail if item['correct'])),
        max_score=float(len(detail)),
        detail=detail,
    )
