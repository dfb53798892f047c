"""
Score Aggregation - question scores to section/test totals

Also converts raw ratios onto the 10-90 practice band.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence

from .report import ScoreReport
from .taxonomies import SECTION_MAP, SECTIONS

BAND_MIN = 10
BAND_MAX = 90


@dataclass
class AggregateResult:
    """Totals across a set of question reports"""
    overall_score: float
    total_max_score: float
    percentage: int
    # section -> {'score': ..., 'max_score': ...}
    sections: Dict[str, Dict[str, float]] = field(default_factory=dict)


def _round_half_up(value: float) -> int:
    return int(value + 0.5)


def percentage(score: float, max_score: float) -> int:
    """Whole-number percentage; 0 when there is nothing to score against"""
    if max_score <= 0:
        return 0
    return _round_half_up(100 * score / max_score)


def band_score(score: float, max_score: float) -> int:
    """Map score/max onto the 10-90 band"""
    if max_score <= 0:
        return BAND_MIN
    return min(BAND_MAX, BAND_MIN + _round_half_up((BAND_MAX - BAND_MIN) * score / max_score))


def split_sections(question_type: str, score: float) -> Dict[str, float]:
    """Divide a score equally across the sections a question type feeds"""
    sections = SECTION_MAP.get(question_type)
    if not sections:
        raise ValueError(f"No section mapping for question type: '{question_type}'")
    share = score / len(sections)
    return {section: share for section in sections}


def aggregate(
    reports: Sequence[ScoreReport],
    question_types: Optional[Sequence[str]] = None
) -> AggregateResult:
    """
    Sum scores and maxima across reports.

    Question types come from the argument when given, otherwise from each
    report's question_type. Reports without a mapped type still count
    towards the overall totals but not towards any section.
    """
    if question_types is not None and len(question_types) != len(reports):
        raise ValueError("question_types must have one entry per report")

    overall = sum(r.score for r in reports)
    total_max = sum(r.max_score for r in reports)

    sections = {}
    for index, report in enumerate(reports):
        qtype = question_types[index] if question_types is not None else report.question_type
        if qtype not in SECTION_MAP:
            continue
        score_split = split_sections(qtype, report.score)
        max_split = split_sections(qtype, report.max_score)
        for section in score_split:
            totals = sections.setdefault(section, {'score': 0.0, 'max_score': 0.0})
            totals['score'] += score_split[section]
            totals['max_score'] += max_split[section]

    ordered = {s: sections[s] for s in SECTIONS if s in sections}

    return AggregateResult(
        overall_score=overall,
        total_max_score=total_max,
        percentage=percentage(overall, total_max),
        sections=ordered,
    )
