"""
Markdown Reports

Renders scored attempts for learners and teachers.
"""

from typing import List, Tuple

from .scorers.aggregate import AggregateResult, band_score
from .scorers.report import ScoreReport, WordAnalysisEntry, BAD


def _title(question_type: str) -> str:
    return question_type.replace('_', ' ').title() if question_type else "Attempt"


def generate_report(report: ScoreReport, student_name: str = "Student") -> str:
    """
    Generate a formatted report for a single attempt

    Args:
        report: ScoreReport from score_attempt()
        student_name: Name to use in report

    Returns:
        Formatted markdown report string
    """

    lines = [
        f"# {_title(report.question_type)} Report: {student_name}",
        "",
        f"**Score:** {report.score:.1f}/{report.max_score:.1f} "
        f"(band {band_score(report.score, report.max_score)})",
        "",
    ]

    if report.subscores:
        lines += ["## Breakdown", ""]
        for name, value in report.subscores.items():
            lines.append(f"- **{name.title()}:** {value:.1f}")
        lines.append("")

    words = [item for item in report.detail if isinstance(item, WordAnalysisEntry)]
    if words:
        hard = [w.word for w in words if w.status == BAD]
        lines += ["## Words to Review", ""]
        lines.append(', '.join(hard) if hard else "None - every word was recognised.")
        lines.append("")

    lines += ["## Feedback", ""]
    lines += [f"- {message}" for message in report.feedback] or ["- No feedback."]

    return "\n".join(lines) + "\n"


def format_result_summary(
    attempts: List[Tuple[str, ScoreReport]],
    result: AggregateResult,
    student_name: str = "Student"
) -> str:
    """
    Generate a summary table across attempts plus section totals

    Args:
        attempts: (label, ScoreReport) pairs in the order taken
        result: AggregateResult for the same reports
        student_name: Name to use in the heading
    """

    summary = f"# Test Summary: {student_name}\n\n"
    summary += "| # | Attempt | Type | Score | Max |\n"
    summary += "|---|---------|------|-------|-----|\n"

    for number, (label, report) in enumerate(attempts, start=1):
        summary += f"| {number} | {label} | {_title(report.question_type)} | {report.score:.1f} | {report.max_score:.1f} |\n"

    summary += f"\n**Overall:** {result.overall_score:.1f}/{result.total_max_score:.1f} ({result.percentage}%)\n"

    if result.sections:
        summary += "\n## Sections\n\n"
        for section, totals in result.sections.items():
            band = band_score(totals['score'], totals['max_score'])
            summary += f"- **{section.title()}:** {totals['score']:.1f}/{totals['max_score']:.1f} (band {band})\n"

    return summary

