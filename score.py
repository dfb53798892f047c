#!/usr/bin/env python3
"""
Score CLI - score learner attempts and write a report

Scores one attempt or a whole practice test from a JSON file.

Usage:
    python score.py --attempt attempts/read_aloud.json
    python score.py --attempt attempts/mock_test.json --config scoring.json
    python score.py --attempt attempts/mock_test.json --ai-feedback

Attempt file (single):
    {"student_name": "...", "question_type": "read_aloud",
     "reference": {"text": "..."}, "submission": "..."}

Attempt file (test):
    {"student_name": "...", "attempts": [{...}, {...}]}

Output:
    outputs/scores/{student}_scores.json
    outputs/reports/{student}_report.md
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from exam_scoring.reports import generate_report, format_result_summary
from exam_scoring.scorers import (
    score_attempt, aggregate, list_scorers, load_config, DEFAULT_CONFIG,
    MalformedInputError, UnknownQuestionTypeError
)


def main():
    parser = argparse.ArgumentParser(
        description='Score learner attempts against their reference answers',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Question types: {', '.join(list_scorers())}

Examples:
    # Score a single attempt
    python score.py --attempt read_aloud.json

    # Custom thresholds
    python score.py --attempt mock_test.json --config scoring.json

    # Coaching feedback written by Claude (falls back to rule-based)
    python score.py --attempt mock_test.json --ai-feedback
        """
    )

    parser.add_argument(
        '--attempt',
        required=True,
        help='Path to attempt JSON file'
    )
    parser.add_argument(
        '--config',
        help='Path to scoring config JSON (optional, defaults built in)'
    )
    parser.add_argument(
        '--output',
        default='./outputs',
        help='Output directory base (default: ./outputs)'
    )
    parser.add_argument(
        '--ai-feedback',
        action='store_true',
        help='Replace rule-based feedback with Claude coaching feedback'
    )
    parser.add_argument(
        '--api-key',
        help='Anthropic API key (optional, can also use ANTHROPIC_API_KEY env var)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Show debug logging'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    attempt_path = Path(args.attempt)
    if not attempt_path.exists():
        print(f"ERROR: Attempt file not found: {attempt_path}")
        sys.exit(1)

    config = DEFAULT_CONFIG
    if args.config:
        if not Path(args.config).exists():
            print(f"ERROR: Config not found: {args.config}")
            sys.exit(1)
        try:
            config = load_config(args.config)
        except ValueError as e:
            print(f"ERROR: Invalid config: {e}")
            sys.exit(1)

    with open(attempt_path, 'r') as f:
        data = json.load(f)

    student_name = data.get('student_name', 'Unknown')
    attempts = data.get('attempts', [data])

    print(f"\n{'='*60}")
    print(f"SCORING {len(attempts)} ATTEMPT(S) for {student_name}")
    print(f"{'='*60}")

    scored = []
    for number, attempt in enumerate(attempts, start=1):
        question_type = attempt.get('question_type', '')
        try:
            report = score_attempt(
                question_type,
                attempt.get('reference'),
                attempt.get('submission'),
                config
            )
        except (MalformedInputError, UnknownQuestionTypeError) as e:
            print(f"ERROR: Attempt {number}: {e}")
            sys.exit(1)

        if args.ai_feedback:
            report.feedback = _coaching_feedback(report, question_type, args.api_key)

        label = attempt.get('label', f"{question_type} #{number}")
        scored.append((label, report))
        print(f"  ✓ {label}: {report.score:.1f}/{report.max_score:.1f}")

    result = aggregate([report for _, report in scored])
    print(f"\n  Overall: {result.overall_score:.1f}/{result.total_max_score:.1f} ({result.percentage}%)")
    for section, totals in result.sections.items():
        print(f"  {section.title()}: {totals['score']:.1f}/{totals['max_score']:.1f}")

    # Save scores
    output_base = Path(args.output)
    scores_dir = output_base / "scores"
    report_dir = output_base / "reports"
    scores_dir.mkdir(parents=True, exist_ok=True)
    report_dir.mkdir(parents=True, exist_ok=True)

    safe_name = student_name.replace(' ', '_')

    scores_path = scores_dir / f"{safe_name}_scores.json"
    scores_data = {
        'student': student_name,
        'attempts': [dict(report.to_dict(), label=label) for label, report in scored],
        'overall': {
            'score': round(result.overall_score, 1),
            'max_score': round(result.total_max_score, 1),
            'percentage': result.percentage,
            'sections': {
                section: {k: round(v, 1) for k, v in totals.items()}
                for section, totals in result.sections.items()
            },
        },
    }
    with open(scores_path, 'w') as f:
        json.dump(scores_data, f, indent=2)

    # Save report
    report_path = report_dir / f"{safe_name}_report.md"
    if len(scored) == 1:
        report = generate_report(scored[0][1], student_name)
    else:
        report = format_result_summary(scored, result, student_name)
        report += "\n---\n\n" + "\n---\n\n".join(generate_report(r, student_name) for _, r in scored)

    with open(report_path, 'w') as f:
        f.write(report)

    print(f"\n{'='*60}")
    print("SCORING COMPLETE")
    print(f"{'='*60}")
    print(f"Scores: {scores_path}")
    print(f"Report: {report_path}")


def _coaching_feedback(report, question_type, api_key):
    """Claude coaching feedback, or the rule-based feedback if the API fails"""
    try:
        from exam_scoring.scorers.api_feedback import generate_feedback_with_api
        return generate_feedback_with_api(report, question_type, api_key)
    except ImportError as e:
        print(f"  ⚠ API unavailable ({e}), keeping rule-based feedback")
    except Exception as e:
        print(f"  ⚠ API error ({e}), keeping rule-based feedback")
    return report.feedback


if __name__ == "__main__":
    main()
