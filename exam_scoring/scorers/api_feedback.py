"""
API-Based Coaching Feedback

Uses Anthropic Claude API to rewrite rule-based feedback into short
coaching advice. Callers fall back to the rule-based messages if the API
is unavailable.
"""

import json
import os
from typing import List, Optional
from anthropic import Anthropic

from .report import ScoreReport


FEEDBACK_PROMPT = """You are coaching a learner preparing for an English proficiency exam.

Question type: {question_type}
Score: {score:.1f} / {max_score:.1f}
Sub-scores: {subscores}
Rule-based feedback: {rule_feedback}

Write 1-3 short, specific coaching sentences for the learner. Do not change
or restate the numeric scores.

Respond with JSON only: {{"feedback": ["sentence", ...]}}
"""


def generate_feedback_with_api(
    report: ScoreReport,
    question_type: str,
    api_key: Optional[str] = None
) -> List[str]:
    """
    Ask Claude for coaching sentences for a scored attempt.

    Args:
        report: Scored attempt (scores are never modified)
        question_type: Registered question type name
        api_key: Anthropic API key (or use ANTHROPIC_API_KEY env var)

    Returns:
        List of feedback strings
    """

    key = api_key or os.environ.get('ANTHROPIC_API_KEY')
    if not key:
        raise ValueError("ANTHROPIC_API_KEY not set")

    client = Anthropic(api_key=key)

    prompt = FEEDBACK_PROMPT.format(
        question_type=question_type,
        score=report.score,
        max_score=report.max_score,
        subscores=', '.join(f"{k}={v:.1f}" for k, v in report.subscores.items()) or 'None',
        rule_feedback=' '.join(report.feedback) or 'None'
    )

    response = client.messages.create(
        model="claude-sonnet-4-20250514",
        max_tokens=400,
        messages=[
            {"role": "user", "content": prompt}
        ]
    )

    response_text = response.content[0].text.strip()

    # Handle potential markdown wrapping
    if response_text.startswith('```'):
        response_text = response_text.split('```')[1]
        if response_text.startswith('json'):
            response_text = response_text[4:]

    try:
        result = json.loads(response_text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Failed to parse API response as JSON: {e}\nResponse: {response_text[:500]}")

    feedback = result.get('feedback') if isinstance(result, dict) else None
    if not isinstance(feedback, list) or not all(isinstance(s, str) for s in feedback):
        raise ValueError(f"API response has no feedback list: {response_text[:500]}")

    return feedback
