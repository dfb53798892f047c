"""
Feedback Generation

Turns a ScoreReport into short learner-facing messages. Thresholds come
from FeedbackThresholds so they can be tuned without touching the rules.
"""

from typing import List

from .config import ScoringConfig, DEFAULT_CONFIG
from .report import ScoreReport
from .taxonomies import FEEDBACK_MESSAGES


def generate_feedback(report: ScoreReport, config: ScoringConfig = DEFAULT_CONFIG) -> List[str]:
    """
    Returns:
        List of messages: one overall message, then any targeted advice
    """
    thresholds = config.feedback
    subscores = report.subscores
    is_speaking = 'fluency' in subscores or 'pronunciation' in subscores
    messages = FEEDBACK_MESSAGES['speaking' if is_speaking else 'general']

    feedback = []

    # Overall
    if report.score > thresholds.excellent_ratio * report.max_score:
        feedback.append(messages['excellent'])
    elif report.score > thresholds.good_ratio * report.max_score:
        feedback.append(messages['good'])
    else:
        feedback.append(messages['needs_practice'])

    # Targeted advice
    if 'fluency' in subscores and subscores['fluency'] < thresholds.fluency_floor:
        feedback.append(FEEDBACK_MESSAGES['fluency'])
    if 'pronunciation' in subscores and subscores['pronunciation'] < thresholds.pronunciation_floor:
        feedback.append(FEEDBACK_MESSAGES['pronunciation'])

    metrics = report.metrics
    if 'transcript_words' in metrics and 'reference_words' in metrics:
        if metrics['transcript_words'] < metrics['reference_words'] * thresholds.completeness_ratio:
            feedback.append(FEEDBACK_MESSAGES['completeness'])

    return feedback
