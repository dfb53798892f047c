"""
Exam Scoring - Source Package
"""

from .scorers import (
    score_attempt, get_scorer, list_scorers, aggregate,
    ScoreReport, ScoringConfig, MalformedInputError, UnknownQuestionTypeError
)
from .reports import generate_report, format_result_summary

__version__ = '1.0.0'

__all__ = [
    'score_attempt',
    'get_scorer',
    'list_scorers',
    'aggregate',
    'ScoreReport',
    'ScoringConfig',
    'MalformedInputError',
    'UnknownQuestionTypeError',
    'generate_report',
    'format_result_summary',
]
