"""
Scorers Registry

Maps question-type names to scoring adapters. Each adapter checks the
reference/submission shape for its type, then calls a pure scorer.
Add new question types here.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional

from .config import ScoringConfig, FeedbackThresholds, DEFAULT_CONFIG, load_config
from .report import (
    ScoreReport, WordAnalysisEntry, MalformedInputError, UnknownQuestionTypeError
)
from .text import normalize, similarity, best_match
from .alignment import align_words, score_read_aloud
from .selection import score_set_overlap, score_single_choice
from .ordering import score_pairwise_order
from .blanks import score_blanks
from .dictation import score_dictation
from .summary import score_summary, score_essay, extract_keywords
from .feedback import generate_feedback
from .aggregate import AggregateResult, aggregate, band_score, percentage, split_sections

logger = logging.getLogger(__name__)


# ==================== SHAPE CHECKS ====================

def _require(reference: Any, key: str, question_type: str) -> Any:
    if not isinstance(reference, Mapping):
        raise MalformedInputError(question_type, 'reference', "must be a mapping")
    if reference.get(key) is None:
        raise MalformedInputError(question_type, key)
    return reference[key]


def _text(value: Any, question_type: str, name: str = 'submission') -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedInputError(question_type, name, "must be text")
    return value


def _sequence(value: Any, question_type: str, name: str = 'submission') -> List:
    if value is None:
        return []
    if isinstance(value, (str, bytes, Mapping)) or not hasattr(value, '__iter__'):
        raise MalformedInputError(question_type, name, "must be a list")
    return list(value)


def _tokens(value: Any, question_type: str, name: str = 'submission') -> List:
    """A list whose items can be compared as set members"""
    items = _sequence(value, question_type, name)
    for item in items:
        try:
            hash(item)
        except TypeError:
            raise MalformedInputError(question_type, name, "items must be plain values, not lists or mappings")
    return items


def _indices(value: Any, question_type: str, name: str = 'submission') -> List[int]:
    items = _sequence(value, question_type, name)
    if any(isinstance(i, bool) for i in items):
        raise MalformedInputError(question_type, name, "must be a list of word indices")
    try:
        return [int(i) for i in items]
    except (TypeError, ValueError):
        raise MalformedInputError(question_type, name, "must be a list of word indices")


def _blank_pairs(blanks: Any, question_type: str) -> List:
    pairs = []
    for blank in _sequence(blanks, question_type, 'blanks'):
        if isinstance(blank, Mapping):
            if 'index' not in blank or 'correctValue' not in blank:
                raise MalformedInputError(question_type, 'blanks', "entries need 'index' and 'correctValue'")
            pairs.append((blank['index'], blank['correctValue']))
        elif isinstance(blank, (list, tuple)) and len(blank) == 2:
            pairs.append((blank[0], blank[1]))
        else:
            raise MalformedInputError(question_type, 'blanks', "entries must be (index, correctValue) pairs")
    return pairs


# ==================== ADAPTERS ====================

def _read_aloud(qtype: str, reference, submission, config: ScoringConfig) -> ScoreReport:
    text = _text(_require(reference, 'text', qtype), qtype, 'text')
    return score_read_aloud(text, _text(submission, qtype), config)


def _multi_select(key: str):
    def adapter(qtype: str, reference, submission, config: ScoringConfig) -> ScoreReport:
        correct = _tokens(_require(reference, key, qtype), qtype, key)
        return score_set_overlap(_tokens(submission, qtype), correct)
    return adapter


def _highlight_words(qtype: str, reference, submission, config: ScoringConfig) -> ScoreReport:
    mistakes = _indices(_require(reference, 'mistakeIndices', qtype), qtype, 'mistakeIndices')
    offset = reference.get('indexOffset', 0)
    if isinstance(offset, bool) or not isinstance(offset, int):
        raise MalformedInputError(qtype, 'indexOffset', "must be a whole number")
    selected = [i + offset for i in _indices(submission, qtype)]
    return score_set_overlap(selected, mistakes)


def _reorder(qtype: str, reference, submission, config: ScoringConfig) -> ScoreReport:
    correct = _tokens(_require(reference, 'correctOrder', qtype), qtype, 'correctOrder')
    order = _tokens(submission, qtype)
    if len(set(order)) != len(order):
        raise MalformedInputError(qtype, 'submission', "must not repeat items")
    return score_pairwise_order(order, correct)


def _fill_blanks(qtype: str, reference, submission, config: ScoringConfig) -> ScoreReport:
    blanks = _blank_pairs(_require(reference, 'blanks', qtype), qtype)
    if submission is not None and not isinstance(submission, Mapping):
        raise MalformedInputError(qtype, 'submission', "must map blank index to value")
    return score_blanks(blanks, submission)


def _dictation(qtype: str, reference, submission, config: ScoringConfig) -> ScoreReport:
    text = _text(_require(reference, 'text', qtype), qtype, 'text')
    return score_dictation(text, _text(submission, qtype))


def _keywords(qtype: str, reference, derive_from_text: bool = False) -> List[str]:
    if not isinstance(reference, Mapping):
        raise MalformedInputError(qtype, 'reference', "must be a mapping")
    if reference.get('keywords') is not None:
        keywords = [str(k).strip() for k in _tokens(reference['keywords'], qtype, 'keywords')]
        return [k for k in keywords if k]
    if derive_from_text and reference.get('text'):
        return extract_keywords(_text(reference['text'], qtype, 'text'))
    return []


def _written_summary(qtype: str, reference, submission, config: ScoringConfig) -> ScoreReport:
    keywords = _keywords(qtype, reference, derive_from_text=True)
    return score_summary(_text(submission, qtype), keywords, config)


def _spoken_summary(qtype: str, reference, submission, config: ScoringConfig) -> ScoreReport:
    return score_summary(_text(submission, qtype), _keywords(qtype, reference), config)


def _essay(qtype: str, reference, submission, config: ScoringConfig) -> ScoreReport:
    return score_essay(_text(submission, qtype), _keywords(qtype, reference), config)


def _single_choice(qtype: str, reference, submission, config: ScoringConfig) -> ScoreReport:
    correct = _text(_require(reference, 'correctOption', qtype), qtype, 'correctOption')
    return score_single_choice(_text(submission, qtype) if submission is not None else None, correct)


# Registry: question type -> adapter
SCORERS: Dict[str, Callable[..., ScoreReport]] = {
    # Speaking
    'read_aloud': _read_aloud,
    'repeat_sentence': _read_aloud,
    # Writing
    'summarize_written_text': _written_summary,
    'write_essay': _essay,
    # Reading
    'fib_dropdown': _fill_blanks,
    'fib_drag_drop': _fill_blanks,
    'multiple_choice_multiple': _multi_select('correctOptions'),
    'reorder_paragraphs': _reorder,
    'multiple_choice_single': _single_choice,
    # Listening
    'summarize_spoken_text': _spoken_summary,
    'listening_fib': _fill_blanks,
    'highlight_correct_summary': _single_choice,
    'select_missing_word': _single_choice,
    'highlight_incorrect_words': _highlight_words,
    'write_from_dictation': _dictation,
}


def get_scorer(name: str) -> Callable[..., ScoreReport]:
    """Get scoring adapter by question type"""
    if name not in SCORERS:
        available = ', '.join(SCORERS.keys())
        raise UnknownQuestionTypeError(f"Unknown question type: '{name}'. Available: {available}")
    return SCORERS[name]


def list_scorers() -> List[str]:
    """List registered question types"""
    return list(SCORERS.keys())


def score_attempt(
    question_type: str,
    reference: Any,
    submission: Any,
    config: Optional[ScoringConfig] = None
) -> ScoreReport:
    """
    Score one attempt.

    Raises:
        UnknownQuestionTypeError: question_type is not registered
        MalformedInputError: reference/submission has the wrong shape
    """
    scorer = get_scorer(question_type)
    config = config or DEFAULT_CONFIG

    report = scorer(question_type, reference, submission, config)
    report.question_type = question_type
    report.feedback = generate_feedback(report, config)

    logger.debug("Scored %s: %.1f/%.1f", question_type, report.score, report.max_score)
    return report


__all__ = [
    'SCORERS',
    'get_scorer',
    'list_scorers',
    'score_attempt',
    'ScoringConfig',
    'FeedbackThresholds',
    'DEFAULT_CONFIG',
    'load_config',
    'ScoreReport',
    'WordAnalysisEntry',
    'MalformedInputError',
    'UnknownQuestionTypeError',
    'normalize',
    'similarity',
    'best_match',
    'align_words',
    'score_read_aloud',
    'score_set_overlap',
    'score_single_choice',
    'score_pairwise_order',
    'score_blanks',
    'score_dictation',
    'score_summary',
    'score_essay',
    'extract_keywords',
    'generate_feedback',
    'AggregateResult',
    'aggregate',
    'band_score',
    'percentage',
    'split_sections',
]
