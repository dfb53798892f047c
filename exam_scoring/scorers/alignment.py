"""
Word Alignment Scoring - read aloud / repeat sentence

Classifies every reference word against the transcript with a best fuzzy
match, then derives three capped sub-scores:
- Content: share of reference words covered (good = 1, average = 0.5)
- Pronunciation: whole-string similarity of the normalized texts
- Fluency: penalty for transcripts much shorter or longer than the reference
"""

import logging
from typing import List, Optional

from .config import ScoringConfig, DEFAULT_CONFIG
from .report import ScoreReport, WordAnalysisEntry, GOOD, AVERAGE, BAD
from .text import normalize, best_match, similarity

logger = logging.getLogger(__name__)


def classify_rating(rating: float, config: ScoringConfig = DEFAULT_CONFIG) -> str:
    """Map a similarity rating onto good / average / bad"""
    if rating > config.good_threshold:
        return GOOD
    if rating > config.average_threshold:
        return AVERAGE
    return BAD


def align_words(
    reference_text: str,
    transcript: str,
    config: ScoringConfig = DEFAULT_CONFIG
) -> List[WordAnalysisEntry]:
    """
    Classify each display word of the reference against the transcript.

    Order follows the reference text. Punctuation-only tokens (empty once
    normalized) are always 'average'.
    """
    transcript_words = normalize(transcript).split() or [""]

    analysis = []
    for display_word in (reference_text or "").split():
        cleaned = normalize(display_word)
        if not cleaned:
            analysis.append(WordAnalysisEntry(word=display_word, status=AVERAGE))
            continue

        match = best_match(cleaned, transcript_words)
        analysis.append(WordAnalysisEntry(word=display_word, status=classify_rating(match.rating, config)))

    return analysis


def score_content(analysis: List[WordAnalysisEntry], reference_word_count: int,
                  config: ScoringConfig = DEFAULT_CONFIG) -> float:
    good = sum(1 for entry in analysis if entry.status == GOOD)
    average = sum(1 for entry in analysis if entry.status == AVERAGE)
    raw = config.content_max * (good + 0.5 * average) / max(1, reference_word_count)
    return min(config.content_max, raw)


def score_pronunciation(reference_clean: str, transcript_clean: str,
                        config: ScoringConfig = DEFAULT_CONFIG) -> float:
    return min(config.pronunciation_max, config.pronunciation_max * similarity(reference_clean, transcript_clean))


def score_fluency(transcript_word_count: int, reference_word_count: int,
                  config: ScoringConfig = DEFAULT_CONFIG) -> float:
    """Full marks at a 1:1 length ratio; the ratio is capped before the penalty"""
    ratio = min(config.fluency_ratio_cap, transcript_word_count / max(1, reference_word_count))
    return max(0.0, config.fluency_max - config.fluency_max * abs(1 - ratio))


def score_read_aloud(
    reference_text: str,
    transcript: Optional[str],
    config: ScoringConfig = DEFAULT_CONFIG
) -> ScoreReport:
    """
    Score a spoken transcript against the reference passage.

    Returns a ScoreReport whose detail is the per-word analysis and whose
    subscores are content, pronunciation and fluency.
    """
    reference_clean = normalize(reference_text)
    transcript_clean = normalize(transcript)
    reference_words = reference_clean.split()
    transcript_words = transcript_clean.split()

    if not transcript_words:
        logger.debug("Empty transcript against %d reference words", len(reference_words))

    analysis = align_words(reference_text, transcript, config)

    content = score_content(analysis, len(reference_words), config)
    pronunciation = score_pronunciation(reference_clean, transcript_clean, config)
    fluency = score_fluency(len(transcript_words), len(reference_words), config)
    total = min(config.read_aloud_max, content + pronunciation + fluency)

    return ScoreReport(
        score=total,
        max_score=config.read_aloud_max,
        subscores={
            'content': content,
            'pronunciation': pronunciation,
            'fluency': fluency,
        },
        detail=analysis,
        metrics={
            'similarity': similarity(reference_clean, transcript_clean),
            'reference_words': len(reference_words),
            'transcript_words': len(transcript_words),
            'good_words': sum(1 for entry in analysis if entry.status == GOOD),
            'average_words': sum(1 for entry in analysis if entry.status == AVERAGE),
        }
    )
