"""
Summary + Essay Scoring - word-count bands and keyword coverage

No grammar checker is involved: grammar, vocabulary and spelling are
coarse proxies tied to whether the response is of a sensible length.
"""

from typing import List, Optional, Sequence

from .config import ScoringConfig, DEFAULT_CONFIG
from .report import ScoreReport
from .taxonomies import STOPWORDS, KEYWORD_MIN_LENGTH
from .text import word_list


def extract_keywords(passage: Optional[str]) -> List[str]:
    """Unique content words of a passage, in first-seen order"""
    keywords = []
    for word in word_list(passage):
        if len(word) >= KEYWORD_MIN_LENGTH and word not in STOPWORDS and word not in keywords:
            keywords.append(word)
    return keywords


def count_words(text: Optional[str]) -> int:
    return len((text or "").split())


def matched_keywords(text: Optional[str], keywords: Sequence[str]) -> List[str]:
    """Keywords found as case-insensitive substrings of text"""
    lower = (text or "").lower()
    return [k for k in keywords if k and k.lower() in lower]


def score_form(word_count: int, config: ScoringConfig = DEFAULT_CONFIG) -> float:
    short_min, target_min, target_max, long_max = config.summary_bands

    if target_min <= word_count <= target_max:
        return config.form_max
    if short_min <= word_count < target_min or target_max < word_count <= long_max:
        return config.form_max / 2
    return 0.0


def score_summary(
    text: Optional[str],
    keywords: Optional[Sequence[str]] = None,
    config: ScoringConfig = DEFAULT_CONFIG
) -> ScoreReport:
    """
    Score a written or spoken-text summary.

    With no keywords at all, content gets full credit (there is nothing to
    check against). Blank keywords are ignored.
    """
    keywords = [k for k in (keywords or []) if k and k.strip()]
    word_count = count_words(text)
    found = matched_keywords(text, keywords)

    form = score_form(word_count, config)

    if keywords:
        content = config.summary_content_max if found else 0.0
    else:
        content = config.summary_content_max

    proxy = config.language_proxy_credit if form > 0 else 0.0

    subscores = {
        'form': form,
        'content': content,
        'grammar': proxy,
        'vocabulary': proxy,
        'spelling': proxy,
    }

    return ScoreReport(
        score=sum(subscores.values()),
        max_score=config.summary_max,
        subscores=subscores,
        detail=[{'keyword': k, 'found': k in found} for k in keywords],
        metrics={'word_count': word_count, 'keywords_matched': len(found)},
    )


def score_essay(
    text: Optional[str],
    keywords: Optional[Sequence[str]] = None,
    config: ScoringConfig = DEFAULT_CONFIG
) -> ScoreReport:
    """
    Score an essay on form, keyword coverage, length-based language
    proxies and paragraph structure.
    """
    keywords = [k for k in (keywords or []) if k and k.strip()]
    part_max = config.essay_component_max
    names = ('form', 'content', 'grammar', 'vocabulary', 'spelling', 'structure', 'general')

    if not (text or "").strip():
        return ScoreReport(
            score=0.0,
            max_score=config.essay_max,
            subscores={name: 0.0 for name in names},
            detail=[{'keyword': k, 'found': False} for k in keywords],
            metrics={'word_count': 0, 'keywords_matched': 0},
        )

    word_count = count_words(text)
    found = matched_keywords(text, keywords)
    short_min, target_min, target_max, long_max = config.essay_bands

    if target_min <= word_count <= target_max:
        form = part_max
    elif short_min <= word_count < target_min or target_max < word_count <= long_max:
        form = part_max / 2
    else:
        form = 0.0

    content_max = config.essay_content_max
    if keywords:
        coverage = len(found) / len(keywords)
        if coverage > 0.5:
            content = content_max
        elif coverage > 0.2:
            content = content_max * 2 / 3
        elif coverage > 0:
            content = content_max / 3
        else:
            content = 0.0
    else:
        content = content_max if word_count > config.essay_short_words else content_max / 3

    language = part_max / 2 if word_count < config.essay_short_words else part_max
    lines = len(text.split('\n'))
    structure = part_max if lines >= config.essay_structure_min_lines else part_max / 2

    subscores = {
        'form': form,
        'content': content,
        'grammar': language,
        'vocabulary': language,
        'spelling': part_max,
        'structure': structure,
        'general': part_max,
    }

    return ScoreReport(
        score=sum(subscores.values()),
        max_score=config.essay_max,
        subscores=subscores,
        detail=[{'keyword': k, 'found': k in found} for k in keywords],
        metrics={'word_count': word_count, 'keywords_matched': len(found)},
    )
