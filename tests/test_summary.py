"""
Tests for summary and essay scoring
"""

import pytest
from exam_scoring.scorers import ScoringConfig, score_summary, score_essay, extract_keywords


def _words(count, word="word"):
    return " ".join([word] * count)


class TestFormScore:
    """Test word-count bands"""

    @pytest.mark.parametrize("count,form", [
        (39, 0.0),
        (40, 1.0),
        (49, 1.0),
        (50, 2.0),
        (70, 2.0),
        (71, 1.0),
        (100, 1.0),
        (101, 0.0),
        (0, 0.0),
    ])
    def test_bands(self, count, form):
        report = score_summary(_words(count), [])
        assert report.subscores['form'] == form

    def test_custom_bands(self):
        config = ScoringConfig(summary_bands=(5, 10, 20, 30))
        report = score_summary(_words(15), [], config)
        assert report.subscores['form'] == 2.0


class TestSummaryScoring:
    """Test content and language proxies"""

    def test_no_keywords_defaults_to_full_content(self):
        report = score_summary(_words(60), [])
        assert report.subscores == {
            'form': 2.0, 'content': 2.0, 'grammar': 1.5, 'vocabulary': 1.5, 'spelling': 1.5
        }
        assert report.score == pytest.approx(8.5)
        assert report.max_score == 10.0

    def test_keyword_found_case_insensitive(self):
        text = "Climate CHANGE affects everyone " + _words(56)
        report = score_summary(text, ["climate change"])
        assert report.subscores['content'] == 2.0
        assert report.detail == [{'keyword': 'climate change', 'found': True}]

    def test_no_keyword_found(self):
        report = score_summary(_words(60), ["ocean", "plastic"])
        assert report.subscores['content'] == 0.0
        assert report.score == pytest.approx(6.5)

    def test_bad_length_loses_language_credit(self):
        report = score_summary(_words(10), [])
        assert report.subscores['form'] == 0.0
        assert report.subscores['grammar'] == 0.0
        assert report.subscores['vocabulary'] == 0.0
        assert report.subscores['spelling'] == 0.0
        assert report.score == pytest.approx(2.0)

    def test_empty_text(self):
        report = score_summary("", ["anything"])
        assert report.score == 0.0
        assert report.max_score == 10.0

    def test_within_bounds(self):
        for count in (0, 45, 60, 85, 150):
            report = score_summary(_words(count), ["word"])
            assert 0.0 <= report.score <= report.max_score


class TestEssayScoring:
    """Test essay bands, coverage and structure"""

    def _essay(self, count, lines=3, extra=""):
        per_line = count // lines
        body = [_words(per_line) for _ in range(lines - 1)]
        body.append(_words(count - per_line * (lines - 1)))
        return extra + "\n".join(body)

    def test_full_marks(self):
        text = self._essay(246, extra="Pollution and energy and climate ")
        report = score_essay(text, ["pollution", "energy", "climate", "transport"])
        assert report.score == pytest.approx(15.0)
        assert report.max_score == 15.0

    def test_short_single_paragraph_without_keywords(self):
        report = score_essay(_words(110), [])
        assert report.subscores['form'] == 0.0
        assert report.subscores['content'] == 3.0
        assert report.subscores['structure'] == 1.0
        assert report.score == pytest.approx(12.0)

    def test_low_coverage(self):
        text = self._essay(250, extra="pollution ")
        report = score_essay(text, ["pollution", "energy", "climate", "transport", "growth"])
        assert report.subscores['content'] == pytest.approx(1.0)

    def test_very_short_essay(self):
        report = score_essay(_words(30), [])
        assert report.subscores['grammar'] == 1.0
        assert report.subscores['vocabulary'] == 1.0
        assert report.subscores['content'] == 1.0

    def test_empty_essay(self):
        report = score_essay("   ", ["pollution"])
        assert report.score == 0.0
        assert report.max_score == 15.0


class TestExtractKeywords:
    """Test keyword extraction from a passage"""

    def test_filters_short_words_and_stopwords(self):
        keywords = extract_keywords("The sun is a star, and stars were formed from dust.")
        assert keywords == ["star", "stars", "formed", "from", "dust"]

    def test_unique_in_first_seen_order(self):
        assert extract_keywords("Energy, energy; ENERGY policy") == ["energy", "policy"]

    def test_empty(self):
        assert extract_keywords("") == []
        assert extract_keywords(None) == []


class TestBlankKeywords:
    """Test empty keyword strings are ignored"""

    def test_summary_blank_keywords_use_default(self):
        report = score_summary(_words(60), ["", "  "])
        assert report.subscores['content'] == 2.0
        assert report.detail == []

    def test_essay_blank_keywords_use_default(self):
        report = score_essay(_words(150), [""])
        assert report.subscores['content'] == 3.0
