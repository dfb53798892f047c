"""
Tests for word alignment scoring (read aloud / repeat sentence)
"""

import pytest
from exam_scoring.scorers import ScoringConfig
from exam_scoring.scorers.alignment import (
    align_words, classify_rating, score_read_aloud, score_fluency
)


class TestClassification:
    """Test rating -> status thresholds"""

    @pytest.mark.parametrize("rating,status", [
        (1.0, "good"),
        (0.81, "good"),
        (0.8, "average"),
        (0.51, "average"),
        (0.5, "bad"),
        (0.0, "bad"),
    ])
    def test_default_thresholds(self, rating, status):
        assert classify_rating(rating) == status

    def test_custom_thresholds(self):
        config = ScoringConfig(good_threshold=0.9, average_threshold=0.7)
        assert classify_rating(0.85, config) == "average"
        assert classify_rating(0.6, config) == "bad"


class TestAlignWords:
    """Test per-word analysis"""

    def test_preserves_reference_order_and_display_form(self):
        analysis = align_words("The Cat sat.", "the cat sat")
        assert [entry.word for entry in analysis] == ["The", "Cat", "sat."]
        assert all(entry.status == "good" for entry in analysis)

    def test_empty_transcript_marks_words_bad(self):
        analysis = align_words("Birds fly south", "")
        assert [entry.status for entry in analysis] == ["bad", "bad", "bad"]

    def test_punctuation_tokens_always_average(self):
        analysis = align_words("Wait - what", "")
        assert analysis[1].word == "-"
        assert analysis[1].status == "average"
        assert analysis[0].status == "bad"

    def test_near_miss_is_average(self):
        # healed vs sealed rates exactly 0.8 -> not above the good threshold
        analysis = align_words("healed", "sealed")
        assert analysis[0].status == "average"


class TestReadAloudScoring:
    """Test content / pronunciation / fluency sub-scores"""

    def test_perfect_reading(self):
        report = score_read_aloud("The quick brown fox.", "the quick brown fox")
        assert report.subscores['content'] == pytest.approx(5.0)
        assert report.subscores['pronunciation'] == pytest.approx(5.0)
        assert report.subscores['fluency'] == pytest.approx(5.0)
        assert report.score == pytest.approx(15.0)
        assert report.max_score == 15.0

    def test_empty_transcript_scores_zero(self):
        report = score_read_aloud("Birds fly south", "")
        assert report.score == 0.0
        assert report.max_score == 15.0
        assert report.metrics['transcript_words'] == 0

    def test_empty_reference_does_not_error(self):
        report = score_read_aloud("", "something said")
        assert 0.0 <= report.score <= report.max_score
        assert report.detail == []

    def test_short_transcript_fluency(self):
        # half the words -> ratio 0.5 -> 5 - 2.5
        report = score_read_aloud("hello world", "hello")
        assert report.subscores['fluency'] == pytest.approx(2.5)

    def test_long_transcript_ratio_capped(self):
        report = score_read_aloud("hello world", "hello world hello world")
        assert report.subscores['fluency'] == pytest.approx(2.5)
        assert report.subscores['content'] == pytest.approx(5.0)

    def test_fluency_never_negative(self):
        config = ScoringConfig(fluency_ratio_cap=3.0)
        assert score_fluency(30, 1, config) == 0.0

    def test_content_counts_average_as_half(self):
        report = score_read_aloud("healed", "sealed")
        assert report.subscores['content'] == pytest.approx(2.5)

    def test_scores_within_bounds(self):
        cases = [
            ("One, two; three!", "one two three four five six"),
            ("A b c d", "x"),
            ("-- ..", ""),
        ]
        for reference, transcript in cases:
            report = score_read_aloud(reference, transcript)
            assert 0.0 <= report.score <= report.max_score
            for name in ('content', 'pronunciation', 'fluency'):
                assert 0.0 <= report.subscores[name] <= 5.0

    def test_custom_maxima(self):
        config = ScoringConfig(content_max=10.0, pronunciation_max=10.0, fluency_max=10.0, read_aloud_max=30.0)
        report = score_read_aloud("hello world", "hello world", config)
        assert report.score == pytest.approx(30.0)
        assert report.max_score == 30.0
