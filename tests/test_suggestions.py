"""Tests for suggestion rules and readability levels."""

import pytest

from seo_text_analyzer.config import AnalyzerConfig
from seo_text_analyzer.models import (
    SuggestionPriority,
    SuggestionType,
    TextMetrics,
    readability_level,
)
from seo_text_analyzer.suggestions import (
    build_suggestions,
    keyword_suggestion,
    length_suggestion,
    readability_suggestion,
)


class TestReadabilitySuggestion:
    """Tests for the readability rule."""

    @pytest.mark.parametrize("score,priority", [
        (0, SuggestionPriority.HIGH),
        (29.9, SuggestionPriority.HIGH),
        (30, SuggestionPriority.MEDIUM),
        (59.9, SuggestionPriority.MEDIUM),
        (60, SuggestionPriority.LOW),
        (100, SuggestionPriority.LOW),
    ])
    def test_priority_bands(self, score, priority):
        """Test priority at band edges."""
        suggestion = readability_suggestion(score)
        assert suggestion.type == SuggestionType.READABILITY
        assert suggestion.priority == priority

    def test_difficult_message(self):
        """Test the message for hard text."""
        assert "shorter sentences" in readability_suggestion(10).message


class TestLengthSuggestion:
    """Tests for the length rule."""

    @pytest.mark.parametrize("words,priority", [
        (0, SuggestionPriority.MEDIUM),
        (299, SuggestionPriority.MEDIUM),
        (300, SuggestionPriority.LOW),
        (2000, SuggestionPriority.LOW),
        (2001, SuggestionPriority.MEDIUM),
    ])
    def test_priority_bands(self, words, priority):
        """Test priority at band edges."""
        assert length_suggestion(words).priority == priority

    def test_messages(self):
        """Test short and long messages differ."""
        assert "short" in length_suggestion(10).message
        assert "very long" in length_suggestion(5000).message
        assert "appropriate" in length_suggestion(800).message


class TestKeywordSuggestion:
    """Tests for the keyword diversity rule."""

    def test_limited_diversity(self):
        """Test fewer than five extracted keywords."""
        suggestion = keyword_suggestion(4)
        assert suggestion.type == SuggestionType.KEYWORDS
        assert suggestion.priority == SuggestionPriority.HIGH

    def test_good_diversity(self):
        """Test five or more extracted keywords."""
        assert keyword_suggestion(5).priority == SuggestionPriority.LOW

    def test_custom_threshold(self):
        """Test that the threshold comes from the config."""
        config = AnalyzerConfig(min_keyword_diversity=2)
        assert keyword_suggestion(3, config).priority == SuggestionPriority.LOW


class TestBuildSuggestions:
    """Tests for combined suggestion generation."""

    def test_exactly_three_in_order(self):
        """Test one suggestion per type, never duplicated."""
        suggestions = build_suggestions(75.4, 9, 5)

        assert [s.type for s in suggestions] == [
            SuggestionType.READABILITY,
            SuggestionType.LENGTH,
            SuggestionType.KEYWORDS,
        ]


class TestReadabilityLevel:
    """Tests for readability band labels."""

    @pytest.mark.parametrize("score,label", [
        (95, "Very Easy"),
        (80, "Easy"),
        (75, "Fairly Easy"),
        (60, "Standard"),
        (55, "Fairly Difficult"),
        (30, "Difficult"),
        (29, "Very Difficult"),
        (0, "Very Difficult"),
    ])
    def test_levels(self, score, label):
        """Test each Flesch band."""
        assert readability_level(score) == label

    def test_metrics_property(self):
        """Test the label exposed on TextMetrics."""
        metrics = TextMetrics(
            word_count=9,
            sentence_count=2,
            paragraph_count=1,
            readability_score=75,
            avg_words_per_sentence=4.5,
            avg_sentences_per_paragraph=2.0,
        )
        assert metrics.readability_level == "Fairly Easy"
