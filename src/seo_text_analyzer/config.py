# -*- coding: utf-8 -*-
"""
Centralized configuration for SEO Text Analyzer.

This module holds the fixed vocabularies used by the analyzer (stop words,
curated keyword suggestions, insertion connectors) and a configuration
dataclass with the numeric thresholds for metrics, suggestions and keyword
insertion.
"""

from dataclasses import dataclass


# Stand-in for a measured syllables-per-word average in the Flesch formula.
# Tunable, the text is never actually syllabified.
AVG_SYLLABLES_PER_WORD = 1.5

# Flesch Reading Ease coefficients
FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6

# Function words excluded from keyword frequency counting
STOP_WORDS = frozenset({
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "have", "has",
    "had", "do", "does", "did", "will", "would", "could", "should", "may", "might",
    "can", "must", "shall", "a", "an", "this", "that", "these", "those",
})

# Domain-agnostic suggestions appended after the extracted keywords
CURATED_KEYWORDS = (
    "digital marketing",
    "content strategy",
    "SEO optimization",
    "online presence",
    "brand awareness",
    "user engagement",
    "conversion rate",
    "social media",
    "target audience",
    "market research",
    "competitive analysis",
    "growth hacking",
)

# Words placed before an inserted keyword so it reads as an example
CONNECTORS = ("including", "such as", "like", "especially", "particularly")


@dataclass(frozen=True)
class AnalyzerConfig:
    """
    Central configuration for text analysis and keyword insertion.

    Instances are immutable so one config can be shared between engines.

    Attributes:
        max_text_length: Longest accepted input, in characters.
        min_keyword_length: Cleaned words shorter than this are never
            counted as keyword candidates.
        max_extracted_keywords: Cap on keywords taken from the text itself.
        max_curated_keywords: Cap on keywords taken from CURATED_KEYWORDS.

        short_content_words: Below this word count the text is "short".
        long_content_words: Above this word count the text is "very long".
        min_keyword_diversity: Fewer extracted keywords than this triggers
            a high-priority keyword suggestion.
        difficult_readability: Scores below this are hard to read.
        moderate_readability: Scores below this (and at least
            difficult_readability) are moderately readable.

        Insertion scoring:
            min_segment_length: Sentences shorter than this (in characters,
                ignoring surrounding whitespace) are never chosen.
            length_weight / position_weight: Weights of the length and
                position scores in a sentence's total score.
            length_saturation_words: Word count at which the length score
                reaches its maximum.
            insertion_start_ratio: Fraction of the sentence skipped before
                the keyword may be placed.
            insertion_jitter_ratio: Fraction of the sentence over which the
                insertion point is randomized.
    """

    max_text_length: int = 50_000
    min_keyword_length: int = 4

    # Keyword caps
    max_extracted_keywords: int = 10
    max_curated_keywords: int = 8

    # Suggestion thresholds
    short_content_words: int = 300
    long_content_words: int = 2000
    min_keyword_diversity: int = 5
    difficult_readability: float = 30
    moderate_readability: float = 60

    # Insertion scoring
    min_segment_length: int = 10
    length_weight: float = 0.6
    position_weight: float = 0.4
    length_saturation_words: int = 20
    insertion_start_ratio: float = 0.3
    insertion_jitter_ratio: float = 0.4

    @property
    def max_keywords(self) -> int:
        """Upper bound on the length of an analysis keyword list."""
        return self.max_extracted_keywords + self.max_curated_keywords

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_text_length < 1:
            raise ValueError("max_text_length must be positive")
        if self.max_extracted_keywords < 0 or self.max_curated_keywords < 0:
            raise ValueError("keyword caps cannot be negative")
        if self.max_curated_keywords > len(CURATED_KEYWORDS):
            raise ValueError(
                f"max_curated_keywords cannot exceed {len(CURATED_KEYWORDS)}"
            )
        if self.difficult_readability > self.moderate_readability:
            raise ValueError("difficult_readability must not exceed moderate_readability")
        if self.length_saturation_words < 1:
            raise ValueError("length_saturation_words must be positive")


DEFAULT_CONFIG = AnalyzerConfig()
