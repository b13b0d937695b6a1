"""
Data models for SEO Text Analyzer.

This module defines the result structures returned by text analysis and
keyword insertion. Each result knows how to render itself as the camelCase
dictionary expected by API clients.
"""

from dataclasses import dataclass, field
from enum import Enum


class KeywordSource(Enum):
    """Where a keyword candidate came from."""
    EXTRACTED = "extracted"  # Derived from word frequencies in the text
    CURATED = "curated"  # Taken from the fixed suggestion vocabulary


class SuggestionType(Enum):
    """Area of the text a suggestion is about."""
    READABILITY = "readability"
    LENGTH = "length"
    KEYWORDS = "keywords"


class SuggestionPriority(Enum):
    """How urgently a suggestion should be acted on."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Flesch Reading Ease bands, highest first
READABILITY_LEVELS = (
    (90, "Very Easy"),
    (80, "Easy"),
    (70, "Fairly Easy"),
    (60, "Standard"),
    (50, "Fairly Difficult"),
    (30, "Difficult"),
)


def readability_level(score: float) -> str:
    """
    Map a readability score onto its Flesch Reading Ease band.

    Args:
        score: Readability score, 0-100.

    Returns:
        Band label such as "Standard" or "Very Difficult".
    """
    for threshold, label in READABILITY_LEVELS:
        if score >= threshold:
            return label
    return "Very Difficult"


@dataclass
class TextMetrics:
    """Structural and readability statistics for a text."""
    word_count: int
    sentence_count: int
    paragraph_count: int
    readability_score: int  # 0-100, higher is easier
    avg_words_per_sentence: float
    avg_sentences_per_paragraph: float

    @property
    def readability_level(self) -> str:
        """Human-readable label for the readability score."""
        return readability_level(self.readability_score)

    def to_dict(self) -> dict:
        return {
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "paragraphCount": self.paragraph_count,
            "readabilityScore": self.readability_score,
            "avgWordsPerSentence": self.avg_words_per_sentence,
            "avgSentencesPerParagraph": self.avg_sentences_per_paragraph,
        }


@dataclass
class KeywordCandidate:
    """
    A keyword suggested for the text.

    search_volume and difficulty are illustrative placeholder values, not
    data from a keyword research service.
    """
    keyword: str
    frequency: int
    relevance: float  # 0-100
    search_volume: int
    difficulty: int  # 1-100
    source: KeywordSource = KeywordSource.EXTRACTED

    def __post_init__(self) -> None:
        if self.frequency < 0:
            raise ValueError(f"frequency cannot be negative: {self.frequency}")

    @property
    def is_extracted(self) -> bool:
        """Check if the keyword was derived from the text itself."""
        return self.source == KeywordSource.EXTRACTED

    def to_dict(self) -> dict:
        return {
            "keyword": self.keyword,
            "frequency": self.frequency,
            "relevance": self.relevance,
            "searchVolume": self.search_volume,
            "difficulty": self.difficulty,
        }


@dataclass
class Suggestion:
    """An improvement suggestion for the analyzed text."""
    type: SuggestionType
    message: str
    priority: SuggestionPriority

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "message": self.message,
            "priority": self.priority.value,
        }


@dataclass
class AnalysisResult:
    """Complete result of analyzing a text."""
    metrics: TextMetrics
    keywords: list[KeywordCandidate] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)

    @property
    def extracted_keywords(self) -> list[KeywordCandidate]:
        """Keywords derived from the text, in ranking order."""
        return [kw for kw in self.keywords if kw.is_extracted]

    @property
    def curated_keywords(self) -> list[KeywordCandidate]:
        """Keywords taken from the curated vocabulary."""
        return [kw for kw in self.keywords if not kw.is_extracted]

    def get_suggestion(self, suggestion_type: SuggestionType) -> Suggestion:
        """Get the suggestion of the given type."""
        for suggestion in self.suggestions:
            if suggestion.type == suggestion_type:
                return suggestion
        raise KeyError(suggestion_type.value)

    def to_dict(self) -> dict:
        return {
            "metrics": self.metrics.to_dict(),
            "keywords": [kw.to_dict() for kw in self.keywords],
            "suggestions": [s.to_dict() for s in self.suggestions],
        }


@dataclass
class InsertionResult:
    """Result of inserting a keyword into a text."""
    updated_text: str
    inserted: bool

    def to_dict(self) -> dict:
        return {
            "updatedText": self.updated_text,
            "inserted": self.inserted,
        }
