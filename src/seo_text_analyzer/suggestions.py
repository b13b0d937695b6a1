"""
Improvement suggestions for analyzed text.

Three independent rules each produce exactly one suggestion:
- Readability: based on the readability score
- Length: based on the word count
- Keywords: based on how many keywords were extracted from the text
"""

from .config import DEFAULT_CONFIG, AnalyzerConfig
from .models import Suggestion, SuggestionPriority, SuggestionType


def readability_suggestion(
    score: float, config: AnalyzerConfig = DEFAULT_CONFIG
) -> Suggestion:
    """Suggest readability improvements for a score (0-100)."""
    if score < config.difficult_readability:
        message = "Text is quite difficult to read. Consider shorter sentences."
        priority = SuggestionPriority.HIGH
    elif score < config.moderate_readability:
        message = "Text readability is moderate. Could be improved with simpler language."
        priority = SuggestionPriority.MEDIUM
    else:
        message = "Text has good readability for general audience."
        priority = SuggestionPriority.LOW
    return Suggestion(SuggestionType.READABILITY, message, priority)


def length_suggestion(
    word_count: int, config: AnalyzerConfig = DEFAULT_CONFIG
) -> Suggestion:
    """Suggest expanding short text or splitting very long text."""
    if word_count < config.short_content_words:
        message = "Content is quite short. Consider expanding for better SEO."
        priority = SuggestionPriority.MEDIUM
    elif word_count > config.long_content_words:
        message = "Content is very long. Consider breaking into sections."
        priority = SuggestionPriority.MEDIUM
    else:
        message = "Content length is appropriate for SEO."
        priority = SuggestionPriority.LOW
    return Suggestion(SuggestionType.LENGTH, message, priority)


def keyword_suggestion(
    extracted_count: int, config: AnalyzerConfig = DEFAULT_CONFIG
) -> Suggestion:
    """Suggest adding terms when few keywords could be extracted."""
    if extracted_count < config.min_keyword_diversity:
        return Suggestion(
            SuggestionType.KEYWORDS,
            "Limited keyword diversity. Consider adding more relevant terms.",
            SuggestionPriority.HIGH,
        )
    return Suggestion(
        SuggestionType.KEYWORDS,
        "Good keyword diversity detected.",
        SuggestionPriority.LOW,
    )


def build_suggestions(
    readability_score: float,
    word_count: int,
    extracted_count: int,
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> list[Suggestion]:
    """
    Generate one suggestion per type.

    Args:
        readability_score: Unrounded readability score.
        word_count: Number of words in the text.
        extracted_count: Number of keywords extracted from the text.
        config: Thresholds to apply.

    Returns:
        Readability, length and keyword suggestions, in that order.
    """
    return [
        readability_suggestion(readability_score, config),
        length_suggestion(word_count, config),
        keyword_suggestion(extracted_count, config),
    ]
