"""
Text metrics and keyword analysis.

The MetricsEngine turns raw prose into:
- Structural metrics (word, sentence and paragraph counts and averages)
- A simplified Flesch Reading Ease score
- Ranked keyword candidates
- One improvement suggestion per area
"""

import logging
import math
import random
from typing import Optional

from .config import (
    AVG_SYLLABLES_PER_WORD,
    DEFAULT_CONFIG,
    FLESCH_BASE,
    FLESCH_SENTENCE_WEIGHT,
    FLESCH_SYLLABLE_WEIGHT,
    AnalyzerConfig,
)
from .keywords import curated_keywords, extract_keywords
from .models import AnalysisResult, TextMetrics
from .suggestions import build_suggestions
from .tokenizer import split_paragraphs, split_sentences, split_words
from .validation import InternalError, validate_text

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to `digits` decimals with halves going up, not to even."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def readability_score(avg_words_per_sentence: float) -> float:
    """
    Compute the simplified Flesch Reading Ease score, clamped to 0-100.

    Syllables are not counted; AVG_SYLLABLES_PER_WORD is used instead, so
    the score depends only on average sentence length.
    """
    score = (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * avg_words_per_sentence
        - FLESCH_SYLLABLE_WEIGHT * AVG_SYLLABLES_PER_WORD
    )
    return max(0.0, min(100.0, score))


class MetricsEngine:
    """
    Analyzer producing metrics, keyword candidates and suggestions.

    The engine holds no per-call state. The random source only feeds the
    placeholder keyword figures.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        config: Optional[AnalyzerConfig] = None,
    ):
        """
        Initialize the engine.

        Args:
            rng: Random source for placeholder keyword values. A fresh
                unseeded generator is used when omitted.
            config: Analyzer configuration.
        """
        self.rng = rng or random.Random()
        self.config = config or DEFAULT_CONFIG

    def analyze(self, text: str) -> AnalysisResult:
        """
        Analyze text.

        Args:
            text: Non-blank text of at most config.max_text_length characters.

        Returns:
            AnalysisResult with metrics, keywords and suggestions.

        Raises:
            ValidationError: If the text is blank or too long.
            InternalError: If analysis fails unexpectedly.
        """
        validate_text(text, self.config)

        try:
            return self._analyze(text)
        except Exception as e:
            logger.error(f"Text analysis failed: {e}")
            raise InternalError("Failed to analyze text") from e

    def _analyze(self, text: str) -> AnalysisResult:
        words = split_words(text)
        sentences = split_sentences(text)
        paragraphs = split_paragraphs(text)

        word_count = len(words)
        sentence_count = len(sentences)
        paragraph_count = len(paragraphs)

        avg_words = word_count / sentence_count if sentence_count else 0.0
        avg_sentences = sentence_count / paragraph_count if paragraph_count else 0.0
        score = readability_score(avg_words)

        metrics = TextMetrics(
            word_count=word_count,
            sentence_count=sentence_count,
            paragraph_count=paragraph_count,
            readability_score=int(round_half_up(score)),
            avg_words_per_sentence=round_half_up(avg_words, 1),
            avg_sentences_per_paragraph=round_half_up(avg_sentences, 1),
        )

        extracted = extract_keywords(words, self.rng, self.config)
        keywords = extracted + curated_keywords(self.rng, self.config)

        suggestions = build_suggestions(score, word_count, len(extracted), self.config)

        logger.debug(
            f"Analyzed {word_count} words, {sentence_count} sentences, "
            f"{paragraph_count} paragraphs; readability={metrics.readability_score}, "
            f"{len(extracted)} extracted keywords"
        )

        return AnalysisResult(metrics=metrics, keywords=keywords, suggestions=suggestions)


def analyze(
    text: str,
    rng: Optional[random.Random] = None,
    config: Optional[AnalyzerConfig] = None,
) -> AnalysisResult:
    """
    Convenience function for text analysis.

    Args:
        text: Text to analyze.
        rng: Optional random source for placeholder keyword values.
        config: Optional analyzer configuration.

    Returns:
        AnalysisResult for the text.
    """
    return MetricsEngine(rng=rng, config=config).analyze(text)
