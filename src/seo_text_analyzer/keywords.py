"""
Keyword candidate generation.

Two kinds of candidates are produced:
- Extracted: the most frequent meaningful words of the text itself
- Curated: a fixed list of general marketing phrases

Search volume and difficulty are placeholders drawn from the supplied
random source. They keep the shape a real keyword data provider would fill.
"""

import random
from collections import Counter
from typing import Iterable

from .config import CURATED_KEYWORDS, DEFAULT_CONFIG, STOP_WORDS, AnalyzerConfig
from .models import KeywordCandidate, KeywordSource
from .tokenizer import clean_word

# Placeholder ranges, upper bounds exclusive
EXTRACTED_VOLUME_RANGE = (100, 10_100)
CURATED_VOLUME_RANGE = (1_000, 51_000)
CURATED_RELEVANCE_RANGE = (20, 100)
DIFFICULTY_RANGE = (1, 101)


def count_keyword_frequencies(
    words: Iterable[str],
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> Counter:
    """
    Count cleaned, non-stop-word words.

    Args:
        words: Raw whitespace-delimited words.
        config: Provides the minimum keyword length.

    Returns:
        Counter keyed by cleaned word, in first-seen order.
    """
    frequencies: Counter = Counter()
    for word in words:
        cleaned = clean_word(word)
        if len(cleaned) < config.min_keyword_length or cleaned in STOP_WORDS:
            continue
        frequencies[cleaned] += 1
    return frequencies


def rank_keywords(frequencies: Counter, limit: int) -> list[tuple[str, int]]:
    """
    Order keywords by descending frequency and keep the top `limit`.

    The sort is stable, so words with equal counts stay in the order they
    first appeared in the text.
    """
    ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]


def extract_keywords(
    words: list[str],
    rng: random.Random,
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> list[KeywordCandidate]:
    """
    Build keyword candidates from the text's own word frequencies.

    Args:
        words: All words of the text (used for both counting and relevance).
        rng: Random source for the placeholder volume/difficulty values.
        config: Analyzer configuration.

    Returns:
        Up to config.max_extracted_keywords candidates, most frequent first.
    """
    word_count = len(words)
    ranked = rank_keywords(
        count_keyword_frequencies(words, config), config.max_extracted_keywords
    )

    candidates = []
    for keyword, frequency in ranked:
        relevance = min(100.0, frequency / word_count * 1000) if word_count else 0.0
        candidates.append(KeywordCandidate(
            keyword=keyword,
            frequency=frequency,
            relevance=relevance,
            search_volume=rng.randrange(*EXTRACTED_VOLUME_RANGE),
            difficulty=rng.randrange(*DIFFICULTY_RANGE),
            source=KeywordSource.EXTRACTED,
        ))
    return candidates


def curated_keywords(
    rng: random.Random,
    config: AnalyzerConfig = DEFAULT_CONFIG,
) -> list[KeywordCandidate]:
    """
    Build candidates from the curated vocabulary, in list order.

    Curated keywords never occur in the frequency count, so their
    frequency is always 0 and their relevance is a placeholder.
    """
    return [
        KeywordCandidate(
            keyword=keyword,
            frequency=0,
            relevance=float(rng.randrange(*CURATED_RELEVANCE_RANGE)),
            search_volume=rng.randrange(*CURATED_VOLUME_RANGE),
            difficulty=rng.randrange(*DIFFICULTY_RANGE),
            source=KeywordSource.CURATED,
        )
        for keyword in CURATED_KEYWORDS[:config.max_curated_keywords]
    ]
