"""
Keyword insertion into existing prose.

The InsertionPlanner weaves a keyword into the sentence that scores best on
length and closeness to the middle of the text, introducing it with a
connector word ("including", "such as", ...). Punctuation and every other
sentence are left untouched.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Optional

from .config import CONNECTORS, DEFAULT_CONFIG, AnalyzerConfig
from .models import InsertionResult
from .tokenizer import split_segment_words, split_segments, split_words
from .validation import InternalError, require_text, validate_keyword

logger = logging.getLogger(__name__)


@dataclass
class SegmentScore:
    """Insertion score of one sentence segment."""
    index: int  # Position in the split_segments() list
    length_score: float
    position_score: float
    score: float


def contains_keyword(text: str, keyword: str) -> bool:
    """
    Check whether the keyword occurs inside any word of the text.

    Case-insensitive substring match per word: "art" is found in "start".
    A multi-word keyword can never match a single word.
    """
    needle = keyword.lower()
    return any(needle in word for word in split_words(text.lower()))


class InsertionPlanner:
    """Chooses where a keyword goes and splices it into the text."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        config: Optional[AnalyzerConfig] = None,
    ):
        """
        Initialize the planner.

        Args:
            rng: Random source for the connector and the insertion jitter.
                A fresh unseeded generator is used when omitted.
            config: Analyzer configuration.
        """
        self.rng = rng or random.Random()
        self.config = config or DEFAULT_CONFIG

    def score_segments(self, segments: list[str]) -> list[SegmentScore]:
        """
        Score every sentence segment long enough to take a keyword.

        Args:
            segments: Output of split_segments(); only even indices are
                sentences.

        Returns:
            Scores in document order.
        """
        total = len(segments)
        scores = []
        for i in range(0, total, 2):
            segment = segments[i]
            if len(segment.strip()) < self.config.min_segment_length:
                continue

            word_count = len(split_segment_words(segment))
            length_score = min(word_count / self.config.length_saturation_words, 1.0)
            position_score = 1 - abs(i - total / 2) / total
            score = (
                self.config.length_weight * length_score
                + self.config.position_weight * position_score
            )
            scores.append(SegmentScore(i, length_score, position_score, score))
        return scores

    def choose_segment(self, segments: list[str]) -> int:
        """
        Pick the index of the best sentence segment.

        Ties go to the earliest segment. Falls back to 0 when no segment
        qualifies.
        """
        best_index = 0
        best_score = 0.0
        for candidate in self.score_segments(segments):
            if candidate.score > best_score:
                best_score = candidate.score
                best_index = candidate.index
        return best_index

    def insertion_index(self, word_count: int) -> int:
        """Pick a word index roughly in the second third of a sentence."""
        start = math.floor(word_count * self.config.insertion_start_ratio)
        jitter = math.floor(word_count * self.config.insertion_jitter_ratio)
        offset = self.rng.randrange(jitter) if jitter > 0 else 0
        return start + offset

    def splice(self, sentence: str, keyword: str) -> str:
        """
        Insert the keyword, preceded by a connector, into a sentence.

        Whitespace between words is collapsed to single spaces; whitespace
        around the sentence is kept as is.
        """
        stripped = sentence.strip()
        leading = sentence[:len(sentence) - len(sentence.lstrip())]
        trailing = sentence[len(leading) + len(stripped):]

        words = split_words(stripped)
        index = self.insertion_index(len(words))
        connector = self.rng.choice(CONNECTORS)

        before = " ".join(words[:index])
        after = " ".join(words[index:])
        spliced = " ".join(part for part in (before, connector, keyword, after) if part)
        return f"{leading}{spliced}{trailing}"

    def insert_keyword(self, text: str, keyword: str) -> InsertionResult:
        """
        Insert a keyword at the most natural point in the text.

        Args:
            text: Text to modify.
            keyword: Keyword phrase to insert.

        Returns:
            InsertionResult; `inserted` is False and the text unchanged when
            the keyword is already present or no sentence can take it.

        Raises:
            ValidationError: If text or keyword is missing or blank.
            InternalError: If insertion fails unexpectedly.
        """
        require_text(text)
        keyword = validate_keyword(keyword)

        try:
            updated_text = self._insert(text, keyword)
        except Exception as e:
            logger.error(f"Keyword insertion failed: {e}")
            raise InternalError("Failed to insert keyword") from e

        inserted = updated_text != text
        logger.debug(f"Keyword '{keyword}' inserted={inserted}")
        return InsertionResult(updated_text=updated_text, inserted=inserted)

    def _insert(self, text: str, keyword: str) -> str:
        if contains_keyword(text, keyword):
            logger.debug(f"Keyword '{keyword}' already present, skipping")
            return text

        segments = split_segments(text)
        best = self.choose_segment(segments)
        if not segments[best]:
            return text

        segments[best] = self.splice(segments[best], keyword)
        return "".join(segments)


def insert_keyword(
    text: str,
    keyword: str,
    rng: Optional[random.Random] = None,
    config: Optional[AnalyzerConfig] = None,
) -> InsertionResult:
    """
    Convenience function for keyword insertion.

    Args:
        text: Text to modify.
        keyword: Keyword phrase to insert.
        rng: Optional random source for connector and position jitter.
        config: Optional analyzer configuration.

    Returns:
        InsertionResult for the text.
    """
    return InsertionPlanner(rng=rng, config=config).insert_keyword(text, keyword)
