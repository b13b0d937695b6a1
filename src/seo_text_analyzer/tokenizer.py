"""
Text tokenization helpers.

Splits prose into words, sentences, paragraphs and insertion segments.
All patterns are single-pass and free of nested quantifiers, so cost stays
linear in the input length.
"""

import re

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
PARAGRAPH_BOUNDARY = re.compile(r"\n\s*\n")
# Captured so the delimiters (and the whitespace after them) survive a split
SEGMENT_BOUNDARY = re.compile(r"([.!?]+\s*)")
WHITESPACE = re.compile(r"\s+")
NON_WORD = re.compile(r"[^\w]")


def split_words(text: str) -> list[str]:
    """Split text into whitespace-delimited words, dropping empty tokens."""
    return text.split()


def split_sentences(text: str) -> list[str]:
    """
    Split text into sentences on runs of '.', '!' and '?'.

    Delimiters are discarded, as are blank pieces. Text without any
    terminal punctuation comes back as a single sentence.
    """
    return [s for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def split_paragraphs(text: str) -> list[str]:
    """Split text into paragraphs on one or more blank lines."""
    return [p for p in PARAGRAPH_BOUNDARY.split(text) if p.strip()]


def clean_word(word: str) -> str:
    """Lowercase a word and strip everything but word characters."""
    return NON_WORD.sub("", word.lower())


def split_segments(text: str) -> list[str]:
    """
    Split text into alternating sentence segments and delimiters.

    Even indices hold sentence text, odd indices hold the punctuation run
    that ended it plus any following whitespace. Joining the list gives
    back the original text exactly.

    Example:
        >>> split_segments("One. Two!")
        ['One', '. ', 'Two', '!', '']
    """
    return SEGMENT_BOUNDARY.split(text)


def split_segment_words(segment: str) -> list[str]:
    """
    Split a segment on whitespace runs, keeping edge empties.

    Unlike split_words, leading or trailing whitespace yields an empty
    first or last element.
    """
    return WHITESPACE.split(segment)
