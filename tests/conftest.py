"""
Pytest fixtures and configuration for SEO Text Analyzer tests.
"""

import random

import pytest


class LowRandom(random.Random):
    """Random source that always returns the low end of every range."""

    def randrange(self, start, stop=None, step=1):
        if stop is None:
            return 0
        return start

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def low_rng() -> LowRandom:
    """Deterministic random source for exact-output assertions."""
    return LowRandom()


@pytest.fixture
def seeded_rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def short_text() -> str:
    """Two short sentences in one paragraph."""
    return "The quick brown fox jumps. The lazy dog sleeps."


@pytest.fixture
def pets_text() -> str:
    """A long sentence followed by a short one."""
    return (
        "This is a reasonably long sentence about pets and their care. "
        "Pets need attention."
    )


@pytest.fixture
def article_text() -> str:
    """Multi-paragraph text with mixed punctuation."""
    return (
        "Content marketing helps small businesses reach new customers online. "
        "Good content answers real questions that customers ask every day!\n\n"
        "Writing consistently builds trust with readers over time. "
        "Does your business publish articles regularly? "
        "Search engines reward helpful content...\n\n"
        "Start with one article per week and measure the results carefully."
    )
