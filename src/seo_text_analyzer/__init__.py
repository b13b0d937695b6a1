"""
SEO Text Analyzer

A content-editing helper that:
- Computes readability and structural metrics for prose
- Suggests keywords ranked by frequency, plus curated marketing phrases
- Weaves a chosen keyword into existing text at a natural point
"""

__version__ = "1.0.0"
__author__ = "SEO Text Analyzer Team"

from .config import (
    AnalyzerConfig,
    AVG_SYLLABLES_PER_WORD,
    CONNECTORS,
    CURATED_KEYWORDS,
    STOP_WORDS,
)

from .models import (
    AnalysisResult,
    InsertionResult,
    KeywordCandidate,
    KeywordSource,
    Suggestion,
    SuggestionPriority,
    SuggestionType,
    TextMetrics,
    readability_level,
)

from .validation import (
    AnalyzerError,
    InternalError,
    ValidationError,
)

from .metrics import (
    MetricsEngine,
    analyze,
)

from .insertion import (
    InsertionPlanner,
    insert_keyword,
)

__all__ = [
    # Configuration
    "AnalyzerConfig",
    "AVG_SYLLABLES_PER_WORD",
    "CONNECTORS",
    "CURATED_KEYWORDS",
    "STOP_WORDS",
    # Models
    "AnalysisResult",
    "InsertionResult",
    "KeywordCandidate",
    "KeywordSource",
    "Suggestion",
    "SuggestionPriority",
    "SuggestionType",
    "TextMetrics",
    "readability_level",
    # Errors
    "AnalyzerError",
    "InternalError",
    "ValidationError",
    # Analysis
    "MetricsEngine",
    "analyze",
    # Insertion
    "InsertionPlanner",
    "insert_keyword",
]
