"""
Input validation and error types.

Validation failures are the caller's fault and carry a message meant to be
shown as-is. Anything else that goes wrong inside the analyzer surfaces as
an InternalError with the original exception chained as its cause.
"""

from typing import Optional

from .config import DEFAULT_CONFIG, AnalyzerConfig


class AnalyzerError(Exception):
    """Base class for analyzer errors."""
    pass


class ValidationError(AnalyzerError):
    """Raised when input text or keyword is missing, blank or too long."""
    pass


class InternalError(AnalyzerError):
    """Raised when analysis or insertion fails unexpectedly."""
    pass


def require_text(text: Optional[str]) -> str:
    """
    Check that text is present and not blank.

    Raises:
        ValidationError: If the text is missing or blank.
    """
    if text is None or not isinstance(text, str) or not text.strip():
        raise ValidationError("Text is required")
    return text


def validate_text(text: Optional[str], config: AnalyzerConfig = DEFAULT_CONFIG) -> str:
    """
    Check that text is present and within the length limit.

    Args:
        text: Text to validate.
        config: Configuration providing the maximum length.

    Returns:
        The text, unchanged.

    Raises:
        ValidationError: If the text is missing, blank or too long.
    """
    require_text(text)

    if len(text) > config.max_text_length:
        raise ValidationError(
            f"Text is too long (max {config.max_text_length:,} characters)"
        )

    return text


def validate_keyword(keyword: Optional[str]) -> str:
    """
    Check that a keyword is present and return it stripped.

    Raises:
        ValidationError: If the keyword is missing or blank.
    """
    if keyword is None or not isinstance(keyword, str) or not keyword.strip():
        raise ValidationError("Keyword is required")
    return keyword.strip()
