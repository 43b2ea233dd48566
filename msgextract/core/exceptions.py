"""
Error types for message extraction.

Extraction collects these as values in ``ExtractionResult.errors``; they
are raised only inside the core and caught where a single message is built.
"""
from typing import Optional

from .nodes import SourceSpan


class I18nError(Exception):
    """Base exception for all extraction errors.

    Attributes:
        span: Where in the template the problem was found
        msg: Error description without location
    """
    def __init__(self, span: Optional[SourceSpan], msg: str):
        self.span = span
        self.msg = msg
        super().__init__(self._format())

    def _format(self) -> str:
        if self.span is None:
            return self.msg
        return f"{self.msg} ({self.span})"


class MarkerError(I18nError):
    """Raised when an explicit marker cannot produce a message.

    For example ``i18n-title`` on an element without a ``title`` attribute.
    """
    pass


class UnmatchedMarkerError(I18nError):
    """Opening marker comment without a closing counterpart."""
    pass


class UnexpectedClosingMarkerError(I18nError):
    """Closing marker comment with no open block."""
    pass


class ExpressionSyntaxError(I18nError):
    """Malformed interpolated expression.

    Attributes:
        expression: Source of the offending expression
    """
    def __init__(self, span: Optional[SourceSpan], msg: str, expression: str = None):
        self.expression = expression
        super().__init__(span, msg)


class TemplateParseError(I18nError):
    """Reported by the markup parser; fatal to the whole extraction."""
    pass
