"""
Protocol interfaces for the extraction collaborators.

The extractor only depends on these contracts, so callers can plug in
another markup parser or expression grammar.
"""

from typing import List, Protocol, Tuple

from .exceptions import I18nError
from .nodes import Node


class ITemplateParser(Protocol):
    """Interface for markup parsers."""

    def parse(self, text: str, source_url: str) -> Tuple[List[Node], List[I18nError]]:
        """Parse a template.

        Args:
            text: Raw template source
            source_url: Template identifier used in error spans

        Returns:
            Tuple of (root_nodes, parse_errors)
        """
        ...


class IExpressionParser(Protocol):
    """Interface for interpolated expression validation."""

    def parse(self, source: str):
        """Parse an expression, without evaluating it.

        Args:
            source: Expression text between ``{{`` and ``}}``

        Returns:
            A parser-specific description of the expression

        Raises:
            ExpressionSyntaxError: If the expression is malformed
        """
        ...
