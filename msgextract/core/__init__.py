"""
Message extraction core

Main entry point:
    MessageExtractor.extract() - Extract messages from a template

Components:
    - expander: ICU plural/select forms to plain elements
    - markers: i18n attribute, implicit tag and comment markers
    - partition: Grouping of siblings into translation parts
    - stringify: Placeholder-annotated message content
    - extractor: Orchestration and attribute messages
"""

from .exceptions import (
    I18nError,
    MarkerError,
    UnmatchedMarkerError,
    UnexpectedClosingMarkerError,
    ExpressionSyntaxError,
    TemplateParseError,
)
from .expander import expand_nodes
from .expression_parser import ExpressionParser
from .extractor import ExtractionResult, MessageExtractor
from .html_parser import LxmlTemplateParser
from .messages import Message, message_id, remove_duplicates
from .partition import Part, partition
from .stringify import stringify_nodes

__all__ = [
    # Extraction
    'MessageExtractor',
    'ExtractionResult',
    'Message',
    'message_id',
    'remove_duplicates',

    # Building blocks
    'expand_nodes',
    'partition',
    'Part',
    'stringify_nodes',
    'ExpressionParser',
    'LxmlTemplateParser',

    # Errors
    'I18nError',
    'MarkerError',
    'UnmatchedMarkerError',
    'UnexpectedClosingMarkerError',
    'ExpressionSyntaxError',
    'TemplateParseError',
]
