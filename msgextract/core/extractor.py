"""
Message extraction from templates.

Algorithm:

1. Parse the template. Parse errors are fatal: no messages are extracted.
2. Expand ICU forms into plain elements.
3. Partition the root nodes and process each part separately.
4. A translatable part is stringified into one message; attributes of the
   elements inside it are then scanned for attribute messages. Its nodes are
   never partitioned again.
5. Any other part is processed element by element: recurse into the
   element's children (step 3 at the child level), then scan its attributes.

Errors from markers and expressions are collected and never stop the
traversal, so a result always carries every message that could be built.
"""
import logging
from dataclasses import dataclass, field
from typing import Collection, Dict, List, Mapping, Optional

from msgextract.config import I18N_ATTR_PREFIX, ExtractorConfig

from .exceptions import I18nError
from .expander import expand_nodes
from .expression_parser import ExpressionParser
from .html_parser import LxmlTemplateParser
from .interfaces import IExpressionParser, ITemplateParser
from .markers import (
    is_explicit_attr_marker,
    is_marker_attr,
    message_from_attribute,
    message_from_i18n_attribute,
)
from .messages import Message
from .nodes import Element, Node, iter_elements
from .partition import Part, partition
from .result import Result, capture

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """All messages extracted from a template, with the errors found."""
    messages: List[Message] = field(default_factory=list)
    errors: List[I18nError] = field(default_factory=list)


class _Extraction:
    """Accumulators for one extraction call."""

    def __init__(self, extractor: 'MessageExtractor'):
        self._parser = extractor.expression_parser
        self._implicit_tags = extractor.implicit_tags
        self._implicit_attrs = extractor.implicit_attrs
        self.messages: List[Message] = []
        self.errors: List[I18nError] = []

    def recurse(self, nodes: List[Node]) -> None:
        for part in partition(nodes, self.errors, self._implicit_tags):
            self._extract_from_part(part)

    def _extract_from_part(self, part: Part) -> None:
        if part.translatable:
            self.messages.append(part.create_message(self._parser, self.errors))
            self._extract_from_descendant_attributes(part.children)
        else:
            for node in part.nodes:
                if isinstance(node, Element):
                    self.recurse(node.children)
                    self._extract_from_attributes(node)

        root = part.root_element
        if part.translatable and root is not None:
            self._extract_from_attributes(root)

    def _extract_from_descendant_attributes(self, nodes: List[Node]) -> None:
        for element in iter_elements(nodes):
            self._extract_from_attributes(element)

    def _extract_from_attributes(self, element: Element) -> None:
        translatable_names = self._implicit_attrs.get(element.name, ())
        explicit_names = []

        for attr in element.attrs:
            if not is_explicit_attr_marker(attr):
                continue
            explicit_names.append(attr.name[len(I18N_ATTR_PREFIX):])
            self._collect(self._explicit_attribute_message(element, attr))

        for attr in element.attrs:
            if is_marker_attr(attr) or attr.name in explicit_names:
                continue
            if attr.name in translatable_names:
                self._collect(self._implicit_attribute_message(attr))

    def _explicit_attribute_message(self, element: Element, attr) -> Result:
        return capture(message_from_i18n_attribute, I18nError)(self._parser, element, attr, self.errors)

    def _implicit_attribute_message(self, attr) -> Result:
        return capture(message_from_attribute, I18nError)(self._parser, attr, self.errors)

    def _collect(self, result: Result) -> None:
        if result.is_ok():
            self.messages.append(result.unwrap())
        else:
            logger.warning(str(result.error))
            self.errors.append(result.error)


class MessageExtractor:
    """
    Extracts translatable messages from templates.

    Args:
        html_parser: Markup parser (default: lxml based)
        expression_parser: Expression validator (default: ExpressionParser)
        implicit_tags: Tag names whose content is always a message
        implicit_attrs: Per tag, attribute names that are always messages

    Example:
        >>> extractor = MessageExtractor(implicit_attrs={'img': ['alt']})
        >>> result = extractor.extract('<p i18n="greeting">Hi <b>you</b></p>', 'app.html')
        >>> result.messages[0].content
        'Hi <ph name="e1">you</ph>'
    """

    def __init__(
        self,
        html_parser: Optional[ITemplateParser] = None,
        expression_parser: Optional[IExpressionParser] = None,
        implicit_tags: Optional[Collection[str]] = None,
        implicit_attrs: Optional[Mapping[str, Collection[str]]] = None,
    ):
        self.html_parser = html_parser if html_parser is not None else LxmlTemplateParser()
        self.expression_parser = expression_parser if expression_parser is not None else ExpressionParser()
        self.implicit_tags = frozenset(implicit_tags or ())
        self.implicit_attrs: Dict[str, frozenset] = {
            tag: frozenset(names) for tag, names in (implicit_attrs or {}).items()
        }

    @classmethod
    def from_config(cls, config: Optional[ExtractorConfig] = None, **kwargs) -> 'MessageExtractor':
        """Create an extractor from ExtractorConfig (default: environment)."""
        config = config or ExtractorConfig.from_env()
        logger.debug(f"Extractor config: {config.to_dict()}")
        return cls(implicit_tags=config.implicit_tags, implicit_attrs=config.implicit_attrs, **kwargs)

    def extract(self, template: str, source_url: str) -> ExtractionResult:
        """Parse ``template`` and extract its messages."""
        nodes, parse_errors = self.html_parser.parse(template, source_url)
        if parse_errors:
            logger.info(f"{source_url}: {len(parse_errors)} parse error(s), skipping extraction")
            return ExtractionResult([], list(parse_errors))

        result = self.extract_nodes(nodes)
        logger.info(f"{source_url}: {len(result.messages)} message(s), {len(result.errors)} error(s)")
        return result

    def extract_nodes(self, nodes: List[Node]) -> ExtractionResult:
        """Extract messages from an already parsed tree."""
        extraction = _Extraction(self)
        extraction.recurse(expand_nodes(nodes).nodes)
        return ExtractionResult(extraction.messages, extraction.errors)
