"""
Default template parser built on lxml's HTML parser.

Converts the lxml tree into the extraction node model: element text and
tails become ``Text`` nodes, comments become ``Comment`` nodes, and ICU
forms written in text (``{count, plural, =0 {none} other {many}}``) become
``Expansion`` nodes for the expander.

ICU forms are recognised inside a single text run only; a form whose case
bodies contain markup is kept as literal text.
"""
import logging
import re
from typing import List, Optional, Tuple

from lxml import etree

from .exceptions import I18nError, TemplateParseError
from .nodes import Attribute, Comment, Element, Expansion, ExpansionCase, Node, SourceSpan, Text

logger = logging.getLogger(__name__)

EXPANSION_TYPE_PATTERN = re.compile(r'[A-Za-z][\w-]*')
CASE_VALUE_PATTERN = re.compile(r'[^\s{}]+')

# libxml2 only knows HTML4 tags; custom and template tags are not errors here
IGNORED_ERROR_TYPES = {'HTML_UNKNOWN_TAG'}

# Older libxml2 rejects binding attribute names such as (click), [value] and *ngIf
MIN_LIBXML_VERSION = (2, 14)


class LxmlTemplateParser:
    """Parses template fragments with lxml.

    Args:
        parse_expansions: Recognise ICU forms in text (default True)
    """

    def __init__(self, parse_expansions: bool = True):
        self.parse_expansions = parse_expansions
        if etree.LIBXML_VERSION < MIN_LIBXML_VERSION:
            logger.warning(
                f"libxml2 {etree.LIBXML_VERSION} reports binding attributes as parse errors; "
                f"install lxml built against libxml2 >= {MIN_LIBXML_VERSION}")

    def parse(self, text: str, source_url: str) -> Tuple[List[Node], List[I18nError]]:
        if not text or not text.strip():
            return [], []

        parser = etree.HTMLParser(recover=True, remove_comments=False, remove_blank_text=False)
        try:
            root = etree.fromstring(f"<html><body>{text}</body></html>", parser)
        except etree.XMLSyntaxError as e:
            return [], [TemplateParseError(SourceSpan(source_url, e.lineno), str(e.msg))]

        errors: List[I18nError] = [
            TemplateParseError(SourceSpan(source_url, entry.line), entry.message)
            for entry in parser.error_log
            if entry.level >= etree.ErrorLevels.ERROR and entry.type_name not in IGNORED_ERROR_TYPES
        ]
        if errors:
            logger.debug(f"{len(errors)} parse error(s) in {source_url}")

        body = root.find('body') if root is not None else None
        if body is None:
            return [], errors
        return self._convert_children(body, source_url), errors

    def _convert_children(self, element: etree._Element, source_url: str) -> List[Node]:
        nodes: List[Node] = []
        if element.text:
            nodes.extend(self._text_nodes(element.text, SourceSpan(source_url, element.sourceline)))

        for child in element:
            span = SourceSpan(source_url, child.sourceline)
            if child.tag is etree.Comment:
                nodes.append(Comment((child.text or "").strip(), span))
            elif isinstance(child.tag, str):
                attrs = [Attribute(name, value or "", span) for name, value in child.attrib.items()]
                nodes.append(Element(child.tag, attrs, self._convert_children(child, source_url), span))
            # Processing instructions and entities carry nothing translatable

            if child.tail:
                nodes.extend(self._text_nodes(child.tail, span))
        return nodes

    def _text_nodes(self, value: str, span: SourceSpan) -> List[Node]:
        if not self.parse_expansions:
            return [Text(value, span)]
        return split_expansions(value, span)


def split_expansions(value: str, span: Optional[SourceSpan] = None) -> List[Node]:
    """Split text into ``Text`` and ``Expansion`` nodes.

    Interpolations (``{{ }}``) are never taken for ICU forms.
    """
    nodes: List[Node] = []
    literal_start = 0
    i = 0
    while i < len(value):
        if value.startswith('{{', i):
            end = value.find('}}', i + 2)
            if end == -1:
                break
            i = end + 2
            continue
        if value[i] == '{':
            parsed = _parse_expansion(value, i, span)
            if parsed is not None:
                expansion, end = parsed
                if i > literal_start:
                    nodes.append(Text(value[literal_start:i], span))
                nodes.append(expansion)
                i = literal_start = end
                continue
        i += 1

    if literal_start < len(value):
        nodes.append(Text(value[literal_start:], span))
    return nodes


def _skip_whitespace(value: str, pos: int) -> int:
    while pos < len(value) and value[pos].isspace():
        pos += 1
    return pos


def _find_closing_brace(value: str, open_pos: int) -> Optional[int]:
    depth = 1
    i = open_pos + 1
    while i < len(value):
        if value.startswith('{{', i):
            end = value.find('}}', i + 2)
            if end == -1:
                return None
            i = end + 2
            continue
        if value[i] == '{':
            depth += 1
        elif value[i] == '}':
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return None


def _parse_expansion(value: str, start: int, span: Optional[SourceSpan]) -> Optional[Tuple[Expansion, int]]:
    """Parse an ICU form starting at the ``{`` at ``start``.

    Returns:
        (expansion, end_position) or None when the text is not an ICU form
    """
    comma = value.find(',', start + 1)
    if comma == -1:
        return None
    switch_value = value[start + 1:comma].strip()
    if not switch_value or '{' in switch_value or '}' in switch_value:
        return None

    type_start = comma + 1
    comma = value.find(',', type_start)
    if comma == -1:
        return None
    expansion_type = value[type_start:comma].strip()
    if not EXPANSION_TYPE_PATTERN.fullmatch(expansion_type):
        return None

    cases: List[ExpansionCase] = []
    pos = comma + 1
    while True:
        pos = _skip_whitespace(value, pos)
        if pos >= len(value):
            return None
        if value[pos] == '}':
            break
        match = CASE_VALUE_PATTERN.match(value, pos)
        if not match:
            return None
        pos = _skip_whitespace(value, match.end())
        if pos >= len(value) or value[pos] != '{':
            return None
        body_end = _find_closing_brace(value, pos)
        if body_end is None:
            return None
        body = value[pos + 1:body_end]
        cases.append(ExpansionCase(match.group(0), split_expansions(body, span), span))
        pos = body_end + 1

    if not cases:
        return None
    return Expansion(switch_value, expansion_type, cases, span), pos + 1
