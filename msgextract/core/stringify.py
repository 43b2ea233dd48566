"""
Serialization of translatable nodes into placeholder-annotated content.

Every element becomes a named placeholder pair, every interpolated expression
a self-closing placeholder, and text holding interpolation is wrapped in its
own placeholder so translators can move it as one unit:

    <a>A{{I}}</a><b>B</b>

becomes

    <ph name="e0"><ph name="t1">A<ph name="0"/></ph></ph><ph name="e2">B</ph>

Element and text placeholders share one counter per call, assigned left to
right depth first. Expression placeholders are numbered within their text.
"""
from typing import List

from msgextract.common.placeholder_format import PlaceholderFormat

from .exceptions import I18nError
from .interfaces import IExpressionParser
from .interpolation import has_interpolation, remove_interpolation
from .nodes import Comment, Element, Expansion, Node, Text


class _StringifyVisitor:
    def __init__(self, parser: IExpressionParser, errors: List[I18nError]):
        self._parser = parser
        self._errors = errors
        self._index = 0
        self._fmt = PlaceholderFormat.from_config()

    def visit_all(self, nodes: List[Node]) -> str:
        return "".join(filter(None, (self.visit(node) for node in nodes)))

    def visit(self, node: Node) -> str:
        if isinstance(node, Element):
            return self.visit_element(node)
        if isinstance(node, Text):
            return self.visit_text(node)
        if isinstance(node, Comment):
            return ""
        if isinstance(node, Expansion):
            # Expanded before partitioning; nothing meaningful to render
            return ""
        raise TypeError(f"Unsupported node type: {type(node).__name__}")

    def visit_element(self, element: Element) -> str:
        name = self._fmt.element_name(self._index)
        self._index += 1
        if not element.children:
            return self._fmt.empty(name)
        return self._fmt.wrap(name, self.visit_all(element.children))

    def visit_text(self, text: Text) -> str:
        name = self._fmt.text_name(self._index)
        self._index += 1
        if not has_interpolation(text.value):
            return text.value
        return self._fmt.wrap(name, remove_interpolation(text.value, text.span, self._parser, self._errors))


def stringify_nodes(nodes: List[Node], parser: IExpressionParser, errors: List[I18nError]) -> str:
    """Serialize ``nodes``; expression errors are appended to ``errors``."""
    return _StringifyVisitor(parser, errors).visit_all(nodes)
