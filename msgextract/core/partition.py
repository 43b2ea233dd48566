"""
Partitioning of sibling nodes into translation parts.

Marker comments can group several siblings into one message, so extraction
works on parts rather than nodes. For example these siblings:

    <a>A</a>
    <b i18n>B</b>
    <!-- i18n -->
    <c>C</c>
    D
    <!-- /i18n -->
    E

split into four parts: ``a`` (not translated), ``b`` (translated),
``c`` plus ``D`` (translated as one message) and ``E`` (not translated).
"""
import logging
from dataclasses import dataclass, field
from typing import Collection, List, Optional

from .exceptions import I18nError, UnexpectedClosingMarkerError, UnmatchedMarkerError
from .interfaces import IExpressionParser
from .markers import (
    comment_marker_value,
    description,
    find_i18n_attr,
    has_own_marker,
    is_closing_comment,
    is_opening_comment,
    meaning,
)
from .messages import Message
from .nodes import Element, Node, SourceSpan
from .stringify import stringify_nodes

logger = logging.getLogger(__name__)


@dataclass
class Part:
    """A contiguous run of siblings, translated as a whole or not at all.

    Attributes:
        nodes: Sibling nodes covered by this part, in document order
        translatable: Whether the part is one message
        marker: Raw ``meaning|description`` of the marker, if any
        grouped: True for parts delimited by marker comments
        span: Location used for the message and errors
    """
    nodes: List[Node] = field(default_factory=list)
    translatable: bool = False
    marker: Optional[str] = None
    grouped: bool = False
    span: Optional[SourceSpan] = None

    @property
    def root(self) -> Optional[Node]:
        if self.grouped or len(self.nodes) != 1:
            return None
        return self.nodes[0]

    @property
    def root_element(self) -> Optional[Element]:
        root = self.root
        return root if isinstance(root, Element) else None

    @property
    def children(self) -> List[Node]:
        """Nodes whose content makes up the message."""
        root = self.root_element
        if root is not None:
            return root.children
        return self.nodes

    def create_message(self, parser: IExpressionParser, errors: List[I18nError]) -> Message:
        return Message(
            stringify_nodes(self.children, parser, errors),
            meaning(self.marker),
            description(self.marker),
            self.span,
        )


def partition(nodes: List[Node], errors: List[I18nError], implicit_tags: Collection[str]) -> List[Part]:
    """
    Split siblings into parts in one left-to-right scan.

    Args:
        nodes: Sibling nodes (already expanded)
        errors: Receives marker pairing errors
        implicit_tags: Tag names translated without an explicit marker

    Returns:
        Parts in document order; marker comments belong to no part
    """
    parts: List[Part] = []
    run: List[Node] = []

    def close_run() -> None:
        if run:
            parts.append(Part(nodes=list(run), translatable=False, span=run[0].span))
            run.clear()

    i = 0
    while i < len(nodes):
        node = nodes[i]

        if is_opening_comment(node):
            close_run()
            group: List[Node] = []
            i += 1
            while i < len(nodes) and not is_closing_comment(nodes[i]):
                group.append(nodes[i])
                i += 1
            if i == len(nodes):
                errors.append(UnmatchedMarkerError(node.span, "Missing closing 'i18n' comment."))
            if group:
                parts.append(Part(nodes=group, translatable=True,
                                  marker=comment_marker_value(node), grouped=True, span=node.span))
            else:
                logger.debug(f"Skipping empty marked block at {node.span}")
            i += 1
            continue

        if is_closing_comment(node):
            errors.append(UnexpectedClosingMarkerError(
                node.span, "Unexpected closing 'i18n' comment without an opening one."))
            i += 1
            continue

        if has_own_marker(node, implicit_tags):
            close_run()
            i18n_attr = find_i18n_attr(node)
            parts.append(Part(nodes=[node], translatable=True,
                              marker=i18n_attr.value if i18n_attr is not None else None,
                              span=node.span))
        else:
            run.append(node)
        i += 1

    close_run()
    return parts
