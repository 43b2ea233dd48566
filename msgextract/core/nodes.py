"""
Template node model.

Parsers produce these nodes; the extraction core only reads and regroups
them. ``Expansion`` nodes (ICU plural/select forms) exist only until the
expander has rewritten them into plain elements.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class SourceSpan:
    """Location of a node in its template, used for error reporting.

    Attributes:
        url: Template identifier passed to the parser
        line: 1-based line number, when the parser knows it
    """
    url: str
    line: Optional[int] = None

    def __str__(self) -> str:
        if self.line is None:
            return self.url
        return f"{self.url}@{self.line}"


@dataclass
class Attribute:
    name: str
    value: str
    span: Optional[SourceSpan] = None


@dataclass
class Element:
    name: str
    attrs: List[Attribute] = field(default_factory=list)
    children: List['Node'] = field(default_factory=list)
    span: Optional[SourceSpan] = None

    def get_attr(self, name: str) -> Optional[Attribute]:
        """First attribute with the given name, or None."""
        for attr in self.attrs:
            if attr.name == name:
                return attr
        return None


@dataclass
class Text:
    value: str
    span: Optional[SourceSpan] = None


@dataclass
class Comment:
    value: str
    span: Optional[SourceSpan] = None


@dataclass
class ExpansionCase:
    """One ``value {body}`` branch of an ICU form."""
    value: str
    expression: List['Node'] = field(default_factory=list)
    span: Optional[SourceSpan] = None


@dataclass
class Expansion:
    """ICU form such as ``{count, plural, =0 {none} other {many}}``."""
    switch_value: str
    type: str
    cases: List[ExpansionCase] = field(default_factory=list)
    span: Optional[SourceSpan] = None


Node = Union[Element, Text, Comment, Expansion]


def iter_elements(nodes: List[Node]):
    """Yield every element in ``nodes`` and their descendants, depth first."""
    for node in nodes:
        if isinstance(node, Element):
            yield node
            yield from iter_elements(node.children)
