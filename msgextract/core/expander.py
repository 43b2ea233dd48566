"""
Expansion of ICU plural/select forms into plain elements.

    {count, plural, =0 {none} other {many}}

is rewritten to

    <ul [ngPlural]="count">
      <template ngPluralCase="=0"><li i18n="plural_count">none</li></template>
      <template ngPluralCase="other"><li i18n="plural_count">many</li></template>
    </ul>

so every case is an ordinary marked element by the time the partitioner
runs. Select forms (any type other than plural) use ``[ngSwitch]`` and
``ngSwitchWhen`` instead.
"""
import logging
from dataclasses import dataclass, field
from typing import List

from msgextract.config import I18N_ATTR

from .nodes import Attribute, Element, Expansion, ExpansionCase, Node

logger = logging.getLogger(__name__)

PLURAL_TYPE = "plural"


@dataclass
class ExpansionResult:
    """Expanded nodes, and whether any expansion form was rewritten."""
    nodes: List[Node] = field(default_factory=list)
    expanded: bool = False


def expand_nodes(nodes: List[Node]) -> ExpansionResult:
    """Return ``nodes`` with every expansion form rewritten.

    Subtrees without expansions are returned as the same node objects, so
    expanding an already expanded tree changes nothing.
    """
    expanded = False
    result: List[Node] = []
    for node in nodes:
        if isinstance(node, Expansion):
            expanded = True
            result.append(_expand_form(node))
        elif isinstance(node, Element):
            inner = expand_nodes(node.children)
            if inner.expanded:
                expanded = True
                result.append(Element(node.name, list(node.attrs), inner.nodes, node.span))
            else:
                result.append(node)
        else:
            result.append(node)
    return ExpansionResult(result, expanded)


def _expand_form(expansion: Expansion) -> Element:
    if expansion.type == PLURAL_TYPE:
        switch_attr, case_attr = "[ngPlural]", "ngPluralCase"
    else:
        switch_attr, case_attr = "[ngSwitch]", "ngSwitchWhen"
    logger.debug(f"Expanding {expansion.type} form on '{expansion.switch_value}' at {expansion.span}")

    children: List[Node] = [_expand_case(expansion, case, case_attr) for case in expansion.cases]
    return Element(
        "ul",
        [Attribute(switch_attr, expansion.switch_value, expansion.span)],
        children,
        expansion.span,
    )


def _expand_case(expansion: Expansion, case: ExpansionCase, case_attr: str) -> Element:
    inner = expand_nodes(case.expression)
    # A case that held a nested form is not a message itself; its inner cases are
    if inner.expanded:
        li_attrs = []
    else:
        li_attrs = [Attribute(I18N_ATTR, f"{expansion.type}_{expansion.switch_value}", case.span)]
    li = Element("li", li_attrs, inner.nodes, case.span)
    return Element("template", [Attribute(case_attr, case.value, case.span)], [li], case.span)
