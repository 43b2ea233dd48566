"""
Translation marker recognition.

Three mechanisms mark content as translatable:

* an ``i18n="meaning|description"`` attribute on an element,
* an element whose tag is configured as implicitly translatable,
* a pair of ``<!-- i18n: meaning|description -->`` / ``<!-- /i18n -->``
  comments around a run of siblings.

Attributes are marked with ``i18n-<name>`` or by configuring the
tag/attribute pair as implicitly translatable.
"""
from typing import Collection, List, Optional

from msgextract.config import (
    I18N_ATTR,
    I18N_ATTR_PREFIX,
    I18N_COMMENT_OPEN,
    I18N_COMMENT_CLOSE,
    MEANING_SEPARATOR,
)

from .exceptions import I18nError, MarkerError
from .interfaces import IExpressionParser
from .interpolation import remove_interpolation
from .messages import Message
from .nodes import Attribute, Comment, Element, Node


def is_opening_comment(node: Node) -> bool:
    if not isinstance(node, Comment) or node.value is None:
        return False
    value = node.value.strip()
    return value == I18N_COMMENT_OPEN or value.startswith(f"{I18N_COMMENT_OPEN}:")


def is_closing_comment(node: Node) -> bool:
    return isinstance(node, Comment) and node.value is not None and node.value.strip() == I18N_COMMENT_CLOSE


def comment_marker_value(comment: Comment) -> str:
    """The ``meaning|description`` part of an opening comment."""
    return comment.value.strip()[len(I18N_COMMENT_OPEN) + 1:].strip()


def find_i18n_attr(element: Element) -> Optional[Attribute]:
    return element.get_attr(I18N_ATTR)


def is_explicit_attr_marker(attr: Attribute) -> bool:
    return attr.name.startswith(I18N_ATTR_PREFIX)


def is_marker_attr(attr: Attribute) -> bool:
    return attr.name == I18N_ATTR or is_explicit_attr_marker(attr)


def has_own_marker(node: Node, implicit_tags: Collection[str]) -> bool:
    """True when an element is translatable on its own."""
    if not isinstance(node, Element):
        return False
    return find_i18n_attr(node) is not None or node.name in implicit_tags


def meaning(marker: Optional[str]) -> Optional[str]:
    if not marker:
        return None
    return marker.split(MEANING_SEPARATOR)[0]


def description(marker: Optional[str]) -> Optional[str]:
    if not marker:
        return None
    parts = marker.split(MEANING_SEPARATOR)
    return parts[1] if len(parts) > 1 else None


def message_from_attribute(
    parser: IExpressionParser,
    attr: Attribute,
    errors: List[I18nError],
    meaning: Optional[str] = None,
    description: Optional[str] = None,
) -> Message:
    """Message whose content is the attribute value.

    A plain value is copied verbatim; interpolations become placeholders.
    """
    content = remove_interpolation(attr.value, attr.span, parser, errors)
    return Message(content, meaning, description, attr.span)


def message_from_i18n_attribute(
    parser: IExpressionParser,
    element: Element,
    i18n_attr: Attribute,
    errors: List[I18nError],
) -> Message:
    """
    Message for the attribute named by an ``i18n-<name>`` marker.

    Raises:
        MarkerError: If the element has no ``<name>`` attribute to take the text from
    """
    expected_name = i18n_attr.name[len(I18N_ATTR_PREFIX):]
    target = element.get_attr(expected_name)
    if target is None:
        raise MarkerError(element.span, f"Missing attribute '{expected_name}'.")
    return message_from_attribute(
        parser, target, errors,
        meaning(i18n_attr.value), description(i18n_attr.value))
