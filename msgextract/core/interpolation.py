"""
Interpolation handling for text and attribute values.

``Hello {{ user.name }}!`` is split into literal strings and expressions;
each expression is replaced with a self-closing placeholder whose name is
its position in the value, or a custom name given with a trailing
``// i18n(ph="name")`` comment.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from msgextract.common.placeholder_format import PlaceholderFormat
from msgextract.config import INTERPOLATION_START, INTERPOLATION_END

from .exceptions import ExpressionSyntaxError, I18nError
from .interfaces import IExpressionParser
from .nodes import SourceSpan

logger = logging.getLogger(__name__)

INTERPOLATION_PATTERN = re.compile(
    re.escape(INTERPOLATION_START) + r'([\s\S]*?)' + re.escape(INTERPOLATION_END))

CUSTOM_PH_PATTERN = re.compile(
    r'//[\s\S]*i18n[\s\S]*\([\s\S]*ph[\s\S]*=[\s\S]*"([\s\S]*?)"[\s\S]*\)')


@dataclass
class SplitInterpolation:
    """Literal runs and the expressions between them.

    ``len(strings) == len(expressions) + 1`` always holds.
    """
    strings: List[str] = field(default_factory=list)
    expressions: List[str] = field(default_factory=list)


def split_interpolation(value: str) -> Optional[SplitInterpolation]:
    """Split a value on ``{{ }}``, or return None when it has no interpolation.

    An unclosed ``{{`` is literal text.
    """
    pieces = INTERPOLATION_PATTERN.split(value)
    if len(pieces) <= 1:
        return None
    return SplitInterpolation(strings=pieces[0::2], expressions=pieces[1::2])


def has_interpolation(value: str) -> bool:
    return INTERPOLATION_PATTERN.search(value) is not None


def get_ph_name_from_binding(expression: str, index: int) -> str:
    match = CUSTOM_PH_PATTERN.search(expression)
    return match.group(1) if match else str(index)


def dedupe_ph_name(used_names: Dict[str, int], name: str) -> str:
    """Return ``name`` the first time, then ``name_1``, ``name_2``..."""
    count = used_names.get(name)
    if count is None:
        used_names[name] = 1
        return name
    used_names[name] = count + 1
    return f"{name}_{count}"


def remove_interpolation(
    value: str,
    span: Optional[SourceSpan],
    parser: IExpressionParser,
    errors: List[I18nError],
) -> str:
    """
    Replace every interpolated expression in ``value`` with a placeholder.

    Expressions are validated with ``parser``; syntax errors are appended to
    ``errors`` and the placeholder is emitted anyway, so the resulting content
    does not depend on whether the expression was valid.

    Example:
        >>> remove_interpolation("Hi {{a}} and {{b}}", None, ExpressionParser(), [])
        'Hi <ph name="0"/> and <ph name="1"/>'
    """
    parsed = split_interpolation(value)
    if parsed is None:
        return value

    fmt = PlaceholderFormat.from_config()
    used_names: Dict[str, int] = {}
    parts: List[str] = []
    for i, literal in enumerate(parsed.strings):
        parts.append(literal)
        if i == len(parsed.expressions):
            break
        expression = parsed.expressions[i]
        _validate(expression, span, parser, errors)
        name = dedupe_ph_name(used_names, get_ph_name_from_binding(expression, i))
        parts.append(fmt.empty(name))
    return "".join(parts)


def _validate(expression: str, span: Optional[SourceSpan],
              parser: IExpressionParser, errors: List[I18nError]) -> None:
    try:
        parser.parse(expression)
    except ExpressionSyntaxError as e:
        logger.debug(f"Invalid expression at {span}: {e.msg}")
        errors.append(ExpressionSyntaxError(span, e.msg, expression))
