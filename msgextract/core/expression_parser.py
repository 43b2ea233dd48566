"""
Syntax check for interpolated template expressions.

Expressions are never evaluated during extraction. This parser tokenizes an
expression and rejects the malformed shapes that would break a template
binding: blank input, stray characters, unterminated strings, unbalanced
brackets, dangling operators, chained statements, assignments, and pipes
without a name.
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional

from .exceptions import ExpressionSyntaxError

TOKEN_PATTERN = re.compile(r"""
    (?P<space>\s+)
  | (?P<number>\d+(?:\.\d*)?(?:[eE][+-]?\d+)?|\.\d+)
  | (?P<string>'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")
  | (?P<identifier>[A-Za-z_$][\w$]*)
  | (?P<operator>===|!==|==|!=|<=|>=|&&|\|\||\?\?|\?\.|[-+*/%<>!?:.,;|=()\[\]{}])
""", re.VERBOSE)

OPENERS = {'(': ')', '[': ']', '{': '}'}
CLOSERS = {')', ']', '}'}
UNARY_OPERATORS = {'!', '-', '+'}
# Operators that cannot follow a non-null assertion such as ``user!.name``
NOT_AFTER_NON_NULL = {'(', '{', '!'}


@dataclass
class Token:
    kind: str
    text: str
    index: int

    def is_operator(self, text: Optional[str] = None) -> bool:
        if self.kind != 'operator':
            return False
        return text is None or self.text == text


@dataclass
class Expression:
    """Description of a syntactically valid expression.

    Attributes:
        source: Expression text as written, including any trailing comment
        tokens: Tokens of the expression body (comment stripped)
        pipes: Names of the pipes applied, in order
    """
    source: str
    tokens: List[Token] = field(default_factory=list)
    pipes: List[str] = field(default_factory=list)


def strip_comments(source: str) -> str:
    """Drop a trailing ``// ...`` comment that is not inside a string literal."""
    quote = None
    i = 0
    while i < len(source) - 1:
        char = source[i]
        if quote:
            if char == '\\':
                i += 2
                continue
            if char == quote:
                quote = None
        elif char in ('"', "'"):
            quote = char
        elif char == '/' and source[i + 1] == '/':
            return source[:i]
        i += 1
    return source


def tokenize(source: str) -> List[Token]:
    tokens: List[Token] = []
    pos = 0
    while pos < len(source):
        match = TOKEN_PATTERN.match(source, pos)
        if not match:
            char = source[pos]
            if char in ('"', "'"):
                raise ExpressionSyntaxError(
                    None, f"Unterminated quote at column {pos} in [{source}]", source)
            raise ExpressionSyntaxError(
                None, f"Unexpected character [{char}] at column {pos} in [{source}]", source)
        kind = match.lastgroup
        if kind != 'space':
            tokens.append(Token(kind, match.group(0), pos))
        pos = match.end()
    return tokens


def mark_non_null_assertions(tokens: List[Token]) -> List[Token]:
    """Retag postfix ``!`` tokens as ``non_null`` so they end an operand."""
    marked: List[Token] = []
    for i, token in enumerate(tokens):
        if token.is_operator('!') and marked:
            previous = marked[-1]
            following = tokens[i + 1] if i + 1 < len(tokens) else None
            ends_operand = previous.kind in ('identifier', 'non_null') or previous.text in CLOSERS
            ends_expression = following is None or (
                following.kind == 'operator' and following.text not in NOT_AFTER_NON_NULL)
            if ends_operand and ends_expression:
                token = Token('non_null', token.text, token.index)
        marked.append(token)
    return marked


class ExpressionParser:
    """Default expression validator used by the extractor."""

    def parse(self, source: str) -> Expression:
        body = strip_comments(source)
        if not body.strip():
            raise ExpressionSyntaxError(
                None, "Blank expressions are not allowed in interpolated strings", source)

        tokens = mark_non_null_assertions(tokenize(body))
        self._check_brackets(tokens, body)
        pipes = self._check_operators(tokens, body)
        return Expression(source=source, tokens=tokens, pipes=pipes)

    def _check_brackets(self, tokens: List[Token], body: str) -> None:
        stack: List[Token] = []
        for token in tokens:
            if token.kind != 'operator':
                continue
            if token.text in OPENERS:
                stack.append(token)
            elif token.text in CLOSERS:
                if not stack or OPENERS[stack[-1].text] != token.text:
                    raise ExpressionSyntaxError(
                        None, f"Unexpected token '{token.text}' at column {token.index} in [{body}]", body)
                stack.pop()
        if stack:
            expected = OPENERS[stack[-1].text]
            raise ExpressionSyntaxError(
                None, f"Missing expected {expected} in [{body}]", body)

    def _check_operators(self, tokens: List[Token], body: str) -> List[str]:
        pipes: List[str] = []
        previous: Optional[Token] = None
        for i, token in enumerate(tokens):
            if token.is_operator(';'):
                raise ExpressionSyntaxError(
                    None, f"Expression cannot contain chained statements in [{body}]", body)
            if token.is_operator('='):
                raise ExpressionSyntaxError(
                    None, f"Bindings cannot contain assignments in [{body}]", body)
            if token.is_operator('|'):
                following = tokens[i + 1] if i + 1 < len(tokens) else None
                if following is None or following.kind != 'identifier':
                    raise ExpressionSyntaxError(
                        None, f"Cannot have a pipe without a name at column {token.index} in [{body}]", body)
                pipes.append(following.text)
            if self._is_binary(token) and token.text not in UNARY_OPERATORS:
                if previous is None or self._is_binary(previous) or previous.text in OPENERS:
                    raise ExpressionSyntaxError(
                        None, f"Unexpected token '{token.text}' at column {token.index} in [{body}]", body)
            previous = token

        last = tokens[-1]
        if self._is_binary(last) or (last.kind == 'operator' and last.text in OPENERS):
            raise ExpressionSyntaxError(
                None, f"Unexpected end of expression: [{body}]", body)
        return pipes

    @staticmethod
    def _is_binary(token: Token) -> bool:
        return (token.kind == 'operator'
                and token.text not in OPENERS
                and token.text not in CLOSERS)
