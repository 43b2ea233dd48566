"""
Outcome of building a single attribute message.

An attribute marker either yields a Message or an extraction error. The
extractor merges the error into its list and moves on to the next attribute.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Tuple, Type, TypeVar, Union

V = TypeVar('V')
X = TypeVar('X', bound=Exception)


@dataclass
class Ok(Generic[V]):
    """Holds the built value (usually a Message)."""
    value: V

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> V:
        return self.value


@dataclass
class Err(Generic[X]):
    """Holds the exception raised while building the value."""
    error: X

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise ValueError(f"No value, build failed: {self.error}")


Result = Union[Ok[V], Err[X]]


def capture(func: Callable[..., V], *error_types: Type[Exception]) -> Callable[..., Result]:
    """Wrap ``func`` so the listed exceptions come back as ``Err``.

    Any other exception propagates.

        build = capture(message_from_attribute, I18nError)
        build(parser, attr, errors)   # Ok(Message(...)) or Err(MarkerError(...))
    """
    caught: Tuple[Type[Exception], ...] = error_types or (Exception,)

    def build(*args, **kwargs) -> Result:
        try:
            value = func(*args, **kwargs)
        except caught as error:
            return Err(error)
        return Ok(value)
    return build
