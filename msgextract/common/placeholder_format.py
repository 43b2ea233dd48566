"""
Centralized placeholder rendering.

Message content marks element boundaries and interpolated expressions with
``<ph>`` tokens. Every module that writes them goes through this class so
the token shape lives in one place.
"""
from msgextract.config import (
    PLACEHOLDER_TAG,
    ELEMENT_PLACEHOLDER_PREFIX,
    TEXT_PLACEHOLDER_PREFIX,
)


class PlaceholderFormat:
    """
    Builds element, text and expression placeholders.

    Example:
        >>> fmt = PlaceholderFormat.from_config()
        >>> fmt.wrap(fmt.element_name(0), "Hello")
        '<ph name="e0">Hello</ph>'
        >>> fmt.empty("0")
        '<ph name="0"/>'
    """

    def __init__(self, tag: str, element_prefix: str, text_prefix: str):
        """
        Initialize placeholder format.

        Args:
            tag: Placeholder tag name (e.g., "ph")
            element_prefix: Name prefix for element placeholders (e.g., "e")
            text_prefix: Name prefix for interpolated text wrappers (e.g., "t")
        """
        self.tag = tag
        self.element_prefix = element_prefix
        self.text_prefix = text_prefix
        self._closing = f"</{tag}>"

    @classmethod
    def from_config(cls) -> 'PlaceholderFormat':
        """Create PlaceholderFormat from global config constants."""
        return cls(PLACEHOLDER_TAG, ELEMENT_PLACEHOLDER_PREFIX, TEXT_PLACEHOLDER_PREFIX)

    def element_name(self, index: int) -> str:
        return f"{self.element_prefix}{index}"

    def text_name(self, index: int) -> str:
        return f"{self.text_prefix}{index}"

    def open(self, name: str) -> str:
        return f'<{self.tag} name="{name}">'

    def close(self) -> str:
        return self._closing

    def empty(self, name: str) -> str:
        """Self-closing placeholder, used for expressions and childless elements."""
        return f'<{self.tag} name="{name}"/>'

    def wrap(self, name: str, content: str) -> str:
        return f"{self.open(name)}{content}{self.close()}"
