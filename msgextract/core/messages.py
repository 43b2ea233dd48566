"""
Extracted messages and their catalog identity.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional
from urllib.parse import quote

from .nodes import SourceSpan


@dataclass(frozen=True)
class Message:
    """One translation unit.

    Attributes:
        content: Text with ``<ph>`` placeholders
        meaning: Disambiguating meaning, part of the message identity
        description: Note for translators, not part of the identity
        span: Where the message was found (ignored by equality)
    """
    content: str
    meaning: Optional[str] = None
    description: Optional[str] = None
    span: Optional[SourceSpan] = field(default=None, compare=False)


def message_id(message: Message) -> str:
    """Fingerprint used to deduplicate messages: meaning plus content."""
    meaning = message.meaning if message.meaning is not None else ""
    content = message.content if message.content is not None else ""
    return quote(f"$ng|{meaning}|{content}", safe="@*_+-./")


def remove_duplicates(messages: Iterable[Message]) -> List[Message]:
    """
    Removes duplicate messages, keeping the first one seen per id.

    Example:
        >>> m = [Message("message", "meaning", "desc1"), Message("message", "meaning", "desc2")]
        >>> remove_duplicates(m)
        [Message(content='message', meaning='meaning', description='desc1', span=None)]
    """
    unique: Dict[str, Message] = {}
    for message in messages:
        unique.setdefault(message_id(message), message)
    return list(unique.values())
