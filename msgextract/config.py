"""
Centralized configuration
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from dotenv import load_dotenv

_config_logger = logging.getLogger('config')

# Load .env from the current working directory if present
_env_file = Path.cwd() / '.env'
load_dotenv(_env_file)

DEBUG_MODE = os.getenv('DEBUG_MODE', 'false').lower() == 'true'
if DEBUG_MODE:
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    _config_logger.setLevel(logging.DEBUG)

# ============================================================================
# TRANSLATION MARKERS
# ============================================================================

I18N_ATTR = "i18n"
"""Attribute marking an element's content as one translation unit"""

I18N_ATTR_PREFIX = f"{I18N_ATTR}-"
"""Prefix marking another attribute as translatable (e.g., i18n-title)"""

I18N_COMMENT_OPEN = "i18n"
"""Value (or value prefix, followed by ':') of a comment opening a marked block"""

I18N_COMMENT_CLOSE = "/i18n"
"""Value of a comment closing a marked block"""

MEANING_SEPARATOR = "|"
"""Separator between meaning and description in marker values"""

# ============================================================================
# PLACEHOLDER CONFIGURATION
# ============================================================================

PLACEHOLDER_TAG = "ph"
"""Tag name used for placeholders in message content (e.g., <ph name="e0">)"""

ELEMENT_PLACEHOLDER_PREFIX = "e"
"""Prefix of placeholders standing for elements"""

TEXT_PLACEHOLDER_PREFIX = "t"
"""Prefix of placeholders wrapping text nodes that contain interpolation"""

INTERPOLATION_START = "{{"
INTERPOLATION_END = "}}"

# ============================================================================
# IMPLICIT TRANSLATION RULES
# ============================================================================


def _parse_tag_list(raw: str) -> List[str]:
    return [tag.strip() for tag in raw.split(',') if tag.strip()]


def _parse_attr_map(raw: str) -> Dict[str, List[str]]:
    """Parse 'img:alt,title;input:placeholder' into {'img': ['alt', 'title'], ...}"""
    result: Dict[str, List[str]] = {}
    for entry in raw.split(';'):
        if ':' not in entry:
            continue
        tag, attrs = entry.split(':', 1)
        tag = tag.strip()
        if not tag:
            continue
        result.setdefault(tag, []).extend(_parse_tag_list(attrs))
    return result


IMPLICIT_TAGS = _parse_tag_list(os.getenv('I18N_IMPLICIT_TAGS', ''))
IMPLICIT_ATTRS = _parse_attr_map(os.getenv('I18N_IMPLICIT_ATTRS', ''))

if DEBUG_MODE:
    _config_logger.debug(f"I18N_IMPLICIT_TAGS: {IMPLICIT_TAGS}")
    _config_logger.debug(f"I18N_IMPLICIT_ATTRS: {IMPLICIT_ATTRS}")


@dataclass
class ExtractorConfig:
    """Settings that stay constant for the lifetime of one extractor"""

    implicit_tags: List[str] = field(default_factory=lambda: list(IMPLICIT_TAGS))
    implicit_attrs: Dict[str, List[str]] = field(
        default_factory=lambda: {tag: list(attrs) for tag, attrs in IMPLICIT_ATTRS.items()}
    )

    @classmethod
    def from_env(cls) -> 'ExtractorConfig':
        """Create config from the current environment (re-read, not cached)"""
        return cls(
            implicit_tags=_parse_tag_list(os.getenv('I18N_IMPLICIT_TAGS', '')),
            implicit_attrs=_parse_attr_map(os.getenv('I18N_IMPLICIT_ATTRS', '')),
        )

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'ExtractorConfig':
        """Create config from a plain mapping (e.g., loaded from a project file)"""
        data = data or {}
        attrs = data.get('implicit_attrs', {})
        return cls(
            implicit_tags=list(data.get('implicit_tags', [])),
            implicit_attrs={tag: list(names) for tag, names in attrs.items()},
        )

    def to_dict(self) -> dict:
        return {
            'implicit_tags': list(self.implicit_tags),
            'implicit_attrs': {tag: list(names) for tag, names in self.implicit_attrs.items()},
        }
