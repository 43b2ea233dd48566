"""
msgextract - translatable message extraction from HTML templates
"""
from .core import ExtractionResult, Message, MessageExtractor, remove_duplicates

__version__ = "0.1.0"

__all__ = [
    'MessageExtractor',
    'ExtractionResult',
    'Message',
    'remove_duplicates',
]
