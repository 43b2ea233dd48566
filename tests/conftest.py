"""
Pytest configuration and fixtures for all tests.

Provides small node builders so tests can describe template trees
without going through the HTML parser.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from msgextract.core.expression_parser import ExpressionParser
from msgextract.core.nodes import Attribute, Comment, Element, SourceSpan, Text

SPAN = SourceSpan("test.html", 1)


def _element(name, *children, attrs=None):
    attributes = [Attribute(k, v, SPAN) for k, v in (attrs or {}).items()]
    return Element(name, attributes, list(children), SPAN)


def _text(value):
    return Text(value, SPAN)


def _comment(value):
    return Comment(value, SPAN)


@pytest.fixture
def el():
    """Element builder: el('p', txt('Hi'), attrs={'i18n': 'm|d'})."""
    return _element


@pytest.fixture
def txt():
    return _text


@pytest.fixture
def cmt():
    return _comment


@pytest.fixture
def parser():
    return ExpressionParser()


@pytest.fixture
def errors():
    return []


@pytest.fixture
def span():
    return SPAN
