"""Unit tests for message content serialization."""

import pytest
from msgextract.core.exceptions import ExpressionSyntaxError
from msgextract.core.stringify import stringify_nodes


class TestStringify:
    """Test placeholder generation."""

    def test_plain_text_copied(self, txt, parser, errors):
        """Text without interpolation is copied verbatim."""
        assert stringify_nodes([txt('Hello world')], parser, errors) == 'Hello world'

    def test_unclosed_interpolation_is_literal(self, el, txt, parser, errors):
        nodes = [txt('a {{ b'), el('i', txt('c'))]

        assert stringify_nodes(nodes, parser, errors) == 'a {{ b<ph name="e1">c</ph>'
        assert errors == []

    def test_documented_example(self, el, txt, parser, errors):
        """<a>A{{I}}</a><b>B</b> uses one counter for elements and text."""
        nodes = [el('a', txt('A{{I}}')), el('b', txt('B'))]

        content = stringify_nodes(nodes, parser, errors)

        assert content == (
            '<ph name="e0"><ph name="t1">A<ph name="0"/></ph></ph>'
            '<ph name="e2">B</ph>'
        )
        assert errors == []

    def test_nested_element_and_interpolation(self, el, txt, parser, errors):
        """Placeholder suffixes are assigned left to right from 0."""
        nodes = [el('b', el('a', txt('A'), txt('{{I}}')))]

        content = stringify_nodes(nodes, parser, errors)

        assert content == (
            '<ph name="e0"><ph name="e1">A<ph name="t3"><ph name="0"/></ph></ph></ph>'
        )

    def test_childless_element_self_closing(self, el, txt, parser, errors):
        """Elements without children become a single placeholder."""
        content = stringify_nodes([txt('Line'), el('br'), txt('next')], parser, errors)

        assert content == 'Line<ph name="e1"/>next'

    def test_comments_skipped(self, el, txt, cmt, parser, errors):
        """Comments inside a message contribute nothing."""
        content = stringify_nodes([txt('A'), cmt('note'), txt('B')], parser, errors)

        assert content == 'AB'

    def test_multiple_interpolations_numbered_by_position(self, txt, parser, errors):
        content = stringify_nodes([txt('{{a}} of {{b}}')], parser, errors)

        assert content == '<ph name="t0"><ph name="0"/> of <ph name="1"/></ph>'

    def test_custom_placeholder_names(self, txt, parser, errors):
        """A trailing i18n(ph=...) comment names the placeholder."""
        content = stringify_nodes(
            [txt('{{ n // i18n(ph="count") }} of {{ m // i18n(ph="count") }}')], parser, errors)

        assert content == '<ph name="t0"><ph name="count"/> of <ph name="count_1"/></ph>'
        assert errors == []

    def test_deterministic(self, el, txt, parser):
        """Same subtree, same content."""
        nodes = [el('p', txt('Hi {{name}}'), el('b', txt('there')))]

        first = stringify_nodes(nodes, parser, [])
        second = stringify_nodes(nodes, parser, [])

        assert first == second

    def test_invalid_expression_reported(self, txt, parser, errors):
        """Syntax errors are collected and the placeholder is still emitted."""
        content = stringify_nodes([txt('Total: {{ a + }}')], parser, errors)

        assert content == '<ph name="t0">Total: <ph name="0"/></ph>'
        assert len(errors) == 1
        assert isinstance(errors[0], ExpressionSyntaxError)
        assert errors[0].expression == ' a + '

    def test_blank_expression_reported(self, txt, parser, errors):
        stringify_nodes([txt('{{ }}')], parser, errors)

        assert len(errors) == 1
        assert 'Blank expressions' in errors[0].msg

    def test_empty_node_list(self, parser, errors):
        assert stringify_nodes([], parser, errors) == ''
