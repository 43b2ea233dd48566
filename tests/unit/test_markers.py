"""Unit tests for marker recognition and attribute messages."""

import pytest
from msgextract.core.exceptions import MarkerError
from msgextract.core.markers import (
    comment_marker_value,
    description,
    has_own_marker,
    is_closing_comment,
    is_opening_comment,
    meaning,
    message_from_attribute,
    message_from_i18n_attribute,
)
from msgextract.core.nodes import Attribute


class TestMeaningAndDescription:

    @pytest.mark.parametrize("marker,expected_meaning,expected_description", [
        ("m|d", "m", "d"),
        ("m", "m", None),
        ("|d", "", "d"),
        ("", None, None),
        (None, None, None),
    ])
    def test_split(self, marker, expected_meaning, expected_description):
        assert meaning(marker) == expected_meaning
        assert description(marker) == expected_description


class TestCommentMarkers:

    def test_opening_forms(self, cmt):
        assert is_opening_comment(cmt('i18n'))
        assert is_opening_comment(cmt('i18n: m|d'))
        assert not is_opening_comment(cmt('i18nx'))
        assert not is_opening_comment(cmt('/i18n'))

    def test_closing(self, cmt, txt):
        assert is_closing_comment(cmt('/i18n'))
        assert not is_closing_comment(cmt('i18n'))
        assert not is_closing_comment(txt('/i18n'))

    def test_marker_value(self, cmt):
        assert comment_marker_value(cmt('i18n: greeting|On login ')) == 'greeting|On login'
        assert comment_marker_value(cmt('i18n')) == ''


class TestOwnMarker:

    def test_explicit_attribute(self, el):
        assert has_own_marker(el('p', attrs={'i18n': ''}), [])

    def test_implicit_tag(self, el):
        assert has_own_marker(el('h1'), ['h1'])
        assert not has_own_marker(el('h2'), ['h1'])

    def test_text_never_marked(self, txt):
        assert not has_own_marker(txt('h1'), ['h1'])


class TestAttributeMessages:

    def test_plain_value_copied(self, parser, errors, span):
        message = message_from_attribute(parser, Attribute('title', 'Close window', span), errors)

        assert message.content == 'Close window'
        assert message.meaning is None
        assert message.description is None

    def test_interpolated_value(self, parser, errors, span):
        message = message_from_attribute(parser, Attribute('title', 'Hi {{name}}', span), errors)

        assert message.content == 'Hi <ph name="0"/>'

    def test_explicit_attribute_message(self, el, parser, errors):
        img = el('img', attrs={'alt': 'Logo', 'i18n-alt': 'brand|Company logo'})

        message = message_from_i18n_attribute(parser, img, img.get_attr('i18n-alt'), errors)

        assert message.content == 'Logo'
        assert message.meaning == 'brand'
        assert message.description == 'Company logo'

    def test_explicit_attribute_missing_target(self, el, parser, errors):
        img = el('img', attrs={'i18n-alt': 'brand'})

        with pytest.raises(MarkerError) as exc_info:
            message_from_i18n_attribute(parser, img, img.get_attr('i18n-alt'), errors)

        assert exc_info.value.msg == "Missing attribute 'alt'."
