"""Unit tests for message identity and deduplication."""

import pytest
from msgextract.core.messages import Message, message_id, remove_duplicates
from msgextract.core.nodes import SourceSpan


class TestMessageId:

    def test_description_not_part_of_id(self):
        assert message_id(Message("c", "m", "one")) == message_id(Message("c", "m", "two"))

    def test_meaning_part_of_id(self):
        assert message_id(Message("c", "m1")) != message_id(Message("c", "m2"))

    def test_missing_meaning_same_as_empty(self):
        assert message_id(Message("c")) == message_id(Message("c", ""))

    def test_id_is_escaped(self):
        assert message_id(Message('<ph name="e0"/>', "m")) == '%24ng%7Cm%7C%3Cph%20name%3D%22e0%22/%3E'


class TestMessage:

    def test_span_ignored_by_equality(self):
        assert Message("c", span=SourceSpan("a.html", 1)) == Message("c", span=SourceSpan("b.html", 9))

    def test_immutable(self):
        message = Message("c")

        with pytest.raises(AttributeError):
            message.content = "other"


class TestRemoveDuplicates:

    def test_first_description_wins(self):
        messages = [Message("message", "meaning", "desc1"), Message("message", "meaning", "desc2")]

        assert remove_duplicates(messages) == [Message("message", "meaning", "desc1")]
        assert remove_duplicates(messages)[0].description == "desc1"

    def test_order_preserved(self):
        messages = [Message("b"), Message("a"), Message("b"), Message("c")]

        assert [m.content for m in remove_duplicates(messages)] == ["b", "a", "c"]

    def test_different_meanings_kept(self):
        messages = [Message("x", "noun"), Message("x", "verb")]

        assert len(remove_duplicates(messages)) == 2
