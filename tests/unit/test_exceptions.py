"""Unit tests for extraction error types."""

import pytest
from msgextract.core.exceptions import (
    ExpressionSyntaxError,
    I18nError,
    MarkerError,
    TemplateParseError,
    UnexpectedClosingMarkerError,
    UnmatchedMarkerError,
)
from msgextract.core.nodes import SourceSpan


class TestI18nError:

    def test_str_includes_span(self):
        error = MarkerError(SourceSpan("app.html", 4), "Missing attribute 'title'.")

        assert str(error) == "Missing attribute 'title'. (app.html@4)"
        assert error.msg == "Missing attribute 'title'."

    def test_str_without_line(self):
        assert str(I18nError(SourceSpan("app.html"), "bad")) == "bad (app.html)"

    def test_str_without_span(self):
        assert str(I18nError(None, "bad")) == "bad"

    @pytest.mark.parametrize("cls", [
        MarkerError,
        UnmatchedMarkerError,
        UnexpectedClosingMarkerError,
        ExpressionSyntaxError,
        TemplateParseError,
    ])
    def test_hierarchy(self, cls):
        assert issubclass(cls, I18nError)

    def test_expression_kept(self):
        error = ExpressionSyntaxError(None, "Unexpected end of expression", "a +")

        assert error.expression == "a +"
