"""Unit tests for the Result helpers."""

import pytest
from msgextract.core.exceptions import I18nError, MarkerError
from msgextract.core.result import Err, Ok, capture


class TestOkErr:

    def test_ok(self):
        result = Ok(3)

        assert result.is_ok()
        assert not result.is_err()
        assert result.unwrap() == 3

    def test_err(self):
        result = Err(KeyError("boom"))

        assert result.is_err()
        assert not result.is_ok()
        with pytest.raises(ValueError, match="boom"):
            result.unwrap()


class TestCapture:

    def test_success(self):
        assert capture(int, ValueError)("42") == Ok(42)

    def test_listed_error(self):
        result = capture(int, ValueError)("x")

        assert result.is_err()
        assert isinstance(result.error, ValueError)

    def test_subclass_of_listed_error(self):
        def build():
            raise MarkerError(None, "Missing attribute 'title'.")

        result = capture(build, I18nError)()

        assert isinstance(result.error, MarkerError)

    def test_other_errors_propagate(self):
        def build():
            raise KeyError("k")

        with pytest.raises(KeyError):
            capture(build, I18nError)()
