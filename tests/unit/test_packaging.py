"""Checks on the distribution metadata in pyproject.toml."""

import re
from pathlib import Path

import pytest

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


@pytest.fixture
def pyproject():
    return PYPROJECT.read_text(encoding="utf-8")


class TestPyproject:

    def test_lxml_parses_binding_attributes(self, pyproject):
        # lxml 6 ships libxml2 2.14, the first to accept (click)/[value]/*ngIf names
        match = re.search(r'"lxml>=(\d+)', pyproject)

        assert match is not None
        assert int(match.group(1)) >= 6

    def test_readme_is_not_a_design_document(self, pyproject):
        assert "SPEC_FULL.md" not in pyproject
