"""
Pytest configuration and fixtures for richtext tests
"""
import re

import pytest

from richtext import NamedColor, Style, text
from richtext.logging_config import GlobalIndent


@pytest.fixture(autouse=True)
def reset_indent():
    """Start every test with clean log indentation"""
    GlobalIndent.reset()
    yield
    GlobalIndent.reset()


@pytest.fixture
def newline_pattern() -> re.Pattern[str]:
    """Pattern splitting on line breaks"""
    return re.compile("\n")


@pytest.fixture
def green_document():
    """Green "A line" with an unstyled child spanning a line break"""
    return text("A line", Style(color=NamedColor.GREEN)).append(
        text("of text\nand another")
    )


@pytest.fixture
def markup_file(tmp_path):
    """Factory fixture writing markup to a temporary file.

    Usage:
        def test_example(markup_file):
            path = markup_file("<text>a/b</text>")
    """

    def _create(source: str, name: str = "document.xml"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _create
