"""
richtext - Styled rich-text component trees and delimiter splitting.

This library provides:
- An immutable component tree (text and container components) with
  inheritable styles
- Splitting of a tree on a regular expression into sibling trees that keep
  their inherited formatting
- An XML markup codec and a YAML writer for split results

Example usage:

    from richtext import NamedColor, Style, text

    doc = text("A line", Style(color=NamedColor.GREEN)).append(text("of text\\nand another"))
    first, second = doc.split("\\n")
    # first:  "A line" (green) with child "of text"
    # second: "and another" (green)
"""

from richtext.components import (
    Component,
    ContainerComponent,
    TextComponent,
    container,
    empty,
    is_empty,
    plain_text,
    text,
)
from richtext.config import compile_pattern
from richtext.parsers.markup import parse_markup, to_markup
from richtext.splitting import split, split_text
from richtext.style import MergeStrategy, NamedColor, Style, style

__version__ = "0.1.0"

__all__ = [
    "Component",
    "ContainerComponent",
    "TextComponent",
    "container",
    "empty",
    "is_empty",
    "plain_text",
    "text",
    "compile_pattern",
    "parse_markup",
    "to_markup",
    "split",
    "split_text",
    "MergeStrategy",
    "NamedColor",
    "Style",
    "style",
]
