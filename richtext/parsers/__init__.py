"""Parsers converting external document formats to component trees."""

from richtext.parsers.markup import (
    MarkupError,
    UnknownElementError,
    parse_markup,
    to_markup,
)

__all__ = [
    "MarkupError",
    "UnknownElementError",
    "parse_markup",
    "to_markup",
]
