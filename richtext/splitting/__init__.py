"""Splitting of component trees on delimiter patterns.

This module flattens a styled component tree into a list of sibling trees,
one per delimiter-separated segment, keeping every fragment's inherited
formatting intact.
"""

from richtext.splitting.engine import split
from richtext.splitting.patterns import split_text

__all__ = [
    "split",
    "split_text",
]
