"""Shared configuration for the richtext package."""

import re

# Default delimiter: split a document into lines
DEFAULT_PATTERN = r"\n"

# Default nesting limit for parsed markup. Splitting recurses once per level,
# so this also bounds the recursion depth of the splitter.
MAX_DEPTH = 256

# Highest nesting limit a caller may ask for. Parsing and splitting each
# recurse once per level and must stay below the interpreter's recursion limit.
MAX_DEPTH_CEILING = 512

# Markup element names
TEXT_TAG = "text"
GROUP_TAG = "group"
MARKUP_TAGS = frozenset({TEXT_TAG, GROUP_TAG})


def validate_max_depth(max_depth: int) -> None:
    """Validate a nesting limit.

    Args:
        max_depth: The maximum number of nested elements

    Raises:
        ValueError: If the limit is not an integer between 1 and MAX_DEPTH_CEILING
    """
    if (
        isinstance(max_depth, bool)
        or not isinstance(max_depth, int)
        or not 1 <= max_depth <= MAX_DEPTH_CEILING
    ):
        raise ValueError(
            f"Invalid max depth: {max_depth!r}. "
            f"Expected an integer from 1 to {MAX_DEPTH_CEILING} (e.g., {MAX_DEPTH})"
        )


def compile_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile a delimiter pattern.

    Args:
        pattern: A regular expression string or an already compiled pattern

    Returns:
        The compiled pattern

    Raises:
        TypeError: If pattern is neither a string nor a compiled string pattern
        ValueError: If the regular expression is invalid
    """
    if isinstance(pattern, re.Pattern):
        if not isinstance(pattern.pattern, str):
            raise TypeError(
                f"Pattern must match text, got a compiled {type(pattern.pattern).__name__} pattern"
            )
        return pattern
    if not isinstance(pattern, str):
        raise TypeError(
            f"Pattern must be a string or compiled regular expression, got {type(pattern).__name__}"
        )
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValueError(f"Invalid pattern: '{pattern}'. {e}") from e
