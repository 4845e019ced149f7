"""Split engine that breaks a component tree apart on a delimiter pattern."""

from __future__ import annotations

import re
from collections import deque

from richtext.components import (
    COMPONENT_TYPES,
    Component,
    TextComponent,
    is_empty,
    text,
)
from richtext.config import compile_pattern
from richtext.logging_config import logger
from richtext.splitting.patterns import split_text
from richtext.style import MergeStrategy, Style


def split(root: Component, pattern: str | re.Pattern[str]) -> list[Component]:
    """Split a component tree wherever its rendered text matches a pattern.

    The result is a flat list of sibling trees. Rendering them one after the
    other, with the matched delimiters put back in between, reproduces the
    original text. Every fragment keeps the styling it had in the original
    tree: fragments that move out from under a styled ancestor carry that
    ancestor's style with them.

    Example:
        >>> split(text("a\\nb", style("bold")), "\\n")
        [TextComponent(content='a', ...), TextComponent(content='b', ...)]

    Args:
        root: The component tree to split
        pattern: Delimiter as regular expression string or compiled pattern

    Returns:
        At least one component

    Raises:
        TypeError: If root is not a component or pattern has the wrong type
        ValueError: If pattern is not a valid regular expression
    """
    if not isinstance(root, COMPONENT_TYPES):
        raise TypeError(f"Expected a component, got {type(root).__name__}")
    regex = compile_pattern(pattern)

    with logger.indent_block(f"Splitting on {regex.pattern!r}", double_line=True):
        parts = _split(root, Style.empty(), regex)

    logger.debug(f"Split produced {len(parts)} part(s)")
    return list(parts)


def _split(
    component: Component,
    parent_style: Style,
    regex: re.Pattern[str],
) -> deque[Component]:
    """Split one component and stitch its children's parts onto its own.

    Args:
        component: The component to split
        parent_style: Effective style inherited from all ancestors
        regex: Delimiter pattern

    Returns:
        Parts in document order; never empty
    """
    parts: deque[Component] = deque()
    style = component.style.merge(parent_style, MergeStrategy.IF_ABSENT_ON_TARGET)

    if isinstance(component, TextComponent):
        pieces = split_text(component.content, regex)
        # The first piece stays inside the original component's ancestors,
        # so its own style is enough. Later pieces leave them behind.
        parts.append(text(pieces[0], component.style))
        for piece in pieces[1:]:
            parts.append(text(piece, style))
        if logger.is_debug_enabled():
            logger.debug(f"text {component.content!r} -> {len(pieces)} piece(s)")
    else:
        # Children are split recursively below
        parts.append(component.with_children(()))
        if logger.is_debug_enabled():
            logger.debug(f"container with {len(component.children)} child(ren)")

    sibling = False
    for child in component.children:
        with logger.indent_block():
            result = _split(child, style, regex)

        # Join the child's first part onto our last part, dropping empties
        root = parts.pop()
        first = result.popleft()
        if is_empty(first):
            parts.append(root)
        elif is_empty(root):
            merged = first.style.merge(root.style, MergeStrategy.IF_ABSENT_ON_TARGET)
            parts.append(first.with_style(merged))
            sibling = True
        elif sibling:
            parts.append(text("", children=(root, first)))
            sibling = False
        else:
            parts.append(root.append(first))

        # The child's remaining parts are new siblings
        if result:
            parts.extend(result)
            sibling = True

    return parts
