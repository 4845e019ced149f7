"""Component tree model for rich text.

A document is a tree of components. Two kinds exist:

```
TextComponent       literal content, own style, children
ContainerComponent  no content, own style, children
```

Components are immutable values. Every "modification" returns a new
component and leaves the original untouched, so a tree can be shared freely
between callers.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Union

from richtext.style import Style

if TYPE_CHECKING:
    from typing import Self


class _ComponentOps:
    """Copy-on-write operations shared by all component kinds."""

    style: Style
    children: tuple[Component, ...]

    def with_children(self, children: Iterable[Component]) -> Self:
        """Return a copy with the given children."""
        return replace(self, children=tuple(children))

    def with_style(self, style: Style) -> Self:
        """Return a copy with the given own style."""
        return replace(self, style=style)

    def append(self, child: Component) -> Self:
        """Return a copy with one more trailing child."""
        return replace(self, children=(*self.children, child))

    def depth_first(self) -> Iterator[Component]:
        """Traverse tree depth-first, yielding self then children."""
        yield self
        for child in self.children:
            yield from child.depth_first()

    def split(self, pattern: str | re.Pattern[str]) -> list[Component]:
        """Split this component on a delimiter pattern.

        See richtext.splitting.engine.split().
        """
        from richtext.splitting.engine import split

        return split(self, pattern)


@dataclass(frozen=True)
class TextComponent(_ComponentOps):
    """A component holding literal text."""

    content: str = ""
    style: Style = field(default_factory=Style.empty)
    children: tuple[Component, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable (lists in particular) but always store a tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class ContainerComponent(_ComponentOps):
    """A component without content, used to group and style children."""

    style: Style = field(default_factory=Style.empty)
    children: tuple[Component, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


Component = Union[TextComponent, ContainerComponent]

COMPONENT_TYPES = (TextComponent, ContainerComponent)


def text(
    content: str,
    style: Style | None = None,
    children: Iterable[Component] = (),
) -> TextComponent:
    """Create a literal text component."""
    return TextComponent(
        content=content,
        style=style if style is not None else Style.empty(),
        children=tuple(children),
    )


def empty() -> TextComponent:
    """Create an empty text component (no content, no style, no children)."""
    return TextComponent()


def container(
    style: Style | None = None,
    children: Iterable[Component] = (),
) -> ContainerComponent:
    """Create a container component."""
    return ContainerComponent(
        style=style if style is not None else Style.empty(),
        children=tuple(children),
    )


def is_empty(component: Component) -> bool:
    """Check if the component has neither content nor children.

    Containers are never empty: they may still carry meaning through their
    style even when they hold nothing.
    """
    return (
        isinstance(component, TextComponent)
        and not component.content
        and not component.children
    )


def plain_text(component: Component) -> str:
    """Render the literal content of a tree in document order, without styling."""
    return "".join(
        node.content
        for node in component.depth_first()
        if isinstance(node, TextComponent)
    )
