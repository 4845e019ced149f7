"""Style model for rich-text components."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from enum import Enum


class NamedColor(str, Enum):
    """The sixteen classic named text colors."""

    BLACK = "black"
    DARK_BLUE = "dark_blue"
    DARK_GREEN = "dark_green"
    DARK_AQUA = "dark_aqua"
    DARK_RED = "dark_red"
    DARK_PURPLE = "dark_purple"
    GOLD = "gold"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    BLUE = "blue"
    GREEN = "green"
    AQUA = "aqua"
    RED = "red"
    LIGHT_PURPLE = "light_purple"
    YELLOW = "yellow"
    WHITE = "white"


class MergeStrategy(Enum):
    """How attributes of a source style are combined into a target style."""

    ALWAYS = "always"  # source wins wherever it is set
    NEVER = "never"  # target is returned unchanged
    IF_ABSENT_ON_TARGET = "if_absent_on_target"  # source only fills gaps


DECORATIONS = ("bold", "italic", "underlined", "strikethrough", "obfuscated")

_BOOLEAN_VALUES = {"true": True, "false": False}


@dataclass(frozen=True)
class Style:
    """Own (non-inherited) formatting attributes of a component.

    Every attribute is ``None`` when unset. Decorations are tri-state so an
    explicit ``False`` can switch off a decoration inherited from a parent.
    """

    color: str | None = None
    """Named color (see NamedColor) or hex string like "#ff8800"."""

    bold: bool | None = None
    italic: bool | None = None
    underlined: bool | None = None
    strikethrough: bool | None = None
    obfuscated: bool | None = None

    font: str | None = None
    """Font key, e.g. "minecraft:uniform"."""

    insertion: str | None = None
    """Text inserted into the input field on shift-click."""

    @classmethod
    def empty(cls) -> Style:
        """Return a style with no attributes set."""
        return _EMPTY

    def is_empty(self) -> bool:
        """Check whether no attribute is set."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def merge(
        self,
        source: Style,
        strategy: MergeStrategy = MergeStrategy.ALWAYS,
    ) -> Style:
        """Merge attributes of another style into this one.

        Args:
            source: The style to take attributes from
            strategy: Which side wins for attributes set on both

        Returns:
            A new style; ``self`` is never modified
        """
        if strategy is MergeStrategy.NEVER or source.is_empty():
            return self

        changes = {}
        for f in fields(self):
            value = getattr(source, f.name)
            if value is None:
                continue
            if strategy is MergeStrategy.IF_ABSENT_ON_TARGET and getattr(self, f.name) is not None:
                continue
            changes[f.name] = value

        if not changes:
            return self
        return replace(self, **changes)

    def to_attributes(self) -> dict[str, str]:
        """Convert set attributes to a flat string mapping.

        Used by the markup and YAML writers. Booleans become "true"/"false".
        """
        result: dict[str, str] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, bool):
                result[f.name] = "true" if value else "false"
            elif isinstance(value, Enum):
                result[f.name] = value.value
            else:
                result[f.name] = str(value)
        return result

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> Style:
        """Build a style from a flat string mapping.

        Args:
            attributes: Mapping as produced by to_attributes()

        Returns:
            The parsed style

        Raises:
            ValueError: If a key is unknown or a decoration is not "true"/"false"
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, str | bool] = {}

        for key, raw in attributes.items():
            if key not in known:
                raise ValueError(f"Unknown style attribute: '{key}'")
            if key in DECORATIONS:
                flag = _BOOLEAN_VALUES.get(raw.strip().lower())
                if flag is None:
                    raise ValueError(
                        f"Invalid value for '{key}': '{raw}'. Expected 'true' or 'false'"
                    )
                values[key] = flag
            elif key == "color":
                values[key] = _parse_color(raw)
            else:
                values[key] = raw

        return cls(**values)


def _parse_color(raw: str) -> str:
    """Return the NamedColor member for a known name, else the raw string."""
    try:
        return NamedColor(raw)
    except ValueError:
        return raw


def style(
    *decorations: str,
    color: str | None = None,
    font: str | None = None,
    insertion: str | None = None,
) -> Style:
    """Shorthand for building a style with decorations switched on.

    Example:
        style("bold", color=NamedColor.GOLD) == Style(color="gold", bold=True)
    """
    for name in decorations:
        if name not in DECORATIONS:
            raise ValueError(f"Unknown decoration: '{name}'")
    return Style(
        color=color,
        font=font,
        insertion=insertion,
        **{name: True for name in decorations},
    )


_EMPTY = Style()
