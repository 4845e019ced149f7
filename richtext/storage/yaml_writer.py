"""YAML writer for split results."""

import io
import re
from pathlib import Path

import ruamel.yaml
from ruamel.yaml.scalarstring import DoubleQuotedScalarString, LiteralScalarString

from richtext.components import Component, TextComponent, plain_text


def _format_text(value: str) -> str | LiteralScalarString | DoubleQuotedScalarString:
    """Use a literal block scalar (|-) for multiline text.

    Text holding a carriage return is double-quoted instead, since YAML
    normalizes line breaks inside block scalars.
    """
    if "\r" in value:
        return DoubleQuotedScalarString(value)
    if "\n" in value:
        return LiteralScalarString(value)
    return value


def component_to_dict(component: Component) -> dict:
    """Convert a component tree to a nested dictionary.

    Empty content, empty styles and empty child lists are left out.

    Args:
        component: The component to convert

    Returns:
        Dictionary with type and any of content, style, children that are set
    """
    if isinstance(component, TextComponent):
        result = {"type": "text"}
        if component.content:
            result["content"] = _format_text(component.content)
    else:
        result = {"type": "group"}

    attributes = component.style.to_attributes()
    if attributes:
        result["style"] = attributes

    if component.children:
        result["children"] = [component_to_dict(child) for child in component.children]

    return result


def generate_yaml_dict(parts: list[Component], pattern: str | re.Pattern[str]) -> dict:
    """Generate a dictionary describing a split result.

    Args:
        parts: The components returned by split()
        pattern: The delimiter the parts were split on

    Returns:
        Dictionary ready for YAML serialization
    """
    if isinstance(pattern, re.Pattern):
        pattern = pattern.pattern

    return {
        "pattern": pattern,
        "count": len(parts),
        "parts": [
            {
                "text": _format_text(plain_text(part)),
                "component": component_to_dict(part),
            }
            for part in parts
        ],
    }


def save_yaml(
    parts: list[Component],
    pattern: str | re.Pattern[str],
    output_file: Path,
) -> Path:
    """Save a split result as a YAML file.

    Args:
        parts: The components returned by split()
        pattern: The delimiter the parts were split on
        output_file: Destination path; parent directories are created

    Returns:
        Path to the saved file
    """
    output_file.parent.mkdir(parents=True, exist_ok=True)

    yaml_dict = generate_yaml_dict(parts, pattern)

    # Configure ruamel.yaml for proper formatting
    yaml = ruamel.yaml.YAML()
    yaml.default_flow_style = False
    yaml.indent(mapping=2, sequence=4, offset=2)  # indent-sequences: true
    yaml.width = 100
    yaml.explicit_start = True  # Add --- document start

    buffer = io.StringIO()
    yaml.dump(yaml_dict, buffer)
    content = buffer.getvalue()

    # Write with Unix line endings
    with open(output_file, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)

    return output_file
