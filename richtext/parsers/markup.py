"""XML markup codec for component trees.

The markup is a small XML dialect with two elements:

```
<text color="green" bold="true">A line<text>of text</text></text>
<group italic="true"><text>one</text><text>two</text></group>
```

``<text>`` becomes a TextComponent whose content is the element's leading
text; ``<group>`` becomes a ContainerComponent. Style attributes are the
fields of Style, with decorations written as "true"/"false". Text following
a child element (its tail) becomes an unstyled TextComponent placed right
after that child. Whitespace is content: indentation between elements is
kept as text.
"""

from __future__ import annotations

from lxml import etree

from richtext.components import Component, ContainerComponent, TextComponent, text
from richtext.config import GROUP_TAG, MARKUP_TAGS, MAX_DEPTH, TEXT_TAG, validate_max_depth
from richtext.style import Style


class MarkupError(ValueError):
    """Raised when markup cannot be converted to a component tree."""


class UnknownElementError(MarkupError):
    """Raised when encountering an element that is not part of the markup."""

    def __init__(self, tag_name: str, context: str = "") -> None:
        """Initialize the error.

        Args:
            tag_name: The unknown tag name
            context: Additional context about where the element was found
        """
        self.tag_name = tag_name
        msg = f"Unknown element <{tag_name}>"
        if context:
            msg = f"{msg} in {context}"
        super().__init__(msg)


def get_tag_name(elem: etree._Element) -> str:
    """Get tag name without namespace prefix.

    Args:
        elem: XML element

    Returns:
        Tag name without namespace, or "" for comments and processing instructions
    """
    tag = elem.tag
    if isinstance(tag, str) and "}" in tag:
        return tag.split("}")[-1]
    return tag if isinstance(tag, str) else ""


def parse_markup(source: str | bytes, max_depth: int = MAX_DEPTH) -> Component:
    """Parse markup into a component tree.

    Args:
        source: The markup document
        max_depth: Maximum element nesting accepted

    Returns:
        The root component

    Raises:
        MarkupError: If the document is not well-formed, uses unknown
            elements or attributes, or nests deeper than max_depth
    """
    validate_max_depth(max_depth)
    if isinstance(source, str):
        source = source.encode("utf-8")

    # libxml2 stops at 256 levels unless huge_tree is set
    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=max_depth > MAX_DEPTH,
    )
    try:
        root = etree.fromstring(source, parser)
    except etree.XMLSyntaxError as e:
        raise MarkupError(f"Invalid markup: {e}") from e

    return _parse_element(root, 1, max_depth)


def _parse_element(elem: etree._Element, depth: int, max_depth: int) -> Component:
    """Convert one element and its subtree."""
    tag = get_tag_name(elem)
    if depth > max_depth:
        raise MarkupError(f"Markup nested deeper than {max_depth} levels at <{tag}>")
    if tag not in MARKUP_TAGS:
        context = f"line {elem.sourceline}" if elem.sourceline else ""
        raise UnknownElementError(tag or str(elem.tag), context)

    try:
        style = Style.from_attributes(dict(elem.attrib))
    except ValueError as e:
        raise MarkupError(f"Invalid attributes on <{tag}>: {e}") from e

    children: list[Component] = []
    if tag == GROUP_TAG and elem.text:
        children.append(text(elem.text))

    for child in elem:
        # Comments and processing instructions only contribute their tail
        if isinstance(child.tag, str):
            children.append(_parse_element(child, depth + 1, max_depth))
        if child.tail:
            children.append(text(child.tail))

    if tag == TEXT_TAG:
        return TextComponent(content=elem.text or "", style=style, children=tuple(children))
    return ContainerComponent(style=style, children=tuple(children))


def to_markup(component: Component) -> str:
    """Serialize a component tree to markup.

    parse_markup(to_markup(c)) == c holds for every tree.

    Raises:
        MarkupError: If the content holds characters XML cannot represent
    """
    try:
        elem = _build_element(component)
    except ValueError as e:
        raise MarkupError(f"Cannot serialize component: {e}") from e
    return etree.tostring(elem, encoding="unicode")


def _build_element(component: Component) -> etree._Element:
    if isinstance(component, TextComponent):
        elem = etree.Element(TEXT_TAG, attrib=component.style.to_attributes())
        if component.content:
            elem.text = component.content
    else:
        elem = etree.Element(GROUP_TAG, attrib=component.style.to_attributes())

    for child in component.children:
        elem.append(_build_element(child))
    return elem
