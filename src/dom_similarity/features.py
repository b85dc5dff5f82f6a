"""FeatureVector and FeatureExtractor: the structural fingerprint of an element.

A FeatureVector summarises one element of a parsed HTML document: its tag
name, its parent's tag name, the tag names of its child elements, its
attributes, how many siblings it has and, when a layout provider knows it,
its rendered size.  Vectors are plain immutable data with no reference back
to the element they were extracted from.

Tag names are upper-cased to match the DOM ``nodeName`` of HTML elements.
Only element nodes count as children or siblings; text and comment nodes are
ignored.
"""

from __future__ import annotations

from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

from dom_similarity.errors import LayoutError, MissingParentError
from dom_similarity.protocols import LayoutProvider

__all__ = ["FeatureExtractor", "FeatureVector", "extract_features"]


@dataclass(frozen=True, slots=True)
class FeatureVector:
    """Structural fingerprint of one element.

    Attributes:
        node:              Tag name of the element.
        parent:            Tag name of the element's parent.
        children:          Tag names of the child elements, in document order.
        children_length:   Number of child elements.
        siblings_length:   Number of the parent's child elements (self included).
        attributes:        Interleaved ``(name, value, name, value, ...)`` pairs
                           in attribute order.
        attributes_length: Number of entries in ``attributes``, i.e. twice the
                           number of attributes.
        width:             Rendered width, or None when unknown.
        height:            Rendered height, or None when unknown.
    """

    node: str
    parent: str
    children: tuple[str, ...]
    children_length: int
    siblings_length: int
    attributes: tuple[str, ...]
    attributes_length: int
    width: float | None = None
    height: float | None = None

    def __post_init__(self) -> None:
        if len(self.children) != self.children_length:
            msg = (
                f"children_length={self.children_length} does not match "
                f"{len(self.children)} children"
            )
            raise ValueError(msg)
        if len(self.attributes) != self.attributes_length:
            msg = (
                f"attributes_length={self.attributes_length} does not match "
                f"{len(self.attributes)} attribute entries"
            )
            raise ValueError(msg)


def _tag_name(element: Tag) -> str:
    return element.name.upper()


def _child_elements(element: Tag) -> list[Tag]:
    return [child for child in element.children if isinstance(child, Tag)]


def _attribute_value(value: object) -> str | None:
    """Render a BeautifulSoup attribute value as its DOM string value."""
    if value is None:
        return None
    # Multi-valued attributes (class, rel, ...) arrive as lists of tokens.
    if isinstance(value, (list, tuple)):
        return " ".join(str(token) for token in value)
    return str(value)


@dataclass
class FeatureExtractor:
    """Maps a BeautifulSoup element to its FeatureVector.

    Extraction reads the element and its immediate neighbourhood only and
    never modifies the document.

    Attributes:
        layout: Optional LayoutProvider supplying rendered width and height.
            Without one, ``width`` and ``height`` are left as None.

    Example::

        soup = BeautifulSoup("<ul><li id='a'>x</li><li>y</li></ul>", "html.parser")
        vec = FeatureExtractor().extract(soup.li)
        # vec.node == "LI", vec.parent == "UL", vec.siblings_length == 2
        # vec.attributes == ("id", "a"), vec.attributes_length == 2
    """

    layout: LayoutProvider | None = None

    def extract(self, element: Tag) -> FeatureVector:
        """Extract the FeatureVector of ``element``.

        Args:
            element: An element inside a parsed document.

        Returns:
            The element's FeatureVector.

        Raises:
            TypeError: If ``element`` is not an element (e.g. a text node or
                the document itself).
            MissingParentError: If ``element`` is the document root or is
                detached, so it has no parent element.
            LayoutError: If the layout provider raises for ``element``.
        """
        if not isinstance(element, Tag) or isinstance(element, BeautifulSoup):
            msg = f"expected an element, got {type(element).__name__}"
            raise TypeError(msg)

        children = tuple(_tag_name(child) for child in _child_elements(element))

        parent = element.parent
        # The document node is not an element: the root has no parent element.
        if parent is None or isinstance(parent, BeautifulSoup):
            raise MissingParentError(_tag_name(element))

        attributes: list[str] = []
        for name, raw in element.attrs.items():
            value = _attribute_value(raw)
            if value is None:
                continue
            attributes.append(name)
            attributes.append(value)

        width: float | None = None
        height: float | None = None
        if self.layout is not None:
            try:
                size = self.layout.dimensions(element)
                if size is not None:
                    width, height = float(size[0]), float(size[1])
            except Exception as exc:
                raise LayoutError(_tag_name(element), exc) from exc

        return FeatureVector(
            node=_tag_name(element),
            parent=_tag_name(parent),
            children=children,
            children_length=len(children),
            siblings_length=len(_child_elements(parent)),
            attributes=tuple(attributes),
            attributes_length=len(attributes),
            width=width,
            height=height,
        )


def extract_features(
    element: Tag, layout: LayoutProvider | None = None
) -> FeatureVector:
    """Extract the FeatureVector of ``element``; see ``FeatureExtractor.extract``."""
    return FeatureExtractor(layout=layout).extract(element)
