"""InlineStyleLayout: rendered sizes read from the markup itself.

Without a layout engine the only size information in a parsed document is
what the author wrote down: ``width``/``height`` declarations in the inline
``style`` attribute, or the legacy ``width``/``height`` attributes of
tables, cells and images.  Only pixel and unitless lengths are understood;
anything else (percentages, ``em``, ``auto``) is treated as unknown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import tinycss2

if TYPE_CHECKING:
    from bs4 import Tag

__all__ = ["InlineStyleLayout"]

_SIZE_PROPERTIES = ("width", "height")
_IGNORED_TOKENS = frozenset({"whitespace", "comment"})


def _pixels(tokens: list) -> float | None:
    """Return the pixel length held by a component value list, if any."""
    values = [t for t in tokens if t.type not in _IGNORED_TOKENS]
    if len(values) != 1:
        return None
    token = values[0]
    if token.type == "dimension" and token.lower_unit == "px":
        return float(token.value)
    if token.type == "number":
        return float(token.value)
    return None


def _attribute_pixels(raw: object) -> float | None:
    if not isinstance(raw, str):
        return None
    return _pixels(tinycss2.parse_component_value_list(raw, skip_comments=True))


class InlineStyleLayout:
    """LayoutProvider reading pixel sizes from inline styles and attributes.

    Inline style declarations win over the ``width``/``height`` attributes;
    within the style, the last valid declaration of a property wins and
    ``!important`` is ignored.  ``dimensions`` returns ``None`` unless both a
    width and a height resolve.
    """

    def dimensions(self, element: Tag) -> tuple[float, float] | None:
        sizes: dict[str, float | None] = {
            prop: _attribute_pixels(element.get(prop)) for prop in _SIZE_PROPERTIES
        }
        style = element.get("style")
        if isinstance(style, str):
            declarations = tinycss2.parse_declaration_list(
                style, skip_comments=True, skip_whitespace=True
            )
            for decl in declarations:
                if decl.type != "declaration" or decl.lower_name not in sizes:
                    continue
                px = _pixels(decl.value)
                if px is not None:
                    sizes[decl.lower_name] = px

        width, height = sizes["width"], sizes["height"]
        if width is None or height is None:
            return None
        return (width, height)
