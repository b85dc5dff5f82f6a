"""LayoutProvider Protocol for the rendered-size extension point.

Parsed documents carry no layout, so rendered width and height come from a
pluggable provider.  Any object with a conformant ``dimensions`` method
passes ``isinstance`` checks; no inheritance is required.

Example::

    from dom_similarity.protocols import LayoutProvider

    class FixedLayout:
        def dimensions(self, element):
            return (320.0, 24.0)

    assert isinstance(FixedLayout(), LayoutProvider)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bs4 import Tag


@runtime_checkable
class LayoutProvider(Protocol):
    """Structural protocol for rendered-size sources.

    ``dimensions`` returns ``(width, height)`` for the element, or ``None``
    when the size of that element is unknown.
    """

    def dimensions(self, element: Tag) -> tuple[float, float] | None: ...
