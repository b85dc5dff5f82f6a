"""Match dataclass for matcher output."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bs4 import Tag

__all__ = ["Match"]


@dataclass(frozen=True, slots=True)
class Match:
    """One scored candidate.

    Attributes:
        element: The candidate element itself, so callers can act on it.
        score:   Cosine similarity to the anchor in [0.0, 1.0], or NaN when
                 undefined (zero-norm vector).
    """

    element: Tag
    score: float

    @property
    def is_defined(self) -> bool:
        """False when ``score`` is NaN."""
        return not math.isnan(self.score)

    def __iter__(self) -> Iterator[Any]:
        # Allows ``element, score = match``.
        yield self.element
        yield self.score
