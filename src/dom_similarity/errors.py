"""Error and warning types raised by dom-similarity."""

from __future__ import annotations

__all__ = [
    "DomSimilarityError",
    "LayoutError",
    "MissingParentError",
    "UndefinedScoreWarning",
]


class DomSimilarityError(Exception):
    """Base error for all dom-similarity failures."""


class MissingParentError(DomSimilarityError):
    """The element has no parent element, so sibling features are undefined."""

    def __init__(self, tag_name: str) -> None:
        self.tag_name = tag_name
        super().__init__(f"element <{tag_name}> has no parent element")


class LayoutError(DomSimilarityError):
    """The layout provider failed to size an element."""

    def __init__(self, tag_name: str, reason: BaseException) -> None:
        self.tag_name = tag_name
        super().__init__(f"layout provider failed for <{tag_name}>: {reason!r}")


class UndefinedScoreWarning(RuntimeWarning):
    """A cosine similarity came out as NaN because a vector has zero norm."""
