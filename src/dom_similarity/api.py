"""Public API functions for dom-similarity.

This module provides the user-facing functions: matcher, filter_matches,
similar_elements and parse_document.  Each call creates a fresh
ElementMatcher so no state is shared between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup

from dom_similarity.algorithm.config import WeightConfig
from dom_similarity.matcher import ElementMatcher
from dom_similarity.result import Match

if TYPE_CHECKING:
    from bs4 import Tag

    from dom_similarity.protocols import LayoutProvider

__all__ = ["filter_matches", "matcher", "parse_document", "similar_elements"]

DEFAULT_THRESHOLD = 0.9


def parse_document(markup: str | bytes, features: str = "html.parser") -> BeautifulSoup:
    """Parse HTML markup into a BeautifulSoup document.

    Args:
        markup:   HTML source.
        features: BeautifulSoup tree builder.  Defaults to the standard
                  library's ``html.parser``.
    """
    return BeautifulSoup(markup, features)


def matcher(
    anchor: Tag,
    weights: WeightConfig | None = None,
    layout: LayoutProvider | None = None,
    document: Tag | None = None,
) -> list[Match]:
    """Score every element sharing the anchor's tag name.

    Args:
        anchor:   The element to find look-alikes of.
        weights:  Per-feature weights.  Defaults to ``WeightConfig()``.
        layout:   Optional LayoutProvider for rendered width/height.
        document: Element or document to search.  Defaults to the anchor's
                  document root.

    Returns:
        All candidates with their scores, in document order, unfiltered.
    """
    m = ElementMatcher(weights=weights, layout=layout)
    return m._score(anchor, document, stacklevel=3)


def filter_matches(
    matches: Iterable[Match],
    threshold: float = DEFAULT_THRESHOLD,
) -> list[Match]:
    """Keep matches whose score is defined and strictly above ``threshold``.

    Order is preserved.  NaN scores never pass.
    """
    return [m for m in matches if m.is_defined and m.score > threshold]


def similar_elements(
    anchor: Tag,
    threshold: float = DEFAULT_THRESHOLD,
    weights: WeightConfig | None = None,
    layout: LayoutProvider | None = None,
    document: Tag | None = None,
) -> list[Match]:
    """Return the elements that look like ``anchor``.

    Equivalent to ``filter_matches(matcher(anchor, ...), threshold)``.

    Example::

        soup = parse_document(html)
        rows = similar_elements(soup.select("tr.athing")[0])
    """
    m = ElementMatcher(weights=weights, layout=layout)
    return filter_matches(
        m._score(anchor, document, stacklevel=3), threshold=threshold
    )
