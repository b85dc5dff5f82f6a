"""ElementMatcher: orchestrator that wires FeatureExtractor + similarity engine.

Architecture:
- match() extracts the anchor's FeatureVector once, enumerates every element
  of the document sharing the anchor's tag name, extracts each candidate's
  vector and scores it against the anchor with ``cosine_similarity``.
- Candidates are returned in document order as ``Match`` objects; there is
  no sorting and no thresholding (see ``api.filter_matches``).
- A candidate whose extraction fails is logged and skipped; a failure never
  aborts the rest of the scan.  Anchor failures propagate.
- Without a layout provider the width/height weights are zeroed so that
  missing sizes are omitted from the score rather than counted as mismatches.
"""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING

from dom_similarity.algorithm.config import WeightConfig
from dom_similarity.algorithm.similarity import cosine_similarity, is_defined
from dom_similarity.errors import DomSimilarityError, UndefinedScoreWarning
from dom_similarity.features import FeatureExtractor
from dom_similarity.result import Match

if TYPE_CHECKING:
    from bs4 import Tag

    from dom_similarity.protocols import LayoutProvider

__all__ = ["ElementMatcher"]

logger = logging.getLogger(__name__)


def _document_root(element: Tag) -> Tag:
    root = element
    while root.parent is not None:
        root = root.parent
    return root


class ElementMatcher:
    """Finds elements structurally similar to an anchor element.

    The matcher holds only immutable configuration, so one instance can be
    reused across documents and anchors.

    Example::

        from bs4 import BeautifulSoup
        from dom_similarity.matcher import ElementMatcher

        soup = BeautifulSoup(html, "html.parser")
        anchor = soup.select("tr.athing")[0]
        for element, score in ElementMatcher().match(anchor):
            print(score, element.get("id"))
    """

    def __init__(
        self,
        weights: WeightConfig | None = None,
        layout: LayoutProvider | None = None,
    ) -> None:
        """Initialise the matcher.

        Args:
            weights: Per-feature weights.  Defaults to ``WeightConfig()``.
            layout:  Optional LayoutProvider for rendered width/height.  When
                None, width and height are dropped from the score.
        """
        config = weights if weights is not None else WeightConfig()
        self._weights: WeightConfig = (
            config if layout is not None else config.without_layout()
        )
        self._extractor = FeatureExtractor(layout=layout)

    @property
    def weights(self) -> WeightConfig:
        """The weights actually used for scoring."""
        return self._weights

    def match(self, anchor: Tag, document: Tag | None = None) -> list[Match]:
        """Score every element sharing the anchor's tag name.

        Args:
            anchor:   The element to find look-alikes of.
            document: Element or document to search.  Defaults to the
                anchor's document root.

        Returns:
            One ``Match`` per scored candidate, in document order.  The anchor
            itself is included when it lies inside ``document``.

        Raises:
            MissingParentError: If the anchor has no parent element.
            LayoutError: If the layout provider fails for the anchor.
            TypeError: If the anchor is not an element.
        """
        return self._score(anchor, document, stacklevel=3)

    def _score(
        self, anchor: Tag, document: Tag | None, stacklevel: int
    ) -> list[Match]:
        # stacklevel is counted from this frame, so UndefinedScoreWarning
        # points at the caller of the public entry point.
        anchor_features = self._extractor.extract(anchor)
        scope = document if document is not None else _document_root(anchor)
        candidates = scope.find_all(anchor.name)
        logger.debug(
            "scoring %d <%s> candidates", len(candidates), anchor_features.node
        )

        results: list[Match] = []
        for candidate in candidates:
            try:
                features = self._extractor.extract(candidate)
            except DomSimilarityError as exc:
                logger.warning("skipping candidate <%s>: %s", candidate.name, exc)
                continue

            score = cosine_similarity(anchor_features, features, self._weights)
            if not is_defined(score):
                logger.warning(
                    "undefined similarity for <%s>: zero-norm feature vector",
                    candidate.name,
                )
                warnings.warn(
                    f"similarity of <{candidate.name}> is undefined "
                    "(zero-norm feature vector)",
                    UndefinedScoreWarning,
                    stacklevel=stacklevel,
                )
            results.append(Match(element=candidate, score=score))
        return results
