"""dom-similarity - find DOM elements structurally similar to an anchor element."""

from __future__ import annotations

from dom_similarity.algorithm.config import WeightConfig
from dom_similarity.algorithm.similarity import (
    cosine_similarity,
    dot_product,
    is_defined,
    norm,
)
from dom_similarity.api import (
    filter_matches,
    matcher,
    parse_document,
    similar_elements,
)
from dom_similarity.errors import (
    DomSimilarityError,
    LayoutError,
    MissingParentError,
    UndefinedScoreWarning,
)
from dom_similarity.features import FeatureExtractor, FeatureVector, extract_features
from dom_similarity.layout import InlineStyleLayout
from dom_similarity.matcher import ElementMatcher
from dom_similarity.protocols import LayoutProvider
from dom_similarity.result import Match

__version__: str = "0.1.0"
__all__: list[str] = [
    "DomSimilarityError",
    "ElementMatcher",
    "FeatureExtractor",
    "FeatureVector",
    "InlineStyleLayout",
    "LayoutError",
    "LayoutProvider",
    "Match",
    "MissingParentError",
    "UndefinedScoreWarning",
    "WeightConfig",
    "cosine_similarity",
    "dot_product",
    "extract_features",
    "filter_matches",
    "is_defined",
    "matcher",
    "norm",
    "parse_document",
    "similar_elements",
]
