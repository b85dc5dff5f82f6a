"""algorithm subpackage: public API for the similarity engine.

Provides the weighted dot product, the induced norm, cosine similarity and
the weight configuration.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from dom_similarity.algorithm import WeightConfig, cosine_similarity

    score = cosine_similarity(anchor_vec, candidate_vec, WeightConfig())
    # 0.0 <= score <= 1.0, or NaN for a zero-norm vector
"""

from __future__ import annotations

from dom_similarity.algorithm.config import FEATURE_FIELDS, WeightConfig
from dom_similarity.algorithm.similarity import (
    components,
    cosine_similarity,
    dot_product,
    is_defined,
    norm,
)

__all__ = [
    "FEATURE_FIELDS",
    "WeightConfig",
    "components",
    "cosine_similarity",
    "dot_product",
    "is_defined",
    "norm",
]
