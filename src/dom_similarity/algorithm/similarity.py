"""Weighted dot product, norm and cosine similarity over FeatureVectors.

Every component of the inner product is an exact-match indicator:

- Scalar fields contribute 1.0 when equal and 0.0 otherwise, numeric counts
  included ("same count", not "close count").
- ``width``/``height`` contribute 0.0 when either side is unknown.
- Sequence fields contribute the number of positions, up to the shorter
  sequence's length, holding equal values.  Tails beyond the shorter length
  contribute nothing.

    a . b = sum(w[f] * match(a, b, f) for f in FEATURE_FIELDS)

Each field's weight is applied once to its (possibly positional) match
value.  All terms are non-negative, so cosine similarity lies in [0, 1]
whenever both norms are non-zero.  A zero norm yields NaN; callers filtering
on a threshold must treat NaN as "no match" (see ``is_defined``).
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from dom_similarity.algorithm.config import (
    FEATURE_FIELDS,
    LAYOUT_FIELDS,
    SEQUENCE_FIELDS,
    WeightConfig,
)
from dom_similarity.features import FeatureVector

__all__ = ["components", "cosine_similarity", "dot_product", "is_defined", "norm"]

_DEFAULT_WEIGHTS = WeightConfig()


def _positional_matches(a: Sequence[str], b: Sequence[str]) -> int:
    # zip stops at the shorter sequence.
    return sum(1 for x, y in zip(a, b) if x == y)


def _scalar_match(a: object, b: object) -> float:
    return 1.0 if a == b else 0.0


def components(a: FeatureVector, b: FeatureVector) -> list[tuple[str, float]]:
    """Return the unweighted ``(field, match_value)`` pairs of ``a . b``.

    The list always holds one entry per field, in ``FEATURE_FIELDS`` order.
    """
    result: list[tuple[str, float]] = []
    for name in FEATURE_FIELDS:
        left = getattr(a, name)
        right = getattr(b, name)
        if name in SEQUENCE_FIELDS:
            value = float(_positional_matches(left, right))
        elif name in LAYOUT_FIELDS and (left is None or right is None):
            value = 0.0
        else:
            value = _scalar_match(left, right)
        result.append((name, value))
    return result


def dot_product(
    a: FeatureVector,
    b: FeatureVector,
    weights: WeightConfig | None = None,
) -> float:
    """Weighted inner product of two feature vectors.

    Args:
        a, b: Feature vectors to compare.
        weights: Per-field weights.  Defaults to ``WeightConfig()``.

    Returns:
        A non-negative float.
    """
    w = weights if weights is not None else _DEFAULT_WEIGHTS
    pairs = components(a, b)
    values = np.array([value for _, value in pairs], dtype=np.float64)
    return float(np.dot(values, w.as_array([name for name, _ in pairs])))


def norm(v: FeatureVector, weights: WeightConfig | None = None) -> float:
    """Norm induced by the weighted inner product: ``sqrt(v . v)``."""
    return math.sqrt(dot_product(v, v, weights))


def cosine_similarity(
    a: FeatureVector,
    b: FeatureVector,
    weights: WeightConfig | None = None,
) -> float:
    """Cosine similarity ``(a . b) / (|a| * |b|)``.

    Returns:
        A float in [0.0, 1.0], or NaN when either vector has zero norm
        under ``weights``.
    """
    numerator = np.float64(dot_product(a, b, weights))
    denominator = np.float64(norm(a, weights) * norm(b, weights))
    # 0/0 is NaN by definition here; silence numpy's RuntimeWarning.
    with np.errstate(divide="ignore", invalid="ignore"):
        score = numerator / denominator
    # Clip float rounding (e.g. 1.0000000000000002); NaN passes through.
    return float(np.clip(score, 0.0, 1.0))


def is_defined(score: float) -> bool:
    """Return False for a non-numeric (NaN) similarity score."""
    return not math.isnan(score)
