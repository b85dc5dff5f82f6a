"""WeightConfig: per-feature weights for the similarity engine.

WeightConfig is a frozen (immutable) dataclass holding one non-negative
weight per FeatureVector field.  Weights live here and only here; feature
vectors carry plain values and are weighted uniformly during scoring.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace

import numpy as np

__all__ = ["FEATURE_FIELDS", "LAYOUT_FIELDS", "SEQUENCE_FIELDS", "WeightConfig"]

# Summation order of the dot product components.
FEATURE_FIELDS: tuple[str, ...] = (
    "node",
    "parent",
    "children_length",
    "siblings_length",
    "attributes_length",
    "width",
    "height",
    "children",
    "attributes",
)

SEQUENCE_FIELDS: frozenset[str] = frozenset({"children", "attributes"})
LAYOUT_FIELDS: frozenset[str] = frozenset({"width", "height"})


@dataclass(frozen=True, slots=True)
class WeightConfig:
    """Immutable weight configuration for the weighted dot product.

    The defaults favour structure over naming: matching child tags, matching
    attribute pairs and an equal child count dominate, while the element and
    parent tag names barely register (candidates already share a tag name).

    Attributes:
        node: Weight of the element's own tag name.
        parent: Weight of the parent's tag name.
        children: Weight applied once to the positional child-tag match count.
        children_length: Weight of an equal child count.
        siblings_length: Weight of an equal sibling count.
        attributes: Weight applied once to the positional attribute match count.
        attributes_length: Weight of an equal attribute-entry count.
        width: Weight of an equal rendered width.
        height: Weight of an equal rendered height.
    """

    node: float = 0.1
    parent: float = 0.1
    children: float = 100.0
    children_length: float = 100.0
    siblings_length: float = 1.0
    attributes: float = 100.0
    attributes_length: float = 10.0
    width: float = 20.0
    height: float = 20.0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                msg = f"{f.name} weight must be finite, got {value}"
                raise ValueError(msg)
            if value < 0.0:
                msg = f"{f.name} weight must be >= 0.0, got {value}"
                raise ValueError(msg)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float]) -> WeightConfig:
        """Build a config from a mapping of field name to weight.

        Fields missing from ``mapping`` keep their default weight.

        Raises:
            ValueError: If ``mapping`` names a field that does not exist.
        """
        unknown = set(mapping) - set(FEATURE_FIELDS)
        if unknown:
            msg = f"unknown feature weights: {sorted(unknown)}"
            raise ValueError(msg)
        return cls(**{name: float(value) for name, value in mapping.items()})

    def without_layout(self) -> WeightConfig:
        """Return a copy with the width and height weights set to zero."""
        return replace(self, width=0.0, height=0.0)

    def as_array(self, names: Sequence[str] = FEATURE_FIELDS) -> np.ndarray:
        """Return the weights of ``names`` as a float64 vector, in order."""
        return np.array([getattr(self, name) for name in names], dtype=np.float64)
