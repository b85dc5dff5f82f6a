"""pytest plugin for dom-similarity.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from dom_similarity import WeightConfig, cosine_similarity, extract_features

if TYPE_CHECKING:
    from bs4 import Tag


@pytest.fixture(scope="session")
def assert_elements_similar() -> Any:
    """Fixture that returns a callable element similarity asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_rows_alike(assert_elements_similar):
            rows = soup.find_all("tr")
            assert_elements_similar(rows[0], rows[1])

    Returns:
        A callable ``_assert(anchor, candidate, threshold=0.9, weights=None) -> None``
        that raises ``AssertionError`` unless the similarity is above threshold.
    """

    def _assert(
        anchor: Tag,
        candidate: Tag,
        threshold: float = 0.9,
        weights: WeightConfig | None = None,
    ) -> None:
        """Assert that two elements are structurally similar.

        Raises:
            AssertionError: When the similarity is NaN or not strictly above
                threshold, with a message including both feature vectors.
        """
        config = weights if weights is not None else WeightConfig().without_layout()
        left = extract_features(anchor)
        right = extract_features(candidate)
        score = cosine_similarity(left, right, config)
        if not score > threshold:
            raise AssertionError(
                f"elements not similar: "
                f"similarity={score:.4f} <= threshold={threshold}\n"
                f"  anchor:    {left}\n"
                f"  candidate: {right}"
            )

    return _assert
