"""Tests for the Match dataclass."""

from __future__ import annotations

import math
from dataclasses import FrozenInstanceError

import pytest
from bs4 import BeautifulSoup

from dom_similarity.result import Match


@pytest.fixture()
def element():  # type: ignore[no-untyped-def]
    return BeautifulSoup("<ul><li>x</li></ul>", "html.parser").li


class TestMatch:
    def test_fields(self, element) -> None:  # type: ignore[no-untyped-def]
        m = Match(element=element, score=0.5)
        assert m.element is element
        assert m.score == 0.5

    def test_unpacks_as_pair(self, element) -> None:  # type: ignore[no-untyped-def]
        el, score = Match(element, 0.25)
        assert el is element
        assert score == 0.25

    def test_frozen(self, element) -> None:  # type: ignore[no-untyped-def]
        m = Match(element, 0.5)
        with pytest.raises(FrozenInstanceError):
            m.score = 1.0  # type: ignore[misc]

    def test_is_defined(self, element) -> None:  # type: ignore[no-untyped-def]
        assert Match(element, 0.0).is_defined
        assert not Match(element, math.nan).is_defined
