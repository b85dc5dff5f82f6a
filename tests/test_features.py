"""Tests for FeatureVector and FeatureExtractor.

Covers:
- Tag names (upper-cased element, parent and child names)
- Child enumeration (elements only, document order)
- Sibling count
- Interleaved attribute extraction, multi-valued and None-valued attributes
- Missing parent (document root, detached element)
- Non-element input
- Optional layout dimensions
- FeatureVector invariants and immutability
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest
from bs4 import BeautifulSoup, Tag

from dom_similarity.errors import DomSimilarityError, LayoutError, MissingParentError
from dom_similarity.features import FeatureExtractor, FeatureVector, extract_features

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

TABLE = """
<table>
  <tbody>
    <tr class="athing" id="1"><td>1.</td><td><a href="/a">First</a></td></tr>
    <tr><td colspan="2">meta</td></tr>
    <tr class="athing" id="2"><td>2.</td><td><a href="/b">Second</a></td></tr>
  </tbody>
</table>
"""


def _soup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


class _BrokenLayout:
    def dimensions(self, element: Tag) -> tuple[float, float] | None:
        raise KeyError("box")


class _FixedLayout:
    def __init__(self, size: tuple[float, float] | None) -> None:
        self.size = size

    def dimensions(self, element: Tag) -> tuple[float, float] | None:
        return self.size


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class TestTagNames:
    def test_node_is_upper_case(self) -> None:
        vec = extract_features(_soup(TABLE).find("tr"))
        assert vec.node == "TR"

    def test_parent_is_upper_case(self) -> None:
        vec = extract_features(_soup(TABLE).find("tr"))
        assert vec.parent == "TBODY"


class TestChildren:
    def test_child_tag_names_in_order(self) -> None:
        vec = extract_features(_soup("<div><p><span>a</span><em>b</em><span>c</span></p></div>").p)
        assert vec.children == ("SPAN", "EM", "SPAN")
        assert vec.children_length == 3

    def test_text_and_comments_ignored(self) -> None:
        soup = _soup("<div><p>text <!-- note --> <b>x</b> tail</p></div>")
        vec = extract_features(soup.p)
        assert vec.children == ("B",)
        assert vec.children_length == 1

    def test_only_immediate_children(self) -> None:
        vec = extract_features(_soup(TABLE).find("tr"))
        assert vec.children == ("TD", "TD")

    def test_leaf_has_no_children(self) -> None:
        vec = extract_features(_soup("<div><br></div>").br)
        assert vec.children == ()
        assert vec.children_length == 0


class TestSiblings:
    def test_counts_parent_child_elements_including_self(self) -> None:
        vec = extract_features(_soup(TABLE).find("tr"))
        assert vec.siblings_length == 3

    def test_only_child(self) -> None:
        vec = extract_features(_soup("<ul><li>x</li></ul>").li)
        assert vec.siblings_length == 1


class TestAttributes:
    def test_interleaved_name_value_pairs(self) -> None:
        vec = extract_features(_soup('<div><span id="x" class="y"></span></div>').span)
        assert vec.attributes == ("id", "x", "class", "y")
        assert vec.attributes_length == 4

    def test_attributes_length_is_twice_attribute_count(self) -> None:
        vec = extract_features(_soup('<div><a href="/a" title="t" rel="r"></a></div>').a)
        assert vec.attributes_length == 6

    def test_multi_valued_class_joined(self) -> None:
        vec = extract_features(_soup('<div><p class="a  b c"></p></div>').p)
        assert vec.attributes == ("class", "a b c")

    def test_boolean_attribute_kept_with_empty_value(self) -> None:
        vec = extract_features(_soup("<form><input disabled></form>").input)
        assert vec.attributes == ("disabled", "")

    def test_none_valued_attribute_skipped(self) -> None:
        soup = _soup('<div><p id="x"></p></div>')
        soup.p.attrs["hidden"] = None
        vec = extract_features(soup.p)
        assert vec.attributes == ("id", "x")
        assert vec.attributes_length == 2

    def test_no_attributes(self) -> None:
        vec = extract_features(_soup("<div><p></p></div>").p)
        assert vec.attributes == ()
        assert vec.attributes_length == 0


# ---------------------------------------------------------------------------
# Failure modes
# ---------------------------------------------------------------------------


class TestMissingParent:
    def test_document_root_raises(self) -> None:
        soup = _soup("<html><body></body></html>")
        with pytest.raises(MissingParentError, match="<HTML>"):
            extract_features(soup.html)

    def test_detached_element_raises(self) -> None:
        tag = _soup("").new_tag("div")
        with pytest.raises(MissingParentError):
            extract_features(tag)

    def test_is_a_dom_similarity_error(self) -> None:
        tag = _soup("").new_tag("div")
        with pytest.raises(DomSimilarityError):
            extract_features(tag)

    def test_error_carries_tag_name(self) -> None:
        tag = _soup("").new_tag("section")
        with pytest.raises(MissingParentError) as excinfo:
            extract_features(tag)
        assert excinfo.value.tag_name == "SECTION"


class TestNonElementInput:
    def test_document_rejected(self) -> None:
        with pytest.raises(TypeError, match="BeautifulSoup"):
            extract_features(_soup("<p></p>"))  # type: ignore[arg-type]

    def test_text_node_rejected(self) -> None:
        text = _soup("<div><p>hello</p></div>").p.string
        with pytest.raises(TypeError):
            extract_features(text)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class TestLayout:
    def test_no_layout_leaves_sizes_unknown(self) -> None:
        vec = extract_features(_soup(TABLE).find("tr"))
        assert vec.width is None
        assert vec.height is None

    def test_layout_sizes_recorded(self) -> None:
        extractor = FeatureExtractor(layout=_FixedLayout((320, 24)))
        vec = extractor.extract(_soup(TABLE).find("tr"))
        assert vec.width == 320.0
        assert vec.height == 24.0

    def test_provider_failure_wrapped(self) -> None:
        extractor = FeatureExtractor(layout=_BrokenLayout())
        with pytest.raises(LayoutError, match="<TR>") as excinfo:
            extractor.extract(_soup(TABLE).find("tr"))
        assert isinstance(excinfo.value, DomSimilarityError)
        assert isinstance(excinfo.value.__cause__, KeyError)
        assert excinfo.value.tag_name == "TR"

    def test_unknown_size_from_layout(self) -> None:
        extractor = FeatureExtractor(layout=_FixedLayout(None))
        vec = extractor.extract(_soup(TABLE).find("tr"))
        assert vec.width is None
        assert vec.height is None


# ---------------------------------------------------------------------------
# FeatureVector
# ---------------------------------------------------------------------------


class TestFeatureVector:
    def test_equal_rows_extract_equal_vectors(self) -> None:
        rows = _soup(TABLE).find_all("tr", class_="athing")
        left = extract_features(rows[0])
        right = extract_features(rows[1])
        assert left.children == right.children
        assert left.attributes != right.attributes  # ids differ

    def test_frozen(self) -> None:
        vec = extract_features(_soup(TABLE).find("tr"))
        with pytest.raises(FrozenInstanceError):
            vec.node = "TD"  # type: ignore[misc]

    def test_children_length_mismatch_rejected(self) -> None:
        with pytest.raises(ValueError, match="children_length"):
            FeatureVector(
                node="TR",
                parent="TBODY",
                children=("TD",),
                children_length=2,
                siblings_length=1,
                attributes=(),
                attributes_length=0,
            )

    def test_attributes_length_mismatch_rejected(self) -> None:
        with pytest.raises(ValueError, match="attributes_length"):
            FeatureVector(
                node="TR",
                parent="TBODY",
                children=(),
                children_length=0,
                siblings_length=1,
                attributes=("id", "x"),
                attributes_length=1,
            )

    def test_extraction_does_not_modify_document(self) -> None:
        soup = _soup(TABLE)
        before = str(soup)
        for row in soup.find_all("tr"):
            extract_features(row)
        assert str(soup) == before
