"""Tests for FragmentKind and Rectangle."""

import pytest

from cssbuilder import FragmentKind, Rectangle


class TestFragmentKind:
    def test_rank_follows_css_order(self):
        kinds = sorted(FragmentKind, key=lambda k: k.rank)
        assert kinds == [
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.CLASS,
            FragmentKind.ATTRIBUTE,
            FragmentKind.PSEUDO_CLASS,
            FragmentKind.PSEUDO_ELEMENT,
        ]

    def test_later_kinds(self):
        assert FragmentKind.PSEUDO_CLASS.later_kinds() == [FragmentKind.PSEUDO_ELEMENT]
        assert FragmentKind.PSEUDO_ELEMENT.later_kinds() == []
        assert len(FragmentKind.ELEMENT.later_kinds()) == 5

    def test_unique_kinds(self):
        assert {k for k in FragmentKind if k.unique} == {
            FragmentKind.ELEMENT,
            FragmentKind.PSEUDO_ELEMENT,
        }

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (FragmentKind.ELEMENT, "x"),
            (FragmentKind.ID, "#x"),
            (FragmentKind.CLASS, ".x"),
            (FragmentKind.ATTRIBUTE, "[x]"),
            (FragmentKind.PSEUDO_CLASS, ":x"),
            (FragmentKind.PSEUDO_ELEMENT, "::x"),
        ],
    )
    def test_decorate(self, kind, expected):
        assert kind.decorate("x") == expected


class TestRectangle:
    def test_fields_and_area(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20
        assert r.area() == 200

    def test_area_tracks_mutation(self):
        r = Rectangle(2, 3)
        r.width = 5
        assert r.area() == 15
