"""Selector fragment kinds and the Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """One of the six selector component categories, in CSS order.

    Declaration order is the required order inside a compound selector:
    element, id, class, attribute, pseudo-class, pseudo-element.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def single(self) -> bool:
        """True for kinds that occupy a single slot instead of a sequence."""
        return self in (FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT)

    @property
    def unique(self) -> bool:
        """True for kinds that may not be added twice to the same selector."""
        return self in (FragmentKind.ELEMENT, FragmentKind.PSEUDO_ELEMENT)

    def decorate(self, token: str) -> str:
        prefix, suffix = _DECORATIONS[self]
        return f"{prefix}{token}{suffix}"

    def later_kinds(self) -> list[FragmentKind]:
        return [kind for kind in FragmentKind if kind.rank > self.rank]


_RANKS = {kind: index for index, kind in enumerate(FragmentKind)}

_DECORATIONS: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass
class Rectangle:
    """A width/height record with an area operation."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
