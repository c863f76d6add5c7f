"""SelectorBuilder: fluent accumulator for compound and combined CSS selectors.

Syntax produced:
    element#id.class[attr]:pseudo-class::pseudo-element
    <selector> <combinator> <selector>
"""

from __future__ import annotations

import logging

from cssbuilder.errors import DuplicateFragment, OutOfOrder
from cssbuilder.model import FragmentKind

__all__ = ["SelectorBuilder"]

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Mutable accumulator for one selector expression.

    A builder is either *simple* (filled by the fragment-adding methods) or
    *combined* (filled by a single :meth:`combine` call). :meth:`render`
    produces the selector string and clears all state.
    """

    def __init__(self) -> None:
        self._fragments: dict[FragmentKind, list[str]] = {kind: [] for kind in FragmentKind}
        self._combined: str | None = None

    @classmethod
    def empty(cls) -> SelectorBuilder:
        return cls()

    # --- introspection ---------------------------------------------------------

    @property
    def is_combined(self) -> bool:
        return self._combined is not None

    @property
    def is_empty(self) -> bool:
        return self._combined is None and not any(self._fragments.values())

    # --- fragment-adding operations -------------------------------------------

    def element(self, name: str) -> SelectorBuilder:
        return self._add(FragmentKind.ELEMENT, name)

    def id(self, name: str) -> SelectorBuilder:
        return self._add(FragmentKind.ID, name)

    def class_(self, name: str) -> SelectorBuilder:
        return self._add(FragmentKind.CLASS, name)

    def attr(self, name: str) -> SelectorBuilder:
        return self._add(FragmentKind.ATTRIBUTE, name)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return self._add(FragmentKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return self._add(FragmentKind.PSEUDO_ELEMENT, name)

    def _add(self, kind: FragmentKind, token: str) -> SelectorBuilder:
        if self._combined is not None:
            logger.debug("Rejected %s %r: builder holds a combined selector", kind.value, token)
            raise OutOfOrder(kind, message="Cannot add fragments to a combined selector")
        slot = self._fragments[kind]
        if kind.unique and slot:
            logger.debug("Rejected %s %r: already present", kind.value, token)
            raise DuplicateFragment(kind)
        for later in kind.later_kinds():
            if self._fragments[later]:
                logger.debug("Rejected %s %r: %s already present", kind.value, token, later.value)
                raise OutOfOrder(kind, later)

        decorated = kind.decorate(token)
        if kind.single:
            slot[:] = [decorated]
        else:
            slot.append(decorated)
        return self

    # --- combination ------------------------------------------------------------

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Render *left* and *right* (consuming both) and join them with *combinator*."""
        if not self.is_empty:
            raise OutOfOrder(None, message="Cannot combine into a non-empty selector")
        self._combined = f"{left.render()} {combinator} {right.render()}"
        return self

    # --- rendering --------------------------------------------------------------

    def render(self) -> str:
        """Return the selector string and reset the builder.

        A second call without re-seeding returns an empty string.
        """
        if self._combined is not None:
            result = self._combined
        else:
            result = "".join("".join(self._fragments[kind]) for kind in FragmentKind)
        self._reset()
        logger.debug("Rendered selector %r", result)
        return result

    stringify = render

    def _reset(self) -> None:
        for slot in self._fragments.values():
            slot.clear()
        self._combined = None

    def __repr__(self) -> str:
        if self._combined is not None:
            return f"SelectorBuilder(combined={self._combined!r})"
        parts = "".join("".join(self._fragments[kind]) for kind in FragmentKind)
        return f"SelectorBuilder({parts!r})"
