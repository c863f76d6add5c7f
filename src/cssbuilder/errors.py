"""Error types raised by the selector builder and the JSON helpers."""

from __future__ import annotations

from enum import Enum

from cssbuilder.model import FragmentKind

DUPLICATE_MESSAGE = (
    "Element and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class ErrorKind(Enum):
    """Which selector construction rule was violated."""

    DUPLICATE_FRAGMENT = "duplicate_fragment"
    OUT_OF_ORDER = "out_of_order"


class SelectorError(Exception):
    """Base class for selector construction failures.

    Attributes:
        kind: The rule that was violated.
        fragment: The fragment kind whose addition failed, if any.
    """

    kind: ErrorKind

    def __init__(self, message: str, fragment: FragmentKind | None = None) -> None:
        self.fragment = fragment
        super().__init__(message)


class DuplicateFragment(SelectorError):
    """Raised when element or pseudo-element is added a second time."""

    kind = ErrorKind.DUPLICATE_FRAGMENT

    def __init__(self, fragment: FragmentKind) -> None:
        super().__init__(f"{DUPLICATE_MESSAGE} (duplicate {fragment.value})", fragment)


class OutOfOrder(SelectorError):
    """Raised when a fragment is added after a strictly later kind.

    ``conflict`` is the later kind that was already present, or ``None``
    when the builder already holds a combined selector.
    """

    kind = ErrorKind.OUT_OF_ORDER

    def __init__(
        self,
        fragment: FragmentKind | None,
        conflict: FragmentKind | None = None,
        message: str = ORDER_MESSAGE,
    ) -> None:
        self.conflict = conflict
        if fragment is not None and conflict is not None:
            message = f"{message} ({fragment.value} after {conflict.value})"
        super().__init__(message, fragment)


class ParseError(Exception):
    """Raised when JSON text cannot be decoded into a record."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
