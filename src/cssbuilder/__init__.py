"""cssbuilder: fluent CSS selector builder plus small object helpers."""
from __future__ import annotations

from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import DuplicateFragment, ErrorKind, OutOfOrder, ParseError, SelectorError
from cssbuilder.factory import SelectorFactory, css_selector_builder
from cssbuilder.model import FragmentKind, Rectangle
from cssbuilder.serialization import from_json, to_json

__version__ = "0.1.0"

__all__ = [
    "CssBuilderConfig",
    "DuplicateFragment",
    "ErrorKind",
    "FragmentKind",
    "OutOfOrder",
    "ParseError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "SelectorFactory",
    "css_selector_builder",
    "from_json",
    "to_json",
]
