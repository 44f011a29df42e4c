"""Exception types raised by the hex coordinate and layout engine."""

from __future__ import annotations


class HexError(Exception):
    """Base class for all hexlattice errors."""


class InvalidCoordinate(HexError, ValueError):
    """Raised when coordinates do not describe a valid cube position."""


class InvalidDirection(HexError, ValueError):
    """Raised when a neighbor direction falls outside ``0..5``."""


class MissingContext(HexError, LookupError):
    """Raised when a pixel-space query is made on a hex with no layout."""
