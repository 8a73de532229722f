"""Custom exceptions for diagram construction and transformation.

Every error raised by the core is a programmer error (a contract
violation), surfaced immediately to the caller. Each subclass also derives
from the closest builtin exception so callers can catch either form.
"""

from __future__ import annotations


class DiagramError(Exception):
    """Base exception for all diagram-related errors."""


class DiagramValidationError(DiagramError, ValueError):
    """Raised when a factory receives malformed input.

    This error is raised when:
    - A polygon is built from fewer than 3 points
    - A path is built from fewer than 2 points
    - Coordinate or name sequences have mismatched lengths
    """


class NameCollisionError(DiagramValidationError):
    """Raised when a child or path name is already taken within a node."""

    def __init__(self, name: str, *, container: str) -> None:
        """Initialize collision error.

        Args:
            name: The duplicated name.
            container: What the name collided in ("children" or "paths").
        """
        self.name = name
        self.container = container
        super().__init__(f"Duplicate name {name!r} in {container}")


class StructuralTypeError(DiagramError, TypeError):
    """Raised when an operation is not permitted for a node's kind."""

    def __init__(self, message: str, *, kind: str | None = None) -> None:
        """Initialize structural error with the offending node kind.

        Args:
            message: Human-readable error description.
            kind: Kind of the node the operation was attempted on.
        """
        self.kind = kind
        if kind is not None:
            message = f"{message} (kind={kind})"
        super().__init__(message)


class UnsupportedOperationError(DiagramError, NotImplementedError):
    """Raised for operations that are defined but not implemented."""


class AnchorLookupError(DiagramError, LookupError):
    """Raised when an unknown anchor identifier is requested."""

    def __init__(self, anchor: object) -> None:
        self.anchor = anchor
        super().__init__(f"Unknown anchor {anchor!r}")


class EmptyDiagramError(DiagramError, ValueError):
    """Raised when a bounding box is requested for a subtree with no geometry."""
