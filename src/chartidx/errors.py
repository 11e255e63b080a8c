"""Exception types for chartidx.

Exception Hierarchy:
    ChartIndexError (base)
    ├── DescriptorParseError - constants/parameters file is malformed
    ├── IndexParseError - existing index file cannot be parsed
    └── StructuralMismatchError - `entries` has an unexpected shape

Filesystem failures are not wrapped: they surface as the original OSError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class ChartIndexError(Exception):
    """Base exception for all chartidx errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class DescriptorParseError(ChartIndexError):
    """A constants or parameters descriptor could not be parsed.

    Example:
        >>> raise DescriptorParseError("constants", Path("constants.yaml"), "missing field 'name'")
    """

    def __init__(self, descriptor: str, path: Path | None, reason: str) -> None:
        self.descriptor = descriptor
        self.path = path
        location = f" {path}" if path is not None else ""
        super().__init__(f"Invalid {descriptor} descriptor{location}: {reason}")


class IndexParseError(ChartIndexError):
    """The existing index file is present but is not a valid index document."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        location = f" {path}" if path is not None else ""
        super().__init__(f"Cannot parse index{location}: {reason}")


class StructuralMismatchError(ChartIndexError):
    """The `entries` field of an index has a shape this tool cannot append to."""
