"""Exception types raised by the group algebra engine."""

from __future__ import annotations

from typing import Optional, Sequence


class InvalidArgument(ValueError):
    """Bad input to a constructor or query (non-positive order, empty product, bad table)."""


class ResourceExceeded(RuntimeError):
    def __init__(self, message: str, *, limit: int, kind: str = "subgroups") -> None:
        super().__init__(message)
        self.limit = int(limit)
        self.kind = kind


class IntegrityViolation(RuntimeError):
    """A multiplication table does not describe a group."""

    def __init__(
        self,
        message: str,
        *,
        kind: str,
        elements: Optional[Sequence[int]] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.elements = tuple(elements or ())


__all__ = ["InvalidArgument", "ResourceExceeded", "IntegrityViolation"]
