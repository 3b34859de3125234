"""Exceptions raised while building a test model.

Every failure is fatal to the current build: nothing is retried and no
partially assembled model is handed back.
"""

from __future__ import annotations

from typing import Any, Sequence


class BuildError(Exception):
    """Base exception for all model-building errors."""


class InvalidConfiguration(BuildError):
    """Raised when an option is missing, out of range, or inconsistent."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid option '{field}' = {value!r}: {reason}")


class GeometryError(BuildError):
    """Raised when a loop or polygon is degenerate or invalid.

    Covers non-closed, self-intersecting and zero-area loops, as well as
    holes that touch or cross the boundary they are cut into.
    """

    def __init__(self, reason: str, points: Sequence[Any] | None = None) -> None:
        self.reason = reason
        self.points = list(points or [])
        msg = reason
        if self.points:
            coords = ", ".join(str(p) for p in self.points[:6])
            msg += f"\nPoints: {coords}"
            if len(self.points) > 6:
                msg += f" ... and {len(self.points) - 6} more"
        super().__init__(msg)


class DanglingReferenceError(BuildError):
    """Raised when a handle does not resolve to an entity of the model."""

    def __init__(self, kind: str, handle: int) -> None:
        self.kind = kind
        self.handle = handle
        super().__init__(f"No {kind} with handle {handle} in this model")
