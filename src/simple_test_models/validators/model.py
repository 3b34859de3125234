"""Cross-entity checks for an assembled single-zone model.

Validates relationships that the individual pydantic models can't check
on their own: how many entities of each kind exist, whether every
boundary and target resolves to the single space, and whether the opaque
and glazed areas add up to the configured surface area.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from simple_test_models.errors import DanglingReferenceError
from simple_test_models.models.geometry import AREA_TOLERANCE
from simple_test_models.models.elements import Boundary, BoundaryType
from simple_test_models.models.model import SimpleModel


@dataclass
class ValidationError:
    """A single validation issue."""

    severity: str  # "error" | "warning"
    element_type: str
    element_id: str
    message: str


def validate_model(model: SimpleModel, surface_area: float | None = None) -> list[ValidationError]:
    """Run all single-zone checks. Returns list of errors."""
    errors: list[ValidationError] = []
    errors.extend(validate_counts(model))
    errors.extend(validate_relations(model))
    if surface_area is not None:
        errors.extend(validate_area_accounting(model, surface_area))
    return errors


def validate_counts(model: SimpleModel) -> list[ValidationError]:
    """Exactly one space and one surface, at most one fenestration."""
    errors: list[ValidationError] = []
    if len(model.spaces) != 1:
        errors.append(
            ValidationError(
                severity="error",
                element_type="Space",
                element_id=model.global_id,
                message=f"Expected exactly one space, found {len(model.spaces)}",
            )
        )
    if len(model.surfaces) != 1:
        errors.append(
            ValidationError(
                severity="error",
                element_type="Surface",
                element_id=model.global_id,
                message=f"Expected exactly one surface, found {len(model.surfaces)}",
            )
        )
    if len(model.fenestrations) > 1:
        errors.append(
            ValidationError(
                severity="error",
                element_type="Fenestration",
                element_id=model.global_id,
                message=f"Expected at most one fenestration, found {len(model.fenestrations)}",
            )
        )
    return errors


def _resolves_to_single_space(model: SimpleModel, boundary: Boundary) -> bool:
    return (
        boundary.type == BoundaryType.SPACE
        and len(model.spaces) == 1
        and boundary.space == 0
    )


def validate_relations(model: SimpleModel) -> list[ValidationError]:
    """Boundaries and load targets point at the space; constructions have layers."""
    errors: list[ValidationError] = []

    for element_type, elements in (
        ("Surface", model.surfaces),
        ("Fenestration", model.fenestrations),
    ):
        for element in elements:
            if not _resolves_to_single_space(model, element.front_boundary):
                errors.append(
                    ValidationError(
                        severity="error",
                        element_type=element_type,
                        element_id=element.global_id,
                        message=(
                            f"{element_type} '{element.name}' front boundary "
                            f"does not resolve to the zone space"
                        ),
                    )
                )
            try:
                layers = model.construction(element.construction).materials
            except DanglingReferenceError as e:
                errors.append(
                    ValidationError(
                        severity="error",
                        element_type=element_type,
                        element_id=element.global_id,
                        message=str(e),
                    )
                )
                continue
            if not layers:
                errors.append(
                    ValidationError(
                        severity="error",
                        element_type="Construction",
                        element_id=element.global_id,
                        message=f"{element_type} '{element.name}' has a construction with no layers",
                    )
                )

    for load in model.loads:
        if len(model.spaces) != 1 or load.target_space != 0:
            errors.append(
                ValidationError(
                    severity="error",
                    element_type=type(load).__name__,
                    element_id=load.global_id,
                    message=f"Load '{load.name}' does not target the zone space",
                )
            )

    return errors


def validate_area_accounting(model: SimpleModel, surface_area: float) -> list[ValidationError]:
    """Opaque plus glazed area must equal the configured surface area."""
    total = sum(s.area for s in model.surfaces) + sum(f.area for f in model.fenestrations)
    if math.isclose(total, surface_area, rel_tol=AREA_TOLERANCE, abs_tol=AREA_TOLERANCE):
        return []
    return [
        ValidationError(
            severity="error",
            element_type="Polygon",
            element_id=model.global_id,
            message=(
                f"Surface and window areas add up to {total:.12g} m², "
                f"expected {surface_area:.12g} m²"
            ),
        )
    ]
