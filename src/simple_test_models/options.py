"""Options for the single-zone test building.

Numeric feature fields use 0 to mean "disabled". ``zone_volume`` and
``surface_area`` default to a negative sentinel, so leaving them unset
always fails when the model is built.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from simple_test_models.errors import InvalidConfiguration
from simple_test_models.models.construction import SubstanceKind

DEFAULT_LAYER_THICKNESS = 0.1


class LayerSpec(BaseModel):
    """One requested construction layer."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    kind: SubstanceKind
    thickness: float = Field(gt=0, description="Layer thickness in meters")

    @classmethod
    def parse(cls, text: str) -> LayerSpec:
        """Parse ``"kind:thickness"``, e.g. ``"concrete:0.2"``."""
        kind, sep, thickness = text.partition(":")
        if not sep:
            raise InvalidConfiguration("construction_layers", text, "expected 'kind:thickness'")
        try:
            return cls(kind=kind.strip().lower(), thickness=float(thickness))
        except (ValueError, ValidationError) as e:
            raise InvalidConfiguration("construction_layers", text, str(e)) from e


def default_layers() -> list[LayerSpec]:
    """A single lightweight insulation layer."""
    return [LayerSpec(kind=SubstanceKind.POLYURETHANE, thickness=DEFAULT_LAYER_THICKNESS)]


class SingleZoneTestBuildingOptions(BaseModel):
    """Characteristics of the zone of the single-zone model."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    zone_volume: float = Field(default=-1.0, description="Volume in m³ (required)")
    construction_layers: list[LayerSpec] | None = Field(
        default=None,
        description="Layers from exterior to interior; None for the default layer",
    )
    surface_area: float = Field(
        default=-1.0, description="Gross wall area in m², window included (required)"
    )
    window_area: float = Field(
        default=0.0, description="Window area in m², cut from the surface area"
    )
    heating_power: float = Field(default=0.0, description="Heater power in W")
    lighting_power: float = Field(default=0.0, description="Lighting power in W")
    infiltration_rate: float = Field(default=0.0, description="Infiltration rate in m³/s")
    emissivity: float = Field(
        default=0.84, ge=0, le=1, description="Thermal absorptance of all substances"
    )
    solar_absorptance: float = Field(
        default=0.7, ge=0, le=1, description="Solar absorptance of all substances"
    )
    orientation: float = Field(
        default=0.0, description="Degrees; when 0 the exterior of the wall faces South"
    )

    @classmethod
    def coerce(
        cls, options: SingleZoneTestBuildingOptions | Mapping[str, Any]
    ) -> SingleZoneTestBuildingOptions:
        """Accept an options instance or a mapping of its fields."""
        if isinstance(options, cls):
            return options
        try:
            return cls.model_validate(options)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"]) or "options"
            raise InvalidConfiguration(field, first.get("input"), first["msg"]) from e
