"""Substances, materials and constructions.

A Substance holds bulk thermal properties; a Material is a layer of some
thickness made of one Substance; a Construction is the ordered stack of
Materials (exterior first) assigned to surfaces and fenestrations.

Entities reference each other by integer handle into the owning
SimpleModel, so one Substance can back several Materials and one
Construction can be shared by several surfaces.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from simple_test_models.models.ifc_id import generate_ifc_id


class SubstanceKind(str, Enum):
    """Catalogue of substances available to test constructions."""

    CONCRETE = "concrete"
    POLYURETHANE = "polyurethane"
    GLASS = "glass"
    AIR = "air"


class Substance(BaseModel):
    """Bulk thermal-physical properties of a substance."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str
    kind: SubstanceKind
    density: float = Field(gt=0, description="kg/m³")
    specific_heat_capacity: float = Field(gt=0, description="J/(kg·K)")
    thermal_conductivity: float = Field(gt=0, description="W/(m·K)")
    thermal_absorptance: float = Field(
        ge=0, le=1, description="Long-wave absorptance, equal to emissivity"
    )
    solar_absorptance: float = Field(default=0.7, ge=0, le=1)
    solar_transmittance: float = Field(default=0.0, ge=0, le=1)

    @property
    def thermal_diffusivity(self) -> float:
        """k / (rho * cp), in m²/s."""
        return self.thermal_conductivity / (self.density * self.specific_heat_capacity)


class Material(BaseModel):
    """A layer of a given thickness made of one Substance."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str
    substance: int = Field(ge=0, description="Handle of the backing Substance")
    thickness: float = Field(gt=0, description="Layer thickness in meters")


class Construction(BaseModel):
    """Ordered stack of Material handles, from exterior to interior."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str
    materials: tuple[int, ...] = Field(default=(), description="Material handles, exterior first")

    @property
    def layer_count(self) -> int:
        return len(self.materials)
