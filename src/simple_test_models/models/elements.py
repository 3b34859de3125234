"""Model elements: spaces, surfaces, fenestrations and loads.

Relations to other entities (construction, boundary space, target space)
are integer handles into the owning SimpleModel, never embedded copies.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from simple_test_models.models.geometry import Polygon3D
from simple_test_models.models.ifc_id import generate_ifc_id


class Infiltration(BaseModel):
    """Constant-rate outdoor air infiltration into a space."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    kind: Literal["constant"] = "constant"
    rate: float = Field(gt=0, description="Infiltration flow in m³/s")


class Space(BaseModel):
    """A thermal zone: a volume of air bounded by surfaces."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str = ""
    volume: float = Field(gt=0, description="Air volume in m³")
    infiltration: Infiltration | None = None


class BoundaryType(str, Enum):
    """What lies on one side of a surface.

    OUTDOOR: exterior conditions (weather)
    GROUND: in contact with the ground
    SPACE: a space of the same model
    """

    OUTDOOR = "outdoor"
    GROUND = "ground"
    SPACE = "space"


class Boundary(BaseModel):
    """One side of a surface or fenestration."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    type: BoundaryType = BoundaryType.OUTDOOR
    space: int | None = Field(default=None, ge=0, description="Handle of the bounded Space")

    @classmethod
    def to_space(cls, space: int) -> Boundary:
        return cls(type=BoundaryType.SPACE, space=space)

    @model_validator(mode="after")
    def space_iff_space_type(self) -> Boundary:
        if (self.type == BoundaryType.SPACE) != (self.space is not None):
            raise ValueError("A space handle is required for, and only for, SPACE boundaries")
        return self


class Surface(BaseModel):
    """An opaque planar element; its polygon may carry a hole for a window."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str = ""
    polygon: Polygon3D
    construction: int = Field(ge=0, description="Handle of the Construction")
    front_boundary: Boundary = Field(default_factory=Boundary)
    back_boundary: Boundary = Field(default_factory=Boundary)

    @property
    def area(self) -> float:
        """Net opaque area (m²), excluding any hole."""
        return self.polygon.area


class FenestrationPositions(str, Enum):
    """How a fenestration can be positioned.

    FIXED: cannot be opened
    BINARY: either fully open or fully closed
    CONTINUOUS: any opening fraction between 0 and 1
    """

    FIXED = "fixed"
    BINARY = "binary"
    CONTINUOUS = "continuous"


class FenestrationType(str, Enum):
    WINDOW = "window"
    DOOR = "door"


class Fenestration(BaseModel):
    """A window or door occupying an opening cut into a surface."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str = ""
    polygon: Polygon3D
    construction: int = Field(ge=0, description="Handle of the Construction")
    operation: FenestrationPositions = FenestrationPositions.FIXED
    fenestration_type: FenestrationType = FenestrationType.WINDOW
    front_boundary: Boundary = Field(default_factory=Boundary)
    back_boundary: Boundary = Field(default_factory=Boundary)

    @property
    def area(self) -> float:
        return self.polygon.area

    @property
    def is_operable(self) -> bool:
        return self.operation != FenestrationPositions.FIXED

    @model_validator(mode="after")
    def pane_has_no_hole(self) -> Fenestration:
        if self.polygon.has_hole:
            raise ValueError("Fenestration polygon must not have a hole")
        return self


class ElectricHeater(BaseModel):
    """An ideal electric heater delivering up to max_power into a space."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    kind: Literal["electric_heater"] = "electric_heater"
    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str = ""
    max_power: float = Field(gt=0, description="Maximum heating power in W")
    target_space: int = Field(ge=0, description="Handle of the heated Space")


class Luminaire(BaseModel):
    """A lighting load dissipating up to max_power into a space."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    kind: Literal["luminaire"] = "luminaire"
    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str = ""
    max_power: float = Field(gt=0, description="Maximum electric power in W")
    target_space: int = Field(ge=0, description="Handle of the lit Space")


Load = Annotated[Union[ElectricHeater, Luminaire], Field(discriminator="kind")]
