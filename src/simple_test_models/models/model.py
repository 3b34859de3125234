"""The SimpleModel entity arena and its simulation state header.

Entities are appended to per-kind tables and addressed by their integer
position (the handle). Handles are stable for the lifetime of the model,
and every cross-reference is checked when the referencing entity is added.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from simple_test_models.errors import DanglingReferenceError
from simple_test_models.models.construction import Construction, Material, Substance
from simple_test_models.models.elements import (
    Boundary,
    BoundaryType,
    ElectricHeater,
    Fenestration,
    Load,
    Luminaire,
    Space,
    Surface,
)
from simple_test_models.models.ifc_id import generate_ifc_id

T = TypeVar("T")


class StateElementKind(str, Enum):
    """Kinds of time-varying values a simulation needs to track."""

    FENESTRATION_OPEN_FRACTION = "fenestration_open_fraction"
    HEATER_POWER_CONSUMPTION = "heater_power_consumption"
    LUMINAIRE_POWER_CONSUMPTION = "luminaire_power_consumption"


class SimulationStateElement(BaseModel):
    """One registered state variable, bound to the entity it belongs to."""

    model_config = ConfigDict(frozen=True)

    kind: StateElementKind
    handle: int = Field(ge=0, description="Handle of the owning entity")


class SimulationStateHeader(BaseModel):
    """Registry of the state variables created while building a model."""

    elements: list[SimulationStateElement] = Field(default_factory=list)
    initial_values: list[float] = Field(default_factory=list)

    def push(self, element: SimulationStateElement, initial_value: float = 0.0) -> int:
        """Register a state variable. Returns its index in the state vector."""
        self.elements.append(element)
        self.initial_values.append(initial_value)
        return len(self.elements) - 1

    def __len__(self) -> int:
        return len(self.elements)

    def find(self, kind: StateElementKind, handle: int) -> int | None:
        """Index of the state variable of ``kind`` owned by ``handle``, if any."""
        return next(
            (
                i
                for i, e in enumerate(self.elements)
                if e.kind == kind and e.handle == handle
            ),
            None,
        )


class SimpleModel(BaseModel):
    """A building model made of handle-addressed entity tables."""

    global_id: str = Field(default_factory=generate_ifc_id, description="IFC GlobalId")
    name: str = "The SimpleModel"
    spaces: list[Space] = Field(default_factory=list)
    substances: list[Substance] = Field(default_factory=list)
    materials: list[Material] = Field(default_factory=list)
    constructions: list[Construction] = Field(default_factory=list)
    surfaces: list[Surface] = Field(default_factory=list)
    fenestrations: list[Fenestration] = Field(default_factory=list)
    loads: list[Load] = Field(default_factory=list)
    state: SimulationStateHeader = Field(default_factory=SimulationStateHeader)

    # ── Lookups ───────────────────────────────────────────────────────

    @staticmethod
    def _get(table: Sequence[T], kind: str, handle: int) -> T:
        if not 0 <= handle < len(table):
            raise DanglingReferenceError(kind, handle)
        return table[handle]

    def space(self, handle: int) -> Space:
        return self._get(self.spaces, "Space", handle)

    def substance(self, handle: int) -> Substance:
        return self._get(self.substances, "Substance", handle)

    def material(self, handle: int) -> Material:
        return self._get(self.materials, "Material", handle)

    def construction(self, handle: int) -> Construction:
        return self._get(self.constructions, "Construction", handle)

    def surface(self, handle: int) -> Surface:
        return self._get(self.surfaces, "Surface", handle)

    def fenestration(self, handle: int) -> Fenestration:
        return self._get(self.fenestrations, "Fenestration", handle)

    def load(self, handle: int) -> ElectricHeater | Luminaire:
        return self._get(self.loads, "Load", handle)

    def construction_layers(self, handle: int) -> list[Material]:
        """Materials of a construction, exterior first."""
        return [self.material(m) for m in self.construction(handle).materials]

    @property
    def heaters(self) -> list[ElectricHeater]:
        return [ld for ld in self.loads if isinstance(ld, ElectricHeater)]

    @property
    def luminaires(self) -> list[Luminaire]:
        return [ld for ld in self.loads if isinstance(ld, Luminaire)]

    # ── Add entities ──────────────────────────────────────────────────

    def add_space(self, space: Space) -> int:
        self.spaces.append(space)
        return len(self.spaces) - 1

    def add_substance(self, substance: Substance) -> int:
        self.substances.append(substance)
        return len(self.substances) - 1

    def add_material(self, material: Material) -> int:
        self.substance(material.substance)
        self.materials.append(material)
        return len(self.materials) - 1

    def add_construction(self, construction: Construction) -> int:
        for handle in construction.materials:
            self.material(handle)
        self.constructions.append(construction)
        return len(self.constructions) - 1

    def add_surface(self, surface: Surface) -> int:
        self.construction(surface.construction)
        self._check_boundary(surface.front_boundary)
        self._check_boundary(surface.back_boundary)
        self.surfaces.append(surface)
        return len(self.surfaces) - 1

    def add_fenestration(self, fenestration: Fenestration) -> int:
        """Add a fenestration; operable ones register their open fraction."""
        self.construction(fenestration.construction)
        self._check_boundary(fenestration.front_boundary)
        self._check_boundary(fenestration.back_boundary)
        self.fenestrations.append(fenestration)
        handle = len(self.fenestrations) - 1
        if fenestration.is_operable:
            self.state.push(
                SimulationStateElement(
                    kind=StateElementKind.FENESTRATION_OPEN_FRACTION, handle=handle
                )
            )
        return handle

    def add_load(self, load: ElectricHeater | Luminaire) -> int:
        """Add a heater or luminaire and register its power consumption."""
        self.space(load.target_space)
        self.loads.append(load)
        handle = len(self.loads) - 1
        kind = (
            StateElementKind.HEATER_POWER_CONSUMPTION
            if isinstance(load, ElectricHeater)
            else StateElementKind.LUMINAIRE_POWER_CONSUMPTION
        )
        self.state.push(SimulationStateElement(kind=kind, handle=handle))
        return handle

    def _check_boundary(self, boundary: Boundary) -> None:
        if boundary.type == BoundaryType.SPACE:
            self.space(boundary.space)
