"""Model entities."""

from simple_test_models.models.ifc_id import generate_ifc_id
from simple_test_models.models.geometry import Loop3D, Point3D, Polygon3D
from simple_test_models.models.construction import (
    Construction,
    Material,
    Substance,
    SubstanceKind,
)
from simple_test_models.models.elements import (
    Boundary,
    BoundaryType,
    ElectricHeater,
    Fenestration,
    FenestrationPositions,
    FenestrationType,
    Infiltration,
    Load,
    Luminaire,
    Space,
    Surface,
)
from simple_test_models.models.model import (
    SimpleModel,
    SimulationStateElement,
    SimulationStateHeader,
    StateElementKind,
)

__all__ = [
    "generate_ifc_id",
    "Point3D",
    "Loop3D",
    "Polygon3D",
    "Substance",
    "SubstanceKind",
    "Material",
    "Construction",
    "Infiltration",
    "Space",
    "Boundary",
    "BoundaryType",
    "Surface",
    "Fenestration",
    "FenestrationPositions",
    "FenestrationType",
    "ElectricHeater",
    "Luminaire",
    "Load",
    "SimpleModel",
    "SimulationStateElement",
    "SimulationStateHeader",
    "StateElementKind",
]
