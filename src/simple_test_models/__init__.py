"""Small, internally consistent building models for exercising simulation tests."""

from simple_test_models.errors import (
    BuildError,
    DanglingReferenceError,
    GeometryError,
    InvalidConfiguration,
)
from simple_test_models.generators.single_zone import (
    add_heater,
    add_luminaire,
    assemble,
    build_single_zone_test_model,
)
from simple_test_models.models.model import SimpleModel, SimulationStateHeader
from simple_test_models.options import LayerSpec, SingleZoneTestBuildingOptions

__version__ = "0.1.0"

__all__ = [
    "BuildError",
    "DanglingReferenceError",
    "GeometryError",
    "InvalidConfiguration",
    "LayerSpec",
    "SimpleModel",
    "SimulationStateHeader",
    "SingleZoneTestBuildingOptions",
    "add_heater",
    "add_luminaire",
    "assemble",
    "build_single_zone_test_model",
]
