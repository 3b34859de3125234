"""Model generation tools.

Pure functions that create entities in a SimpleModel:
- Geometry: square wall polygon, centered window hole
- Construction: layer specs → shared substances, materials, construction
- Single zone: the complete single-zone test building
"""

from simple_test_models.generators.geometry import build_wall_polygon, cut_window
from simple_test_models.generators.construction import build_construction
from simple_test_models.generators.single_zone import (
    add_heater,
    add_luminaire,
    assemble,
    build_single_zone_test_model,
)

__all__ = [
    "build_wall_polygon",
    "cut_window",
    "build_construction",
    "add_heater",
    "add_luminaire",
    "assemble",
    "build_single_zone_test_model",
]
