"""Single-zone test building.

One space, one exterior wall facing South (unless rotated), an optional
operable window cut into that wall with the same construction, and
optional infiltration, heater and lighting loads.

The surface_area includes the window; the window_area is cut from it.
Everything is built on a fresh SimpleModel, so a failure at any step
leaves nothing behind.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from simple_test_models.errors import BuildError, GeometryError, InvalidConfiguration
from simple_test_models.generators.construction import build_construction
from simple_test_models.generators.geometry import build_wall_polygon, cut_window
from simple_test_models.models.elements import (
    Boundary,
    ElectricHeater,
    Fenestration,
    FenestrationPositions,
    FenestrationType,
    Infiltration,
    Luminaire,
    Space,
    Surface,
)
from simple_test_models.models.model import SimpleModel
from simple_test_models.options import SingleZoneTestBuildingOptions
from simple_test_models.validators.model import validate_model

logger = logging.getLogger(__name__)


def add_heater(
    model: SimpleModel, options: SingleZoneTestBuildingOptions, space: int = 0
) -> int:
    """Add an electric heater of ``options.heating_power`` W heating ``space``."""
    power = options.heating_power
    if not power > 0:
        raise InvalidConfiguration("heating_power", power, "a heater needs a positive power")
    return model.add_load(ElectricHeater(name="Heater", max_power=power, target_space=space))


def add_luminaire(
    model: SimpleModel, options: SingleZoneTestBuildingOptions, space: int = 0
) -> int:
    """Add a luminaire of ``options.lighting_power`` W lighting ``space``."""
    power = options.lighting_power
    if not power > 0:
        raise InvalidConfiguration("lighting_power", power, "a luminaire needs a positive power")
    return model.add_load(Luminaire(name="Luminaire", max_power=power, target_space=space))


def assemble(options: SingleZoneTestBuildingOptions) -> SimpleModel:
    """Build the single-zone model described by ``options``.

    Raises:
        InvalidConfiguration: an option is missing or out of range.
        GeometryError: the wall or window geometry is invalid.
    """
    model = SimpleModel(name="Single zone test building")

    # Space
    if not options.zone_volume > 0:
        raise InvalidConfiguration(
            "zone_volume", options.zone_volume, "a positive zone volume is required"
        )
    infiltration = None
    if options.infiltration_rate > 0:
        infiltration = Infiltration(rate=options.infiltration_rate)
    space = model.add_space(
        Space(name="Zone", volume=options.zone_volume, infiltration=infiltration)
    )

    # Construction
    construction = build_construction(
        model,
        options.construction_layers,
        emissivity=options.emissivity,
        solar_absorptance=options.solar_absorptance,
    )

    # Geometry
    wall = build_wall_polygon(options.surface_area, options.orientation)
    window = None
    if options.window_area > 0:
        if options.window_area >= options.surface_area:
            raise InvalidConfiguration(
                "window_area",
                options.window_area,
                f"must be smaller than surface_area ({options.surface_area:g})",
            )
        wall, window = cut_window(wall, options.window_area)

    # Surfaces
    model.add_surface(
        Surface(
            name="Wall",
            polygon=wall,
            construction=construction,
            front_boundary=Boundary.to_space(space),
        )
    )
    if window is not None:
        model.add_fenestration(
            Fenestration(
                name="Window",
                polygon=window,
                construction=construction,
                operation=FenestrationPositions.BINARY,
                fenestration_type=FenestrationType.WINDOW,
                front_boundary=Boundary.to_space(space),
            )
        )

    # Loads
    if options.heating_power > 0:
        add_heater(model, options, space)
    if options.lighting_power > 0:
        add_luminaire(model, options, space)

    errors = validate_model(model, options.surface_area)
    if errors:
        message = "; ".join(e.message for e in errors)
        if any(e.element_type == "Polygon" for e in errors):
            raise GeometryError(message)
        raise BuildError(message)

    logger.debug(
        "Built single-zone model: %d surface(s), %d fenestration(s), %d load(s)",
        len(model.surfaces),
        len(model.fenestrations),
        len(model.loads),
    )
    return model


def build_single_zone_test_model(
    options: SingleZoneTestBuildingOptions | Mapping[str, Any],
) -> SimpleModel:
    """Build a single-zone test model from options or a mapping of option fields.

    The returned model carries its simulation state header in ``model.state``.
    """
    return assemble(SingleZoneTestBuildingOptions.coerce(options))
