"""Construction assembly: layer specs → substances, materials, construction.

Substances are shared per kind within a model, so a construction made of
two concrete layers references one concrete Substance through two
Materials.
"""

from __future__ import annotations

from typing import Iterable, Union

from pydantic import ValidationError

from simple_test_models.errors import InvalidConfiguration
from simple_test_models.models.construction import (
    Construction,
    Material,
    Substance,
    SubstanceKind,
)
from simple_test_models.models.model import SimpleModel
from simple_test_models.options import LayerSpec, default_layers

# density (kg/m³), specific heat (J/kgK), conductivity (W/mK), solar transmittance
SUBSTANCE_PROPERTIES: dict[SubstanceKind, tuple[float, float, float, float]] = {
    SubstanceKind.CONCRETE: (1700.0, 800.0, 0.816, 0.0),
    SubstanceKind.POLYURETHANE: (17.5, 2400.0, 0.0252, 0.0),
    SubstanceKind.GLASS: (2500.0, 840.0, 1.0, 0.837),
    SubstanceKind.AIR: (1.17, 1000.0, 0.0257, 1.0),
}

LayerInput = Union[LayerSpec, tuple[Union[SubstanceKind, str], float]]


def _to_layer_spec(layer: LayerInput) -> LayerSpec:
    if isinstance(layer, LayerSpec):
        return layer
    try:
        kind, thickness = layer
        return LayerSpec(kind=kind, thickness=thickness)
    except (TypeError, ValueError, ValidationError) as e:
        raise InvalidConfiguration("construction_layers", layer, str(e)) from e


def get_or_add_substance(
    model: SimpleModel,
    kind: SubstanceKind,
    emissivity: float = 0.84,
    solar_absorptance: float = 0.7,
) -> int:
    """Handle of the model's Substance of this kind, created on first use."""
    existing = next(
        (i for i, s in enumerate(model.substances) if s.kind == kind), None
    )
    if existing is not None:
        return existing

    density, specific_heat, conductivity, transmittance = SUBSTANCE_PROPERTIES[kind]
    return model.add_substance(
        Substance(
            name=kind.value,
            kind=kind,
            density=density,
            specific_heat_capacity=specific_heat,
            thermal_conductivity=conductivity,
            thermal_absorptance=emissivity,
            solar_absorptance=solar_absorptance,
            solar_transmittance=transmittance,
        )
    )


def build_construction(
    model: SimpleModel,
    layer_specs: Iterable[LayerInput] | None = None,
    emissivity: float = 0.84,
    solar_absorptance: float = 0.7,
    name: str = "the construction",
) -> int:
    """Add a Construction (and its materials) to the model.

    Args:
        model: Model receiving the new entities.
        layer_specs: Layers from exterior to interior, as ``LayerSpec`` or
            ``(kind, thickness)`` pairs. ``None`` selects a single
            lightweight default layer.
        emissivity: Thermal absorptance given to every substance.
        solar_absorptance: Solar absorptance given to every substance.
        name: Construction name.

    Returns:
        Handle of the new Construction.
    """
    layers = default_layers() if layer_specs is None else [_to_layer_spec(ls) for ls in layer_specs]
    if not layers:
        raise InvalidConfiguration(
            "construction_layers", [], "a construction needs at least one layer"
        )

    material_handles: list[int] = []
    for i, layer in enumerate(layers):
        substance = get_or_add_substance(model, layer.kind, emissivity, solar_absorptance)
        material = Material(name=f"Material {i}", substance=substance, thickness=layer.thickness)
        material_handles.append(model.add_material(material))

    return model.add_construction(
        Construction(name=name, materials=tuple(material_handles))
    )
