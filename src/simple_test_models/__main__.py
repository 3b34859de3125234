"""Simple test models CLI.

Usage:
    python -m simple_test_models build --zone-volume 40 --surface-area 4 [options]

Builds the single-zone test building and prints a JSON summary of the
resulting model, so option sets can be checked without writing a test.
"""
from __future__ import annotations

import json
from typing import List, Optional

import typer

from simple_test_models.errors import BuildError
from simple_test_models.generators.single_zone import build_single_zone_test_model
from simple_test_models.models.model import SimpleModel
from simple_test_models.options import LayerSpec

app = typer.Typer(
    name="simple_test_models",
    help="Simple test models — build small thermal models for simulation tests.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def summarize(model: SimpleModel) -> dict:
    """Plain-data summary of a model's entities and key values."""
    constructions = []
    for i, construction in enumerate(model.constructions):
        layers = []
        for material in model.construction_layers(i):
            layers.append({
                "material": material.name,
                "substance": model.substance(material.substance).name,
                "thickness": material.thickness,
            })
        constructions.append({"name": construction.name, "layers": layers})

    return {
        "name": model.name,
        "spaces": [
            {
                "name": s.name,
                "volume": s.volume,
                "infiltration_rate": s.infiltration.rate if s.infiltration else 0.0,
            }
            for s in model.spaces
        ],
        "surfaces": [
            {"name": s.name, "area": s.area, "construction": s.construction}
            for s in model.surfaces
        ],
        "fenestrations": [
            {
                "name": f.name,
                "area": f.area,
                "construction": f.construction,
                "operation": f.operation.value,
            }
            for f in model.fenestrations
        ],
        "constructions": constructions,
        "substances": [s.name for s in model.substances],
        "loads": [
            {"kind": ld.kind, "name": ld.name, "max_power": ld.max_power}
            for ld in model.loads
        ],
        "state_variables": len(model.state),
    }


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def build(
    zone_volume: float = typer.Option(..., help="Zone volume in m³"),
    surface_area: float = typer.Option(..., help="Wall area in m², window included"),
    window_area: float = typer.Option(0.0, help="Window area in m² (0 = no window)"),
    heating_power: float = typer.Option(0.0, help="Heater power in W (0 = no heater)"),
    lighting_power: float = typer.Option(0.0, help="Lighting power in W (0 = no lights)"),
    infiltration_rate: float = typer.Option(0.0, help="Infiltration in m³/s (0 = none)"),
    emissivity: float = typer.Option(0.84, help="Emissivity of all substances"),
    orientation: float = typer.Option(0.0, help="Wall orientation in degrees (0 = South)"),
    layer: Optional[List[str]] = typer.Option(
        None, "--layer", help="Construction layer as kind:thickness, exterior first; repeatable"
    ),
):
    """Build the single-zone test building and print a summary."""
    try:
        layers = [LayerSpec.parse(text) for text in layer] if layer else None
        model = build_single_zone_test_model({
            "zone_volume": zone_volume,
            "construction_layers": layers,
            "surface_area": surface_area,
            "window_area": window_area,
            "heating_power": heating_power,
            "lighting_power": lighting_power,
            "infiltration_rate": infiltration_rate,
            "emissivity": emissivity,
            "orientation": orientation,
        })
    except BuildError as e:
        _output({"ok": False, "error": str(e)})
        raise typer.Exit(1)

    _output({"ok": True, "model": summarize(model)})


@app.command()
def version() -> None:
    """Show version."""
    from simple_test_models import __version__

    typer.echo(f"simple-test-models v{__version__}")


if __name__ == "__main__":
    app()
