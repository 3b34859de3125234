"""Single-zone test building — usage example.

One zone: 40 m³
- 1 south-facing wall, 4 m² gross (concrete + polyurethane)
- 1 operable window, 1 m², same construction as the wall
- 1 electric heater (1500 W) and 1 luminaire (200 W)

Front view (looking North at the exterior):
   +-----------+
   |  +-----+  |
   |  | win |  |
   |  +-----+  |
   +-----------+
"""

from simple_test_models import LayerSpec, SingleZoneTestBuildingOptions, build_single_zone_test_model
from simple_test_models.models import SubstanceKind
from simple_test_models.validators.model import validate_model

options = SingleZoneTestBuildingOptions(
    zone_volume=40.0,
    surface_area=4.0,
    window_area=1.0,
    heating_power=1500.0,
    lighting_power=200.0,
    construction_layers=[
        LayerSpec(kind=SubstanceKind.CONCRETE, thickness=0.2),
        LayerSpec(kind=SubstanceKind.POLYURETHANE, thickness=0.05),
    ],
)

model = build_single_zone_test_model(options)

# --- Validate ---
errors = validate_model(model, options.surface_area)
if errors:
    print("⚠️  Validation errors:")
    for e in errors:
        print(f"  [{e.severity}] {e.element_type}: {e.message}")
else:
    print("✅ Validation passed")

wall = model.surfaces[0]
window = model.fenestrations[0]
print(f"   Zone volume: {model.spaces[0].volume:.1f} m³")
print(f"   Wall area: {wall.area:.3f} m² (net of window)")
print(f"   Window area: {window.area:.3f} m²")
print(f"   Layers: {[m.name for m in model.construction_layers(wall.construction)]}")
print(f"   Substances: {[s.name for s in model.substances]}")
print(f"   Loads: {[(ld.name, ld.max_power) for ld in model.loads]}")
print(f"   State variables: {len(model.state)}")
