"""Tests for model entities and the SimpleModel arena."""

import pytest

from simple_test_models.errors import DanglingReferenceError
from simple_test_models.generators.geometry import build_wall_polygon, cut_window
from simple_test_models.models import (
    Boundary,
    BoundaryType,
    Construction,
    ElectricHeater,
    Fenestration,
    FenestrationPositions,
    Infiltration,
    Luminaire,
    Material,
    SimpleModel,
    Space,
    StateElementKind,
    Substance,
    SubstanceKind,
    Surface,
    generate_ifc_id,
)


def concrete() -> Substance:
    return Substance(
        name="concrete",
        kind=SubstanceKind.CONCRETE,
        density=1700.0,
        specific_heat_capacity=800.0,
        thermal_conductivity=0.816,
        thermal_absorptance=0.84,
    )


def model_with_construction() -> tuple[SimpleModel, int, int]:
    """Model with one space and one single-layer construction."""
    model = SimpleModel()
    space = model.add_space(Space(name="Zone", volume=40.0))
    substance = model.add_substance(concrete())
    material = model.add_material(Material(name="m", substance=substance, thickness=0.2))
    construction = model.add_construction(Construction(name="c", materials=(material,)))
    return model, space, construction


class TestSpace:
    def test_create(self):
        space = Space(name="Zone", volume=40.0)
        assert space.volume == 40.0
        assert space.infiltration is None
        assert len(space.global_id) == 22

    @pytest.mark.parametrize("volume", [0.0, -1.0])
    def test_non_positive_volume_rejected(self, volume):
        with pytest.raises(ValueError):
            Space(volume=volume)

    def test_constant_infiltration(self):
        space = Space(volume=40.0, infiltration=Infiltration(rate=0.1))
        assert space.infiltration.kind == "constant"
        assert space.infiltration.rate == 0.1

    def test_zero_infiltration_rejected(self):
        with pytest.raises(ValueError):
            Infiltration(rate=0.0)


class TestBoundary:
    def test_default_is_outdoor(self):
        assert Boundary().type == BoundaryType.OUTDOOR

    def test_to_space(self):
        b = Boundary.to_space(3)
        assert b.type == BoundaryType.SPACE
        assert b.space == 3

    def test_space_type_requires_handle(self):
        with pytest.raises(ValueError, match="space handle"):
            Boundary(type=BoundaryType.SPACE)

    def test_outdoor_rejects_handle(self):
        with pytest.raises(ValueError, match="space handle"):
            Boundary(type=BoundaryType.OUTDOOR, space=0)


class TestFenestration:
    def test_holed_polygon_rejected(self):
        wall, _ = cut_window(build_wall_polygon(4.0), 1.0)
        with pytest.raises(ValueError, match="hole"):
            Fenestration(polygon=wall, construction=0)

    def test_operability(self):
        _, pane = cut_window(build_wall_polygon(4.0), 1.0)
        assert not Fenestration(polygon=pane, construction=0).is_operable
        assert Fenestration(
            polygon=pane, construction=0, operation=FenestrationPositions.BINARY
        ).is_operable


class TestSimpleModel:
    def test_handles_are_positions(self):
        model = SimpleModel()
        assert model.add_space(Space(volume=1.0)) == 0
        assert model.add_space(Space(volume=2.0)) == 1
        assert model.space(1).volume == 2.0

    def test_lookup_returns_same_object(self):
        model = SimpleModel()
        space = Space(volume=1.0)
        handle = model.add_space(space)
        assert model.space(handle) is space

    @pytest.mark.parametrize("handle", [0, -1, 5])
    def test_unknown_handle(self, handle):
        with pytest.raises(DanglingReferenceError) as exc:
            SimpleModel().space(handle)
        assert exc.value.kind == "Space"
        assert exc.value.handle == handle

    def test_material_needs_existing_substance(self):
        model = SimpleModel()
        with pytest.raises(DanglingReferenceError):
            model.add_material(Material(name="m", substance=0, thickness=0.1))
        assert model.materials == []

    def test_construction_needs_existing_materials(self):
        model = SimpleModel()
        with pytest.raises(DanglingReferenceError):
            model.add_construction(Construction(name="c", materials=(0,)))

    def test_surface_needs_existing_space(self):
        model, _, construction = model_with_construction()
        surface = Surface(
            polygon=build_wall_polygon(4.0),
            construction=construction,
            front_boundary=Boundary.to_space(7),
        )
        with pytest.raises(DanglingReferenceError):
            model.add_surface(surface)
        assert model.surfaces == []

    def test_surface_needs_existing_construction(self):
        model, space, _ = model_with_construction()
        surface = Surface(
            polygon=build_wall_polygon(4.0),
            construction=9,
            front_boundary=Boundary.to_space(space),
        )
        with pytest.raises(DanglingReferenceError):
            model.add_surface(surface)

    def test_construction_shared_by_surface_and_fenestration(self):
        model, space, construction = model_with_construction()
        wall, pane = cut_window(build_wall_polygon(4.0), 1.0)
        s = model.add_surface(
            Surface(polygon=wall, construction=construction, front_boundary=Boundary.to_space(space))
        )
        f = model.add_fenestration(
            Fenestration(polygon=pane, construction=construction, front_boundary=Boundary.to_space(space))
        )
        assert model.surface(s).construction == model.fenestration(f).construction
        assert len(model.constructions) == 1

    def test_operable_fenestration_registers_state(self):
        model, space, construction = model_with_construction()
        _, pane = cut_window(build_wall_polygon(4.0), 1.0)
        handle = model.add_fenestration(
            Fenestration(
                polygon=pane,
                construction=construction,
                operation=FenestrationPositions.BINARY,
                front_boundary=Boundary.to_space(space),
            )
        )
        assert model.state.find(StateElementKind.FENESTRATION_OPEN_FRACTION, handle) == 0
        assert model.state.initial_values == [0.0]

    def test_fixed_fenestration_registers_nothing(self):
        model, space, construction = model_with_construction()
        _, pane = cut_window(build_wall_polygon(4.0), 1.0)
        model.add_fenestration(Fenestration(polygon=pane, construction=construction))
        assert len(model.state) == 0

    def test_loads(self):
        model, space, _ = model_with_construction()
        h = model.add_load(ElectricHeater(max_power=1500.0, target_space=space))
        lum = model.add_load(Luminaire(max_power=200.0, target_space=space))
        assert [ld.max_power for ld in model.heaters] == [1500.0]
        assert [ld.max_power for ld in model.luminaires] == [200.0]
        assert model.state.find(StateElementKind.HEATER_POWER_CONSUMPTION, h) == 0
        assert model.state.find(StateElementKind.LUMINAIRE_POWER_CONSUMPTION, lum) == 1

    def test_load_needs_existing_space(self):
        with pytest.raises(DanglingReferenceError):
            SimpleModel().add_load(ElectricHeater(max_power=10.0, target_space=0))

    def test_load_power_must_be_positive(self):
        with pytest.raises(ValueError):
            Luminaire(max_power=0.0, target_space=0)

    def test_dump_and_reload(self):
        model, space, _ = model_with_construction()
        model.add_load(Luminaire(max_power=200.0, target_space=space))
        reloaded = SimpleModel.model_validate_json(model.model_dump_json())
        assert reloaded.luminaires[0].max_power == 200.0
        assert reloaded.space(0).volume == 40.0


class TestIfcId:
    def test_unique(self):
        assert generate_ifc_id() != generate_ifc_id()

    def test_length(self):
        assert len(generate_ifc_id()) == 22
