import pytest

from vouwbank.state import (
    AppState,
    BendDirection,
    BendInputState,
    Job,
    MaterialName,
    SheetMetal,
    ToolingInputState,
    default_dies,
    default_materials,
    default_punches,
)


def test_material_display_strings():
    assert [str(m) for m in MaterialName.default_names()] == [
        "Steel",
        "Aluminum",
        "Stainless Steel",
        "Copper",
        "Mild Steel",
    ]


def test_custom_material_is_distinct_from_builtin():
    custom = MaterialName.custom("Steel")
    assert str(custom) == "Steel"
    assert custom != MaterialName.STEEL
    assert custom.is_custom
    assert MaterialName.custom("Brass") == MaterialName.custom("Brass")


def test_material_names_are_hashable_keys():
    table = {MaterialName.COPPER: 1, MaterialName.custom("Copper"): 2}
    assert table[MaterialName.COPPER] == 1
    assert len(table) == 2


def test_bend_direction_order_and_strings():
    assert BendDirection.default_directions() == [BendDirection.UP, BendDirection.DOWN]
    assert [str(d) for d in BendDirection.default_directions()] == ["Up", "Down"]


def test_default_sheet_and_job():
    sheet = SheetMetal()
    assert sheet.id == "DefaultSheet-001"
    assert sheet.original_length_mm == 300.0
    assert sheet.thickness_mm == 2.0
    assert sheet.width_mm == 100.0
    assert sheet.material_name == MaterialName.STEEL
    job = Job()
    assert job.name == "DefaultJob-001"
    assert job.steps == []


def test_jobs_do_not_share_step_lists():
    a, b = Job(), Job()
    a.steps.append("x")
    assert b.steps == []


def test_default_materials_table():
    materials = default_materials()
    assert set(materials) == set(MaterialName.default_names())
    assert materials[MaterialName.STEEL].min_bend_radius_factor == 1.5
    assert materials[MaterialName.COPPER].density_kg_m3 == 8960.0
    for name, details in materials.items():
        assert details.name == name


def test_default_tooling():
    assert [p.name for p in default_punches()] == ["P88.10.R06", "P30.15.R1", "Default Punch"]
    assert [d.name for d in default_dies()] == ["D12.90.R2", "D20.60.R3", "Default Die"]
    assert default_dies()[1].v_opening_mm == 20.0


def test_app_state_defaults():
    state = AppState()
    assert state.simulation_status == "Ready"
    assert state.parts_bent_session == 0
    assert state.profile_load_status == "Profile not generated."
    assert state.status_message == ("System Initialized.", None)
    assert state.bend_input == BendInputState()
    assert state.tooling_input == ToolingInputState()
    assert state.simulated_profile is None


def test_app_state_sheet_input_mirrors_job():
    state = AppState()
    assert state.sheet_input.length_mm_str == "300"
    assert state.sheet_input.thickness_mm_str == "2"
    assert state.sheet_input.width_mm_str == "100"
    assert state.sheet_input.selected_material_idx == 0


def test_sheet_input_follows_custom_job_material():
    job = Job(sheet=SheetMetal(material_name=MaterialName.COPPER, thickness_mm=1.5))
    state = AppState(current_job=job)
    assert state.material_display_order[state.sheet_input.selected_material_idx] == MaterialName.COPPER
    assert float(state.sheet_input.thickness_mm_str) == 1.5


@pytest.mark.parametrize("name", MaterialName.default_names())
def test_material_index_roundtrip(name):
    state = AppState()
    assert state.material_display_order[state.material_index(name)] == name


def test_material_index_unknown_falls_back_to_zero():
    assert AppState().material_index(MaterialName.custom("Unobtainium")) == 0