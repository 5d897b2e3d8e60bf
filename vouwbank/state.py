"""Domain model and application state for the press brake simulator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


class StatusColor(Enum):
    """Colours used to highlight status messages."""

    RED = "#ff0000"
    GREEN = "#00ff00"
    YELLOW = "#ffff00"


@dataclass(frozen=True)
class MaterialName:
    """Name of a sheet material: one of the built-in materials or a custom one."""

    label: str
    is_custom: bool = False

    STEEL: ClassVar[MaterialName]
    ALUMINUM: ClassVar[MaterialName]
    STAINLESS_STEEL: ClassVar[MaterialName]
    COPPER: ClassVar[MaterialName]
    MILD_STEEL: ClassVar[MaterialName]

    @classmethod
    def default_names(cls) -> list[MaterialName]:
        """Built-in materials in display order."""
        return [cls.STEEL, cls.ALUMINUM, cls.STAINLESS_STEEL, cls.COPPER, cls.MILD_STEEL]

    @classmethod
    def custom(cls, name: str) -> MaterialName:
        """A user-defined material name."""
        return cls(name, True)

    def __str__(self) -> str:
        return self.label


MaterialName.STEEL = MaterialName("Steel")
MaterialName.ALUMINUM = MaterialName("Aluminum")
MaterialName.STAINLESS_STEEL = MaterialName("Stainless Steel")
MaterialName.COPPER = MaterialName("Copper")
MaterialName.MILD_STEEL = MaterialName("Mild Steel")


@dataclass
class MaterialDetails:
    """Mechanical properties of a material."""

    name: MaterialName
    density_kg_m3: float
    yield_stress_mpa: float
    tensile_modulus_gpa: float
    min_bend_radius_factor: float


class BendDirection(Enum):
    """Direction in which a flange is bent."""

    UP = "Up"
    DOWN = "Down"

    @classmethod
    def default_directions(cls) -> list[BendDirection]:
        """Directions in display order."""
        return [cls.UP, cls.DOWN]

    def __str__(self) -> str:
        return self.value


@dataclass
class BendStep:
    """One bend in a job; sequence_order is 1-based."""

    sequence_order: int
    position_mm: float
    target_angle_deg: float
    radius_mm: float
    direction: BendDirection


@dataclass
class SheetMetal:
    """The workpiece a job starts from."""

    id: str = "DefaultSheet-001"
    original_length_mm: float = 300.0
    thickness_mm: float = 2.0
    width_mm: float = 100.0
    material_name: MaterialName = MaterialName.STEEL


@dataclass
class Punch:
    name: str
    height_mm: float
    angle_deg: float
    radius_mm: float


@dataclass
class Die:
    name: str
    v_opening_mm: float
    angle_deg: float
    shoulder_radius_mm: float


@dataclass
class Job:
    """A sheet together with the bends to apply to it."""

    name: str = "DefaultJob-001"
    sheet: SheetMetal = field(default_factory=SheetMetal)
    steps: list[BendStep] = field(default_factory=list)


@dataclass
class SheetInputState:
    """Raw text typed into the sheet properties form."""

    length_mm_str: str = ""
    thickness_mm_str: str = ""
    width_mm_str: str = ""
    selected_material_idx: int = 0


@dataclass
class BendInputState:
    """Raw text typed into the bend definition form."""

    position_mm_str: str = ""
    target_angle_deg_str: str = ""
    radius_mm_str: str = ""
    selected_direction_idx: int = 0


@dataclass
class ToolingInputState:
    selected_punch_idx: int = 0
    selected_die_idx: int = 0


def _format_number(value: float) -> str:
    if value == int(value) and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def default_materials() -> dict[MaterialName, MaterialDetails]:
    """The built-in material table."""
    rows = [
        (MaterialName.STEEL, 7850.0, 250.0, 200.0, 1.5),
        (MaterialName.ALUMINUM, 2700.0, 100.0, 70.0, 1.0),
        (MaterialName.STAINLESS_STEEL, 8000.0, 215.0, 193.0, 2.0),
        (MaterialName.COPPER, 8960.0, 70.0, 117.0, 0.8),
        (MaterialName.MILD_STEEL, 7850.0, 220.0, 200.0, 1.2),
    ]
    return {name: MaterialDetails(name, *props) for name, *props in rows}


def default_punches() -> list[Punch]:
    """The built-in punch library."""
    return [
        Punch("P88.10.R06", 60.0, 88.0, 0.6),
        Punch("P30.15.R1", 65.0, 30.0, 1.0),
        Punch("Default Punch", 50.0, 90.0, 1.0),
    ]


def default_dies() -> list[Die]:
    """The built-in die library."""
    return [
        Die("D12.90.R2", 12.0, 90.0, 2.0),
        Die("D20.60.R3", 20.0, 60.0, 3.0),
        Die("Default Die", 16.0, 90.0, 2.0),
    ]


@dataclass
class AppState:
    """Everything the application keeps between frames."""

    current_job: Job = field(default_factory=Job)
    available_materials: dict[MaterialName, MaterialDetails] = field(default_factory=default_materials)
    material_display_order: list[MaterialName] = field(default_factory=MaterialName.default_names)
    available_punches: list[Punch] = field(default_factory=default_punches)
    available_dies: list[Die] = field(default_factory=default_dies)
    sheet_input: SheetInputState | None = None
    bend_input: BendInputState = field(default_factory=BendInputState)
    tooling_input: ToolingInputState = field(default_factory=ToolingInputState)
    simulation_status: str = "Ready"
    parts_bent_session: int = 0
    simulated_profile: Any = None
    simulated_profile_size: tuple[float, float] | None = None
    profile_load_status: str = "Profile not generated."
    status_message: tuple[str, StatusColor | None] = ("System Initialized.", None)
    app_logo: Any = None
    app_logo_size: tuple[float, float] | None = None

    def __post_init__(self) -> None:
        if self.sheet_input is None:
            sheet = self.current_job.sheet
            self.sheet_input = SheetInputState(
                length_mm_str=_format_number(sheet.original_length_mm),
                thickness_mm_str=_format_number(sheet.thickness_mm),
                width_mm_str=_format_number(sheet.width_mm),
                selected_material_idx=self.material_index(sheet.material_name),
            )

    def material_index(self, name: MaterialName) -> int:
        """Position of a material in the display order, or 0 if absent."""
        try:
            return self.material_display_order.index(name)
        except ValueError:
            return 0