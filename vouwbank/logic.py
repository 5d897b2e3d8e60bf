"""Operations on the application state: sheet setup, bends, simulation and job files."""

from __future__ import annotations

import io
import logging
import math
from pathlib import Path
from typing import Any

from PIL import Image, UnidentifiedImageError

from vouwbank.state import AppState, BendDirection, BendInputState, BendStep, MaterialName, StatusColor
from vouwbank.storage import JobStorageError, load_job_from_file, save_job_to_file

logger = logging.getLogger(__name__)

MIN_SHEET_DIMENSION_MM = 0.1
MAX_SHEET_DIMENSION_MM = 10000.0
MIN_BEND_RADIUS_MM = 0.0
MAX_BEND_RADIUS_MM = 500.0
MIN_BEND_ANGLE_DEG = 1.0
MAX_BEND_ANGLE_DEG = 179.0

DEFAULT_IMAGE_PATH = "assets/drawing.png"


class ImageLoadError(Exception):
    """An image could not be read or decoded."""


def _fmt(value: float) -> str:
    """Render a number the way the status messages show it (300.0 -> "300")."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _parse_float(text: str) -> float:
    """Parse a number strictly: no surrounding whitespace, no digit separators."""
    if text != text.strip() or "_" in text:
        raise ValueError(text)
    return float(text)


def load_image(image_path: str | Path) -> tuple[Any, tuple[float, float]]:
    """Load an image as RGBA and return it together with its (width, height)."""
    try:
        data = Path(image_path).read_bytes()
    except OSError as exc:
        raise ImageLoadError(f"Failed to load image from path: {exc}") from exc
    try:
        with Image.open(io.BytesIO(data)) as img:
            img.load()
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, OSError, ValueError) as exc:
        raise ImageLoadError(f"Failed to decode image: {exc}") from exc
    width, height = rgba.size
    return rgba, (float(width), float(height))


def _sync_sheet_inputs(state: AppState) -> None:
    sheet = state.current_job.sheet
    state.sheet_input.length_mm_str = _fmt(sheet.original_length_mm)
    state.sheet_input.thickness_mm_str = _fmt(sheet.thickness_mm)
    state.sheet_input.width_mm_str = _fmt(sheet.width_mm)
    state.sheet_input.selected_material_idx = state.material_index(sheet.material_name)


def _parse_dimension(state: AppState, text: str, field_name: str) -> float | None:
    try:
        value = _parse_float(text)
    except ValueError:
        state.status_message = (
            f"Invalid {field_name}: '{text}' is not a valid number.",
            StatusColor.RED,
        )
        return None
    if not MIN_SHEET_DIMENSION_MM <= value <= MAX_SHEET_DIMENSION_MM:
        state.status_message = (
            f"{field_name} out of range ({_fmt(MIN_SHEET_DIMENSION_MM)}-{_fmt(MAX_SHEET_DIMENSION_MM)}mm).",
            StatusColor.RED,
        )
        return None
    return value


def update_sheet_properties(state: AppState) -> bool:
    """Apply the sheet form to the current job; returns whether it was accepted."""
    inputs = state.sheet_input
    length = _parse_dimension(state, inputs.length_mm_str, "Length")
    if length is None:
        return False
    thickness = _parse_dimension(state, inputs.thickness_mm_str, "Thickness")
    if thickness is None:
        return False
    width = _parse_dimension(state, inputs.width_mm_str, "Width")
    if width is None:
        return False

    order = state.material_display_order
    idx = inputs.selected_material_idx
    if 0 <= idx < len(order):
        material = order[idx]
    else:
        material = order[0] if order else MaterialName.STEEL

    sheet = state.current_job.sheet
    sheet.original_length_mm = length
    sheet.thickness_mm = thickness
    sheet.width_mm = width
    sheet.material_name = material
    state.current_job.steps.clear()

    state.status_message = ("Sheet properties updated. Bend steps cleared.", StatusColor.GREEN)
    state.simulated_profile = None
    state.profile_load_status = "Profile outdated due to sheet change."
    return True


def get_recommended_min_bend_radius(state: AppState) -> float | None:
    """Smallest advisable inner radius for the current sheet, or None for unknown materials."""
    sheet = state.current_job.sheet
    details = state.available_materials.get(sheet.material_name)
    if details is None:
        return None
    if sheet.thickness_mm <= 0.0:
        return 0.0
    if details.min_bend_radius_factor <= 0.0:
        return sheet.thickness_mm * 0.5
    return sheet.thickness_mm * details.min_bend_radius_factor


def _parse_bend_value(state: AppState, text: str, field_name: str) -> float | None:
    try:
        return _parse_float(text)
    except ValueError:
        state.status_message = (f"Ongeldige {field_name}: '{text}'", StatusColor.RED)
        return None


def add_bend_step(state: AppState) -> bool:
    """Append a bend from the bend form to the current job; returns whether it was added."""
    inputs = state.bend_input
    sheet_length = state.current_job.sheet.original_length_mm

    position = _parse_bend_value(state, inputs.position_mm_str, "Buig Positie")
    if position is None:
        return False
    if not 0.0 < position < sheet_length:
        state.status_message = (
            f"Buig posititie ({_fmt(position)}mm) is buiten de plaat lengte (0-{_fmt(sheet_length)}mm).",
            StatusColor.RED,
        )
        return False

    angle = _parse_bend_value(state, inputs.target_angle_deg_str, "Buig Hoek")
    if angle is None:
        return False
    if not MIN_BEND_ANGLE_DEG <= angle <= MAX_BEND_ANGLE_DEG:
        state.status_message = (
            f"Buig hoek ({_fmt(angle)}°) buiten bereik van "
            f"({_fmt(MIN_BEND_ANGLE_DEG)}-{_fmt(MAX_BEND_ANGLE_DEG)}°).",
            StatusColor.RED,
        )
        return False

    radius = _parse_bend_value(state, inputs.radius_mm_str, "Buig Radius")
    if radius is None:
        return False
    if not MIN_BEND_RADIUS_MM <= radius <= MAX_BEND_RADIUS_MM:
        state.status_message = (
            f"Buig radius ({_fmt(radius)}mm) buiten bereik van "
            f"({_fmt(MIN_BEND_RADIUS_MM)}-{_fmt(MAX_BEND_RADIUS_MM)}mm).",
            StatusColor.RED,
        )
        return False

    directions = BendDirection.default_directions()
    idx = inputs.selected_direction_idx
    direction = directions[idx] if 0 <= idx < len(directions) else BendDirection.UP

    recommended = get_recommended_min_bend_radius(state)
    if recommended is not None and 1e-6 < radius < recommended:
        warning = f"Warning: Radius {radius:.2f}mm < recommended min {recommended:.2f}mm for material."
        logger.warning(warning)
        state.status_message = (warning, StatusColor.YELLOW)

    state.current_job.steps.append(
        BendStep(
            sequence_order=len(state.current_job.steps) + 1,
            position_mm=position,
            target_angle_deg=angle,
            radius_mm=radius,
            direction=direction,
        )
    )
    state.status_message = ("Buig stap toegevoegd.", StatusColor.GREEN)
    state.simulated_profile = None
    state.profile_load_status = "Profile outdated due to new bend."
    return True


def clear_all_bend_steps(state: AppState) -> None:
    """Remove every bend from the current job."""
    if not state.current_job.steps:
        state.status_message = ("No bend steps to clear.", None)
        return
    state.current_job.steps.clear()
    state.status_message = ("All bend steps cleared.", StatusColor.GREEN)
    state.simulated_profile = None
    state.profile_load_status = "Profile outdated, bends cleared."


def run_simulation(state: AppState, profile_path: str | Path = DEFAULT_IMAGE_PATH) -> None:
    """Simulate the job's bends and load the profile image shown for it."""
    job = state.current_job
    if not job.steps:
        state.status_message = ("No bend steps to simulate.", StatusColor.YELLOW)
        return

    state.simulation_status = f"Simulating {len(job.steps)} bend steps for job '{job.name}'..."
    state.status_message = (state.simulation_status, None)
    logger.info(state.simulation_status)
    for step in job.steps:
        logger.info(
            "  Simulating Step %d: Pos: %s, Angle: %s, Rad: %s, Dir: %s",
            step.sequence_order,
            _fmt(step.position_mm),
            _fmt(step.target_angle_deg),
            _fmt(step.radius_mm),
            step.direction,
        )

    state.profile_load_status = f"Generating profile (using placeholder: {profile_path})..."
    try:
        image, size = load_image(profile_path)
    except ImageLoadError as exc:
        state.profile_load_status = f"Fout laden profiel afbeelding: {exc}"
        state.simulated_profile = None
    else:
        state.simulated_profile = image
        state.simulated_profile_size = size
        state.profile_load_status = "Simulated profile loaded (placeholder)."

    state.parts_bent_session += 1
    state.simulation_status = "Simulatie compleet."
    state.status_message = ("Simulatie compleet.", StatusColor.GREEN)


def perform_initial_setup(state: AppState, logo_path: str | Path = DEFAULT_IMAGE_PATH) -> None:
    """Load the logo and fill the input forms from the current job."""
    try:
        logo, size = load_image(logo_path)
    except ImageLoadError as exc:
        logger.error("Failed to load app logo: %s", exc)
        state.status_message = (f"Failed to load app logo: {exc}", StatusColor.RED)
    else:
        state.app_logo = logo
        state.app_logo_size = size

    _sync_sheet_inputs(state)
    state.bend_input.position_mm_str = "50.0"
    state.bend_input.target_angle_deg_str = "90.0"
    state.bend_input.radius_mm_str = "2.0"


def handle_save_job(state: AppState, file_path: str | None) -> bool:
    """Save the current job; None means the user cancelled. Returns whether it was saved."""
    if file_path is None:
        logger.info("Save job cancelled.")
        return False
    try:
        save_job_to_file(state.current_job, file_path)
    except JobStorageError as exc:
        logger.error("Failed to save job: %s", exc)
        return False
    logger.info("Job '%s' saved to '%s'", state.current_job.name, file_path)
    return True


def handle_load_job(state: AppState, file_path: str | None) -> bool:
    """Replace the current job with one from a file; None means cancelled. Returns success."""
    if file_path is None:
        logger.info("Load job cancelled.")
        return False
    try:
        job = load_job_from_file(file_path)
    except JobStorageError as exc:
        logger.error("Failed to load job: %s", exc)
        return False
    state.current_job = job
    _sync_sheet_inputs(state)
    state.bend_input = BendInputState()
    state.simulated_profile = None
    state.profile_load_status = "New job loaded, profile outdated."
    logger.info("Job loaded from '%s'", file_path)
    return True