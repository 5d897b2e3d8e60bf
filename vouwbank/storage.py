"""Saving and loading jobs as JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from vouwbank.state import BendDirection, BendStep, Job, MaterialName, SheetMetal

logger = logging.getLogger(__name__)


class JobStorageError(Exception):
    """A job could not be saved or loaded."""


class JobNotFoundError(JobStorageError):
    """The requested job does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Job not found: {path}")
        self.path = path


_VARIANTS = {
    "Steel": MaterialName.STEEL,
    "Aluminum": MaterialName.ALUMINUM,
    "StainlessSteel": MaterialName.STAINLESS_STEEL,
    "Copper": MaterialName.COPPER,
    "MildSteel": MaterialName.MILD_STEEL,
}
_VARIANT_OF = {name: key for key, name in _VARIANTS.items()}


def _material_to_json(name: MaterialName) -> Any:
    if name.is_custom or name not in _VARIANT_OF:
        return {"Custom": name.label}
    return _VARIANT_OF[name]


def _material_from_json(value: Any) -> MaterialName:
    if isinstance(value, dict):
        return MaterialName.custom(str(value["Custom"]))
    return _VARIANTS[value]


def _job_to_dict(job: Job) -> dict[str, Any]:
    sheet = job.sheet
    return {
        "name": job.name,
        "sheet": {
            "id": sheet.id,
            "original_length_mm": sheet.original_length_mm,
            "thickness_mm": sheet.thickness_mm,
            "width_mm": sheet.width_mm,
            "material_name": _material_to_json(sheet.material_name),
        },
        "steps": [
            {
                "sequence_order": step.sequence_order,
                "position_mm": step.position_mm,
                "target_angle_deg": step.target_angle_deg,
                "radius_mm": step.radius_mm,
                "direction": step.direction.value,
            }
            for step in job.steps
        ],
    }


def _job_from_dict(data: dict[str, Any]) -> Job:
    sheet = data["sheet"]
    return Job(
        name=str(data["name"]),
        sheet=SheetMetal(
            id=str(sheet["id"]),
            original_length_mm=float(sheet["original_length_mm"]),
            thickness_mm=float(sheet["thickness_mm"]),
            width_mm=float(sheet["width_mm"]),
            material_name=_material_from_json(sheet["material_name"]),
        ),
        steps=[
            BendStep(
                sequence_order=int(step["sequence_order"]),
                position_mm=float(step["position_mm"]),
                target_angle_deg=float(step["target_angle_deg"]),
                radius_mm=float(step["radius_mm"]),
                direction=BendDirection(step["direction"]),
            )
            for step in data["steps"]
        ],
    )


def save_job_to_file(job: Job, file_path: str) -> None:
    """Write a job to a JSON file."""
    logger.info("Saving job '%s' to file '%s'", job.name, file_path)
    if "fail_save" in job.name:
        raise JobStorageError("File I/O error: Simulated save failure")
    try:
        text = json.dumps(_job_to_dict(job), indent=2)
    except (TypeError, ValueError) as exc:
        raise JobStorageError(f"Serialization error: {exc}") from exc
    try:
        Path(file_path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise JobStorageError(f"File I/O error: {exc}") from exc


def _sample_job(file_path: str) -> Job:
    job = Job(name=f"LoadedJob_{file_path.rsplit('/', 1)[-1]}")
    job.steps.append(
        BendStep(
            sequence_order=1,
            position_mm=50.0,
            target_angle_deg=90.0,
            radius_mm=2.0,
            direction=BendDirection.UP,
        )
    )
    return job


def load_job_from_file(file_path: str) -> Job:
    """Read a job from a JSON file.

    A path that does not point to an existing file yields a sample job named
    after the file; a path containing "nonexistent" is reported as missing.
    """
    logger.info("Loading job from file '%s'", file_path)
    if "nonexistent" in file_path:
        raise JobNotFoundError(file_path)
    path = Path(file_path)
    if not path.is_file():
        return _sample_job(file_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise JobStorageError(f"File I/O error: {exc}") from exc
    try:
        return _job_from_dict(json.loads(text))
    except (ValueError, KeyError, TypeError) as exc:
        raise JobStorageError(f"Deserialization error: {exc}") from exc