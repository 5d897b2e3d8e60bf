import json

import pytest

from vouwbank.state import BendDirection, BendStep, Job, MaterialName, SheetMetal
from vouwbank.storage import (
    JobNotFoundError,
    JobStorageError,
    load_job_from_file,
    save_job_to_file,
)


def _job(material=MaterialName.ALUMINUM):
    job = Job(
        name="Bracket",
        sheet=SheetMetal(id="S-1", original_length_mm=250.5, thickness_mm=1.5, width_mm=80.0, material_name=material),
    )
    job.steps.append(BendStep(1, 40.0, 90.0, 2.0, BendDirection.UP))
    job.steps.append(BendStep(2, 120.0, 45.0, 0.0, BendDirection.DOWN))
    return job


def test_save_failure_is_reported():
    with pytest.raises(JobStorageError, match="Simulated save failure"):
        save_job_to_file(Job(name="job_fail_save"), "whatever.json")


def test_round_trip(tmp_path):
    path = str(tmp_path / "job.json")
    job = _job()
    save_job_to_file(job, path)
    assert load_job_from_file(path) == job


def test_round_trip_custom_material(tmp_path):
    path = str(tmp_path / "custom.json")
    job = _job(MaterialName.custom("Brass"))
    save_job_to_file(job, path)
    loaded = load_job_from_file(path)
    assert loaded.sheet.material_name == MaterialName.custom("Brass")
    assert loaded.sheet.material_name != MaterialName.STEEL


def test_builtin_material_written_as_variant(tmp_path):
    path = tmp_path / "job.json"
    save_job_to_file(_job(MaterialName.STAINLESS_STEEL), str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["sheet"]["material_name"] == "StainlessSteel"
    assert data["steps"][1]["direction"] == "Down"


def test_save_into_missing_directory_fails(tmp_path):
    with pytest.raises(JobStorageError):
        save_job_to_file(_job(), str(tmp_path / "missing" / "job.json"))


def test_load_nonexistent_raises_not_found():
    with pytest.raises(JobNotFoundError, match="jobs/nonexistent.json") as info:
        load_job_from_file("jobs/nonexistent.json")
    assert info.value.path == "jobs/nonexistent.json"
    assert isinstance(info.value, JobStorageError)


def test_load_missing_file_gives_sample_job(tmp_path):
    job = load_job_from_file(str(tmp_path) + "/sample_job.json")
    assert job.name == "LoadedJob_sample_job.json"
    assert job.sheet == SheetMetal()
    assert job.steps == [BendStep(1, 50.0, 90.0, 2.0, BendDirection.UP)]


def test_load_invalid_json_raises(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(JobStorageError, match="Deserialization error"):
        load_job_from_file(str(path))


def test_load_unknown_direction_raises(tmp_path):
    path = tmp_path / "bad.json"
    save_job_to_file(_job(), str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    data["steps"][0]["direction"] = "Sideways"
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(JobStorageError):
        load_job_from_file(str(path))