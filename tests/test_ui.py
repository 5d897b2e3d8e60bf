import pytest

from vouwbank.state import BendDirection, BendStep, Die, Punch, default_dies, default_punches
from vouwbank.ui import die_summary, fit_size, format_step_row, punch_summary


def test_format_step_row_cells():
    step = BendStep(1, 50.0, 90.0, 2.0, BendDirection.UP)
    assert format_step_row(step) == ("1", "50.0", "90.0", "2.0", "Up")


def test_format_step_row_direction_and_order():
    step = BendStep(7, 10.0, 45.0, 0.0, BendDirection.DOWN)
    row = format_step_row(step)
    assert row[0] == "7"
    assert row[4] == "Down"
    assert len(row) == 5


def test_format_step_row_uses_one_decimal():
    step = BendStep(2, 12.345, 89.99, 1.04, BendDirection.UP)
    row = format_step_row(step)
    assert all(cell.count(".") == 1 and len(cell.split(".")[1]) == 1 for cell in row[1:4])


def test_fit_size_keeps_small_image():
    assert fit_size((400.0, 200.0), (1000.0, 1000.0)) == (400.0, 200.0)


@pytest.mark.parametrize(
    "size, available",
    [
        ((400.0, 200.0), (200.0, 1000.0)),
        ((200.0, 400.0), (1000.0, 100.0)),
        ((800.0, 600.0), (300.0, 150.0)),
        ((1000.0, 50.0), (120.0, 10.0)),
    ],
)
def test_fit_size_fits_and_keeps_aspect(size, available):
    width, height = fit_size(size, available)
    assert width <= available[0] + 1e-9
    assert height <= available[1] + 1e-9
    assert width / height == pytest.approx(size[0] / size[1])


def test_fit_size_fills_limiting_side():
    width, height = fit_size((400.0, 200.0), (200.0, 1000.0))
    assert width == pytest.approx(200.0)


def test_punch_summary_default():
    assert punch_summary(default_punches()[0]) == (
        "Selected Punch: P88.10.R06 (Angle: 88°, Radius: 0.6mm)"
    )


def test_die_summary_default():
    assert die_summary(default_dies()[1]) == "Selected Die: D20.60.R3 (V-Open: 20mm, Angle: 60°)"


def test_summaries_name_the_tool():
    punch = Punch("Custom P", 40.0, 85.5, 1.25)
    die = Die("Custom D", 14.5, 88.0, 1.0)
    assert punch_summary(punch).startswith("Selected Punch: Custom P (")
    assert "85.5°" in punch_summary(punch)
    assert die_summary(die).startswith("Selected Die: Custom D (")
    assert "14.5mm" in die_summary(die)