import pytest

from vouwbank.app import main, needs_repaint
from vouwbank.state import AppState


def test_default_state_is_idle():
    assert needs_repaint(AppState()) is False


@pytest.mark.parametrize(
    "simulation_status",
    ["Simulating 2 bend steps for job 'X'...", "PROCESSING", "still processing data"],
)
def test_busy_simulation_requests_repaint(simulation_status):
    state = AppState(simulation_status=simulation_status)
    assert needs_repaint(state) is True


@pytest.mark.parametrize(
    "profile_status",
    ["Generating profile (using placeholder: assets/drawing.png)...", "Loading profile", "LOADING"],
)
def test_pending_profile_requests_repaint(profile_status):
    state = AppState(profile_load_status=profile_status)
    assert needs_repaint(state) is True


@pytest.mark.parametrize(
    "simulation_status, profile_status",
    [
        ("Simulatie compleet.", "Simulated profile loaded (placeholder)."),
        ("Ready", "Profile outdated due to new bend."),
        ("Ready", "New job loaded, profile outdated."),
    ],
)
def test_finished_states_do_not_repaint(simulation_status, profile_status):
    state = AppState(simulation_status=simulation_status, profile_load_status=profile_status)
    assert needs_repaint(state) is False


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2