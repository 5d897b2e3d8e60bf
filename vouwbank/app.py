"""Application entry point for the press brake simulator."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from vouwbank.logic import DEFAULT_IMAGE_PATH, perform_initial_setup
from vouwbank.state import AppState

logger = logging.getLogger(__name__)

BUSY_REFRESH_MS = 100
IDLE_REFRESH_MS = 1000


def needs_repaint(state: AppState) -> bool:
    """Whether a simulation or profile load is pending and the window should redraw soon."""
    sim = state.simulation_status.lower()
    profile = state.profile_load_status.lower()
    return (
        "simulating" in sim
        or "processing" in sim
        or "generating" in profile
        or "loading" in profile
    )


def main(argv: list[str] | None = None) -> int:
    """Start the simulator window."""
    parser = argparse.ArgumentParser(prog="vouwbank", description="Press brake bending simulator.")
    parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("Current working directory: %s", Path.cwd())
    logger.info("Attempting to load image from: %s", DEFAULT_IMAGE_PATH)

    import tkinter as tk

    from vouwbank.ui import MainWindow

    root = tk.Tk()
    root.title("Vouwbank Simulator")
    root.geometry("800x600")

    state = AppState()
    perform_initial_setup(state)
    window = MainWindow(root, state)

    def tick() -> None:
        window.refresh()
        root.after(BUSY_REFRESH_MS if needs_repaint(state) else IDLE_REFRESH_MS, tick)

    tick()
    root.mainloop()
    return 0