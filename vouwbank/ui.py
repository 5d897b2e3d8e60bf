"""Tk user interface for the press brake simulator."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from vouwbank import logic
from vouwbank.logic import _fmt as format_number
from vouwbank.state import AppState, BendDirection, BendStep, Die, Punch

logger = logging.getLogger(__name__)

LOAD_JOB_PATH = "jobs/sample_job.json"
SAVE_JOB_PATH = "jobs/my_output_job.json"
LOGO_HEIGHT = 24
MIN_PROFILE_HEIGHT = 200
STEP_COLUMNS = ("#", "Pos", "Hoek", "Graden", "Dir")


def format_step_row(step: BendStep) -> tuple[str, str, str, str, str]:
    """Cells shown for a bend step in the sequence table."""
    return (
        str(step.sequence_order),
        f"{step.position_mm:.1f}",
        f"{step.target_angle_deg:.1f}",
        f"{step.radius_mm:.1f}",
        str(step.direction),
    )


def fit_size(size: tuple[float, float], available: tuple[float, float]) -> tuple[float, float]:
    """Shrink a (width, height) to fit the available space, keeping its aspect ratio."""
    width, height = size
    avail_width, avail_height = available
    if width <= 0 or height <= 0:
        return width, height
    aspect = width / height
    if width > avail_width:
        width = avail_width
        height = width / aspect
    if height > avail_height:
        height = avail_height
        width = height * aspect
    return width, height


def punch_summary(punch: Punch) -> str:
    """One-line description of a punch."""
    return (
        f"Selected Punch: {punch.name} "
        f"(Angle: {format_number(punch.angle_deg)}°, Radius: {format_number(punch.radius_mm)}mm)"
    )


def die_summary(die: Die) -> str:
    """One-line description of a die."""
    return (
        f"Selected Die: {die.name} "
        f"(V-Open: {format_number(die.v_opening_mm)}mm, Angle: {format_number(die.angle_deg)}°)"
    )


class MainWindow:
    """The main window: job setup on the left, machine control and profile on the right."""

    def __init__(self, root: Any, state: AppState) -> None:
        import tkinter as tk
        from tkinter import ttk

        self.root = root
        self.state = state
        self._photos: dict[str, Any] = {}
        self._profile_key: tuple[int, int, int] | None = None

        self._length_var = tk.StringVar(master=root)
        self._thickness_var = tk.StringVar(master=root)
        self._width_var = tk.StringVar(master=root)
        self._position_var = tk.StringVar(master=root)
        self._angle_var = tk.StringVar(master=root)
        self._radius_var = tk.StringVar(master=root)

        self._build_menu(tk)

        top = ttk.Frame(root, padding=(6, 2))
        top.pack(side=tk.TOP, fill=tk.X)
        self._logo_label = ttk.Label(top)
        self._logo_label.pack(side=tk.RIGHT)
        self._clock_label = ttk.Label(top)
        self._clock_label.pack(side=tk.RIGHT, padx=6)

        self._status_label = ttk.Label(root, padding=(6, 2))
        self._status_label.pack(side=tk.BOTTOM, fill=tk.X)
        ttk.Separator(root).pack(side=tk.BOTTOM, fill=tk.X)
        self._default_fg = self._status_label.cget("foreground")

        left = ttk.Frame(root, padding=6, width=380)
        left.pack(side=tk.LEFT, fill=tk.Y)
        ttk.Label(left, text="Taak & Machine Setup", font=("TkDefaultFont", 14, "bold")).pack(anchor=tk.W)
        self._build_sheet_panel(tk, ttk, left)
        self._build_tooling_panel(tk, ttk, left)
        self._build_bend_panel(tk, ttk, left)
        self._build_sequence_panel(tk, ttk, left)

        right = ttk.Frame(root, padding=6)
        right.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        ttk.Label(right, text="Bediening & Uitvoer", font=("TkDefaultFont", 14, "bold")).pack(anchor=tk.W)
        ttk.Separator(right).pack(fill=tk.X, pady=4)
        self._build_execution_panel(tk, ttk, right)
        ttk.Separator(right).pack(fill=tk.X, pady=4)
        self._build_profile_panel(tk, ttk, right)

        self._pull_inputs()
        self.refresh()

    # --- construction -------------------------------------------------

    def _build_menu(self, tk: Any) -> None:
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Laad Taak...", command=self._on_load_job)
        file_menu.add_command(label="Laad Taak Als...", command=self._on_save_job)
        file_menu.add_command(label="Exit", command=self.root.destroy)
        menubar.add_cascade(label="Bestand", menu=file_menu)
        self.root.config(menu=menubar)

    def _form_row(self, ttk: Any, parent: Any, row: int, text: str, var: Any) -> None:
        ttk.Label(parent, text=text).grid(row=row, column=0, sticky="w", padx=(0, 10), pady=2)
        ttk.Entry(parent, textvariable=var, width=14).grid(row=row, column=1, sticky="w", pady=2)

    def _build_sheet_panel(self, tk: Any, ttk: Any, parent: Any) -> None:
        frame = ttk.LabelFrame(parent, text="Plaat Eigenschappen", padding=6)
        frame.pack(fill=tk.X, pady=(10, 0))
        self._form_row(ttk, frame, 0, "Lengte (mm):", self._length_var)
        self._form_row(ttk, frame, 1, "Dikte (mm):", self._thickness_var)
        self._form_row(ttk, frame, 2, "Breedte (mm):", self._width_var)
        ttk.Label(frame, text="Materiaal:").grid(row=3, column=0, sticky="w", pady=2)
        self._material_box = ttk.Combobox(
            frame,
            state="readonly",
            width=18,
            values=[str(name) for name in self.state.material_display_order],
        )
        self._material_box.grid(row=3, column=1, sticky="w", pady=2)
        ttk.Button(frame, text="Update Plaat Eigenschappen", command=self._on_update_sheet).grid(
            row=4, column=0, columnspan=2, sticky="w", pady=(5, 0)
        )
        self._min_radius_label = ttk.Label(frame)
        self._min_radius_label.grid(row=5, column=0, columnspan=2, sticky="w")

    def _build_tooling_panel(self, tk: Any, ttk: Any, parent: Any) -> None:
        frame = ttk.LabelFrame(parent, text="Tooling Setup", padding=6)
        frame.pack(fill=tk.X, pady=(10, 0))
        ttk.Label(frame, text="Punch:").grid(row=0, column=0, sticky="w", pady=2)
        self._punch_box = ttk.Combobox(
            frame, state="readonly", width=18, values=[p.name for p in self.state.available_punches]
        )
        self._punch_box.grid(row=0, column=1, sticky="w", pady=2)
        ttk.Label(frame, text="Die:").grid(row=1, column=0, sticky="w", pady=2)
        self._die_box = ttk.Combobox(
            frame, state="readonly", width=18, values=[d.name for d in self.state.available_dies]
        )
        self._die_box.grid(row=1, column=1, sticky="w", pady=2)
        self._punch_box.bind("<<ComboboxSelected>>", self._on_tooling_selected)
        self._die_box.bind("<<ComboboxSelected>>", self._on_tooling_selected)
        self._punch_label = ttk.Label(frame)
        self._punch_label.grid(row=2, column=0, columnspan=2, sticky="w", pady=(5, 0))
        self._die_label = ttk.Label(frame)
        self._die_label.grid(row=3, column=0, columnspan=2, sticky="w")

    def _build_bend_panel(self, tk: Any, ttk: Any, parent: Any) -> None:
        frame = ttk.LabelFrame(parent, text="Defieër Buig Stap", padding=6)
        frame.pack(fill=tk.X, pady=(10, 0))
        self._form_row(ttk, frame, 0, "Positie (mm):", self._position_var)
        self._form_row(ttk, frame, 1, "Gewenste Hoek (°):", self._angle_var)
        self._form_row(ttk, frame, 2, "Binnen Straal (mm):", self._radius_var)
        ttk.Label(frame, text="Richting:").grid(row=3, column=0, sticky="w", pady=2)
        self._direction_box = ttk.Combobox(
            frame,
            state="readonly",
            width=12,
            values=[str(d) for d in BendDirection.default_directions()],
        )
        self._direction_box.grid(row=3, column=1, sticky="w", pady=2)
        ttk.Button(frame, text="Voeg Buiging Toe Aan De Job", command=self._on_add_bend).grid(
            row=4, column=0, columnspan=2, sticky="w", pady=(5, 0)
        )

    def _build_sequence_panel(self, tk: Any, ttk: Any, parent: Any) -> None:
        self._sequence_frame = ttk.LabelFrame(parent, padding=6)
        self._sequence_frame.pack(fill=tk.BOTH, expand=True, pady=(10, 0))
        self._empty_label = ttk.Label(
            self._sequence_frame, text="Geen buig stappen gedefinieërd voor de huidige job."
        )
        self._steps_tree = ttk.Treeview(
            self._sequence_frame, columns=STEP_COLUMNS, show="headings", height=6
        )
        for column in STEP_COLUMNS:
            self._steps_tree.heading(column, text=column)
            self._steps_tree.column(column, width=60, anchor=tk.E)
        self._clear_button = ttk.Button(
            self._sequence_frame, text="Wis Alle Plooi Stappen", command=self._on_clear_bends
        )

    def _build_execution_panel(self, tk: Any, ttk: Any, parent: Any) -> None:
        frame = ttk.LabelFrame(parent, text="Machine Bediening", padding=6)
        frame.pack(fill=tk.X)
        ttk.Button(
            frame, text="Voer Simulatie Uit & Genereer Profiel", command=self._on_run_simulation
        ).pack(anchor=tk.W)
        self._machine_status_label = ttk.Label(frame)
        self._machine_status_label.pack(anchor=tk.W, pady=(5, 0))
        self._parts_label = ttk.Label(frame)
        self._parts_label.pack(anchor=tk.W)

    def _build_profile_panel(self, tk: Any, ttk: Any, parent: Any) -> None:
        frame = ttk.LabelFrame(parent, text="Simulatie Profiel Plaat", padding=6)
        frame.pack(fill=tk.BOTH, expand=True)
        self._profile_label = ttk.Label(frame, anchor=tk.CENTER)
        self._profile_label.pack(fill=tk.BOTH, expand=True)

    # --- syncing between widgets and state -----------------------------

    def _pull_inputs(self) -> None:
        sheet_input = self.state.sheet_input
        self._length_var.set(sheet_input.length_mm_str)
        self._thickness_var.set(sheet_input.thickness_mm_str)
        self._width_var.set(sheet_input.width_mm_str)
        self._select(self._material_box, sheet_input.selected_material_idx)

        bend_input = self.state.bend_input
        self._position_var.set(bend_input.position_mm_str)
        self._angle_var.set(bend_input.target_angle_deg_str)
        self._radius_var.set(bend_input.radius_mm_str)
        self._select(self._direction_box, bend_input.selected_direction_idx)

        tooling = self.state.tooling_input
        self._select(self._punch_box, tooling.selected_punch_idx)
        self._select(self._die_box, tooling.selected_die_idx)

    def _push_inputs(self) -> None:
        sheet_input = self.state.sheet_input
        sheet_input.length_mm_str = self._length_var.get()
        sheet_input.thickness_mm_str = self._thickness_var.get()
        sheet_input.width_mm_str = self._width_var.get()
        sheet_input.selected_material_idx = self._index_of(
            self._material_box, sheet_input.selected_material_idx
        )

        bend_input = self.state.bend_input
        bend_input.position_mm_str = self._position_var.get()
        bend_input.target_angle_deg_str = self._angle_var.get()
        bend_input.radius_mm_str = self._radius_var.get()
        bend_input.selected_direction_idx = self._index_of(
            self._direction_box, bend_input.selected_direction_idx
        )

    @staticmethod
    def _select(box: Any, index: int) -> None:
        if 0 <= index < len(box.cget("values")):
            box.current(index)
        else:
            box.set("N/A")

    @staticmethod
    def _index_of(box: Any, fallback: int) -> int:
        index = box.current()
        return fallback if index < 0 else index

    # --- actions --------------------------------------------------------

    def _on_update_sheet(self) -> None:
        self._push_inputs()
        logic.update_sheet_properties(self.state)
        self.refresh()

    def _on_add_bend(self) -> None:
        self._push_inputs()
        logic.add_bend_step(self.state)
        self.refresh()

    def _on_clear_bends(self) -> None:
        logic.clear_all_bend_steps(self.state)
        self.refresh()

    def _on_run_simulation(self) -> None:
        self._push_inputs()
        logic.run_simulation(self.state)
        self.refresh()

    def _on_tooling_selected(self, _event: Any = None) -> None:
        tooling = self.state.tooling_input
        tooling.selected_punch_idx = self._index_of(self._punch_box, tooling.selected_punch_idx)
        tooling.selected_die_idx = self._index_of(self._die_box, tooling.selected_die_idx)
        self.refresh()

    def _on_load_job(self) -> None:
        if logic.handle_load_job(self.state, LOAD_JOB_PATH):
            self._pull_inputs()
        self.refresh()

    def _on_save_job(self) -> None:
        self._push_inputs()
        logic.handle_save_job(self.state, SAVE_JOB_PATH)
        self.refresh()

    # --- drawing --------------------------------------------------------

    def refresh(self) -> None:
        """Redraw every widget that shows part of the state."""
        state = self.state
        self._clock_label.configure(
            text=f"CNC Plooibank Sim v0.1 ({datetime.now().strftime('%H:%M:%S')})"
        )
        self._refresh_logo()

        min_radius = logic.get_recommended_min_bend_radius(state)
        self._min_radius_label.configure(
            text="" if min_radius is None else f"Recommended Min Bend Radius: {min_radius:.2f} mm"
        )

        tooling = state.tooling_input
        punches, dies = state.available_punches, state.available_dies
        self._punch_label.configure(
            text=punch_summary(punches[tooling.selected_punch_idx])
            if 0 <= tooling.selected_punch_idx < len(punches)
            else ""
        )
        self._die_label.configure(
            text=die_summary(dies[tooling.selected_die_idx])
            if 0 <= tooling.selected_die_idx < len(dies)
            else ""
        )

        self._refresh_sequence()

        self._machine_status_label.configure(text=f"Machine Status: {state.simulation_status}")
        self._parts_label.configure(
            text=f"Geplooide Onderdelen Deze Sessie: {state.parts_bent_session}"
        )
        self._refresh_profile()

        text, color = state.status_message
        self._status_label.configure(
            text=text, foreground=self._default_fg if color is None else color.value
        )

    def _refresh_logo(self) -> None:
        logo, size = self.state.app_logo, self.state.app_logo_size
        if logo is None or size is None or "logo" in self._photos:
            return
        from PIL import ImageTk

        width, height = size
        scaled_width = max(1, round(LOGO_HEIGHT * width / height)) if height else LOGO_HEIGHT
        photo = ImageTk.PhotoImage(logo.resize((scaled_width, LOGO_HEIGHT)), master=self.root)
        self._photos["logo"] = photo
        self._logo_label.configure(image=photo)

    def _refresh_sequence(self) -> None:
        steps = self.state.current_job.steps
        self._sequence_frame.configure(text=f"Huidge Job Buig Sequentie ({len(steps)})")
        self._steps_tree.delete(*self._steps_tree.get_children())
        self._empty_label.pack_forget()
        self._steps_tree.pack_forget()
        self._clear_button.pack_forget()
        if steps:
            for step in steps:
                self._steps_tree.insert("", "end", values=format_step_row(step))
            self._steps_tree.pack(fill="both", expand=True)
        else:
            self._empty_label.pack(anchor="w")
        self._clear_button.pack(anchor="w", pady=(5, 0))

    def _refresh_profile(self) -> None:
        image, size = self.state.simulated_profile, self.state.simulated_profile_size
        if image is None or size is None:
            self._photos.pop("profile", None)
            self._profile_key = None
            self._profile_label.configure(image="", text=self.state.profile_load_status)
            return
        available = (
            max(1, self._profile_label.winfo_width()),
            max(MIN_PROFILE_HEIGHT, self._profile_label.winfo_height()),
        )
        width, height = fit_size(size, available)
        key = (id(image), max(1, round(width)), max(1, round(height)))
        if key != self._profile_key:
            from PIL import ImageTk

            photo = ImageTk.PhotoImage(image.resize(key[1:]), master=self.root)
            self._photos["profile"] = photo
            self._profile_key = key
        self._profile_label.configure(image=self._photos["profile"], text="")