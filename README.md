# vouwbank

A small desktop tool for planning jobs on a CNC press brake (*vouwbank*).
You describe a sheet of metal and a sequence of bends, pick tooling, and
then run a simulation that records the job and shows a profile image.

## Installation

```
pip install .
```

The interface uses Tkinter, which comes with most Python installations.
Images are loaded with Pillow.

## Running

```
vouwbank
```

This opens the "Vouwbank Simulator" window (800×600). It has the following panels:

- **Plaat Eigenschappen**: length, thickness and width in millimetres, plus the
  material (Steel, Aluminum, Stainless Steel, Copper or Mild Steel). Dimensions
  must be between 0.1 and 10000 mm. When you apply new sheet properties with
  "Update Plaat Eigenschappen", the existing bend steps are cleared. The panel
  also shows the recommended minimum bend radius, which is the sheet thickness
  multiplied by the material's factor.
- **Tooling Setup**: choose a punch and a die from the built-in sets. The
  main values of each are shown below the selection.
- **Defieër Buig Stap**: give the position (strictly inside the sheet length),
  the target angle (1–179°), the inner radius (0–500 mm) and the direction
  (Up or Down) of a bend, then add it to the job. If the radius is above zero
  but below the recommended minimum, a warning is written to the log. The bend
  is still added.
- **Huidge Job Buig Sequentie**: a table of the bends in the current job,
  with a button to clear them all.
- **Machine Bediening**: runs the simulation and counts the parts bent in this
  session.
- **Simulatie Profiel Plaat**: shows the profile image, scaled to fit, or the
  profile status text when no image is loaded.

The status bar at the bottom shows the latest message. Errors are shown in red,
successes in green, and warnings in yellow.

The **Bestand** menu has three entries. "Laad Taak..." loads
`jobs/sample_job.json`. "Laad Taak Als..." saves the current job to
`jobs/my_output_job.json`. "Exit" closes the window. Both paths are relative to
the working directory. If saving or loading fails, the error is logged.

The window looks for its images in `assets/drawing.png`, relative to the
working directory. That image is used for the logo and for the profile. If the
file is missing, the status bar reports it and everything else works as normal.

## Using the library

The job model and its operations also work without the window:

```python
from vouwbank.state import AppState
from vouwbank import logic

state = AppState()
state.sheet_input.length_mm_str = "500"
logic.update_sheet_properties(state)      # True when accepted

state.bend_input.position_mm_str = "120"
state.bend_input.target_angle_deg_str = "90"
state.bend_input.radius_mm_str = "3"
logic.add_bend_step(state)                # True when added

print(state.current_job.steps)
print(state.status_message)               # ("Buig stap toegevoegd.", StatusColor.GREEN)
print(logic.get_recommended_min_bend_radius(state))
```

Invalid input does not raise. Instead, the operation returns `False` and puts an
error in `state.status_message`. The other operations in `vouwbank.logic` are:

- `clear_all_bend_steps`
- `run_simulation`
- `perform_initial_setup`
- `handle_save_job`
- `handle_load_job`
- `load_image`, which raises `ImageLoadError`

`vouwbank.app.needs_repaint(state)` reports whether a simulation or profile
load is still pending.

### Job files

`vouwbank.storage.save_job_to_file(job, path)` writes a job as JSON.
`vouwbank.storage.load_job_from_file(path)` reads one back. Failures raise
`JobStorageError`. A few cases behave differently:

- A job whose name contains `fail_save` is refused.
- A path containing `nonexistent` raises `JobNotFoundError`.
- Any other path that is not an existing file returns a sample job named
  `LoadedJob_<file name>`, which has one 90° upward bend at 50 mm.

## What it does not do

- The simulation does not calculate the bent geometry. It logs the bend steps
  and counts the part. As the profile, it shows the fixed image
  `assets/drawing.png`, not a drawing of the job.
- The selected tooling is not used in any calculation.
- There are no file dialogs, because the menu uses the fixed job paths above.

## Tests

```
pip install .[test]
pytest
```