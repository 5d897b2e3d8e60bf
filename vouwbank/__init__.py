"""Press brake job planning and bending simulation with a Tk interface."""

__version__ = "0.1.0"