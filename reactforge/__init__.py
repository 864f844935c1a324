"""reactforge -- interactive Vite + React project scaffolder."""

__version__ = "0.1.0"
