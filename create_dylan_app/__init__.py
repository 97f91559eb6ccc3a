"""create-dylan-app -- interactive React + Vite project scaffolder."""

__version__ = "0.1.0"
