"""Kanban board with optimistic edits and whole-board persistence."""

__version__ = "0.1.0"
