"""Tkinter screens and in-memory data models for a rubric-based grading system."""

__version__ = "0.1.0"