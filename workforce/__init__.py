"""Workforce task management: task lifecycle, reassignment by reference and the daily task view."""

__version__ = "1.0.0"
