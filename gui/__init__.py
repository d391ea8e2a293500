"""Tkinter front end for Algebra Drill."""

from gui.app import DrillApp

__all__ = ["DrillApp"]
