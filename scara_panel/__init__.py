"""Operator control panel for a SCARA robot arm."""

__version__ = "0.1.0"
