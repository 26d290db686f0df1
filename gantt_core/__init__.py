"""Gantt scheduling and rendering core."""

__version__ = '0.1.0'
