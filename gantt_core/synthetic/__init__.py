"""Synthetic project data."""

from .generator import ProjectGenerator

__all__ = ['ProjectGenerator']
