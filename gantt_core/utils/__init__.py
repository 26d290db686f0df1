"""Utility functions."""

from .config import load_config, get_default_config, merge_config
from .datetime_utils import days_between, format_date, get_days, to_date

__all__ = [
    'load_config',
    'get_default_config',
    'merge_config',
    'days_between',
    'format_date',
    'get_days',
    'to_date',
]
