"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any, Optional


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            data = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return data


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'timeline': {
            'day_width': 40,
            'minimum_span_days': 1,
            'inclusive_end': False,
            'time_scale': 'day',
            'minimum_view_months': 12,
        },
        'rows': {
            'row_height': 50,  # shared by dependency routing and the task list
            'buffer_size': 5,
        },
        'columns': {
            'buffer_size': 0,
        },
        'dependencies': {
            'arrow_size': 5,
        },
        'utilization': {
            'default_units': 100,
            'base_hours_per_day': 8,
            'overallocation_threshold': 1.0,
        },
        'generator': {
            'phase_count': 4,
            'tasks_per_phase': 6,
            'resource_count': 3,
            'dependency_probability': 0.5,
        },
    }


def merge_config(overrides: Optional[Dict[str, Any]], base: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Deep-merge user settings over the defaults."""
    merged = copy.deepcopy(base if base is not None else get_default_config())
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(value, merged[key])
        else:
            merged[key] = value
    return merged


def resolve_config(config_path: Optional[str]) -> Dict[str, Any]:
    """Load a config file when one exists, merged over the defaults."""
    if config_path and Path(config_path).exists():
        return merge_config(load_config(config_path))
    return get_default_config()
