# segtree/utils/config_loader.py

import logging
from pathlib import Path

import yaml

from .segment_tree import MaxSegmentTree, MinSegmentTree, SumSegmentTree

logger = logging.getLogger(__name__)

TREE_TYPES = {
    'sum': SumSegmentTree,
    'min': MinSegmentTree,
    'max': MaxSegmentTree,
}

DEFAULT_CONFIG = {
    'operation': 'sum',
    'updates': [],
    'queries': [],
    'log_level': 'INFO',
}


def load_config(config_path):
    """Load configuration from YAML file"""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    logger.debug("Loaded config from %s", config_path)
    return config or {}


def _pairs(config, key):
    pairs = config[key]
    if not isinstance(pairs, list):
        raise ValueError(f"'{key}' must be a list of pairs, got {type(pairs).__name__}")

    result = []
    for pair in pairs:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise ValueError(f"Invalid entry in '{key}': {pair!r} (expected a pair)")
        result.append(tuple(pair))
    return result


def validate_config(config):
    """
    Check a demo configuration and fill in defaults.

    Args:
        config (dict): Raw configuration, e.g. from load_config()

    Returns:
        dict: Configuration with 'values', 'operation', 'updates', 'queries'
            and 'log_level' keys

    Raises:
        KeyError: If 'values' is missing
        ValueError: If an entry has the wrong shape or an unknown operation
    """
    if 'values' not in config:
        raise KeyError("Missing required configuration key: 'values'")

    validated = dict(DEFAULT_CONFIG)
    validated.update(config)

    values = validated['values']
    if not isinstance(values, list) or not values:
        raise ValueError(f"'values' must be a non-empty list, got {values!r}")

    operation = str(validated['operation']).lower()
    if operation not in TREE_TYPES:
        raise ValueError(
            f"Unknown operation '{validated['operation']}', expected one of {sorted(TREE_TYPES)}"
        )
    validated['operation'] = operation

    validated['updates'] = _pairs(validated, 'updates')
    validated['queries'] = _pairs(validated, 'queries')
    validated['log_level'] = str(validated['log_level']).upper()

    return validated


def build_tree(config):
    """Build the segment tree type named by config['operation']."""
    return TREE_TYPES[config['operation']](config['values'])
