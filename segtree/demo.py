#!/usr/bin/env python3
# segtree/demo.py

"""
Demo driver: build a segment tree, print it, apply a few point updates and
run range queries.

    python -m segtree.demo --config config/segment_tree.yaml
    python -m segtree.demo --values 5 1 4 2 --verbose
"""

import argparse
import logging
import sys

from .utils.config_loader import build_tree, load_config, validate_config
from .utils.logger import get_logger, setup_logger
from .utils.segment_tree import SegmentTreeError

DEFAULT_DEMO_CONFIG = {
    'values': [1, 2, 3, 4],
    'operation': 'sum',
    'updates': [[0, 4], [3, 2]],
    'queries': [[0, 3], [0, 0], [2, 3]],
}


def log_tree(tree, logger, title):
    logger.info(title)
    for line in tree.format_tree():
        logger.info(f"  {line}")


def run_demo(config, logger):
    """
    Run the demo described by a validated config.

    Args:
        config (dict): Output of validate_config()
        logger (logging.Logger): Where structure and results are reported

    Returns:
        tuple: (tree, results) where results holds one dict per query with
            'left', 'right' and 'result' keys
    """
    tree = build_tree(config)
    logger.info(f"Built {type(tree).__name__} over {tree.source_length()} values "
                f"({tree.node_storage_length()} node slots)")
    log_tree(tree, logger, "Initial tree:")

    for index, value in config['updates']:
        tree.insert(index, value)
        logger.info(f"Set index {index} to {value}")

    if config['updates']:
        log_tree(tree, logger, "Tree after updates:")

    results = []
    for left, right in config['queries']:
        result = tree.query(left, right)
        logger.info(f"{config['operation']}[{left}, {right}] = {result}")
        results.append({'left': left, 'right': right, 'result': result})

    return tree, results


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Segment tree demo')
    parser.add_argument('--config', default=None,
                        help='Path to YAML configuration file')
    parser.add_argument('--values', type=float, nargs='+', default=None,
                        help='Override the configured values')
    parser.add_argument('--log-file', default=None,
                        help='Also write the log to this file')
    parser.add_argument('--plot', default=None,
                        help='Save a plot of the final tree to this path')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None):
    """Main function to run the demo; returns the process exit code"""
    args = parse_args(argv)

    try:
        if args.config:
            raw_config = load_config(args.config)
        elif args.values is not None:
            # Default updates target the default values; only query the whole range
            raw_config = {'queries': [[0, len(args.values) - 1]]}
        else:
            raw_config = dict(DEFAULT_DEMO_CONFIG)

        if args.values is not None:
            # Whole numbers stay ints so integer trees print cleanly
            raw_config['values'] = [int(v) if v.is_integer() else v for v in args.values]
        config = validate_config(raw_config)
    except (FileNotFoundError, KeyError, ValueError) as e:
        get_logger('segtree').error(f"Invalid configuration: {e}")
        return 1

    level = logging.DEBUG if args.verbose else getattr(logging, config['log_level'], logging.INFO)
    logger = setup_logger('segtree', args.log_file, level=level)

    try:
        tree, _ = run_demo(config, logger)
    except (SegmentTreeError, TypeError) as e:
        logger.error(f"Demo failed: {e}")
        return 1

    if args.plot:
        from .utils.visualization import plot_tree
        plot_tree(tree, save_path=args.plot)

    return 0


if __name__ == '__main__':
    sys.exit(main())
