# segtree/utils/__init__.py

from .segment_tree import (
    SegmentTree,
    SumSegmentTree,
    MinSegmentTree,
    MaxSegmentTree,
    TreeNode,
    SegmentTreeError,
    InvalidInputError,
    OutOfRangeError
)
from .logger import get_logger, setup_logger
from .config_loader import load_config, validate_config, build_tree

__all__ = [
    'SegmentTree',
    'SumSegmentTree',
    'MinSegmentTree',
    'MaxSegmentTree',
    'TreeNode',
    'SegmentTreeError',
    'InvalidInputError',
    'OutOfRangeError',
    'get_logger',
    'setup_logger',
    'load_config',
    'validate_config',
    'build_tree'
]
