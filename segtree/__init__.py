# segtree/__init__.py

__version__ = '0.1.0'

from .utils.segment_tree import (
    SegmentTree,
    SumSegmentTree,
    MinSegmentTree,
    MaxSegmentTree,
    InvalidInputError,
    OutOfRangeError
)
from . import utils

__all__ = [
    'utils',
    'SegmentTree',
    'SumSegmentTree',
    'MinSegmentTree',
    'MaxSegmentTree',
    'InvalidInputError',
    'OutOfRangeError'
]
