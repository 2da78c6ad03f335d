"""
Segment tree data structure for logarithmic range queries and point updates.
Implements a generic tree plus Sum, Min and Max segment trees.
"""

import logging
import math
import numbers
import operator
from collections import namedtuple
from typing import Callable, Iterator, List, Optional

import numpy as np

logger = logging.getLogger(__name__)

TreeNode = namedtuple('TreeNode', ['index', 'lo', 'hi', 'value'])


class SegmentTreeError(Exception):
    """Base class for segment tree errors."""


class InvalidInputError(SegmentTreeError, ValueError):
    """Raised when a tree cannot be built from the given values."""


class OutOfRangeError(SegmentTreeError, IndexError):
    """Raised when an index or range falls outside [0, n - 1]."""


def _to_python(value):
    """Unwrap numpy scalars so callers get plain ints/floats back."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def _is_number(value) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def _left_child(index: int) -> int:
    return 2 * index + 1


def _right_child(index: int) -> int:
    return 2 * index + 2


class SegmentTree:
    """Array-backed binary segment tree over a fixed-length sequence.

    Node ``i`` has its children at ``2i + 1`` and ``2i + 2``; the root is
    node ``0`` and covers ``[0, n - 1]``. A node covering ``[lo, hi]`` splits
    at ``mid = (lo + hi) // 2`` into ``[lo, mid]`` and ``[mid + 1, hi]``.

    The tree is not safe for concurrent use: ``insert`` rewrites several
    nodes in turn, so readers and writers sharing a tree need an external
    lock.
    """

    def __init__(self, values, operation: Callable = operator.add,
                 neutral_element=0, inverse: Optional[Callable] = operator.sub):
        """Build the tree from ``values``.

        Args:
            values (sequence): Non-empty, one-dimensional numeric values
            operation (callable): Associative operation combining two nodes
            neutral_element: Identity of ``operation``, returned for ranges
                disjoint from a query
            inverse (callable, optional): ``inverse(new, old)`` gives the delta
                that ``operation`` applies to turn ``old`` into ``new``. Without
                one, updates recompute the path from the children.

        Raises:
            InvalidInputError: If ``values`` is empty, nested or not numeric
        """
        try:
            if not isinstance(values, np.ndarray):
                values = list(values)
            source = np.array(values)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Cannot build a segment tree from {values!r}: {e}") from e

        if source.ndim != 1:
            raise InvalidInputError(f"Values must be one-dimensional, got shape {source.shape}")
        if source.size == 0:
            raise InvalidInputError("Cannot build a segment tree from an empty sequence")
        if not (np.issubdtype(source.dtype, np.number) or source.dtype == object):
            raise InvalidInputError(f"Values must be numeric, got dtype {source.dtype}")

        if np.issubdtype(source.dtype, np.integer):
            # Python ints never overflow; fixed-width numpy ints would wrap
            source = source.astype(object)
        elif source.dtype == object:
            for value in source:
                if not _is_number(value):
                    raise InvalidInputError(f"Values must be numeric, got {value!r}")
            source = np.array([_to_python(value) for value in source], dtype=object)

        self.operation = operation
        self.neutral_element = neutral_element
        self.inverse = inverse

        self._source = source
        # 4n + 1 slots hold the tree for any n, whatever the midpoints
        self._nodes = np.zeros(4 * source.size + 1, dtype=source.dtype)

        self.build(0, 0, self._last_index)
        logger.debug(
            "Built segment tree over %d values (%d node slots), root=%r",
            self.source_length(), self.node_storage_length(), self.total()
        )

    @property
    def _last_index(self) -> int:
        return self._source.size - 1

    def build(self, node_index: int, lo: int, hi: int):
        """Recompute node ``node_index`` and its subtree over ``[lo, hi]``.

        O(n) over the whole tree, O(log n) stack depth.

        Returns:
            The value stored at ``node_index``
        """
        if lo == hi:
            self._nodes[node_index] = self._source[lo]
        else:
            mid = (lo + hi) // 2
            left_value = self.build(_left_child(node_index), lo, mid)
            right_value = self.build(_right_child(node_index), mid + 1, hi)
            self._nodes[node_index] = self.operation(left_value, right_value)
        return self._nodes[node_index]

    def _check_index(self, index, name='index') -> int:
        index = operator.index(index)
        if not 0 <= index <= self._last_index:
            raise OutOfRangeError(
                f"{name} {index} out of range [0, {self._last_index}]"
            )
        return index

    def _query(self, left: int, right: int, node_index: int, lo: int, hi: int):
        if right < lo or left > hi:
            # Not covered
            return self.neutral_element
        if left <= lo and hi <= right:
            return self._nodes[node_index]

        mid = (lo + hi) // 2
        return self.operation(
            self._query(left, right, _left_child(node_index), lo, mid),
            self._query(left, right, _right_child(node_index), mid + 1, hi)
        )

    def query(self, left: int, right: int):
        """Aggregate ``source[left..right]`` inclusive in O(log n).

        Raises:
            OutOfRangeError: If either bound is outside ``[0, n - 1]`` or
                ``left > right``
        """
        left = self._check_index(left, 'left')
        right = self._check_index(right, 'right')
        if left > right:
            raise OutOfRangeError(f"Empty range: left {left} > right {right}")

        return _to_python(self._query(left, right, 0, 0, self._last_index))

    def query_range_sum(self, left: int, right: int):
        return self.query(left, right)

    def _promote(self, value):
        """Widen float/complex storage so ``value`` fits, keeping both lengths.

        Integer trees already hold Python ints in object storage.
        """
        if self._source.dtype == object:
            return
        value_dtype = np.asarray(value).dtype
        if np.issubdtype(value_dtype, np.integer):
            # Any int fits a float tree's dtype; uint64 would not promote cleanly
            return
        dtype = np.result_type(self._source.dtype, value_dtype)
        if dtype != self._source.dtype:
            logger.debug("Promoting segment tree storage from %s to %s", self._source.dtype, dtype)
            self._source = self._source.astype(dtype)
            self._nodes = self._nodes.astype(dtype)

    def _insert_delta(self, index: int, new_value, delta, node_index: int, lo: int, hi: int):
        if not lo <= index <= hi:
            return

        self._nodes[node_index] = self.operation(self._nodes[node_index], delta)
        if lo == hi:
            self._source[index] = new_value
            return

        mid = (lo + hi) // 2
        self._insert_delta(index, new_value, delta, _left_child(node_index), lo, mid)
        self._insert_delta(index, new_value, delta, _right_child(node_index), mid + 1, hi)

    def _insert_rebuild(self, index: int, new_value, node_index: int, lo: int, hi: int):
        if lo == hi:
            self._source[index] = new_value
            self._nodes[node_index] = new_value
            return

        mid = (lo + hi) // 2
        left, right = _left_child(node_index), _right_child(node_index)
        if index <= mid:
            self._insert_rebuild(index, new_value, left, lo, mid)
        else:
            self._insert_rebuild(index, new_value, right, mid + 1, hi)
        self._nodes[node_index] = self.operation(self._nodes[left], self._nodes[right])

    def insert(self, index: int, new_value) -> None:
        """Set position ``index`` to ``new_value`` (an absolute value, not a delta).

        Only the nodes on the root-to-leaf path of ``index`` change.

        Raises:
            OutOfRangeError: If ``index`` is outside ``[0, n - 1]``; the tree
                is left untouched
            InvalidInputError: If ``new_value`` is not a number
        """
        index = self._check_index(index)
        if not _is_number(new_value):
            raise InvalidInputError(f"New value must be numeric, got {new_value!r}")
        new_value = _to_python(new_value)
        self._promote(new_value)

        old_value = self._source[index]
        if self.inverse is not None:
            delta = self.inverse(new_value, old_value)
            self._insert_delta(index, new_value, delta, 0, 0, self._last_index)
        else:
            self._insert_rebuild(index, new_value, 0, 0, self._last_index)

        logger.debug("Set index %d: %r -> %r", index, _to_python(old_value), new_value)

    def update(self, index: int, new_value) -> None:
        self.insert(index, new_value)

    def __setitem__(self, index: int, new_value):
        self.insert(index, new_value)

    def __getitem__(self, index: int):
        return _to_python(self._source[self._check_index(index)])

    def __len__(self) -> int:
        return self.source_length()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.values()!r})"

    def total(self):
        """Aggregate over the whole array (the root node)."""
        return _to_python(self._nodes[0])

    def values(self) -> list:
        """Copy of the source sequence as a list."""
        return self._source.tolist()

    def source_length(self) -> int:
        return int(self._source.size)

    def node_storage_length(self) -> int:
        return int(self._nodes.size)

    def get_arr_size(self) -> int:
        return self.source_length()

    def get_tree_size(self) -> int:
        return self.node_storage_length()

    def traverse(self) -> Iterator[TreeNode]:
        """Yield every populated node in pre-order.

        Each call starts a fresh, read-only walk from the root.
        """
        stack = [(0, 0, self._last_index)]
        while stack:
            node_index, lo, hi = stack.pop()
            if node_index >= self._nodes.size:
                continue
            yield TreeNode(node_index, lo, hi, _to_python(self._nodes[node_index]))
            if lo != hi:
                mid = (lo + hi) // 2
                # Right pushed first so the left subtree comes out first
                stack.append((_right_child(node_index), mid + 1, hi))
                stack.append((_left_child(node_index), lo, mid))

    def format_tree(self) -> List[str]:
        """Render the traversal as ``"index(lo, hi): value"`` lines."""
        return [f"{node.index}({node.lo}, {node.hi}): {node.value}" for node in self.traverse()]


class SumSegmentTree(SegmentTree):
    """Segment tree that finds range sums."""

    def __init__(self, values):
        super().__init__(
            values,
            operation=operator.add,
            neutral_element=0,
            inverse=operator.sub
        )

    def sum(self, left: int = 0, right: Optional[int] = None):
        """Returns sum over [left, right]; ``right`` defaults to the last index."""
        if right is None:
            right = self._last_index
        return self.query(left, right)


class MinSegmentTree(SegmentTree):
    """Segment tree that finds range minimums."""

    def __init__(self, values):
        super().__init__(
            values,
            operation=min,
            neutral_element=math.inf,
            inverse=None
        )

    def min(self, left: int = 0, right: Optional[int] = None):
        """Returns min over [left, right]."""
        if right is None:
            right = self._last_index
        return self.query(left, right)


class MaxSegmentTree(SegmentTree):
    """Segment tree that finds range maximums."""

    def __init__(self, values):
        super().__init__(
            values,
            operation=max,
            neutral_element=-math.inf,
            inverse=None
        )

    def max(self, left: int = 0, right: Optional[int] = None):
        """Returns max over [left, right]."""
        if right is None:
            right = self._last_index
        return self.query(left, right)
