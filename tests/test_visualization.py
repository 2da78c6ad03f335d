# tests/test_visualization.py

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt

from segtree.utils.segment_tree import SegmentTree
from segtree.utils.visualization import plot_tree, traversal_frame


def test_traversal_frame():
    frame = traversal_frame(SegmentTree([1, 2, 3, 4]))

    assert list(frame.columns) == ['node', 'lo', 'hi', 'depth', 'value']
    assert list(frame['node']) == [0, 1, 3, 4, 2, 5, 6]
    assert list(frame['depth']) == [0, 1, 2, 2, 1, 2, 2]
    assert list(frame['value']) == [10, 3, 1, 2, 7, 3, 4]

    # Each level of a full tree over 4 values covers the whole array
    for _, level in frame.groupby('depth'):
        assert level['value'].sum() == 10


def test_plot_tree_saves_figure(tmp_path):
    save_path = tmp_path / 'tree.png'
    fig = plot_tree(SegmentTree([5, 1, 4, 2, 3]), save_path=save_path)

    assert save_path.exists()
    assert len(fig.axes) >= 2
    plt.close(fig)


def test_plot_complex_tree(tmp_path):
    save_path = tmp_path / 'complex.png'
    fig = plot_tree(SegmentTree([3 + 4j, 1j, 2]), save_path=save_path)

    assert save_path.exists()
    plt.close(fig)
