# segtree/utils/visualization.py

import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd
import numpy as np


def _plottable(value):
    # complex128 subclasses complex, so numpy scalars land here too
    return abs(value) if isinstance(value, complex) else float(value)


def traversal_frame(tree):
    """One row per traversed node: node, lo, hi, depth, value"""
    rows = []
    for node in tree.traverse():
        # Node i sits at depth floor(log2(i + 1)) in the implicit layout
        depth = (node.index + 1).bit_length() - 1
        rows.append({
            'node': node.index,
            'lo': node.lo,
            'hi': node.hi,
            'depth': depth,
            'value': node.value,
        })
    return pd.DataFrame(rows, columns=['node', 'lo', 'hi', 'depth', 'value'])


def plot_tree(tree, save_path=None):
    """Plot node values as a heatmap of depth against covered index

    Complex values are plotted by magnitude.
    """
    frame = traversal_frame(tree)
    n = tree.source_length()
    n_levels = int(frame['depth'].max()) + 1

    grid = np.full((n_levels, n), np.nan)
    for row in frame.itertuples(index=False):
        grid[row.depth, row.lo:row.hi + 1] = _plottable(row.value)

    fig, axes = plt.subplots(2, 1, figsize=(max(6, n * 0.6), 3 + n_levels * 0.6),
                             gridspec_kw={'height_ratios': [1, n_levels]})
    fig.suptitle(f'{type(tree).__name__} over {n} values')

    # Source values
    axes[0].bar(range(n), [_plottable(v) for v in tree.values()])
    axes[0].set_title('Source Values')
    axes[0].set_xlabel('Index')
    axes[0].set_ylabel('Value')

    # Node accumulators by depth
    sns.heatmap(grid, ax=axes[1], annot=n <= 16, fmt='g', cmap='viridis',
                cbar_kws={'label': 'Node value'})
    axes[1].set_title('Node Values by Depth')
    axes[1].set_xlabel('Index')
    axes[1].set_ylabel('Depth')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path)
        print(f"Saved tree plot to {save_path}")
    else:
        plt.show()

    return fig
