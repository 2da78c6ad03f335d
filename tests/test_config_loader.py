# tests/test_config_loader.py

import pytest

from segtree.utils.config_loader import build_tree, load_config, validate_config
from segtree.utils.segment_tree import MaxSegmentTree, MinSegmentTree, SumSegmentTree


def write_config(tmp_path, text):
    path = tmp_path / 'segment_tree.yaml'
    path.write_text(text)
    return path


def test_load_config(tmp_path):
    path = write_config(tmp_path, """
values: [1, 2, 3, 4]
operation: min
updates:
  - [0, 4]
queries:
  - [0, 3]
""")
    config = load_config(path)
    assert config == {
        'values': [1, 2, 3, 4],
        'operation': 'min',
        'updates': [[0, 4]],
        'queries': [[0, 3]],
    }


def test_load_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / 'missing.yaml')


def test_load_empty_config(tmp_path):
    assert load_config(write_config(tmp_path, '')) == {}


def test_validate_fills_defaults():
    config = validate_config({'values': [5]})
    assert config == {
        'values': [5],
        'operation': 'sum',
        'updates': [],
        'queries': [],
        'log_level': 'INFO',
    }


def test_validate_normalises_entries():
    config = validate_config({
        'values': [1, 2],
        'operation': 'MAX',
        'updates': [[1, 7]],
        'queries': [(0, 1)],
        'log_level': 'debug',
    })
    assert config['operation'] == 'max'
    assert config['updates'] == [(1, 7)]
    assert config['queries'] == [(0, 1)]
    assert config['log_level'] == 'DEBUG'


def test_validate_requires_values():
    with pytest.raises(KeyError):
        validate_config({'operation': 'sum'})


@pytest.mark.parametrize('config', [
    {'values': []},
    {'values': 3},
    {'values': [1], 'operation': 'product'},
    {'values': [1], 'updates': [[0]]},
    {'values': [1], 'queries': {'left': 0}},
])
def test_validate_rejects_malformed(config):
    with pytest.raises(ValueError):
        validate_config(config)


@pytest.mark.parametrize('operation, tree_type', [
    ('sum', SumSegmentTree),
    ('min', MinSegmentTree),
    ('max', MaxSegmentTree),
])
def test_build_tree(operation, tree_type):
    tree = build_tree(validate_config({'values': [4, 1, 3], 'operation': operation}))
    assert type(tree) is tree_type
    assert tree.values() == [4, 1, 3]


def test_shipped_config_is_valid():
    from pathlib import Path

    path = Path(__file__).parent.parent / 'config' / 'segment_tree.yaml'
    config = validate_config(load_config(path))
    assert config['values'] == [1, 2, 3, 4]
    assert config['updates'] == [(0, 4), (3, 2)]
