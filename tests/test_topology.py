"""Tests for the topology calculator and block partition."""

import pytest

from xbar.layout.topology import block_of, blocks, build_blocks, columns, rows
from xbar.model import InvalidArgument


def test_rows_degree_sum():
    for n in range(2, 50):
        assert rows(n) == n * (n - 1)


def test_rows_trivial():
    assert rows(0) == 0
    assert rows(1) == 0


def test_columns_floor_half():
    for n in range(0, 50):
        assert columns(n) == n // 2
    assert columns(2) == 1
    assert columns(10) == 5


def test_blocks_boundaries():
    assert blocks(0) == 0
    assert blocks(1) == 1
    assert blocks(2) == 1
    assert blocks(10) == 9


def test_five_terminals():
    assert rows(5) == 20
    assert blocks(5) == 4
    assert columns(5) == 2


def test_blocks_grow_with_depth():
    """Deeper partitions (more rows to exhaust) never have fewer blocks."""
    counts = [blocks(n) for n in range(2, 40)]
    assert counts == sorted(counts)
    assert len(set(counts)) == len(counts)


@pytest.mark.parametrize("op", [rows, blocks, columns, build_blocks])
def test_negative_count_rejected(op):
    with pytest.raises(InvalidArgument):
        op(-1)


@pytest.mark.parametrize("bad", [2.5, "4", None, True])
def test_non_integer_count_rejected(bad):
    with pytest.raises(InvalidArgument):
        rows(bad)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        columns(-3)


# --- Block arena ---


def test_build_blocks_partitions_rows():
    for n in range(2, 30):
        arena = build_blocks(n)
        assert len(arena) == blocks(n)
        assert arena[0].start == 0
        for prev, cur in zip(arena, arena[1:]):
            assert cur.start == prev.stop
        assert arena[-1].stop == rows(n)


def test_build_blocks_one_row_per_terminal():
    arena = build_blocks(7)
    assert all(b.length == 7 for b in arena)


def test_build_blocks_spine_parents():
    arena = build_blocks(6)
    assert arena[0].parent is None
    for block in arena[1:]:
        assert block.parent == block.index - 1


def test_build_blocks_trivial():
    assert build_blocks(0) == ()
    (root,) = build_blocks(1)
    assert root.index == 0
    assert root.length == 0
    assert root.parent is None


def test_block_contains():
    block = build_blocks(4)[1]
    assert 4 in block
    assert 7 in block
    assert 3 not in block
    assert 8 not in block


def test_block_of_matches_arena():
    n = 6
    for block in build_blocks(n):
        for absolute in range(block.start, block.stop):
            assert block_of(n, absolute) == block.index


def test_block_of_out_of_range():
    with pytest.raises(InvalidArgument):
        block_of(5, 20)
    with pytest.raises(InvalidArgument):
        block_of(5, -1)
    with pytest.raises(InvalidArgument):
        block_of(1, 0)
