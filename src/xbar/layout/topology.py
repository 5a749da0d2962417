"""Structural scalars of a crossbar and its block partition.

The row range of a crossbar with ``n`` terminals is split as a one-sided
binary tree: every split peels off a leaf holding one row per terminal and
recurses on the remainder, until the remainder is a single leaf. Every
block therefore holds ``n`` rows and there are ``n - 1`` of them.
"""

from __future__ import annotations

__all__ = ["block_of", "blocks", "build_blocks", "check_count", "columns", "rows"]

from functools import lru_cache

from xbar.model import Block, InvalidArgument


def check_count(count: int) -> int:
    """Return ``count`` if it is a valid terminal count, else raise."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgument(f"terminal count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidArgument(f"terminal count must be non-negative, got {count}")
    return count


def rows(count: int) -> int:
    """Number of rows: one per terminal per connection it takes part in."""
    check_count(count)
    if count < 2:
        return 0
    return count * (count - 1)


def blocks(count: int) -> int:
    """Number of leaf blocks in the one-sided partition of the rows."""
    check_count(count)
    if count < 2:
        # A lone terminal still has an (empty) root leaf.
        return count
    return count - 1


def columns(count: int) -> int:
    """Number of wiring columns, ``floor(count / 2)``."""
    check_count(count)
    return count // 2


@lru_cache(maxsize=64)
def _block_arena(count: int) -> tuple[Block, ...]:
    if count == 0:
        return ()

    total = rows(count)
    if total == 0:
        return (Block(index=0, start=0, length=0),)

    arena: list[Block] = []
    start = 0
    remaining = total
    parent: int | None = None
    while remaining > 0:
        # Split off one terminal-wide leaf; the last remainder is the leaf.
        length = count if remaining > count else remaining
        arena.append(Block(index=len(arena), start=start, length=length, parent=parent))
        parent = len(arena) - 1
        start += length
        remaining -= length
    return tuple(arena)


def build_blocks(count: int) -> tuple[Block, ...]:
    """Build the block arena for ``count`` terminals, ordered by index."""
    return _block_arena(check_count(count))


def block_of(count: int, absolute_index: int) -> int:
    """Return the index of the block whose row range holds ``absolute_index``."""
    total = rows(count)
    if not 0 <= absolute_index < total:
        raise InvalidArgument(
            f"row {absolute_index} is outside the {total} rows of a "
            f"{count}-terminal crossbar"
        )
    return absolute_index // count
