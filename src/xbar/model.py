"""Data model for crossbar wiring plans."""

from __future__ import annotations

from dataclasses import dataclass


class InvalidArgument(ValueError):
    """Raised for a terminal count or index outside its domain."""


@dataclass(frozen=True)
class Block:
    """A leaf of the one-sided block partition.

    Blocks are stored in a flat arena ordered by index. ``parent`` is the
    index of the block one level up the spine of the tree (``None`` for the
    root), so the depth of a block equals its index.
    """

    index: int
    start: int
    length: int
    parent: int | None = None

    @property
    def stop(self) -> int:
        return self.start + self.length

    def __contains__(self, absolute_index: object) -> bool:
        return isinstance(absolute_index, int) and self.start <= absolute_index < self.stop


@dataclass(frozen=True)
class Position:
    """The location of one row: a terminal slot inside a block."""

    block_index: int
    row_index: int
    # Always block_index * n + row_index; kept for convenience.
    absolute_index: int

    @classmethod
    def at(cls, block_index: int, row_index: int, count: int) -> Position:
        return cls(block_index, row_index, block_index * count + row_index)


@dataclass(frozen=True)
class Connection:
    """A vertical link between two rows, routed on one column."""

    start: Position
    end: Position
    column: int

    @property
    def terminals(self) -> tuple[int, int]:
        """The connected terminal pair, smallest first."""
        a, b = self.start.row_index, self.end.row_index
        return (a, b) if a < b else (b, a)

    @property
    def span(self) -> range:
        """Absolute rows the wire occupies on its column (half-open)."""
        return range(self.start.absolute_index, self.end.absolute_index)

    @property
    def is_intra_block(self) -> bool:
        return self.start.block_index == self.end.block_index

    def to_dict(self) -> dict:
        return {
            "start": {
                "block_index": self.start.block_index,
                "row_index": self.start.row_index,
                "absolute_index": self.start.absolute_index,
            },
            "end": {
                "block_index": self.end.block_index,
                "row_index": self.end.row_index,
                "absolute_index": self.end.absolute_index,
            },
            "column": self.column,
        }
