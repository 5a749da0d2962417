"""Column packing for a one-sided crossbar realizing K_n.

Connections are enumerated by the circular distance ``d`` between their
two terminals. For ``d < n/2`` there are ``n`` pairs ``(j, (j + d) % n)``;
for ``d == n/2`` (even ``n``) only the ``n/2`` pairs ``(j, j + d)`` are
distinct. Each distance level owns two consecutive blocks, ``2d - 2`` and
``2d - 1``, and its pairs are laid out so that:

- a pair never reaches past the block directly after its own,
- no column ever exceeds ``floor(n/2) - 1``,
- on a given column the row spans of two connections never overlap.

Every connection is a pure function of its enumeration index, so the
sequence can be walked lazily, indexed directly, or restarted freely.
"""

from __future__ import annotations

__all__ = ["Crossbar", "connection_at", "connections", "total_connections"]

from collections.abc import Iterator

from xbar.layout.topology import check_count
from xbar.model import Connection, InvalidArgument, Position


def total_connections(count: int) -> int:
    """Number of edges of K_count."""
    check_count(count)
    return count * (count - 1) // 2


def _half_level(count: int, distance: int, j: int) -> Connection:
    # Opposite terminals: only the first half of the ring is distinct.
    block = 2 * distance - 2
    return Connection(
        start=Position.at(block, j, count),
        end=Position.at(block, distance + j, count),
        column=j,
    )


def _folded(count: int, distance: int, j: int) -> Connection:
    block = 2 * distance - 1
    if j < 3 * distance:
        column = j % distance
    else:
        column = distance + min(j % distance, j + distance - count)
    return Connection(
        start=Position.at(block, j + distance - count, count),
        end=Position.at(block, j, count),
        column=column,
    )


def _forward(count: int, distance: int, j: int, odd: bool, wrap: bool) -> Connection:
    block = 2 * distance - 2
    return Connection(
        start=Position.at(block + int(odd), j, count),
        end=Position.at(block + int(odd or wrap), (distance + j) % count, count),
        column=j % distance,
    )


def _full_level(count: int, distance: int, j: int) -> Connection:
    odd = (j // distance) % 2 == 1
    wrap = distance + j >= count
    if odd and wrap:
        # Wrapping from an odd run would cross two blocks; fold it back
        # into the second block of the level instead.
        return _folded(count, distance, j)
    return _forward(count, distance, j, odd, wrap)


def connection_at(count: int, index: int) -> Connection:
    """Return the ``index``-th connection of a ``count``-terminal crossbar."""
    total = total_connections(count)
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgument(f"connection index must be an integer, got {index!r}")
    if not 0 <= index < total:
        raise InvalidArgument(
            f"connection index {index} out of range for {total} connections"
        )

    distance, j = divmod(index, count)
    distance += 1
    if 2 * distance == count:
        return _half_level(count, distance, j)
    return _full_level(count, distance, j)


class Crossbar:
    """Lazy, restartable sequence of the connections of a crossbar.

    Each call to ``iter()`` starts a fresh cursor at the first pair, so a
    ``Crossbar`` can be consumed any number of times.
    """

    def __init__(self, count: int) -> None:
        self.count = check_count(count)

    def __repr__(self) -> str:
        return f"Crossbar(count={self.count})"

    def __len__(self) -> int:
        return total_connections(self.count)

    def __iter__(self) -> Iterator[Connection]:
        for index in range(len(self)):
            yield connection_at(self.count, index)

    def __getitem__(self, index: int) -> Connection:
        if isinstance(index, int) and not isinstance(index, bool):
            if index < 0:
                index += len(self)
            if not 0 <= index < len(self):
                raise IndexError("crossbar connection index out of range")
        return connection_at(self.count, index)


def connections(count: int) -> Crossbar:
    """Return the lazy connection sequence for ``count`` terminals."""
    return Crossbar(count)
