"""Crossbar layout: block partition and column packing.

Public API:
- rows, blocks, columns: structural scalars of a crossbar
- build_blocks, block_of: the explicit block arena
- connections, connection_at, Crossbar: the lazy connection sequence
"""

from xbar.layout.packing import Crossbar, connection_at, connections, total_connections
from xbar.layout.topology import block_of, blocks, build_blocks, columns, rows

__all__ = [
    "Crossbar",
    "block_of",
    "blocks",
    "build_blocks",
    "columns",
    "connection_at",
    "connections",
    "rows",
    "total_connections",
]
