"""xbar: locality preserving one-sided binary tree crossbar switch wiring.

Computes, for ``n`` terminals, a wiring plan realizing the complete graph
K_n on at most ``floor(n/2)`` columns without any wire spanning three
adjacent blocks.

Reference: Sahin, Devrim. "A locality preserving one-sided binary tree -
crossbar switch wiring design algorithm." Information Sciences and Systems
(CISS), 2015 49th Annual Conference on. IEEE, 2015.
"""

__version__ = "0.1.0"

from xbar.layout import (  # noqa: E402
    Crossbar,
    block_of,
    blocks,
    build_blocks,
    columns,
    connection_at,
    connections,
    rows,
)
from xbar.model import Block, Connection, InvalidArgument, Position  # noqa: E402

__all__ = [
    "Block",
    "Connection",
    "Crossbar",
    "InvalidArgument",
    "Position",
    "__version__",
    "block_of",
    "blocks",
    "build_blocks",
    "columns",
    "connection_at",
    "connections",
    "rows",
]
