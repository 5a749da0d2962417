"""Plan validator: programmatic checks for wiring plan defects.

Runs a suite of checks against a sequence of connections for a crossbar
with ``count`` terminals and returns a list of Violation objects describing
any problems found. An empty list means the plan realizes K_n within the
column bound, keeps every wire local and never double-books a column.
"""

from __future__ import annotations

__all__ = [
    "Severity",
    "Violation",
    "check_column_bound",
    "check_column_conflicts",
    "check_locality",
    "check_pair_coverage",
    "check_positions",
    "check_row_usage",
    "validate_plan",
]

from collections import Counter, defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

import networkx as nx

from xbar.layout import blocks, columns, connections, rows
from xbar.model import Connection


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Violation:
    check: str
    severity: Severity
    message: str
    context: dict = field(default_factory=dict)


def validate_plan(
    count: int, plan: Iterable[Connection] | None = None
) -> list[Violation]:
    """Run all plan checks and return violations.

    ``plan`` defaults to the generated connections for ``count``.
    """
    conns = list(connections(count) if plan is None else plan)
    violations: list[Violation] = []
    violations.extend(check_positions(count, conns))
    violations.extend(check_pair_coverage(count, conns))
    violations.extend(check_column_bound(count, conns))
    violations.extend(check_locality(count, conns))
    violations.extend(check_column_conflicts(count, conns))
    violations.extend(check_row_usage(count, conns))
    return violations


def check_positions(count: int, conns: list[Connection]) -> list[Violation]:
    """Check that every position is internally consistent and in range."""
    violations: list[Violation] = []
    n_blocks = blocks(count)

    for idx, conn in enumerate(conns):
        for label, pos in (("start", conn.start), ("end", conn.end)):
            expected = pos.block_index * count + pos.row_index
            if pos.absolute_index != expected:
                violations.append(
                    Violation(
                        check="positions",
                        severity=Severity.ERROR,
                        message=(
                            f"Connection {idx} {label} has absolute index "
                            f"{pos.absolute_index}, expected {expected}"
                        ),
                        context={"connection": idx, "endpoint": label},
                    )
                )
            if not 0 <= pos.row_index < count or not 0 <= pos.block_index < n_blocks:
                violations.append(
                    Violation(
                        check="positions",
                        severity=Severity.ERROR,
                        message=(
                            f"Connection {idx} {label} at block {pos.block_index}, "
                            f"row {pos.row_index} lies outside the crossbar"
                        ),
                        context={"connection": idx, "endpoint": label},
                    )
                )
        if conn.start.absolute_index >= conn.end.absolute_index:
            violations.append(
                Violation(
                    check="positions",
                    severity=Severity.ERROR,
                    message=f"Connection {idx} does not run downward",
                    context={"connection": idx},
                )
            )
    return violations


def check_pair_coverage(count: int, conns: list[Connection]) -> list[Violation]:
    """Check that the connections cover every edge of K_n exactly once."""
    violations: list[Violation] = []
    covered = nx.Graph()
    covered.add_nodes_from(range(count))
    seen: Counter[tuple[int, int]] = Counter()

    for conn in conns:
        a, b = conn.terminals
        if a == b:
            violations.append(
                Violation(
                    check="pair_coverage",
                    severity=Severity.ERROR,
                    message=f"Terminal {a} is connected to itself",
                    context={"pair": (a, b)},
                )
            )
            continue
        seen[(a, b)] += 1
        covered.add_edge(a, b)

    for pair, times in sorted(seen.items()):
        if times > 1:
            violations.append(
                Violation(
                    check="pair_coverage",
                    severity=Severity.ERROR,
                    message=f"Terminals {pair[0]} and {pair[1]} are connected {times} times",
                    context={"pair": pair},
                )
            )

    # Whatever K_n has and the plan lacks is the complement of the plan.
    missing = sorted(tuple(sorted(e)) for e in nx.complement(covered).edges())
    for a, b in missing:
        violations.append(
            Violation(
                check="pair_coverage",
                severity=Severity.ERROR,
                message=f"Terminals {a} and {b} are never connected",
                context={"pair": (a, b)},
            )
        )
    return violations


def check_column_bound(count: int, conns: list[Connection]) -> list[Violation]:
    """Check that no connection uses a column at or past floor(n/2)."""
    limit = columns(count)
    return [
        Violation(
            check="column_bound",
            severity=Severity.ERROR,
            message=f"Connection {idx} uses column {conn.column}, limit is {limit}",
            context={"connection": idx, "column": conn.column},
        )
        for idx, conn in enumerate(conns)
        if not 0 <= conn.column < limit
    ]


def check_locality(count: int, conns: list[Connection]) -> list[Violation]:
    """Check that no wire spans three or more adjacent blocks.

    Endpoint blocks more than two apart are an error. Two apart (one block
    in between) is allowed but flagged as a warning, since the packing
    never needs it.
    """
    violations: list[Violation] = []
    for idx, conn in enumerate(conns):
        gap = abs(conn.end.block_index - conn.start.block_index)
        if gap > 2:
            violations.append(
                Violation(
                    check="locality",
                    severity=Severity.ERROR,
                    message=(
                        f"Connection {idx} spans blocks {conn.start.block_index}"
                        f"..{conn.end.block_index}"
                    ),
                    context={"connection": idx, "gap": gap},
                )
            )
        elif gap == 2:
            violations.append(
                Violation(
                    check="locality",
                    severity=Severity.WARNING,
                    message=(
                        f"Connection {idx} skips block "
                        f"{min(conn.start.block_index, conn.end.block_index) + 1}"
                    ),
                    context={"connection": idx, "gap": gap},
                )
            )
    return violations


def check_column_conflicts(count: int, conns: list[Connection]) -> list[Violation]:
    """Check that wires sharing a column never share a row segment."""
    violations: list[Violation] = []
    by_column: dict[int, list[tuple[int, int, int]]] = defaultdict(list)
    for idx, conn in enumerate(conns):
        lo = min(conn.start.absolute_index, conn.end.absolute_index)
        hi = max(conn.start.absolute_index, conn.end.absolute_index)
        by_column[conn.column].append((lo, hi, idx))

    for column, spans in sorted(by_column.items()):
        spans.sort()
        for (lo_a, hi_a, idx_a), (lo_b, hi_b, idx_b) in zip(spans, spans[1:]):
            if lo_b < hi_a:
                violations.append(
                    Violation(
                        check="column_conflicts",
                        severity=Severity.ERROR,
                        message=(
                            f"Connections {idx_a} [{lo_a}, {hi_a}) and "
                            f"{idx_b} [{lo_b}, {hi_b}) overlap on column {column}"
                        ),
                        context={"column": column, "connections": (idx_a, idx_b)},
                    )
                )
    return violations


def check_row_usage(count: int, conns: list[Connection]) -> list[Violation]:
    """Check that every row is the endpoint of exactly one connection."""
    violations: list[Violation] = []
    usage = Counter(
        pos.absolute_index for conn in conns for pos in (conn.start, conn.end)
    )
    for row, times in sorted(usage.items()):
        if times > 1:
            violations.append(
                Violation(
                    check="row_usage",
                    severity=Severity.ERROR,
                    message=f"Row {row} is used by {times} connections",
                    context={"row": row},
                )
            )
    total = rows(count)
    unused = total - sum(1 for row in usage if 0 <= row < total)
    if unused > 0:
        violations.append(
            Violation(
                check="row_usage",
                severity=Severity.WARNING,
                message=f"{unused} rows carry no connection",
                context={"unused": unused},
            )
        )
    return violations
