#!/usr/bin/env python3
"""Batch render and validate crossbars for a range of terminal counts.

Outputs go to /tmp/xbar_renders/.

Usage:
    python scripts/render_crossbars.py --max 16
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from xbar.layout import blocks, columns, rows
from xbar.render.svg import render_svg
from xbar.themes import THEMES
from xbar.validate import Severity, validate_plan

OUTPUT_DIR = Path("/tmp/xbar_renders")


def render_count(count: int, output_dir: Path, theme: str) -> list[str]:
    """Validate and render one crossbar, returning a list of issues."""
    issues = [
        f"{v.severity.value.upper()}: {v.message}" for v in validate_plan(count)
    ]
    svg_path = output_dir / f"xbar_{count:03d}.svg"
    svg_path.write_text(render_svg(count, THEMES[theme]) + "\n")
    return issues


def main():
    parser = argparse.ArgumentParser(description="Batch render crossbar switches")
    parser.add_argument("--min", type=int, default=2, help="Smallest terminal count")
    parser.add_argument("--max", type=int, default=16, help="Largest terminal count")
    parser.add_argument("--theme", choices=list(THEMES), default="classic")
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    counts = range(args.min, args.max + 1)
    print(f"Rendering {len(counts)} crossbars to {OUTPUT_DIR}/")
    print()

    any_errors = False
    for count in counts:
        issues = render_count(count, OUTPUT_DIR, args.theme)
        status = "OK" if not issues else "ISSUES"
        if any(i.startswith(Severity.ERROR.value.upper()) for i in issues):
            status = "FAIL"
            any_errors = True

        print(f"  n={count:<4} rows={rows(count):<6} blocks={blocks(count):<4} "
              f"columns={columns(count):<4} [{status}]")
        for issue in issues:
            print(f"    - {issue}")

    print(f"\nOutputs in: {OUTPUT_DIR}/")

    if any_errors:
        sys.exit(1)


if __name__ == "__main__":
    main()
