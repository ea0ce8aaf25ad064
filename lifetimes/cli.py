"""
Timeline Inspector CLI
======================

Inspect a people dataset and its timeline layout from the terminal.

COMMANDS:
- validate: Load the dataset and report skipped records
- people:   List people in selection-list order
- axis:     Print the window and tick marks for a selection
- layout:   ASCII rendering of the selected bars under the axis

USAGE:
    python -m lifetimes.cli [--data PATH] [COMMAND] [ARGS]
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional, Sequence

from ingestion.contracts import LoaderConfig, LoadResult
from ingestion.loader import load_people

from .contracts.base import TimelineError
from .contracts.layout import SegmentKind, TimelineLayout
from .engine import LayoutConfig, recompute, selection_list
from .observability import setup_logging

CERTAIN_CHAR = "#"
UNCERTAIN_CHAR = "-"
TICK_CHAR = "|"
BOUNDARY_CHAR = "+"


def _load(args) -> LoadResult:
    return load_people(args.data, LoaderConfig(sort_language=args.sort_language))


def _layout_config(args) -> LayoutConfig:
    return LayoutConfig(target_ticks=args.ticks, sort_language=args.sort_language)


def _column(percent: float, width: int) -> int:
    return min(width - 1, max(0, int(round(percent / 100.0 * (width - 1)))))


def render_axis_ruler(layout: TimelineLayout, width: int) -> str:
    cells = ["-"] * width
    for tick in layout.ticks:
        cells[_column(tick.position_percent, width)] = (
            BOUNDARY_CHAR if tick.is_boundary else TICK_CHAR
        )
    return "".join(cells)


def render_rows(layout: TimelineLayout, width: int) -> List[str]:
    """One text line per row; uncertain spans drawn first so certain wins."""
    lines = []
    for row in layout.rows:
        cells = [" "] * width
        ordered = sorted(row.segments, key=lambda s: s.kind is SegmentKind.CERTAIN)
        for seg in ordered:
            char = CERTAIN_CHAR if seg.kind is SegmentKind.CERTAIN else UNCERTAIN_CHAR
            start = _column(seg.left_percent, width)
            end = _column(seg.right_percent, width)
            for i in range(start, end + 1):
                cells[i] = char
        lines.append("".join(cells))
    return lines


def cmd_validate(args) -> int:
    """Load the dataset and report issues."""
    print(f"[*] Loading dataset: {args.data}")
    result = _load(args)
    print(f"    Loaded {len(result.people)} people.")
    for issue in result.issues:
        who = issue.person_id or "<no id>"
        print(f"[FAIL] #{issue.index} {who}: {issue.code.value}: {issue.message}")
    if result.ok:
        print("[PASS] All records valid.")
        return 0
    print(f"[FAIL] Found {len(result.issues)} issues.")
    return 1


def cmd_people(args) -> int:
    """List people in selection-list order."""
    result = _load(args)
    for person in selection_list(result.people, args.sort_language):
        print(
            f"{person.person_id:<24} {person.sort_key:<32} "
            f"{person.birth.earliest} .. {person.death.latest}"
        )
    return 0


def cmd_axis(args) -> int:
    """Print window and ticks."""
    result = _load(args)
    layout = recompute(result.people, args.select or (), _layout_config(args))
    window = layout.window
    note = " (widened)" if layout.widened else ""
    print(f"WINDOW {window.min_date} .. {window.max_date}{note}")
    print("POS%    | KIND         | LABEL")
    print("-" * 40)
    for tick in layout.ticks:
        print(f"{tick.position_percent:7.3f} | {tick.kind.value:<12} | {tick.label}")
    return 0


def cmd_layout(args) -> int:
    """ASCII rendering of the selected rows."""
    result = _load(args)
    layout = recompute(result.people, args.select or (), _layout_config(args))
    width = max(args.width, 10)
    labels = {t.label: _column(t.position_percent, width) for t in layout.ticks}

    print(f"WINDOW {layout.window.min_date} .. {layout.window.max_date}")
    print(" " * 24 + render_axis_ruler(layout, width))
    print(" " * 24 + "  ".join(f"{label}@{col}" for label, col in labels.items()))
    for row, line in zip(layout.rows, render_rows(layout, width)):
        print(f"{row.person_id[:23]:<24}{line}")
    if not layout.rows:
        print("(no people selected)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Timeline Inspector")
    parser.add_argument("--data", default="data/people.json", help="Path to people.json")
    parser.add_argument("--sort-language", default="en", help="Language of name.sort used as sort key")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("validate", help="Validate dataset")
    subparsers.add_parser("people", help="List people")

    for name, help_text in (("axis", "Show axis ticks"), ("layout", "Render bars")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--select", action="append", metavar="ID", help="Person id (repeatable)")
        sub.add_argument("--ticks", type=int, default=10, help="Target number of ticks")
        if name == "layout":
            sub.add_argument("--width", type=int, default=72, help="Rendering width in characters")

    return parser


COMMANDS = {
    "validate": cmd_validate,
    "people": cmd_people,
    "axis": cmd_axis,
    "layout": cmd_layout,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 2

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return handler(args)
    except (TimelineError, ValueError, OSError) as e:
        print(f"[!] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
