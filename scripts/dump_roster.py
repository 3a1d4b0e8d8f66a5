#!/usr/bin/env python3
"""
Print the per-day duty listing of a roster workbook as JSON.

Reads an .xlsx roster, builds the duty listing the same way the upload
endpoint does, and writes it to stdout.

Usage:
    python scripts/dump_roster.py --file path/to/roster.xlsx [--sheet NAME] [--day N] [--highlight-color FFC000]

Arguments:
    --file             Path to the roster workbook (required)
    --sheet            Sheet to read (default: last sheet)
    --day              Print only this day
    --highlight-color  Fill color marking highlighted assignments (default: from config.ini)

Examples:
    # Whole roster from the last sheet
    python scripts/dump_roster.py --file duty_june.xlsx

    # Day 12 only
    python scripts/dump_roster.py --file duty_june.xlsx --day 12
"""

import argparse
import json
import sys
import os

# Add the project root to the path so we can import from duty_board.*
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from duty_board.settings import HIGHLIGHT_COLOR
from duty_board.logics.exceptions import DutyBoardException
from duty_board.logics.excel_reader import read_roster_workbook
from duty_board.logics.roster_builder import build_roster, roster_stats
from duty_board.logics.roster_export import day_to_dict, roster_to_dict


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Print the per-day duty listing of a roster workbook")
    parser.add_argument("--file", required=True, help="Path to the roster workbook")
    parser.add_argument("--sheet", default=None, help="Sheet to read (default: last sheet)")
    parser.add_argument("--day", type=int, default=None, help="Print only this day")
    parser.add_argument(
        "--highlight-color",
        default=HIGHLIGHT_COLOR,
        help=f"Fill color marking highlighted assignments (default: {HIGHLIGHT_COLOR})"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    if not os.path.exists(args.file):
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1

    with open(args.file, "rb") as f:
        contents = f.read()

    try:
        roster_sheet = read_roster_workbook(
            contents,
            sheet_name=args.sheet,
            highlight_color=args.highlight_color,
            filename=os.path.basename(args.file)
        )
    except DutyBoardException as e:
        print(f"Error: {e.message}", file=sys.stderr)
        if e.recommendation:
            print(f"  {e.recommendation}", file=sys.stderr)
        return 1

    result = build_roster(roster_sheet.grid, roster_sheet.highlight)
    print(f"Sheet '{roster_sheet.sheet_name}': {roster_stats(result)}", file=sys.stderr)

    if args.day is not None:
        day_roster = result.get(args.day)
        if day_roster is None:
            print(f"Error: No duties found for day {args.day}", file=sys.stderr)
            return 1
        output = day_to_dict(day_roster)
    else:
        output = roster_to_dict(result)

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
