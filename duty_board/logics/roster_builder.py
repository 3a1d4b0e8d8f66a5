"""
Roster Builder: raw roster grid -> per-day duty buckets.

Grid layout
-----------
- row 0: day numbers (numeric cells) from column 2 onwards
- row 1: weekday labels for each day column
- rows 2+: one person per row, name in column 1, duty code per day column

Each qualifying day column is walked once, top to bottom. People are grouped
under the canonical key of their duty code; each bucket remembers the raw
spellings it absorbed and keeps its entries in source row order.

Missing cells, short rows and non-numeric headers are skipped, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from duty_board.logics.duty_keys import (
    duty_code_text,
    duty_sort_key,
    is_numeric_duty_key,
    normalize_duty_key,
)

logger = logging.getLogger(__name__)

DAY_HEADER_ROW = 0
WEEKDAY_ROW = 1
FIRST_PERSON_ROW = 2
NAME_COLUMN = 1
FIRST_DAY_COLUMN = 2

DayNumber = Union[int, float]
RawGrid = Sequence[Sequence[Any]]
HighlightLookup = Callable[[int, int], bool]


@dataclass(frozen=True)
class PersonEntry:
    name: str
    highlighted: bool
    row_index: int


@dataclass
class DutyBucket:
    canonical_key: str
    original_keys: List[str] = field(default_factory=list)
    entries: List[PersonEntry] = field(default_factory=list)

    def add_original_key(self, raw_code: str) -> None:
        if raw_code not in self.original_keys:
            self.original_keys.append(raw_code)


@dataclass
class DayRoster:
    day: DayNumber
    column_index: int
    weekday: str = ""
    buckets: Dict[str, DutyBucket] = field(default_factory=dict)


RosterResult = Dict[DayNumber, DayRoster]


def _cell(grid: RawGrid, row: int, col: int) -> Any:
    """Cell value, or None when the row or column is missing."""
    if row >= len(grid):
        return None
    cells = grid[row]
    if cells is None or col >= len(cells):
        return None
    return cells[col]


def _day_number(value: Any) -> Optional[DayNumber]:
    """Numeric header value as a day number, None for anything else."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float):
        if value != value:  # NaN
            return None
        if value.is_integer():
            return int(value)
    return value


def _has_duty(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def _no_highlight(row: int, col: int) -> bool:
    return False


def build_day(
    grid: RawGrid,
    col: int,
    day: DayNumber,
    highlight: HighlightLookup,
) -> DayRoster:
    """
    Bucket every person with a duty in one day column.

    Args:
        grid: Raw roster grid
        col: Column index of the day
        day: Day number read from the header row
        highlight: (row, col) -> bool lookup for highlighted cells

    Returns:
        DayRoster (possibly with no buckets)
    """
    weekday = duty_code_text(_cell(grid, WEEKDAY_ROW, col)).strip()
    day_roster = DayRoster(day=day, column_index=col, weekday=weekday)

    for row in range(FIRST_PERSON_ROW, len(grid)):
        raw_code = _cell(grid, row, col)
        if not _has_duty(raw_code):
            continue

        raw_text = duty_code_text(raw_code)
        key = normalize_duty_key(raw_code)
        bucket = day_roster.buckets.get(key)
        if bucket is None:
            bucket = DutyBucket(canonical_key=key, original_keys=[raw_text])
            day_roster.buckets[key] = bucket
        else:
            bucket.add_original_key(raw_text)

        name = duty_code_text(_cell(grid, row, NAME_COLUMN))
        bucket.entries.append(
            PersonEntry(name=name, highlighted=bool(highlight(row, col)), row_index=row)
        )

    for bucket in day_roster.buckets.values():
        bucket.entries.sort(key=lambda entry: entry.row_index)

    return day_roster


def build_roster(
    grid: RawGrid,
    highlight: Optional[HighlightLookup] = None,
) -> RosterResult:
    """
    Build the per-day duty listing for a whole roster grid.

    Args:
        grid: Raw roster grid (rows of cell values)
        highlight: Optional (row, col) -> bool lookup; defaults to "never"

    Returns:
        Mapping of day number -> DayRoster, only for days with at least one duty

    Example:
        >>> grid = [
        ...     [None, None, 12, 13],
        ...     [None, None, "Mon", "Tue"],
        ...     [None, "Kim", "1", "OFF"],
        ...     [None, "Lee", "01", "2"],
        ... ]
        >>> sorted(build_roster(grid)[12].buckets)
        ['01', '1']
    """
    highlight = highlight or _no_highlight
    result: RosterResult = {}

    if not grid:
        logger.debug("[Roster] Empty grid, nothing to build")
        return result

    header = grid[DAY_HEADER_ROW] or []
    for col in range(FIRST_DAY_COLUMN, len(header)):
        day = _day_number(header[col])
        if day is None:
            continue

        day_roster = build_day(grid, col, day, highlight)
        if not day_roster.buckets:
            logger.debug(f"[Roster] Day {day} (column {col}) has no duties, skipped")
            continue

        if day in result:
            logger.warning(f"[Roster] Day {day} appears more than once, keeping column {col}")
        result[day] = day_roster

    logger.info(f"[Roster] Built roster with {len(result)} day(s)")
    return result


def sorted_buckets(day_roster: DayRoster) -> List[DutyBucket]:
    """Buckets of one day in display order; the stored mapping is not touched."""
    return [
        day_roster.buckets[key]
        for key in sorted(day_roster.buckets, key=duty_sort_key)
    ]


def numeric_bucket_count(day_roster: DayRoster) -> int:
    """Number of buckets keyed by one of the ranked numeric duties."""
    return sum(1 for key in day_roster.buckets if is_numeric_duty_key(key))


def roster_stats(result: RosterResult) -> Dict[str, int]:
    """Day, bucket, entry and highlighted-entry counts for a built roster."""
    buckets = [bucket for day in result.values() for bucket in day.buckets.values()]
    entries = [entry for bucket in buckets for entry in bucket.entries]
    return {
        "days": len(result),
        "duties": len(buckets),
        "assignments": len(entries),
        "highlighted": sum(1 for entry in entries if entry.highlighted),
    }
