"""
Presentation views of a built roster.

- roster_to_dict / day_to_dict: JSON-ready documents with days ascending and
  duties in display order, labels resolved
- roster_to_dataframe / roster_to_excel_bytes: flat table for download
"""

import io
import logging
from typing import Any, Dict, List

import pandas as pd

from duty_board.logics.duty_keys import get_display_label
from duty_board.logics.roster_builder import (
    DayRoster,
    DutyBucket,
    RosterResult,
    numeric_bucket_count,
    sorted_buckets,
)

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["Day", "Weekday", "Duty", "Label", "Name", "Highlighted", "OriginalKeys"]
EXPORT_SHEET_NAME = "Roster"


def bucket_to_dict(bucket: DutyBucket, is_last_numeric: bool = False) -> Dict[str, Any]:
    return {
        "key": bucket.canonical_key,
        "label": get_display_label(bucket.canonical_key),
        "original_keys": list(bucket.original_keys),
        "is_last_numeric": is_last_numeric,
        "entries": [
            {"name": entry.name, "highlighted": entry.highlighted}
            for entry in bucket.entries
        ],
    }


def day_to_dict(day_roster: DayRoster) -> Dict[str, Any]:
    """
    JSON view of one day.

    Returns:
        {
            "day": 12,
            "weekday": "Mon",
            "numeric_count": 2,
            "duties": [
                {"key": "1", "label": "1R", "original_keys": ["1"],
                 "is_last_numeric": false, "entries": [{"name": "Kim", "highlighted": false}]},
                ...
            ]
        }

    is_last_numeric marks the bucket after which the numeric duties end, so a
    renderer can draw a separator there.
    """
    numeric_count = numeric_bucket_count(day_roster)
    duties = []
    for index, bucket in enumerate(sorted_buckets(day_roster)):
        is_last_numeric = numeric_count > 0 and index == numeric_count - 1
        duties.append(bucket_to_dict(bucket, is_last_numeric))

    return {
        "day": day_roster.day,
        "weekday": day_roster.weekday,
        "numeric_count": numeric_count,
        "duties": duties,
    }


def roster_to_dict(result: RosterResult) -> Dict[str, Any]:
    """JSON view of a whole roster, days ascending."""
    return {"days": [day_to_dict(result[day]) for day in sorted(result)]}


def roster_to_dataframe(result: RosterResult) -> pd.DataFrame:
    """
    Flatten a roster into one row per assignment, in display order.
    """
    rows: List[Dict[str, Any]] = []
    for day in sorted(result):
        day_roster = result[day]
        for bucket in sorted_buckets(day_roster):
            for entry in bucket.entries:
                rows.append({
                    "Day": day_roster.day,
                    "Weekday": day_roster.weekday,
                    "Duty": bucket.canonical_key,
                    "Label": get_display_label(bucket.canonical_key),
                    "Name": entry.name,
                    "Highlighted": entry.highlighted,
                    "OriginalKeys": ", ".join(bucket.original_keys),
                })

    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def roster_to_excel_bytes(result: RosterResult) -> bytes:
    """Excel download of roster_to_dataframe, single 'Roster' sheet."""
    df = roster_to_dataframe(result)
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        df.to_excel(writer, index=False, sheet_name=EXPORT_SHEET_NAME)
    output.seek(0)
    logger.info(f"[Export] Wrote {len(df)} assignment rows to Excel")
    return output.getvalue()
