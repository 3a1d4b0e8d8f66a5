"""
Workbook decoding for uploaded duty rosters.

Turns .xlsx bytes into the raw grid the roster builder consumes, plus a
highlight lookup answering "is the cell at (row, col) filled with the marker
color?". Grid coordinates are 0-based; openpyxl cells are 1-based.
"""

import io
import logging
import zipfile
from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Optional, Set, Tuple

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from duty_board.logics.exceptions import InvalidWorkbookException, SheetNotFoundException

logger = logging.getLogger(__name__)

DEFAULT_HIGHLIGHT_COLOR = "FFC000"


@dataclass
class RosterSheet:
    sheet_name: str
    grid: List[List[Any]]
    highlighted_cells: Set[Tuple[int, int]] = field(default_factory=set)

    def highlight(self, row: int, col: int) -> bool:
        return (row, col) in self.highlighted_cells


def color_matches(rgb: Any, marker: str) -> bool:
    """
    Compare an openpyxl color value with a 6-hex-digit marker.

    openpyxl reports ARGB ("FFFFC000"); plain RGB ("FFC000") is accepted too.
    Theme and indexed colors carry no rgb string and never match.
    """
    if not isinstance(rgb, str) or not marker:
        return False
    rgb = rgb.strip().upper()
    marker = marker.strip().lstrip("#").upper()
    if len(rgb) == 8:
        rgb = rgb[2:]
    return rgb == marker


def _cell_fill_rgb(cell) -> Optional[str]:
    fill = getattr(cell, "fill", None)
    if fill is None or not getattr(fill, "fill_type", None):
        return None
    color = getattr(fill, "fgColor", None)
    if color is None or color.type != "rgb":
        return None
    return color.rgb


def _cell_value(cell, row_index: int) -> Any:
    """
    Grid value for a cell.

    Error cells ("#N/A", "#REF!", ...) read as empty. Date-typed day headers
    read as their day of month, since openpyxl turns the stored serial into
    a datetime.
    """
    if cell.data_type == "e":
        return None
    value = cell.value
    if row_index == 0 and isinstance(value, date):
        return value.day
    return value


def select_sheet(workbook, sheet_name: Optional[str] = None):
    """Named worksheet, or the last sheet of the workbook when no name is given."""
    if sheet_name:
        if sheet_name not in workbook.sheetnames:
            raise SheetNotFoundException(sheet_name, workbook.sheetnames)
        return workbook[sheet_name]
    return workbook[workbook.sheetnames[-1]]


def read_roster_sheet(worksheet, highlight_color: str = DEFAULT_HIGHLIGHT_COLOR) -> RosterSheet:
    """
    Read a worksheet into a RosterSheet.

    Args:
        worksheet: openpyxl worksheet (not read-only, styles are needed)
        highlight_color: 6-hex-digit marker fill color

    Returns:
        RosterSheet with the value grid from A1 to the used range
    """
    grid: List[List[Any]] = []
    highlighted: Set[Tuple[int, int]] = set()

    for row_index, row in enumerate(worksheet.iter_rows(min_row=1, min_col=1)):
        values = []
        for col_index, cell in enumerate(row):
            values.append(_cell_value(cell, row_index))
            if color_matches(_cell_fill_rgb(cell), highlight_color):
                highlighted.add((row_index, col_index))
        grid.append(values)

    logger.debug(
        f"[Excel] Read sheet '{worksheet.title}': {len(grid)} rows, "
        f"{len(highlighted)} highlighted cells"
    )
    return RosterSheet(sheet_name=worksheet.title, grid=grid, highlighted_cells=highlighted)


def read_roster_workbook(
    contents: bytes,
    sheet_name: Optional[str] = None,
    highlight_color: str = DEFAULT_HIGHLIGHT_COLOR,
    filename: str = "upload.xlsx",
) -> RosterSheet:
    """
    Decode workbook bytes into a RosterSheet.

    Args:
        contents: Raw .xlsx/.xlsm bytes
        sheet_name: Sheet to read (default: last sheet)
        highlight_color: Marker fill color for highlighted assignments
        filename: Original filename, used in error messages

    Returns:
        RosterSheet

    Raises:
        InvalidWorkbookException: If the bytes are not a readable workbook
        SheetNotFoundException: If sheet_name is not in the workbook
    """
    try:
        workbook = load_workbook(io.BytesIO(contents), data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError, ValueError) as e:
        logger.error(f"[Excel] Failed to open workbook {filename}: {e}")
        raise InvalidWorkbookException(filename, str(e)) from e

    try:
        worksheet = select_sheet(workbook, sheet_name)
        return read_roster_sheet(worksheet, highlight_color)
    finally:
        workbook.close()
