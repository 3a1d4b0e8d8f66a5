"""
Stored roster endpoints.

Provides endpoints for:
- Full per-day duty listing of an uploaded roster
- A single day's listing
- Excel download of the listing
- Dropping one roster or the whole store
"""

import io
from urllib.parse import quote

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse

from duty_board.cache import clear_all_caches, invalidate_roster
from duty_board.logics.exceptions import DutyBoardException, DayNotFoundException
from duty_board.logics.roster_builder import roster_stats
from duty_board.logics.roster_export import day_to_dict, roster_to_dict, roster_to_excel_bytes
from duty_board.api.dependencies import get_logger, get_stored_roster
from duty_board.api.utils.responses import success_response, error_response
from duty_board.api.utils.validators import validate_roster_id

# Initialize router and dependencies
router = APIRouter()
logger = get_logger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _raise_http(e: DutyBoardException):
    logger.warning(f"[Roster] {e.message}")
    raise HTTPException(status_code=e.http_status, detail=e.to_dict())


@router.get("/api/roster/{roster_id}")
def get_roster(roster_id: str):
    """
    Get the per-day duty listing of an uploaded roster.

    Returns:
        {
            "success": true,
            "data": {
                "roster_id": "...", "filename": "...", "sheet_name": "...",
                "uploaded_at": "...", "stats": {...},
                "roster": {"days": [...]}
            }
        }
    """
    validate_roster_id(roster_id)
    try:
        stored = get_stored_roster(roster_id)
    except DutyBoardException as e:
        _raise_http(e)

    data = stored.metadata()
    data["stats"] = roster_stats(stored.result)
    data["roster"] = roster_to_dict(stored.result)
    return success_response(data)


@router.get("/api/roster/{roster_id}/days/{day}")
def get_roster_day(roster_id: str, day: int):
    """
    Get one day of an uploaded roster.

    Path Parameters:
        roster_id: Id returned by the upload endpoint
        day: Day number from the roster header row

    Responses:
        200: Day listing
        400: Malformed roster_id
        404: Unknown roster or no duties on that day
    """
    validate_roster_id(roster_id)
    try:
        stored = get_stored_roster(roster_id)
        day_roster = stored.result.get(day)
        if day_roster is None:
            raise DayNotFoundException(roster_id, day)
    except DutyBoardException as e:
        _raise_http(e)

    return success_response(day_to_dict(day_roster))


@router.get("/api/roster/{roster_id}/download")
def download_roster(roster_id: str):
    """
    Download the duty listing as an Excel file, one row per assignment.
    """
    validate_roster_id(roster_id)
    try:
        stored = get_stored_roster(roster_id)
    except DutyBoardException as e:
        _raise_http(e)

    try:
        output = io.BytesIO(roster_to_excel_bytes(stored.result))
    except Exception as e:
        logger.error(f"[Roster] Error exporting roster {roster_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=error_response("Error exporting roster")
        )

    download_name = stored.filename.rsplit(".", 1)[0] + "_duties.xlsx"
    return StreamingResponse(
        output,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(download_name)}"}
    )


@router.delete("/api/roster/{roster_id}")
def delete_roster(roster_id: str):
    """Drop an uploaded roster before it expires."""
    validate_roster_id(roster_id)
    if not invalidate_roster(roster_id):
        raise HTTPException(
            status_code=404,
            detail=error_response("Roster not found", {"roster_id": roster_id})
        )
    return success_response(message="Roster deleted")


@router.delete("/api/cache")
def clear_cache():
    """Drop every uploaded roster."""
    return success_response(clear_all_caches(), "All rosters cleared")
