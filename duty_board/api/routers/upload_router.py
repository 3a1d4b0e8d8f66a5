"""
Roster upload endpoints.

Handles:
- Health check
- Roster workbook upload: decode, build the per-day duty listing, store it
"""

from fastapi import APIRouter, UploadFile, File, HTTPException
from typing import Optional

from duty_board.logics.excel_reader import read_roster_workbook
from duty_board.logics.exceptions import DutyBoardException
from duty_board.logics.roster_builder import build_roster, roster_stats
from duty_board.logics.roster_export import roster_to_dict
from duty_board.api.dependencies import get_logger, get_roster_store
from duty_board.api.utils.responses import success_response, error_response
from duty_board.api.utils.validators import validate_upload_file
from duty_board.settings import (
    ALLOWED_EXTENSIONS,
    HIGHLIGHT_COLOR,
    MAX_UPLOAD_BYTES,
    SHEET_NAME
)

# Initialize router and dependencies
router = APIRouter()
logger = get_logger(__name__)


@router.get("/")
def health_check():
    """Root endpoint - health check."""
    return success_response(message="Duty board API")


@router.post("/api/roster/upload")
async def upload_roster(
    file: UploadFile = File(...),
    sheet: Optional[str] = None
):
    """
    Upload a duty roster workbook and build its per-day duty listing.

    Query Parameters:
        sheet: Sheet to read (default: [roster] sheet_name, else the last sheet)

    Request Body:
        file: .xlsx or .xlsm roster

    Responses:
        200: Roster built and stored
        400: Invalid file type, unreadable workbook or unknown sheet
        413: File too large
        500: Processing error

    Returns:
        {
            "success": true,
            "message": "Roster uploaded",
            "data": {
                "roster_id": "9f1c...",
                "filename": "duty_june.xlsx",
                "sheet_name": "June",
                "uploaded_at": "2025-06-01T08:00:00+00:00",
                "stats": {"days": 30, "duties": 310, "assignments": 900, "highlighted": 12},
                "roster": {"days": [...]}
            }
        }
    """
    try:
        contents = await file.read()
        filename = validate_upload_file(
            file.filename,
            len(contents),
            ALLOWED_EXTENSIONS,
            MAX_UPLOAD_BYTES
        )

        roster_sheet = read_roster_workbook(
            contents,
            sheet_name=sheet or SHEET_NAME,
            highlight_color=HIGHLIGHT_COLOR,
            filename=filename
        )
        result = build_roster(roster_sheet.grid, roster_sheet.highlight)
        stored = get_roster_store().add(filename, roster_sheet.sheet_name, result)
        stats = roster_stats(result)

        logger.info(
            f"[Upload] Stored roster {stored.roster_id} from {filename} "
            f"(sheet '{roster_sheet.sheet_name}'): {stats}"
        )

        data = stored.metadata()
        data["stats"] = stats
        data["roster"] = roster_to_dict(result)
        return success_response(data, "Roster uploaded")

    except HTTPException:
        raise
    except DutyBoardException as e:
        logger.warning(f"[Upload] Rejected upload: {e.message}")
        raise HTTPException(status_code=e.http_status, detail=e.to_dict())
    except Exception as e:
        logger.error(f"[Upload] Error processing roster file: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=error_response("Error processing roster file", str(e))
        )
