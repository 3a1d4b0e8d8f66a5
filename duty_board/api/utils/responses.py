"""
Standard response envelopes for API endpoints.

Every endpoint answers with the same outer shape:
- success: {"success": true, "message": ..., "data": ...}
- error:   {"success": false, "error": ..., "details": ...}
"""

from typing import Any, Dict, Optional


def success_response(data: Any = None, message: Optional[str] = None) -> Dict:
    """
    Create a standardized success response.

    Args:
        data: The response data (any JSON-serializable value)
        message: Optional success message

    Examples:
        success_response({"roster_id": "9f1c..."}, "Roster uploaded")
        success_response(message="Duty board API")
    """
    response = {"success": True}

    if message:
        response["message"] = message

    if data is not None:
        response["data"] = data

    return response


def error_response(message: str, details: Optional[Any] = None) -> Dict:
    """
    Create a standardized error response body.

    The status code is set on the HTTPException that carries this body.

    Examples:
        raise HTTPException(status_code=400, detail=error_response("Invalid day", {"day": 40}))
    """
    response = {
        "success": False,
        "error": message
    }

    if details is not None:
        response["details"] = details

    return response
