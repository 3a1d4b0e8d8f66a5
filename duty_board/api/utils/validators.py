"""
Request validation utilities for API endpoints.

Provides reusable validation functions for common request parameters
to ensure data integrity and consistency across all endpoints.
"""

import re
from typing import Iterable

from fastapi import HTTPException
from duty_board.api.utils.responses import error_response
from duty_board.logics.exceptions import (
    FileTooLargeException,
    UnsupportedFileTypeException
)


ROSTER_ID_RE = re.compile(r"^[0-9a-f]{32}$")


def validate_upload_file(filename: str, size: int, allowed_extensions: Iterable[str], max_bytes: int) -> str:
    """
    Validate an uploaded roster file by name and size.

    Args:
        filename: Uploaded filename
        size: Size of the uploaded contents in bytes
        allowed_extensions: Accepted extensions (e.g. (".xlsx", ".xlsm"))
        max_bytes: Maximum accepted size in bytes

    Returns:
        The validated filename

    Raises:
        UnsupportedFileTypeException: If the extension is not accepted (400)
        FileTooLargeException: If the file is too large (413)

    Examples:
        validate_upload_file("duty_june.xlsx", 2048, (".xlsx",), 5242880)  # OK
        validate_upload_file("duty_june.csv", 2048, (".xlsx",), 5242880)   # Raises
    """
    allowed = tuple(allowed_extensions)
    if not filename or not filename.lower().endswith(allowed):
        raise UnsupportedFileTypeException(filename or "", allowed)
    if size > max_bytes:
        raise FileTooLargeException(filename, size, max_bytes)
    return filename


def validate_roster_id(roster_id: str) -> str:
    """
    Validate roster_id path parameter.

    Args:
        roster_id: Id returned by the upload endpoint (32 hex characters)

    Returns:
        The validated roster_id

    Raises:
        HTTPException: If roster_id is malformed (400)
    """
    if not ROSTER_ID_RE.match(roster_id or ""):
        raise HTTPException(
            status_code=400,
            detail=error_response(
                f"Invalid roster_id: {roster_id}",
                {"expected": "32 lowercase hex characters"}
            )
        )
    return roster_id
