"""
Custom exceptions for roster upload and retrieval.

The roster engine itself never raises for bad data; these exceptions belong
to the boundary around it (workbook decoding, upload validation, stored
roster lookup) and carry structured error messages, context, and
recommendations.
"""

from typing import Optional, Dict, Any, Iterable


class DutyBoardException(Exception):
    """Base exception for roster operations."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        recommendation: Optional[str] = None,
        http_status: int = 400
    ):
        self.message = message
        self.context = context or {}
        self.recommendation = recommendation
        self.http_status = http_status
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to structured error response."""
        error_dict = {
            "success": False,
            "error": self.message
        }
        if self.context:
            error_dict["context"] = self.context
        if self.recommendation:
            error_dict["recommendation"] = self.recommendation
        return error_dict


class InvalidWorkbookException(DutyBoardException):
    """Raised when the uploaded bytes cannot be decoded as a workbook."""

    def __init__(self, filename: str, reason: str):
        super().__init__(
            message=f"Could not read workbook {filename}: {reason}",
            context={"filename": filename, "reason": reason},
            recommendation="Re-save the roster as an .xlsx file and upload it again.",
            http_status=400
        )


class SheetNotFoundException(DutyBoardException):
    """Raised when a requested sheet does not exist in the workbook."""

    def __init__(self, sheet_name: str, available: Iterable[str]):
        available = list(available)
        super().__init__(
            message=f"Sheet not found: {sheet_name}",
            context={"sheet_name": sheet_name, "available_sheets": available},
            recommendation="Leave the sheet empty to use the last sheet of the workbook.",
            http_status=400
        )


class UnsupportedFileTypeException(DutyBoardException):
    """Raised when the uploaded file extension is not accepted."""

    def __init__(self, filename: str, allowed: Iterable[str]):
        allowed = list(allowed)
        super().__init__(
            message=f"Invalid file type: {filename}",
            context={"filename": filename, "allowed_extensions": allowed},
            recommendation=f"Upload one of: {', '.join(allowed)}",
            http_status=400
        )


class FileTooLargeException(DutyBoardException):
    """Raised when the uploaded file exceeds the configured size limit."""

    def __init__(self, filename: str, size: int, max_size: int):
        super().__init__(
            message=f"File too large: {filename} ({size} bytes)",
            context={"filename": filename, "size": size, "max_size": max_size},
            recommendation="Upload only the roster sheet or trim unused sheets.",
            http_status=413
        )


class RosterNotFoundException(DutyBoardException):
    """Raised when a stored roster is unknown or has expired."""

    def __init__(self, roster_id: str):
        super().__init__(
            message=f"Roster not found: {roster_id}",
            context={"roster_id": roster_id},
            recommendation="Rosters are kept in memory for a limited time. Upload the file again.",
            http_status=404
        )


class DayNotFoundException(DutyBoardException):
    """Raised when a stored roster has no duties for the requested day."""

    def __init__(self, roster_id: str, day: int):
        super().__init__(
            message=f"No duties found for day {day}",
            context={"roster_id": roster_id, "day": day},
            recommendation="Check the day header row of the uploaded roster.",
            http_status=404
        )
