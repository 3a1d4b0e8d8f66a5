"""
Unit tests for roster exceptions.

Tests that custom exceptions properly structure error information
with context, recommendations, and appropriate HTTP status codes.
"""

import pytest
from duty_board.logics.exceptions import (
    DutyBoardException,
    InvalidWorkbookException,
    SheetNotFoundException,
    UnsupportedFileTypeException,
    FileTooLargeException,
    RosterNotFoundException,
    DayNotFoundException
)


class TestDutyBoardException:
    """Test base DutyBoardException functionality."""

    def test_basic_exception_creation(self):
        exc = DutyBoardException(
            message="Test error",
            context={"key": "value"},
            recommendation="Do something",
            http_status=400
        )

        assert exc.message == "Test error"
        assert exc.context == {"key": "value"}
        assert exc.recommendation == "Do something"
        assert exc.http_status == 400
        assert str(exc) == "Test error"

    def test_to_dict_conversion(self):
        exc = DutyBoardException(
            message="Test error",
            context={"roster_id": "abc123"},
            recommendation="Upload again",
            http_status=500
        )

        error_dict = exc.to_dict()

        assert error_dict["success"] == False
        assert error_dict["error"] == "Test error"
        assert error_dict["context"]["roster_id"] == "abc123"
        assert error_dict["recommendation"] == "Upload again"

    def test_to_dict_without_optional_fields(self):
        exc = DutyBoardException(message="Simple error")
        error_dict = exc.to_dict()

        assert error_dict["success"] == False
        assert "context" not in error_dict
        assert "recommendation" not in error_dict


class TestUploadExceptions:
    """Test exceptions raised while accepting an upload."""

    def test_invalid_workbook(self):
        exc = InvalidWorkbookException("duty.xlsx", "File is not a zip file")

        assert exc.http_status == 400
        assert "duty.xlsx" in exc.message
        assert exc.context["reason"] == "File is not a zip file"
        assert ".xlsx" in exc.recommendation

    def test_sheet_not_found(self):
        exc = SheetNotFoundException("July", ("May", "June"))

        assert exc.http_status == 400
        assert exc.context["available_sheets"] == ["May", "June"]

    def test_unsupported_file_type(self):
        exc = UnsupportedFileTypeException("duty.csv", (".xlsx", ".xlsm"))

        assert exc.http_status == 400
        assert exc.context["allowed_extensions"] == [".xlsx", ".xlsm"]
        assert ".xlsx, .xlsm" in exc.recommendation

    def test_file_too_large(self):
        exc = FileTooLargeException("duty.xlsx", 10, 5)

        assert exc.http_status == 413
        assert exc.context == {"filename": "duty.xlsx", "size": 10, "max_size": 5}


class TestLookupExceptions:
    """Test exceptions raised while reading stored rosters."""

    def test_roster_not_found(self):
        exc = RosterNotFoundException("abc")

        assert exc.http_status == 404
        assert "abc" in exc.message
        assert "upload" in exc.recommendation.lower()

    def test_day_not_found(self):
        error_dict = DayNotFoundException("abc", 31).to_dict()

        assert error_dict["success"] == False
        assert error_dict["context"] == {"roster_id": "abc", "day": 31}

    @pytest.mark.parametrize("exc", [
        RosterNotFoundException("abc"),
        DayNotFoundException("abc", 1),
        FileTooLargeException("a.xlsx", 2, 1),
    ])
    def test_all_derive_from_base(self, exc):
        assert isinstance(exc, DutyBoardException)
