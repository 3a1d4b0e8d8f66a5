"""
Duty code lookup endpoints.

Exposes the normalization, ordering and labelling rules so a client can
render codes consistently without re-deriving them.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field
from typing import List

from duty_board.logics.duty_keys import (
    DUTY_DISPLAY_ORDER,
    get_display_label,
    get_duty_priority,
    normalize_duty_key,
    sort_duty_keys
)
from duty_board.api.dependencies import get_logger
from duty_board.api.utils.responses import success_response

# Initialize router and dependencies
router = APIRouter()
logger = get_logger(__name__)


class DutyCodeSortRequest(BaseModel):
    """Raw duty codes to normalize and order."""
    codes: List[str] = Field(default_factory=list, description="Raw duty codes as typed in the roster")


def _describe_key(key: str) -> dict:
    tier, rank = get_duty_priority(key)
    return {
        "key": key,
        "label": get_display_label(key),
        "tier": tier,
        "rank": rank
    }


@router.get("/api/duty-codes/normalize")
def normalize_duty_code(code: str):
    """
    Normalize one raw duty code.

    Query Parameters:
        code: Raw duty code (e.g. "ov", "nn-12", "03")

    Returns:
        {
            "success": true,
            "data": {"code": "ov", "key": "OFF", "label": "OFF", "tier": 0, "rank": 27}
        }
    """
    data = {"code": code}
    data.update(_describe_key(normalize_duty_key(code)))
    return success_response(data)


@router.post("/api/duty-codes/sort")
def sort_duty_codes(request: DutyCodeSortRequest):
    """
    Normalize a list of raw codes, group spellings by canonical key and
    return the keys in display order.

    Returns:
        {
            "success": true,
            "data": [
                {"key": "OFF", "label": "OFF", "tier": 0, "rank": 27, "original_keys": ["V", "w"]},
                ...
            ]
        }
    """
    originals = {}
    for code in request.codes:
        key = normalize_duty_key(code)
        spellings = originals.setdefault(key, [])
        if code not in spellings:
            spellings.append(code)

    data = []
    for key in sort_duty_keys(originals):
        item = _describe_key(key)
        item["original_keys"] = originals[key]
        data.append(item)

    logger.debug(f"[DutyCodes] Sorted {len(request.codes)} codes into {len(data)} keys")
    return success_response(data)


@router.get("/api/duty-codes/order")
def get_duty_order():
    """Reference display order of the recognised duty keys with their labels."""
    return success_response([_describe_key(key) for key in DUTY_DISPLAY_ORDER])
