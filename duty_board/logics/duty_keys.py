"""
Duty code normalization and display ordering.

Raw duty codes typed into a roster come in many spellings ("OV", "w", "nn-12",
" 03 "). This module collapses them into canonical keys, ranks canonical keys
for display, and derives the label shown for each key.

All functions here are total: garbage input falls through to a default
branch instead of raising.
"""

import re
import logging
from functools import cmp_to_key
from typing import Any, Callable, List, Tuple, Union

logger = logging.getLogger(__name__)

NON_ALNUM_RE: re.Pattern = re.compile(r"[^A-Z0-9]")
DIGITS_RE: re.Pattern = re.compile(r"^[0-9]+$")

# Numeric duty keys shown before every lettered duty
NUMERIC_DUTY_KEYS: Tuple[str, ...] = tuple(str(i) for i in range(1, 17))

DUTY_DISPLAY_ORDER: Tuple[str, ...] = NUMERIC_DUTY_KEYS + (
    "D5",
    "DD",
    "DD12",
    "DB",
    "DC",
    "C",
    "P3",
    "EA",
    "E1",
    "N",
    "NN12",
    "OFF",
    "ST",
)

OFF_DUTY_KEY = "OFF"
CELL_DUTY_LABEL = "세포"

RECOGNIZED_TIER = 0
UNRECOGNIZED_TIER = 1


def _exact(*codes: str) -> Callable[[str], bool]:
    return lambda cleaned: cleaned in codes


def _is_digits(cleaned: str) -> bool:
    return cleaned.isdigit()


def _prefix(letter: str) -> Callable[[str], bool]:
    return lambda cleaned: cleaned.startswith(letter)


def _keep(cleaned: str) -> str:
    return cleaned


def _fixed(key: str) -> Callable[[str], str]:
    return lambda cleaned: key


# First match wins. NN12 must stay ahead of the N prefix rule.
NORMALIZATION_RULES: List[Tuple[Callable[[str], bool], Callable[[str], str]]] = [
    (_exact("NN12"), _fixed("NN12")),
    (_exact("V", "VF", "OV", "W"), _fixed(OFF_DUTY_KEY)),
    (_exact("OF"), _fixed(OFF_DUTY_KEY)),
    (_exact("P"), _fixed("P3")),
    (_exact("C"), _fixed("C")),
    (_exact("E1"), _fixed("E1")),
    (_exact("ST"), _fixed("ST")),
    (_exact("D5"), _fixed("D5")),
    (_exact("DB"), _fixed("DB")),
    (_exact("DC"), _fixed("DC")),
    (_is_digits, _keep),
    (_prefix("D"), _keep),
    (_prefix("E"), _keep),
    (_prefix("N"), _fixed("N")),
]


def duty_code_text(value: Any) -> str:
    """
    Render a raw cell value the way the roster shows it.

    None becomes an empty string and integral floats lose their ".0"
    (a cell holding 3.0 reads "3", not "3.0").

    Args:
        value: Raw cell value (str, int, float, None, ...)

    Returns:
        Text form of the value
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def clean_duty_code(value: Any) -> str:
    """Uppercase the code and drop every character outside A-Z and 0-9."""
    return NON_ALNUM_RE.sub("", duty_code_text(value).upper())


def normalize_duty_key(raw: Any) -> str:
    """
    Map a raw duty code to its canonical key.

    Args:
        raw: Raw duty code as read from the roster cell

    Returns:
        Canonical key (always uppercase, may be empty for empty input)

    Examples:
        >>> normalize_duty_key("ov")
        'OFF'
        >>> normalize_duty_key("nn12")
        'NN12'
        >>> normalize_duty_key("Night")
        'N'
        >>> normalize_duty_key("03")
        '03'
    """
    cleaned = clean_duty_code(raw)
    for matches, result in NORMALIZATION_RULES:
        if matches(cleaned):
            return result(cleaned)
    return cleaned


def get_duty_priority(key: str) -> Tuple[int, Union[int, str]]:
    """
    Sort priority of a canonical key.

    Keys from DUTY_DISPLAY_ORDER rank by their position (tier 0); every
    other key ranks after them, alphabetically (tier 1).

    Args:
        key: Canonical duty key

    Returns:
        (tier, rank) tuple
    """
    upper = duty_code_text(key).upper()
    if upper in DUTY_DISPLAY_ORDER:
        return RECOGNIZED_TIER, DUTY_DISPLAY_ORDER.index(upper)
    return UNRECOGNIZED_TIER, upper


def compare_duty_keys(a: str, b: str) -> int:
    """
    Three-way comparison of two canonical keys for display.

    Returns:
        Negative if a sorts first, positive if b sorts first, 0 if equal rank
    """
    a_tier, a_rank = get_duty_priority(a)
    b_tier, b_rank = get_duty_priority(b)
    if a_tier != b_tier:
        return a_tier - b_tier
    if isinstance(a_rank, int) and isinstance(b_rank, int):
        return a_rank - b_rank
    a_text, b_text = str(a_rank).casefold(), str(b_rank).casefold()
    return (a_text > b_text) - (a_text < b_text)


duty_sort_key = cmp_to_key(compare_duty_keys)


def sort_duty_keys(keys) -> List[str]:
    """Return the keys in display order."""
    return sorted(keys, key=duty_sort_key)


def is_numeric_duty_key(key: str) -> bool:
    """True for the ranked numeric duties "1".."16"."""
    return key in NUMERIC_DUTY_KEYS


def get_display_label(key: str) -> str:
    """
    Label shown for a canonical key.

    Examples:
        >>> get_display_label("3")
        '3R'
        >>> get_display_label("ST")
        'Station'
    """
    if DIGITS_RE.match(key):
        return key + "R"
    if key == "C":
        return CELL_DUTY_LABEL
    if key == "E1":
        return "E"
    if key == OFF_DUTY_KEY:
        return OFF_DUTY_KEY
    if key == "ST":
        return "Station"
    return key
