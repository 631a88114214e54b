"""
Field formatters.

Pure, total functions over a raw (possibly absent) cell value. None of them
raise on malformed input: a value that cannot be cleaned degrades to an empty
string, the placeholder, or None for dates.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from .rules import PLACEHOLDER

_ISO_DATE = re.compile(r"([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})")
_SLASH_DATE = re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{4})")
# First letter of each whitespace-delimited word, after any leading punctuation.
_WORD_FIRST_LETTER = re.compile(r"(?<!\S)([^\w\s]*)([^\W\d_])")


def _text(value: object) -> str:
    return str(value if value is not None else "").strip()


def date_only(value: object) -> str:
    """Drop the time part of "2024-03-07T10:00:00" or "2024-03-07 10:00"."""
    s = _text(value)
    if not s:
        return ""
    if "T" in s:
        return s.split("T", 1)[0]
    return s.split(" ", 1)[0]


def parse_date_loose(value: object) -> Optional[date]:
    """
    Parse a cell into a calendar date, or None.

    Accepted shapes:
    - YYYY-M-D (1-2 digit month/day)
    - A/B/YYYY where the component above 12 is the day. When neither is
      above 12 the first one is the day (day-first locale of the sheet).

    Anything else, including components that do not form a real date
    (31/02/2024), gives None. Such dates are rejected on purpose rather
    than rolled over into the next month (31/02 is never read as 02/03).
    """
    s = date_only(value)
    if not s:
        return None

    iso = _ISO_DATE.fullmatch(s)
    if iso:
        year, month, day = (int(g) for g in iso.groups())
        return _make_date(year, month, day)

    slash = _SLASH_DATE.fullmatch(s)
    if slash:
        a, b, year = (int(g) for g in slash.groups())
        if a > 12:
            day, month = a, b
        elif b > 12:
            month, day = a, b
        else:
            day, month = a, b
        return _make_date(year, month, day)

    return None


def _make_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def start_of_today() -> date:
    """Current local calendar date. Called once per pipeline run."""
    return date.today()


def left_of_double_dash(value: object) -> str:
    """'WEB DEV -- CODE123' -> 'WEB DEV'."""
    s = _text(value)
    return s.split("--", 1)[0].strip()


def to_sentence_case(value: object) -> str:
    """'  LUNES   y (miércoles) ' -> 'Lunes Y (Miércoles)'."""
    s = _text(value)
    if not s or s == PLACEHOLDER:
        return PLACEHOLDER
    s = " ".join(s.lower().split())
    return _WORD_FIRST_LETTER.sub(lambda m: m.group(1) + m.group(2).upper(), s)


def safe_text(value: object, fallback: str = PLACEHOLDER) -> str:
    s = _text(value)
    return s or fallback


def normalize_value(value: object) -> str:
    return _text(value).lower()
