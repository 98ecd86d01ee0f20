# utils.py
from __future__ import annotations

from datetime import datetime, date
from typing import Any

from errors import ValidationError

TS_DISPLAY_FORMAT = "%d/%m/%Y %H:%M"


def now() -> datetime:
    return datetime.now()


def format_ts(dt: datetime) -> str:
    return dt.strftime(TS_DISPLAY_FORMAT)


def parse_date_yyyy_mm_dd(s: str) -> date:
    # "2026-01-11"
    return datetime.strptime(s.strip(), "%Y-%m-%d").date()


def parse_int(value: Any, label: str = "Quantity") -> int:
    """
    Strict integer parsing for form input.
    Accepts ints and integer strings (surrounding blanks allowed); bools,
    floats and anything else raise ValidationError.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{label} is invalid")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise ValidationError(f"{label} is invalid") from None
    raise ValidationError(f"{label} is invalid")


def parse_positive_int(value: Any, label: str = "Quantity") -> int:
    n = parse_int(value, label)
    if n <= 0:
        raise ValidationError(f"{label} must be greater than zero")
    return n


def check_credentials(username: str, password: str) -> str:
    """
    Placeholder login: any non-empty user and password are accepted.
    Returns the stripped user name.
    """
    user = (username or "").strip()
    if not user or not password:
        raise ValidationError("Enter a user name and password (any will do)")
    return user
