"""Ownership checks for book mutations.

Owner ids reach the API as JSON numbers, numeric strings or query-string
values, and the stored column may be NULL. Both sides are coerced to a number
before comparing: strings are trimmed, an empty string or NULL counts as 0,
decimal, exponent, 0x/0o/0b and Infinity literals parse, and anything else
becomes NaN, which never matches. So ``"5"`` and ``5`` are the same owner.
"""

import logging
import math
import re
from enum import Enum

from sqlalchemy.orm import Session

from bookshelf.services.books import get_book_owner

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_RADIX = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


class Ownership(str, Enum):
    """Outcome of an ownership check."""

    ALLOWED = "allowed"
    DENIED = "denied"
    NOT_FOUND = "not_found"


def _parse_numeric_string(value: str) -> float:
    text = value.strip()
    if not text:
        return 0.0
    if text in _INFINITIES:
        return _INFINITIES[text]
    if _RADIX.fullmatch(text):
        return float(int(text[2:], _RADIX_BASES[text[1].lower()]))
    if _DECIMAL.fullmatch(text):
        return float(text)
    return math.nan


def to_number(value: object) -> float:
    """Coerce an owner id to a float; unparseable values become NaN."""
    if value is None:
        return 0.0
    if isinstance(value, bool | int | float):
        return float(value)
    if isinstance(value, str):
        return _parse_numeric_string(value)
    return math.nan


def is_supplied(value: object) -> bool:
    """Check whether a claimed owner id is present.

    None, empty string, zero, False and NaN all count as absent.
    """
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def coerce_owner_id(value: object) -> int | None:
    """Convert an owner id for storage or filtering.

    Absent values map to None. Raises ValueError when the value does not
    coerce to an integer.
    """
    if not is_supplied(value):
        return None
    number = to_number(value)
    if not math.isfinite(number) or not number.is_integer():
        raise ValueError(f"Owner id {value!r} is not an integer")
    return int(number)


def owners_match(stored_owner_id: object, claimed_owner_id: object) -> bool:
    """Numeric equality after coercion; NaN on either side never matches."""
    return to_number(stored_owner_id) == to_number(claimed_owner_id)


def check_ownership(db: Session, book_id: int, claimed_owner_id: object) -> Ownership:
    """Decide whether the caller may mutate a book.

    A caller that supplies no owner id is not checked at all.
    """
    if not is_supplied(claimed_owner_id):
        return Ownership.ALLOWED

    found, stored_owner_id = get_book_owner(db, book_id)
    if not found:
        return Ownership.NOT_FOUND

    if not owners_match(stored_owner_id, claimed_owner_id):
        logger.info(
            f"Ownership denied for book {book_id}: claimed {claimed_owner_id!r}, "
            f"owner {stored_owner_id!r}"
        )
        return Ownership.DENIED
    return Ownership.ALLOWED
