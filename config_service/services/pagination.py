"""Page/limit parsing for the list endpoints."""
import math
import re
from dataclasses import dataclass
from typing import Optional
from config_service.core.config import DEFAULT_PAGE, DEFAULT_LIMIT, MAX_PAGINATION_VALUE

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def _positive_int(raw: Optional[str], default: int) -> int:
    """Leading integer of ``raw`` ("2abc" -> 2); ``default`` when missing, not positive
    or larger than ``MAX_PAGINATION_VALUE``.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    digits = match.group(1)
    # Anything this long is out of range; also avoids int()'s digit limit
    if len(digits.lstrip("+-").lstrip("0")) > len(str(MAX_PAGINATION_VALUE)):
        return default
    value = int(digits)
    return value if 0 < value <= MAX_PAGINATION_VALUE else default


def parse_pagination(page: Optional[str] = None, limit: Optional[str] = None) -> Pagination:
    return Pagination(
        page=_positive_int(page, DEFAULT_PAGE),
        limit=_positive_int(limit, DEFAULT_LIMIT),
    )


def total_pages(count: int, limit: int) -> int:
    return math.ceil(count / limit) if count else 0
