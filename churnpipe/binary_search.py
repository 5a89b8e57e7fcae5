"""Search over records sorted by descending tenure."""

from __future__ import annotations

from bisect import bisect_right
from typing import Any, Sequence


def binary_search_first_ge(records: Sequence[Any], k: int) -> int | None:
    """Return the last index whose tenure is still >= ``k``, or None if none qualifies.

    ``records`` must be sorted by tenure in descending order, so that index marks
    the end of the range of records with tenure >= ``k``.
    """
    count = bisect_right(records, -k, key=lambda record: -record.tenure)
    return count - 1 if count else None