"""
Client-side search, status filter, and sort over the fetched list.

The server has no query parameters; the client always holds the full
record set and recomputes the visible rows from it on every change.
"""

from functools import lru_cache
from typing import Any

from pyuca import Collator

from app.choices import EquipmentStatus

STATUS_ALL = "All"
STATUS_FILTERS = (STATUS_ALL, *(member.value for member in EquipmentStatus))

SORT_NAME_ASC = "nameAsc"
SORT_NAME_DESC = "nameDesc"
SORT_DATE_ASC = "dateAsc"
SORT_DATE_DESC = "dateDesc"
SORT_KEYS = (SORT_NAME_ASC, SORT_NAME_DESC, SORT_DATE_ASC, SORT_DATE_DESC)


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loading the collation table is slow; build it once, on first sort.
    return Collator()


def _name_key(record: dict[str, Any]) -> tuple:
    # Unicode Collation Algorithm order, so "Éclair" sorts with the E's.
    return _collator().sort_key(record["name"].casefold())


def _date_key(record: dict[str, Any]) -> str:
    # Fixed-width YYYY-MM-DD strings sort chronologically.
    return record["lastCleanedDate"]


def filter_and_sort(
    records: list[dict[str, Any]],
    query: str = "",
    status: str = STATUS_ALL,
    sort_key: str = SORT_NAME_ASC,
) -> list[dict[str, Any]]:
    """
    Return the records to display, in display order.

    Args:
        records:  The full record list as returned by the API.
        query:    Case-insensitive substring matched against ``name``.
                  Blank matches everything.
        status:   ``"All"`` or one exact status value.
        sort_key: One of ``nameAsc``, ``nameDesc``, ``dateAsc``,
                  ``dateDesc``.

    Returns:
        A new list; ``records`` is left untouched.

    Raises:
        ValueError: If ``status`` or ``sort_key`` is not recognized.
    """
    if status not in STATUS_FILTERS:
        raise ValueError(f"Unknown status filter '{status}'.")
    if sort_key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key '{sort_key}'.")

    needle = query.strip().casefold()
    visible = [
        record
        for record in records
        if needle in record["name"].casefold()
        and (status == STATUS_ALL or record["status"] == status)
    ]

    key = _name_key if sort_key in (SORT_NAME_ASC, SORT_NAME_DESC) else _date_key
    reverse = sort_key in (SORT_NAME_DESC, SORT_DATE_DESC)
    return sorted(visible, key=key, reverse=reverse)
