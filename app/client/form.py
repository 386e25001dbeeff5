"""
Client-side validation for the add/edit equipment form.

Mirrors the server rules for immediate feedback and adds two checks
the server does not make: the date must be a real calendar date and
must not be in the future.
"""

from datetime import date
from typing import Any

from app.choices import (
    ISO_DATE_PATTERN,
    NAME_MIN_LENGTH,
    EquipmentStatus,
    EquipmentType,
)

_TYPE_VALUES = {member.value for member in EquipmentType}
_STATUS_VALUES = {member.value for member in EquipmentStatus}


def empty_form() -> dict[str, str]:
    """Default values for the add form."""
    return {
        "name": "",
        "type": EquipmentType.MACHINE.value,
        "status": EquipmentStatus.ACTIVE.value,
        "lastCleanedDate": "",
    }


def validate_form(data: dict[str, Any], today: date | None = None) -> dict[str, str]:
    """
    Validate form values and return ``{field: message}`` for each error.

    An empty dict means the form can be submitted.  ``today`` defaults
    to the local current date.
    """
    errors: dict[str, str] = {}

    name = (data.get("name") or "").strip()
    if not name:
        errors["name"] = "Name is required."
    elif len(name) < NAME_MIN_LENGTH:
        errors["name"] = "Name must be at least 2 characters."

    if data.get("type") not in _TYPE_VALUES:
        errors["type"] = "Type is required."

    if data.get("status") not in _STATUS_VALUES:
        errors["status"] = "Status is required."

    date_error = _validate_last_cleaned_date(
        (data.get("lastCleanedDate") or "").strip(),
        today or date.today(),
    )
    if date_error:
        errors["lastCleanedDate"] = date_error

    return errors


def _validate_last_cleaned_date(value: str, today: date) -> str | None:
    if not value:
        return "Last cleaned date is required."

    if ISO_DATE_PATTERN.fullmatch(value) is None:
        return "Last cleaned date must be a valid date."
    try:
        cleaned_on = date.fromisoformat(value)
    except ValueError:
        return "Last cleaned date must be a valid date."

    if cleaned_on > today:
        return "Last cleaned date cannot be in the future."
    return None


def to_payload(data: dict[str, Any]) -> dict[str, str]:
    """Build the request payload from validated form values."""
    return {
        "name": data["name"].strip(),
        "type": data["type"],
        "status": data["status"],
        "lastCleanedDate": data["lastCleanedDate"].strip(),
    }
