"""
Equipment service — validation and CRUD for equipment records.

Routes hand the decoded JSON body to ``validate_payload`` (directly or
through ``create_equipment`` / ``update_equipment``) and translate the
two service exceptions into HTTP responses:

  - ``EquipmentValidationError`` -> 400
  - ``EquipmentNotFoundError``   -> 404

Every mutating function touches exactly one row and commits once.
Concurrent updates to the same row are last-write-wins.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any

from app.choices import (
    ISO_DATE_PATTERN,
    NAME_MIN_LENGTH,
    EquipmentStatus,
    EquipmentType,
)
from app.extensions import db
from app.models.equipment import Equipment

logger = logging.getLogger(__name__)

# ASCII digits only: int() alone would also take "1_0" and full-width digits.
_ID_PATTERN = re.compile(r"\d+", re.ASCII)

_TYPE_VALUES = {member.value: member for member in EquipmentType}
_STATUS_VALUES = {member.value: member for member in EquipmentStatus}


class EquipmentValidationError(ValueError):
    """Raised when an inbound payload fails validation."""


class EquipmentNotFoundError(LookupError):
    """Raised when no equipment row matches the requested id."""

    def __init__(self, equipment_id: int) -> None:
        super().__init__(f"Equipment ID {equipment_id} not found.")
        self.equipment_id = equipment_id


@dataclass(frozen=True)
class EquipmentPayload:
    """A validated, normalized equipment payload (everything but ``id``)."""

    name: str
    type: EquipmentType
    status: EquipmentStatus
    last_cleaned_date: str


# =========================================================================
# Validation
# =========================================================================


def validate_payload(body: Any) -> EquipmentPayload:
    """
    Validate an untyped request body and return the normalized payload.

    Checks run in a fixed order and the first failure wins, so the
    client always receives a single field-specific message.

    Args:
        body: The decoded JSON request body (any JSON value, or None).

    Returns:
        The payload with ``name`` and ``lastCleanedDate`` trimmed and
        ``type`` / ``status`` converted to enum members.

    Raises:
        EquipmentValidationError: With the message for the first
                                  failing field.
    """
    if not isinstance(body, dict):
        raise EquipmentValidationError("Invalid request body.")

    name = body.get("name")
    type_value = body.get("type")
    status_value = body.get("status")
    last_cleaned_date = body.get("lastCleanedDate")

    if not isinstance(name, str) or len(name.strip()) < NAME_MIN_LENGTH:
        raise EquipmentValidationError(
            "Name is required and must be at least 2 characters."
        )

    if not isinstance(type_value, str) or type_value not in _TYPE_VALUES:
        raise EquipmentValidationError(
            "Type is required and must be a valid option."
        )

    if not isinstance(status_value, str) or status_value not in _STATUS_VALUES:
        raise EquipmentValidationError(
            "Status is required and must be a valid option."
        )

    if not isinstance(last_cleaned_date, str) or not last_cleaned_date.strip():
        raise EquipmentValidationError("Last cleaned date is required.")

    normalized_date = last_cleaned_date.strip()
    if ISO_DATE_PATTERN.fullmatch(normalized_date) is None:
        raise EquipmentValidationError(
            "Last cleaned date must be in YYYY-MM-DD format."
        )

    return EquipmentPayload(
        name=name.strip(),
        type=_TYPE_VALUES[type_value],
        status=_STATUS_VALUES[status_value],
        last_cleaned_date=normalized_date,
    )


def parse_id(value: str) -> int | None:
    """Parse a path parameter into a positive integer id, or None."""
    if not isinstance(value, str):
        return None
    digits = value.strip()
    if _ID_PATTERN.fullmatch(digits) is None:
        return None
    parsed = int(digits)
    if parsed <= 0:
        return None
    return parsed


# =========================================================================
# Reads
# =========================================================================


def get_all_equipment() -> list[Equipment]:
    """Return every equipment record ordered by ascending id."""
    return db.session.execute(
        db.select(Equipment).order_by(Equipment.id.asc())
    ).scalars().all()


def get_equipment_by_id(equipment_id: int) -> Equipment | None:
    """Return an equipment record by primary key."""
    return db.session.get(Equipment, equipment_id)


# =========================================================================
# Writes
# =========================================================================


def create_equipment(body: Any) -> Equipment:
    """
    Validate ``body`` and insert a new equipment record.

    Returns:
        The newly created record, including its store-assigned id.

    Raises:
        EquipmentValidationError: If the payload is invalid.
    """
    payload = validate_payload(body)

    equipment = Equipment(
        name=payload.name,
        type=payload.type,
        status=payload.status,
        last_cleaned_date=payload.last_cleaned_date,
    )
    db.session.add(equipment)
    db.session.commit()

    logger.info("Created equipment ID %d (%s)", equipment.id, equipment.name)
    return equipment


def update_equipment(equipment_id: int, body: Any) -> Equipment:
    """
    Overwrite every field of an existing equipment record.

    The payload is validated before the lookup, so an invalid body is
    reported as a validation error even when the id does not exist.

    Returns:
        The updated record.

    Raises:
        EquipmentValidationError: If the payload is invalid.
        EquipmentNotFoundError:   If no record has ``equipment_id``.
    """
    payload = validate_payload(body)

    equipment = get_equipment_by_id(equipment_id)
    if equipment is None:
        raise EquipmentNotFoundError(equipment_id)

    equipment.name = payload.name
    equipment.type = payload.type
    equipment.status = payload.status
    equipment.last_cleaned_date = payload.last_cleaned_date
    db.session.commit()

    logger.info("Updated equipment ID %d", equipment_id)
    return equipment


def delete_equipment(equipment_id: int) -> None:
    """
    Permanently remove an equipment record.

    Raises:
        EquipmentNotFoundError: If no record has ``equipment_id``.
    """
    equipment = get_equipment_by_id(equipment_id)
    if equipment is None:
        raise EquipmentNotFoundError(equipment_id)

    db.session.delete(equipment)
    db.session.commit()

    logger.info("Deleted equipment ID %d", equipment_id)
