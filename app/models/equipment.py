"""
Equipment model — the single ``equipment`` table.

Each row is one piece of plant equipment with a category, an
operational status, and the date it was last cleaned.  ``type`` and
``status`` are closed enumerations persisted as their display strings
(e.g. ``"Under Maintenance"``) so the table stays readable from any
SQLite client.
"""

import enum
from typing import Any

from app.choices import EquipmentStatus, EquipmentType
from app.extensions import db


def _enum_values(enum_class: type[enum.Enum]) -> list[str]:
    """Persist enum members by value instead of by member name."""
    return [member.value for member in enum_class]


class Equipment(db.Model):
    """
    One tracked piece of equipment.

    ``id`` is assigned by the store on insert and never reused, even
    after the highest row is deleted (``sqlite_autoincrement``).

    ``last_cleaned_date`` is kept as the ``YYYY-MM-DD`` string the
    client submitted rather than a ``DATE`` column: the service layer
    only checks the format, and lexicographic order on the string is
    chronological order.
    """

    __tablename__ = "equipment"
    __table_args__ = {"sqlite_autoincrement": True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(200), nullable=False)
    type = db.Column(
        db.Enum(
            EquipmentType,
            name="equipment_type",
            native_enum=False,
            values_callable=_enum_values,
            validate_strings=True,
            length=20,
        ),
        nullable=False,
    )
    status = db.Column(
        db.Enum(
            EquipmentStatus,
            name="equipment_status",
            native_enum=False,
            values_callable=_enum_values,
            validate_strings=True,
            length=20,
        ),
        nullable=False,
    )
    last_cleaned_date = db.Column("lastCleanedDate", db.String(10), nullable=False)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation used on the wire."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "status": self.status.value,
            "lastCleanedDate": self.last_cleaned_date,
        }

    def __repr__(self) -> str:
        return f"<Equipment {self.id} {self.name}>"
