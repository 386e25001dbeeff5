"""
Equipment field choices and format rules.

Shared by the ``equipment`` model, the service-layer validation, and
the terminal client.  Nothing here touches the store, so the client
can import it without binding Flask-SQLAlchemy.
"""

import enum
import re


class EquipmentType(enum.Enum):
    """Category of equipment."""

    MACHINE = "Machine"
    VESSEL = "Vessel"
    TANK = "Tank"
    MIXER = "Mixer"


class EquipmentStatus(enum.Enum):
    """Operational status of a piece of equipment."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    UNDER_MAINTENANCE = "Under Maintenance"


# Minimum length of ``name`` after surrounding whitespace is removed.
NAME_MIN_LENGTH = 2

# Format check only: impossible dates such as 2024-02-30 still match.
ISO_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
