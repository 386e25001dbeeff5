"""
Model package — imports all models so ``db.create_all()`` can
discover them when the store is initialized.

The application has a single table:
  - equipment.py -> equipment
"""

from app.models.equipment import (  # noqa: F401
    Equipment,
    EquipmentStatus,
    EquipmentType,
)
