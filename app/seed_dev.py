"""
Seed script — load sample equipment records for local development.

Registers a ``flask seed-dev`` CLI command that inserts a handful of
records covering every type and status, so the client has something
to search, filter and sort right away.

Usage::

    flask seed-dev            # Seed only when the table is empty
    flask seed-dev --force    # Add the samples even if rows exist
"""

import click
from flask.cli import with_appcontext

from app.extensions import db
from app.models.equipment import Equipment, EquipmentStatus, EquipmentType

# -- Sample records (name, type, status, lastCleanedDate) -------------------
_SAMPLE_EQUIPMENT = [
    ("Pump A", EquipmentType.MACHINE, EquipmentStatus.ACTIVE, "2024-01-15"),
    ("Mixer B", EquipmentType.MIXER, EquipmentStatus.UNDER_MAINTENANCE, "2023-12-02"),
    ("Storage Tank 1", EquipmentType.TANK, EquipmentStatus.ACTIVE, "2024-02-20"),
    ("Pressure Vessel 7", EquipmentType.VESSEL, EquipmentStatus.INACTIVE, "2023-10-31"),
    ("bottling line", EquipmentType.MACHINE, EquipmentStatus.ACTIVE, "2024-03-01"),
]


@click.command("seed-dev")
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Insert the samples even when the table already has rows.",
)
@with_appcontext
def seed_dev_command(force: bool):
    """Insert sample equipment records for development."""
    existing = db.session.execute(
        db.select(db.func.count(Equipment.id))
    ).scalar()

    if existing and not force:
        click.secho(
            f"The equipment table already holds {existing} record(s); "
            "nothing seeded. Use --force to add the samples anyway.",
            fg="yellow",
        )
        return

    for name, equipment_type, status, last_cleaned_date in _SAMPLE_EQUIPMENT:
        db.session.add(
            Equipment(
                name=name,
                type=equipment_type,
                status=status,
                last_cleaned_date=last_cleaned_date,
            )
        )
    db.session.commit()

    click.secho(
        f"✓ Seeded {len(_SAMPLE_EQUIPMENT)} equipment records.", fg="green"
    )


def register_seed_commands(app):
    """Register seed-related CLI commands with the Flask application."""
    app.cli.add_command(seed_dev_command)
