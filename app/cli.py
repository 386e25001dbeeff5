"""
Custom Flask CLI commands.

These commands are registered with the app via ``register_commands()``
in the application factory. Run them with ``flask <command_name>``.

Usage::

    flask init-db       # Create the equipment table if it is missing
    flask db-check      # Verify store connectivity and schema
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy import inspect

from app.extensions import db
from app.models.equipment import Equipment


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create the ``equipment`` table if it does not exist yet."""
    db.create_all()
    click.secho(
        f"Store ready at {current_app.config['SQLALCHEMY_DATABASE_URI']}",
        fg="green",
    )


@click.command("db-check")
@with_appcontext
def db_check_command():
    """
    Verify store connectivity and confirm the equipment table exists.

    Tests the connection string from the app config, runs a simple
    query against the store, and reports how many records it holds.
    This is useful for confirming your .env file is correct.
    """
    click.echo("=" * 60)
    click.echo("  Equipment Tracker — Store Connectivity Check")
    click.echo("=" * 60)

    db_uri = current_app.config["SQLALCHEMY_DATABASE_URI"]
    click.echo(f"\n  Connection string: {db_uri}\n")

    # -- Step 1: Basic connectivity ----------------------------------------
    click.echo("[1/3] Testing connection...")
    try:
        result = db.session.execute(db.text("SELECT 1 AS connected"))
        row = result.fetchone()
        if row and row[0] == 1:
            click.secho("      ✓ Connected to the store successfully.", fg="green")
        else:
            click.secho("      ✗ Unexpected result from test query.", fg="red")
            raise SystemExit(1)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.secho(f"      ✗ Connection failed: {exc}", fg="red")
        click.echo("\n  Troubleshooting tips:")
        click.echo("    - Does your .env DATABASE_URL point at a writable path?")
        click.echo("    - Relative sqlite:/// paths live in the instance/ folder.")
        raise SystemExit(1)

    # -- Step 2: Confirm the table exists ----------------------------------
    click.echo("[2/3] Checking schema...")
    table_names = inspect(db.engine).get_table_names()
    if Equipment.__tablename__ not in table_names:
        click.secho("      ✗ The equipment table is missing.", fg="red")
        click.echo("        Run 'flask init-db' to create it.")
        raise SystemExit(1)
    click.secho("      ✓ Found table: equipment", fg="green")

    # -- Step 3: Count records ---------------------------------------------
    click.echo("[3/3] Counting records...")
    count = db.session.execute(
        db.select(db.func.count(Equipment.id))
    ).scalar()
    click.echo(f"      {count} equipment record(s)")

    click.echo("\n" + "=" * 60)
    click.secho("  All checks passed. Store is ready.", fg="green", bold=True)
    click.echo("=" * 60)


def register_commands(app):
    """Register all custom CLI commands with the Flask application."""
    app.cli.add_command(init_db_command)
    app.cli.add_command(db_check_command)
