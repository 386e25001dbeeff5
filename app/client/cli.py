"""
Terminal client for the equipment API.

Installed as the ``equipment-tracker`` console script.  Every command
talks to the REST API over HTTP; after any change the full list is
fetched again and re-rendered (no local patching).

Usage::

    equipment-tracker list --search pump --status Active --sort dateDesc
    equipment-tracker add --name "Tank 1" --type Tank --status Active \\
        --last-cleaned 2024-01-15
    equipment-tracker edit 1 --status Inactive
    equipment-tracker delete 1
"""

import click

from app.client.api_client import ApiError, EquipmentApiClient
from app.client.filters import (
    SORT_KEYS,
    SORT_NAME_ASC,
    STATUS_ALL,
    STATUS_FILTERS,
    filter_and_sort,
)
from app.client.form import empty_form, to_payload, validate_form

_COLUMNS = (
    ("ID", "id"),
    ("Name", "name"),
    ("Type", "type"),
    ("Status", "status"),
    ("Last Cleaned Date", "lastCleanedDate"),
)


def render_table(records: list[dict]) -> str:
    """Format records as a fixed-width text table."""
    if not records:
        return "No equipment found."

    rows = [[str(record[key]) for _, key in _COLUMNS] for record in records]
    widths = [
        max(len(header), *(len(row[index]) for row in rows))
        for index, (header, _) in enumerate(_COLUMNS)
    ]

    def fmt(cells):
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    lines = [fmt([header for header, _ in _COLUMNS])]
    lines.append("  ".join("-" * width for width in widths))
    lines.extend(fmt(row) for row in rows)
    return "\n".join(lines)


def _fail(message: str) -> None:
    """Print an error in red on stderr and exit with status 1."""
    click.secho(message, fg="red", err=True)
    raise SystemExit(1)


def _reload(client: EquipmentApiClient) -> None:
    """Fetch the full list again and print it in default order."""
    try:
        records = client.fetch_equipment()
    except ApiError as exc:
        _fail(exc.message)
    click.echo(render_table(filter_and_sort(records)))


def _submit_form(data: dict) -> dict:
    """Validate form values, printing every field error before exiting."""
    errors = validate_form(data)
    if errors:
        for field, message in errors.items():
            click.secho(f"  {field}: {message}", fg="red", err=True)
        raise SystemExit(1)
    return to_payload(data)


@click.group()
@click.option(
    "--api-url",
    envvar="EQUIPMENT_API_BASE_URL",
    default=None,
    help="Base API address, e.g. http://localhost:5000/api.",
)
@click.pass_context
def main(ctx: click.Context, api_url: str | None):
    """Track equipment records and their cleaning dates."""
    ctx.obj = EquipmentApiClient(base_url=api_url)


@main.command("list")
@click.option("--search", default="", help="Case-insensitive match on name.")
@click.option(
    "--status",
    type=click.Choice(STATUS_FILTERS),
    default=STATUS_ALL,
    show_default=True,
)
@click.option(
    "--sort",
    "sort_key",
    type=click.Choice(SORT_KEYS),
    default=SORT_NAME_ASC,
    show_default=True,
)
@click.pass_obj
def list_command(client: EquipmentApiClient, search: str, status: str, sort_key: str):
    """Show equipment, filtered and sorted locally."""
    try:
        records = client.fetch_equipment()
    except ApiError as exc:
        _fail(exc.message)
    click.echo(render_table(filter_and_sort(records, search, status, sort_key)))


@main.command("add")
@click.option("--name", default="")
@click.option("--type", "type_", default=empty_form()["type"], show_default=True)
@click.option("--status", default=empty_form()["status"], show_default=True)
@click.option("--last-cleaned", "last_cleaned", default="", help="YYYY-MM-DD")
@click.pass_obj
def add_command(
    client: EquipmentApiClient, name: str, type_: str, status: str, last_cleaned: str
):
    """Add a new piece of equipment."""
    payload = _submit_form(
        {"name": name, "type": type_, "status": status, "lastCleanedDate": last_cleaned}
    )
    try:
        created = client.create_equipment(payload)
    except ApiError as exc:
        _fail(exc.message)
    click.secho(f"Added '{created['name']}' (id={created['id']}).", fg="green")
    _reload(client)


@main.command("edit")
@click.argument("equipment_id", type=int)
@click.option("--name", default=None)
@click.option("--type", "type_", default=None)
@click.option("--status", default=None)
@click.option("--last-cleaned", "last_cleaned", default=None, help="YYYY-MM-DD")
@click.pass_obj
def edit_command(
    client: EquipmentApiClient,
    equipment_id: int,
    name: str | None,
    type_: str | None,
    status: str | None,
    last_cleaned: str | None,
):
    """Edit an existing piece of equipment; omitted fields keep their value."""
    try:
        records = client.fetch_equipment()
    except ApiError as exc:
        _fail(exc.message)

    current = next((record for record in records if record["id"] == equipment_id), None)
    if current is None:
        _fail("Equipment not found.")

    overrides = {
        "name": name,
        "type": type_,
        "status": status,
        "lastCleanedDate": last_cleaned,
    }
    data = {
        field: current[field] if value is None else value
        for field, value in overrides.items()
    }
    payload = _submit_form(data)
    try:
        updated = client.update_equipment(equipment_id, payload)
    except ApiError as exc:
        _fail(exc.message)
    click.secho(f"Updated '{updated['name']}' (id={updated['id']}).", fg="green")
    _reload(client)


@main.command("delete")
@click.argument("equipment_id", type=int)
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation.")
@click.pass_obj
def delete_command(client: EquipmentApiClient, equipment_id: int, yes: bool):
    """Delete a piece of equipment."""
    if not yes and not click.confirm(
        "Delete this equipment? This action cannot be undone."
    ):
        click.echo("Cancelled.")
        return

    try:
        client.delete_equipment(equipment_id)
    except ApiError as exc:
        _fail(exc.message)
    click.secho(f"Deleted equipment id={equipment_id}.", fg="green")
    _reload(client)
