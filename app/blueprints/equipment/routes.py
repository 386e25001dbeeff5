"""
Routes for the equipment blueprint — JSON CRUD for equipment records.

Mounted at ``<API_PREFIX>/equipment``.  Validation and not-found
errors raised by the equipment service are translated into
``{"message": ...}`` responses here; store failures propagate to the
application-level 500 handler.
"""

import logging

from flask import jsonify, request

from app.blueprints.equipment import bp
from app.decorators import equipment_id_required, error_response
from app.services import equipment_service
from app.services.equipment_service import (
    EquipmentNotFoundError,
    EquipmentValidationError,
)

logger = logging.getLogger(__name__)


@bp.route("", methods=["GET"])
def equipment_list():
    """Return every equipment record ordered by id."""
    records = equipment_service.get_all_equipment()
    return jsonify([record.to_dict() for record in records]), 200


@bp.route("", methods=["POST"])
def equipment_create():
    """Create a new equipment record from the JSON body."""
    body = request.get_json(silent=True)
    try:
        equipment = equipment_service.create_equipment(body)
    except EquipmentValidationError as exc:
        logger.debug("Rejected equipment create: %s", exc)
        return error_response(str(exc), 400)
    return equipment.to_dict(), 201


@bp.route("/<equipment_id>", methods=["PUT"])
@equipment_id_required
def equipment_update(equipment_id: int):
    """Overwrite every field of an existing equipment record."""
    body = request.get_json(silent=True)
    try:
        equipment = equipment_service.update_equipment(equipment_id, body)
    except EquipmentValidationError as exc:
        logger.debug("Rejected equipment update %d: %s", equipment_id, exc)
        return error_response(str(exc), 400)
    except EquipmentNotFoundError:
        return error_response("Equipment not found.", 404)
    return equipment.to_dict(), 200


@bp.route("/<equipment_id>", methods=["DELETE"])
@equipment_id_required
def equipment_delete(equipment_id: int):
    """Permanently delete an equipment record."""
    try:
        equipment_service.delete_equipment(equipment_id)
    except EquipmentNotFoundError:
        return error_response("Equipment not found.", 404)
    return "", 204
