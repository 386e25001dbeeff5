"""
Route decorators shared by the JSON blueprints.

``equipment_id_required`` converts the raw ``<equipment_id>`` path
segment into a positive integer before the view runs::

    @bp.route("/<equipment_id>", methods=["PUT"])
    @equipment_id_required
    def update(equipment_id: int):
        ...

The route uses a plain string converter on purpose: Flask's ``int``
converter would turn ``/equipment/abc`` into a 404, while the API
reports a malformed id as 400.
"""

import logging
from functools import wraps

from flask import request

from app.services.equipment_service import parse_id

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int):
    """Build the ``{"message": ...}`` error body used by every route."""
    return {"message": message}, status_code


def equipment_id_required(func):
    """
    Decorator that rejects non-positive or non-numeric equipment ids.

    The wrapped view receives ``equipment_id`` as an ``int``.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        raw_id = kwargs.pop("equipment_id", None)
        equipment_id = parse_id(raw_id)
        if equipment_id is None:
            logger.debug(
                "Rejected %s %s: invalid equipment id %r",
                request.method,
                request.path,
                raw_id,
            )
            return error_response("Invalid equipment id.", 400)
        return func(*args, equipment_id=equipment_id, **kwargs)

    return wrapper
