"""
Equipment blueprint — JSON CRUD API for equipment records.
"""

from flask import Blueprint

bp = Blueprint("equipment", __name__)

from app.blueprints.equipment import routes  # noqa: E402, F401
