"""
Pytest configuration and shared fixtures.

Provides a test application, test client, and CLI runner that all test
modules can use. Uses the ``testing`` configuration, which points at an
in-memory SQLite store, so every test starts from an empty table with
ids counting from 1.
"""

import pytest

from app import create_app
from app.extensions import db as _db


@pytest.fixture()
def app():
    """
    Create a Flask application configured for testing.

    ``create_app`` builds a fresh in-memory store and creates the
    ``equipment`` table; it is dropped again after the test.
    """
    app = create_app("testing")

    # Establish an application context for the whole test.
    with app.app_context():
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def db_session(app):  # pylint: disable=redefined-outer-name
    """Provide the SQLAlchemy session bound to the test store."""
    return _db.session


@pytest.fixture()
def client(app):  # pylint: disable=redefined-outer-name
    """
    Provide a Flask test client for making HTTP requests.

    Usage in tests::

        def test_list(client):
            response = client.get("/api/equipment")
            assert response.status_code == 200
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def runner(app):  # pylint: disable=redefined-outer-name
    """Provide a runner for the app's Flask CLI commands."""
    return app.test_cli_runner()


@pytest.fixture()
def tank_payload():
    """A valid create/update payload."""
    return {
        "name": "Tank 1",
        "type": "Tank",
        "status": "Active",
        "lastCleanedDate": "2024-01-15",
    }
