"""
Flask extension instances.

Extensions are created here without binding to an application so that
the application factory can call ``init_app()`` on each one during
``create_app()``.  This avoids circular imports and follows the
standard Flask extension pattern.
"""

from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

# -- Database ORM ----------------------------------------------------------
# The ``db`` instance is the store handle shared by models and services.
db = SQLAlchemy()

# -- Cross-origin access for the browser/terminal client --------------------
cors = CORS()
