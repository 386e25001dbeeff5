"""
Waitress WSGI entry point for serving the equipment API.

Usage::

    python wsgi.py

Listen address comes from the environment (``HOST``, default
127.0.0.1; ``PORT``, default 5000).  A ``.env`` file in the working
directory is loaded first.

Waitress is a pure-Python WSGI server that runs on Windows and Unix
alike without C compilation.
"""

import os

from dotenv import load_dotenv
from waitress import serve

load_dotenv()

from app import create_app  # noqa: E402

# Default to production config when running via this entry point.
app = create_app(os.environ.get("FLASK_ENV", "production"))

if __name__ == "__main__":
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "5000"))
    print(f"Starting Waitress on {host}:{port}")
    serve(app, host=host, port=port)
