"""WSGI entry point for the Task Hub API."""

import os

from taskhub import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))
