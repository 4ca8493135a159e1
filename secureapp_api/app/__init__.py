"""
Application package initializer.

The service is organised into small layers: ``core`` holds
configuration, logging, errors and the read-only dataset; ``schemas``
defines the pydantic records; ``services`` holds the filter functions
and the response renderer; ``api`` wires them to HTTP routes.
"""

from .main import app, create_app  # noqa: F401
