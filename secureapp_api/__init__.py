"""
Top‑level package for the SecureApp Customer API.

The package provides no public exports; all functionality lives in
submodules under ``app``.  Import the ASGI application with
``secureapp_api.app.main:app``.
"""

__all__ = []
