"""
Version 1 of the API.

Routes are served from the application root (``/customers``,
``/command`` and so on).
"""
