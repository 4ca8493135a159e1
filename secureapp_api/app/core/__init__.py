"""
Core infrastructure: settings, logging, errors, middleware and the
read-only dataset shared by all request handlers.
"""
