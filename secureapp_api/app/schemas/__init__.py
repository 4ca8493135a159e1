"""
Pydantic schema definitions for records and request bodies.

Records are immutable once built.  Attribute names are snake_case in
Python and camelCase on the wire.
"""
