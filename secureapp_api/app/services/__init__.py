"""
Service layer abstraction.

``customer_service`` and ``command_service`` select records from the
read-only dataset; ``render_service`` turns a selection into a
response body in the requested output format.  Nothing here touches
HTTP, so the services can be exercised without an application.
"""
