"""
Top‑level router for version 1 of the API.

Order matters for the customer routes: the fixed paths
(``/customers/active``, ``/customers/inactive`` and
``/customers/search/{query}``) are declared before
``/customers/{customer_id}`` inside the customers router so that they
are matched first.
"""

from fastapi import APIRouter

from .endpoints import commands, customers, system

router = APIRouter()

router.include_router(system.router, tags=["system"])
router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(commands.router, tags=["commands"])
