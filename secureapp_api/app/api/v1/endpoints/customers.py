"""
Customer endpoints for API v1.

Every read endpoint accepts a ``format`` query parameter (``json``,
``text``/``plain`` or ``html``); anything else yields JSON.  Handlers
select records through :class:`CustomerService` and hand a view to the
renderer, so no handler formats output itself.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from secureapp_api.app.core.dataset import Clock, get_clock, get_customer_service
from secureapp_api.app.core.errors import NotFoundError
from secureapp_api.app.schemas.customer import CustomerStatus
from secureapp_api.app.services.customer_service import CustomerService, parse_customer_id
from secureapp_api.app.services.render_service import (
    CustomerDetailView,
    CustomerListView,
    SearchView,
    render,
)

router = APIRouter()

FORMAT_QUERY = Query(None, alias="format", description="Output format: json (default), text, plain or html")

_STATUS_VIEWS = {
    CustomerStatus.ACTIVE: {
        "title": "Active Customers",
        "heading": "Active Customers",
        "count_label": "Total Active",
        "links": (("/customers", "All Customers"), ("/customers/inactive", "Inactive Customers")),
    },
    CustomerStatus.INACTIVE: {
        "title": "Inactive Customers",
        "heading": "Inactive Customers",
        "count_label": "Total Inactive",
        "links": (("/customers", "All Customers"), ("/customers/active", "Active Customers")),
    },
}


def _status_view(service: CustomerService, status: CustomerStatus) -> CustomerListView:
    return CustomerListView(
        customers=service.filter_by_status(status),
        show_status=False,
        **_STATUS_VIEWS[status],
    )


@router.get("")
def list_customers(
    output_format: Optional[str] = FORMAT_QUERY,
    service: CustomerService = Depends(get_customer_service),
    clock: Clock = Depends(get_clock),
) -> Response:
    """Return every customer in dataset order."""
    view = CustomerListView(
        customers=service.customers,
        title="Customer Database",
        heading="Total Customers",
        count_label="Total Customers",
        count_key="total",
        links=(("/customers/active", "Active Customers"), ("/customers/inactive", "Inactive Customers")),
    )
    return render(view, output_format, clock()).to_response()


@router.get("/active")
def list_active_customers(
    output_format: Optional[str] = FORMAT_QUERY,
    service: CustomerService = Depends(get_customer_service),
    clock: Clock = Depends(get_clock),
) -> Response:
    return render(_status_view(service, CustomerStatus.ACTIVE), output_format, clock()).to_response()


@router.get("/inactive")
def list_inactive_customers(
    output_format: Optional[str] = FORMAT_QUERY,
    service: CustomerService = Depends(get_customer_service),
    clock: Clock = Depends(get_clock),
) -> Response:
    return render(_status_view(service, CustomerStatus.INACTIVE), output_format, clock()).to_response()


@router.get("/search/{query}")
def search_customers(
    query: str,
    output_format: Optional[str] = FORMAT_QUERY,
    service: CustomerService = Depends(get_customer_service),
    clock: Clock = Depends(get_clock),
) -> Response:
    """Search first name, last name and email, case-insensitively.

    Always answers 200; no match gives an empty result set.
    """
    normalized = query.lower()
    view = SearchView(query=normalized, results=service.search(normalized))
    return render(view, output_format, clock()).to_response()


@router.get("/{customer_id}")
def get_customer(
    customer_id: str,
    output_format: Optional[str] = FORMAT_QUERY,
    service: CustomerService = Depends(get_customer_service),
    clock: Clock = Depends(get_clock),
) -> Response:
    """Retrieve a single customer by ID.

    Returns HTTP 404 with the list of valid ids when the id is unknown
    or is not an integer.
    """
    customer = service.find_by_id(parse_customer_id(customer_id))
    if customer is None:
        raise NotFoundError("Customer not found", availableIds=service.ids)
    return render(CustomerDetailView(customer), output_format, clock()).to_response()
