"""
Service metadata and liveness endpoints.

``GET /`` describes the service: its name, version, deployment
environment, dataset sizes, an endpoint directory, the supported
output formats and a few example requests.  ``GET /health`` is a
liveness probe.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from secureapp_api.app.core.config import Settings, get_settings
from secureapp_api.app.core.dataset import Clock, Dataset, get_clock, get_dataset
from secureapp_api.app.services.render_service import isoformat_z

router = APIRouter()

ENDPOINTS = {
    "GET /health": "Liveness probe",
    "GET /customers": "Get all customers",
    "GET /customers/:id": "Get customer by ID",
    "GET /customers/search/:query": "Search customers by name or email",
    "GET /customers/active": "Get active customers only",
    "GET /customers/inactive": "Get inactive customers only",
    "GET /command/:cmd": "Look up a command",
    "POST /command": 'Look up a command given as JSON body {"command": "<name>"}',
    "GET /commands": "List all commands",
}

FORMATS = {
    "json": "Default JSON format",
    "text": "Plain text format: ?format=text (alias: ?format=plain)",
    "html": "HTML format: ?format=html",
}


@router.get("/")
def service_info(
    settings: Settings = Depends(get_settings),
    dataset: Dataset = Depends(get_dataset),
) -> Dict[str, Any]:
    """Return service metadata and the endpoint directory."""
    base_url = f"http://localhost:{settings.port}"
    return {
        "message": settings.project_name,
        "version": settings.api_version,
        "environment": settings.environment,
        "totalCustomers": len(dataset.customers),
        "totalCommands": len(dataset.commands),
        "endpoints": ENDPOINTS,
        "formats": FORMATS,
        "examples": [
            f"curl {base_url}/customers",
            f"curl {base_url}/customers/1",
            f"curl {base_url}/customers/search/john",
            f"curl {base_url}/customers/active?format=html",
            f"curl {base_url}/command/is-secure",
        ],
    }


@router.get("/health")
def health(clock: Clock = Depends(get_clock)) -> Dict[str, str]:
    return {"status": "healthy", "timestamp": isoformat_z(clock())}
