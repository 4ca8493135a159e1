"""
Command lookup endpoints for API v1.

The command table answers a fixed set of yes/no questions.  Lookups
are exact and case-sensitive.  Unknown commands yield HTTP 404 with
the list of defined commands; ``POST /command`` without a ``command``
field yields HTTP 400.  A ``command`` that is not a string can never
name an entry, so it is reported as an unknown command.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, Response

from secureapp_api.app.core.dataset import Clock, get_clock, get_command_service
from secureapp_api.app.core.errors import USAGE_KEY, BadRequestError, NotFoundError
from secureapp_api.app.services.command_service import CommandService
from secureapp_api.app.services.render_service import CommandTableView, CommandView, render

router = APIRouter()

FORMAT_QUERY = Query(None, alias="format", description="Output format: json (default), text, plain or html")
COMMAND_USAGE = 'POST /command with JSON body {"command": "<name>"}'


def _answer(name: str, service: CommandService, output_format: Optional[str], clock: Clock) -> Response:
    result = service.lookup(name)
    if result is None:
        raise NotFoundError("Command not found", availableCommands=service.names)
    return render(CommandView(result), output_format, clock()).to_response()


@router.get("/command/{cmd}")
def get_command(
    cmd: str,
    output_format: Optional[str] = FORMAT_QUERY,
    service: CommandService = Depends(get_command_service),
    clock: Clock = Depends(get_clock),
) -> Response:
    """Return the fixed answer for ``cmd``."""
    return _answer(cmd, service, output_format, clock)


@router.post("/command", openapi_extra={USAGE_KEY: COMMAND_USAGE})
def post_command(
    body: Any = Body(None, examples=[{"command": "is-secure"}]),
    output_format: Optional[str] = FORMAT_QUERY,
    service: CommandService = Depends(get_command_service),
    clock: Clock = Depends(get_clock),
) -> Response:
    """Look up the command named in the request body."""
    command = body.get("command") if isinstance(body, dict) else None
    if not command:
        raise BadRequestError("Missing required field: command", usage=COMMAND_USAGE)
    if not isinstance(command, str):
        raise NotFoundError("Command not found", availableCommands=service.names)
    return _answer(command, service, output_format, clock)


@router.get("/commands")
def list_commands(
    output_format: Optional[str] = FORMAT_QUERY,
    service: CommandService = Depends(get_command_service),
    clock: Clock = Depends(get_clock),
) -> Response:
    """Return the whole command table and its size."""
    return render(CommandTableView(service.table()), output_format, clock()).to_response()
