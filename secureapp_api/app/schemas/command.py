"""
Schemas for the command lookup endpoints.

The command table maps a command name to a fixed ``yes``/``no``
answer.  ``POST /command`` reads its body as plain JSON so that a
missing or mistyped ``command`` field can be reported as a bad request
or an unknown command instead of a validation error.
"""

from typing import Literal

from pydantic import BaseModel

CommandAnswer = Literal["yes", "no"]
COMMAND_ANSWERS = ("yes", "no")


class CommandResult(BaseModel):
    """Outcome of a single command lookup."""

    command: str
    response: CommandAnswer
