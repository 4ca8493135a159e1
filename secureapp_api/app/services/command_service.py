"""
Lookup over the fixed command table.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from secureapp_api.app.schemas.command import CommandResult


class CommandService:
    """Exact, case-sensitive lookups of command answers."""

    def __init__(self, commands: Mapping[str, str]) -> None:
        self._commands = commands

    @property
    def names(self) -> list:
        return list(self._commands)

    def table(self) -> Dict[str, str]:
        return dict(self._commands)

    def lookup(self, name: str) -> Optional[CommandResult]:
        """Return the answer for ``name`` or ``None`` if it is not defined."""
        answer = self._commands.get(name)
        if answer is None:
            return None
        return CommandResult(command=name, response=answer)
