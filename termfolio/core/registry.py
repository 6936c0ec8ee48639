"""Command registry - maps command names to descriptions and handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, Optional

if TYPE_CHECKING:
    from .dispatcher import DispatchContext
    from .renderables import Renderable

CommandAction = Callable[["DispatchContext"], "Renderable"]


@dataclass(frozen=True)
class Command:
    """A registered command: what it does and the handler that does it."""
    description: str
    action: CommandAction


class CommandRegistry:
    """
    Ordered mapping of command name to Command.

    Names are case-sensitive, non-empty and contain no whitespace, since they
    are matched against the first whitespace-delimited token of the input.
    Registration order is preserved for the help listing.

    Usage:
        registry = CommandRegistry()
        registry.register("echo", "Print arguments", lambda ctx: Text(" ".join(ctx.args)))
        command = registry.lookup("echo")
    """

    def __init__(self):
        self._commands: dict[str, Command] = {}

    def register(self, name: str, description: str, action: CommandAction) -> Command:
        """Register a command.

        Raises:
            ValueError: if the name is empty, contains whitespace, or is
                already registered.
        """
        if not name or any(c.isspace() for c in name):
            raise ValueError(f"Invalid command name: {name!r}")
        if name in self._commands:
            raise ValueError(f"Command '{name}' already registered")
        command = Command(description, action)
        self._commands[name] = command
        return command

    def lookup(self, name: str) -> Optional[Command]:
        """Get a command by exact name, or None."""
        return self._commands.get(name)

    def list(self) -> list[tuple[str, str]]:
        """(name, description) pairs in registration order."""
        return [(name, command.description) for name, command in self._commands.items()]

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)
