"""Resolve typed input to a registered command and run it."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .profile import Profile
from .registry import CommandRegistry
from .renderables import Element, Renderable, el

logger = logging.getLogger(__name__)

# Command suggested by the not-found message
HELP_COMMAND = "help"


@dataclass(frozen=True)
class DispatchContext:
    """Everything a handler receives for one invocation."""
    args: list[str]
    profile: Profile
    registry: CommandRegistry


def split_input(raw: str) -> tuple[str, list[str]]:
    """Split input into (command name, args) on runs of whitespace.

    Tokens are taken verbatim: no quoting, no escaping.

    Raises:
        ValueError: if the input is blank.
    """
    tokens = raw.split()
    if not tokens:
        raise ValueError("Cannot dispatch blank input")
    return tokens[0], tokens[1:]


def not_found(name: str) -> Element:
    """The canonical output for an unrecognized command."""
    return el(
        "span",
        "Command not found: ",
        el("strong", name),
        ". Type ",
        el("code", HELP_COMMAND),
        " to see options.",
        class_="not-found",
    )


def dispatch(raw_input: str, registry: CommandRegistry, profile: Profile) -> Renderable:
    """Run the command named by the first token of *raw_input*.

    Returns the handler's output unmodified, or the not-found renderable.
    Handler exceptions propagate to the caller.
    """
    name, args = split_input(raw_input)
    command = registry.lookup(name)
    if command is None:
        logger.debug("Command not found: %s", name)
        return not_found(name)

    logger.debug("Dispatching %s with %d args", name, len(args))
    return command.action(DispatchContext(args=args, profile=profile, registry=registry))
