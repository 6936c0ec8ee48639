"""Append-only transcript of submitted commands and their output."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .dispatcher import dispatch
from .profile import Profile
from .registry import CommandRegistry
from .renderables import LiveComponent, Renderable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """One submitted command. ``id`` is the stable render key."""
    id: int
    command: str
    output: Renderable


class Transcript:
    """
    Submits input to the dispatcher and records the results in order.

    Entries are never edited or removed. Ids start at 0 and increase by one
    per appended entry. Blank input produces no entry.
    """

    def __init__(self, registry: CommandRegistry, profile: Profile):
        self.registry = registry
        self.profile = profile
        self._entries: list[HistoryEntry] = []
        self._next_id = 0
        self._listeners: list[Callable[[HistoryEntry], None]] = []

    @property
    def entries(self) -> Sequence[HistoryEntry]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def subscribe(self, callback: Callable[[HistoryEntry], None]) -> Callable[[], None]:
        """
        Subscribe to appended entries.

        Returns:
            Unsubscribe function
        """
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def submit(self, raw: str) -> Optional[HistoryEntry]:
        """Dispatch *raw* and append the result.

        Returns the new entry, or None when the input is blank. Handler
        exceptions propagate and nothing is appended. Listener failures are
        logged; the entry stays recorded.
        """
        command = raw.strip()
        if not command:
            return None

        output = dispatch(command, self.registry, self.profile)
        entry = HistoryEntry(id=self._next_id, command=command, output=output)
        self._next_id += 1
        self._entries.append(entry)

        for listener in list(self._listeners):
            try:
                listener(entry)
            except Exception:
                logger.exception("Transcript listener failed for entry %d", entry.id)
        return entry

    def close(self) -> None:
        """Unmount every live component still running in the transcript."""
        for entry in self._entries:
            if isinstance(entry.output, LiveComponent) and entry.output.mounted:
                entry.output.unmount()
        logger.debug("Transcript closed with %d entries", len(self._entries))
