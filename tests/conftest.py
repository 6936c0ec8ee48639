"""Shared test fixtures."""

import pytest

from termfolio.commands import create_registry
from termfolio.core.profile import Link, Profile


class FakeHandle:
    """Timer handle recorded by FakeLoop."""

    def __init__(self, when, callback, args):
        self.when = when
        self.callback = callback
        self.args = args
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeLoop:
    """Deterministic stand-in for an event loop's ``call_later``.

    Time only moves when a test calls ``advance``.
    """

    def __init__(self):
        self.now = 0.0
        self.handles: list[FakeHandle] = []

    def call_later(self, delay, callback, *args):
        handle = FakeHandle(self.now + delay, callback, args)
        self.handles.append(handle)
        return handle

    @property
    def pending(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds: float) -> None:
        """Run every timer due within the next *seconds*, in time order."""
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.when <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.handles.remove(handle)
            self.now = handle.when
            handle.callback(*handle.args)
        self.now = target


@pytest.fixture
def fake_loop():
    return FakeLoop()


@pytest.fixture
def profile():
    """Sample profile with two links."""
    return Profile(
        name="Ada Lovelace",
        role="Analyst",
        location="London",
        summary="Wrote the first published algorithm for a machine.",
        links=(
            Link(label="Notes", url="https://example.com/notes"),
            Link(label="Engine", url="https://example.com/engine"),
        ),
    )


@pytest.fixture
def registry(profile):
    """The built-in command registry with a short animation period."""
    return create_registry(profile, title="test terminal", period=0.1)


@pytest.fixture
def sample_profile_yaml(tmp_path):
    """A valid profile file on disk."""
    path = tmp_path / "profile.yaml"
    path.write_text(
        "name: Grace Hopper\n"
        "role: Rear Admiral\n"
        "location: Arlington\n"
        "summary: Compiler pioneer.\n"
        "links:\n"
        "  - label: Navy\n"
        "    url: https://example.com/navy\n"
        "  - label: COBOL\n"
        "    url: https://example.com/cobol\n"
    )
    return path
