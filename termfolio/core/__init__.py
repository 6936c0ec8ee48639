"""Core utilities - command registry, dispatch, transcript, profile, colors, scheduling."""

from .colors import COATS, DEFAULT_COAT, ColorDef, get_available_coats, get_coat
from .profile import DEFAULT_PROFILE, Link, Profile, ProfileError, load_profile
from .renderables import Element, LiveComponent, Renderable, Text, el, render_text
from .registry import Command, CommandRegistry
from .dispatcher import DispatchContext, dispatch, not_found, split_input
from .transcript import HistoryEntry, Transcript
from .scheduler import Scheduler

__all__ = [
    # Colors
    "ColorDef",
    "COATS",
    "DEFAULT_COAT",
    "get_available_coats",
    "get_coat",
    # Profile
    "Profile",
    "Link",
    "DEFAULT_PROFILE",
    "ProfileError",
    "load_profile",
    # Renderables
    "Text",
    "Element",
    "LiveComponent",
    "Renderable",
    "el",
    "render_text",
    # Commands
    "Command",
    "CommandRegistry",
    "DispatchContext",
    "dispatch",
    "not_found",
    "split_input",
    # Transcript
    "HistoryEntry",
    "Transcript",
    # Scheduling
    "Scheduler",
]
