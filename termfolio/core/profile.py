"""Developer profile shown by the terminal's ``about`` command.

The profile is loaded once at session start and passed by reference into
command construction. It is immutable for the lifetime of the process.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class ProfileError(Exception):
    """Raised when a profile file cannot be read or validated."""


class Link(BaseModel):
    """A labelled external link (GitHub, LinkedIn, ...)."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(min_length=1, description="Text shown for the link")
    url: str = Field(min_length=1, description="Target URL")


class Profile(BaseModel):
    """Static record describing the site owner."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display name")
    role: str = Field(description="Job title or role")
    location: str = Field(description="City / region")
    summary: str = Field(description="One-paragraph summary")
    links: tuple[Link, ...] = Field(default=(), description="Ordered links")


DEFAULT_PROFILE = Profile(
    name="Chris Stivers",
    role="Developer",
    location="San Jose, Ca",
    summary=(
        "Builder of large scale web applications and services, "
        "with an eye toward developer experience."
    ),
    links=(
        Link(label="GitHub", url="https://github.com/cstivers78"),
        Link(label="LinkedIn", url="https://www.linkedin.com/in/chris-stivers-86387a1/"),
    ),
)


def load_profile(path: Path | str) -> Profile:
    """Load a profile from a YAML file.

    Expected layout::

        name: Ada Lovelace
        role: Analyst
        location: London
        summary: First programmer.
        links:
          - label: Notes
            url: https://example.com/notes

    Raises:
        ProfileError: if the file is unreadable, not YAML, or fails validation.
    """
    path = Path(path)
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, OSError) as e:
        raise ProfileError(f"Failed to load profile {path}: {e}") from e

    if not isinstance(data, dict):
        raise ProfileError(f"Profile {path} must be a mapping")

    try:
        profile = Profile.model_validate(data)
    except ValidationError as e:
        raise ProfileError(f"Invalid profile {path}: {e}") from e

    logger.debug("Loaded profile for %s from %s", profile.name, path)
    return profile
