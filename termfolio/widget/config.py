"""Terminal configuration with clean, readable structure."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

from ..core.colors import DEFAULT_COAT, get_available_coats
from ..core.profile import DEFAULT_PROFILE, Profile, load_profile
from .framebuffer import FRAME_SIZE

logger = logging.getLogger(__name__)

# Project root
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_PATH = PROJECT_ROOT / "config.json"


def _section_values(section_cls, d) -> dict:
    """Known keys of *d* whose values have the same type as the field default.

    Anything else (unknown keys, wrong types, a non-dict section) is dropped
    so the field keeps its default.
    """
    if not isinstance(d, dict):
        if d is not None:
            logger.warning("Ignoring %s section: expected an object", section_cls.__name__)
        return {}
    defaults = section_cls()
    values = {}
    for name in section_cls.__dataclass_fields__:
        if name not in d:
            continue
        value, default = d[name], getattr(defaults, name)
        if type(value) is not type(default):
            logger.warning("Ignoring %s.%s=%r: expected %s",
                           section_cls.__name__, name, value, type(default).__name__)
            continue
        values[name] = value
    return values


@dataclass
class DisplayConfig:
    """Window and transcript appearance."""
    title: str = "stivers.us terminal"
    prompt: str = "guest@stivers.us:~$"
    placeholder: str = "Type a command (try 'help')"

    # Window size
    window_width: int = 820
    window_height: int = 560

    font_family: str = "Menlo"
    font_size: int = 13
    bg_color: str = "#0d0d14"
    fg_color: str = "#c8c8d0"
    prompt_color: str = "#00ffaa"
    link_color: str = "#66aaff"
    error_color: str = "#ff5f5f"

    # Pixel size of one animation cell
    cell_size: int = 4


@dataclass
class AnimationConfig:
    """Sprite animation settings."""
    period_ms: int = 360
    frame_size: int = FRAME_SIZE
    coat: str = DEFAULT_COAT

    @property
    def period(self) -> float:
        """Period in seconds."""
        return self.period_ms / 1000

    @classmethod
    def from_dict(cls, d: dict) -> "AnimationConfig":
        config = cls(**_section_values(cls, d))
        if config.coat not in get_available_coats():
            config.coat = DEFAULT_COAT
        if config.period_ms <= 0:
            config.period_ms = cls.period_ms
        if config.frame_size <= 0:
            config.frame_size = FRAME_SIZE
        return config


@dataclass
class TerminalConfig:
    """Main configuration combining all sections."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    profile_path: Optional[str] = None

    def to_dict(self) -> dict:
        d = {
            "display": asdict(self.display),
            "animation": asdict(self.animation),
        }
        if self.profile_path:
            d["profile_path"] = self.profile_path
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "TerminalConfig":
        display = DisplayConfig(**_section_values(DisplayConfig, d.get("display")))
        animation = AnimationConfig.from_dict(d.get("animation"))

        profile_path = d.get("profile_path")
        if profile_path is not None and not isinstance(profile_path, str):
            logger.warning("Ignoring profile_path=%r: expected a string", profile_path)
            profile_path = None

        return cls(display=display, animation=animation, profile_path=profile_path)

    def save(self, path: Path = CONFIG_PATH):
        temp = path.with_suffix(".tmp")
        temp.write_text(json.dumps(self.to_dict(), indent=2))
        temp.rename(path)

    @classmethod
    def load(cls, path: Path = CONFIG_PATH) -> "TerminalConfig":
        try:
            if path.exists():
                data = json.loads(path.read_text())
                if isinstance(data, dict):
                    return cls.from_dict(data)
                logger.warning("Ignoring config %s: top level must be an object", path)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
        return cls()

    def load_profile(self) -> Profile:
        """The configured profile, or the built-in one when no path is set.

        Relative paths resolve against the project root.

        Raises:
            ProfileError: if the configured file is missing or invalid.
        """
        if not self.profile_path:
            return DEFAULT_PROFILE
        path = Path(self.profile_path)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return load_profile(path)
