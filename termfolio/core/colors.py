"""Centralized color definitions for termfolio.

Frames store ANSI 256 color codes; the host converts them to RGB/hex for
display. Coat palettes map horse body parts to colors:
- bay: brown body, black points (default)
- chestnut: copper body and mane
- palomino: golden body, cream mane
- grey: dappled grey
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

# xterm system colors 0-15
_SYSTEM_RGB: Tuple[Tuple[int, int, int], ...] = (
    (0, 0, 0), (128, 0, 0), (0, 128, 0), (128, 128, 0),
    (0, 0, 128), (128, 0, 128), (0, 128, 128), (192, 192, 192),
    (128, 128, 128), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (0, 0, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
)

# Channel levels of the 6x6x6 color cube (codes 16-231)
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def ansi256_to_rgb(code: int) -> Tuple[int, int, int]:
    """Convert an ANSI 256 color code to an (r, g, b) tuple of 0-255 ints."""
    if not 0 <= code <= 255:
        raise ValueError(f"ANSI color code out of range: {code}")
    if code < 16:
        return _SYSTEM_RGB[code]
    if code < 232:
        n = code - 16
        return (_CUBE_LEVELS[n // 36], _CUBE_LEVELS[(n // 6) % 6], _CUBE_LEVELS[n % 6])
    level = 8 + 10 * (code - 232)
    return (level, level, level)


@dataclass(frozen=True)
class ColorDef:
    """Color definition with ANSI and RGB values."""
    ansi: int  # ANSI 256 color code
    rgb: Tuple[float, float, float]  # RGB values 0.0-1.0

    @property
    def hex(self) -> str:
        """#rrggbb string for tk widgets."""
        r, g, b = (round(c * 255) for c in self.rgb)
        return f"#{r:02x}{g:02x}{b:02x}"

    @classmethod
    def from_ansi(cls, code: int) -> "ColorDef":
        """Build a ColorDef whose RGB matches the xterm rendering of *code*."""
        r, g, b = ansi256_to_rgb(code)
        return cls(code, (r / 255, g / 255, b / 255))


# =============================================================================
# Coat Definitions
# =============================================================================

# Each coat maps body parts to ColorDef instances
# Parts: body, shade (far legs, belly), mane, hoof, muzzle, eye, shadow

_c = ColorDef.from_ansi

COATS: dict[str, dict[str, ColorDef]] = {
    "bay": {
        "body": _c(130),
        "shade": _c(94),
        "mane": _c(234),
        "hoof": _c(236),
        "muzzle": _c(52),
        "eye": _c(16),
        "shadow": _c(238),
    },
    "chestnut": {
        "body": _c(166),
        "shade": _c(130),
        "mane": _c(94),
        "hoof": _c(237),
        "muzzle": _c(130),
        "eye": _c(16),
        "shadow": _c(238),
    },
    "palomino": {
        "body": _c(179),
        "shade": _c(136),
        "mane": _c(230),
        "hoof": _c(239),
        "muzzle": _c(137),
        "eye": _c(16),
        "shadow": _c(238),
    },
    "grey": {
        "body": _c(250),
        "shade": _c(245),
        "mane": _c(240),
        "hoof": _c(236),
        "muzzle": _c(244),
        "eye": _c(16),
        "shadow": _c(238),
    },
}

DEFAULT_COAT = "bay"

COAT_PARTS = ("body", "shade", "mane", "hoof", "muzzle", "eye", "shadow")


def get_available_coats() -> List[str]:
    """Get list of available coat names."""
    return list(COATS.keys())


def get_coat(name: str) -> Dict[str, ColorDef]:
    """Get the palette for a coat name.

    Raises:
        KeyError: if the coat does not exist.
    """
    if name not in COATS:
        raise KeyError(f"Unknown coat: {name}")
    return COATS[name]
