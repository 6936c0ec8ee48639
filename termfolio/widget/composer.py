"""
Sprite composer - paints a trotting horse onto frame buffers.

Core design:
- Primitives: paint_rect / paint_cell, clipped to the frame
- Painters: one function per body part, each paints and returns the frame
- Pose: authoring-time offsets for one frame of the cycle
- compose_horse: runs the painters in a fixed order

Paint order is body, neck, head, mane, tail, legs, shadow. Later painters
overwrite earlier ones, so legs must come after the body and the mane after
the head.

Layout on the default 64x64 frame (horse faces right, y grows down):
    ears/head   y  5-17,  x 46-59
    neck        y 12-30,  x 39-51
    body        y 27-39,  x 14-45
    legs        y 38-55
    shadow      y 56-57
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping

from ..core.colors import DEFAULT_COAT, ColorDef, get_coat
from .framebuffer import FRAME_SIZE, Frame

# Row just below the hooves of a planted leg
GROUND = 56

BODY_X, BODY_Y = 16, 27
BODY_W, BODY_H = 28, 13

LEG_WIDTH = 3
LEG_LENGTH = 18
HOOF_HEIGHT = 2


# =============================================================================
# Pose Parameters
# =============================================================================

@dataclass(frozen=True)
class LegPose:
    """Placement of one leg for one frame."""
    x: int                  # left column of the upper leg
    lift: int = 0           # rows the hoof is raised off the ground
    forward: bool = False   # mid-stride forward (True) or pushing back
    offset: int = 0         # horizontal shift of the lower leg
    length: int = LEG_LENGTH


@dataclass(frozen=True)
class Pose:
    """Whole-figure pose for one frame of the cycle."""
    far_legs: tuple[LegPose, LegPose]    # hind, fore; painted in shade
    near_legs: tuple[LegPose, LegPose]   # hind, fore
    bob: int = 0          # vertical body offset (negative = up)
    head_dip: int = 0     # extra rows the head drops
    tail_swing: int = 0   # horizontal tail offset

    @property
    def legs(self) -> tuple[LegPose, ...]:
        return self.far_legs + self.near_legs


# Diagonal pairs move together in a trot: near-fore with far-hind, then
# far-fore with near-hind.
TROT_CYCLE: tuple[Pose, ...] = (
    Pose(
        far_legs=(LegPose(17, lift=4, forward=True, offset=2), LegPose(36, offset=-1)),
        near_legs=(LegPose(21, offset=-1), LegPose(40, lift=4, forward=True, offset=2)),
        bob=-1,
        tail_swing=1,
    ),
    Pose(
        far_legs=(LegPose(17, offset=1), LegPose(36)),
        near_legs=(LegPose(21), LegPose(40, offset=1)),
        head_dip=1,
    ),
    Pose(
        far_legs=(LegPose(17, offset=-1), LegPose(36, lift=4, forward=True, offset=2)),
        near_legs=(LegPose(21, lift=4, forward=True, offset=2), LegPose(40, offset=-1)),
        bob=-1,
        tail_swing=-1,
    ),
    Pose(
        far_legs=(LegPose(17), LegPose(36, offset=1)),
        near_legs=(LegPose(21, offset=1), LegPose(40)),
        head_dip=1,
    ),
)


# =============================================================================
# Primitives
# =============================================================================

def paint_rect(frame: Frame, x: int, y: int, w: int, h: int, color: int) -> Frame:
    """Paint a filled rectangle; cells outside the frame are skipped."""
    frame.fill(x, y, w, h, color)
    return frame


def paint_cell(frame: Frame, x: int, y: int, color: int) -> Frame:
    """Paint a single cell; ignored when out of bounds."""
    frame.put(x, y, color)
    return frame


# =============================================================================
# Body-part Painters
# =============================================================================

def paint_body(frame: Frame, x: int, y: int, color: int, shade: int) -> Frame:
    """Barrel with a rounded rump and chest, shaded along the belly."""
    paint_rect(frame, x, y, BODY_W, BODY_H, color)
    paint_rect(frame, x - 2, y + 1, 2, BODY_H - 3, color)    # rump
    paint_rect(frame, x + BODY_W, y - 2, 2, BODY_H - 1, color)  # chest
    paint_rect(frame, x + 2, y + BODY_H - 2, BODY_W - 4, 2, shade)
    return frame


def paint_neck(frame: Frame, x: int, y: int, color: int, dip: int = 0) -> Frame:
    """Neck rising up and forward from the chest in stepped blocks."""
    for i in range(5):
        paint_rect(frame, x + 2 * i, y - 3 * i + (dip * i) // 4, 6, 6, color)
    return frame


def paint_head(frame: Frame, x: int, y: int, color: int, muzzle: int, eye: int) -> Frame:
    """Head with ear, darker muzzle, eye and nostril."""
    paint_rect(frame, x + 1, y - 3, 2, 3, color)        # ear
    paint_rect(frame, x, y, 10, 7, color)                # skull
    paint_rect(frame, x + 8, y + 3, 5, 5, color)         # jaw
    paint_rect(frame, x + 10, y + 5, 4, 3, muzzle)       # muzzle
    paint_cell(frame, x + 5, y + 2, eye)
    paint_cell(frame, x + 12, y + 5, eye)                # nostril
    return frame


def paint_mane(frame: Frame, x: int, y: int, color: int, dip: int = 0) -> Frame:
    """Mane along the crest of the neck plus a forelock."""
    for i in range(5):
        paint_rect(frame, x + 2 * i, y - 3 * i + (dip * i) // 4, 2, 4, color)
    paint_rect(frame, x + 9, y - 14 + dip, 3, 2, color)  # forelock
    return frame


def paint_tail(frame: Frame, x: int, y: int, color: int, swing: int = 0) -> Frame:
    """Tail hanging from the rump; *swing* sways the lower strands."""
    paint_rect(frame, x, y, 4, 4, color)
    paint_rect(frame, x - 2 + swing, y + 3, 4, 6, color)
    paint_rect(frame, x - 3 + 2 * swing, y + 8, 3, 7, color)
    return frame


def paint_leg(frame: Frame, leg: LegPose, color: int, hoof: int) -> Frame:
    """One leg from its attachment under the body down to the hoof."""
    top = GROUND - leg.length
    bottom = GROUND - leg.lift
    span = bottom - top
    if span <= 0:
        return frame
    upper = span // 2
    paint_rect(frame, leg.x, top, LEG_WIDTH, upper, color)
    paint_rect(frame, leg.x + leg.offset, top + upper, LEG_WIDTH, span - upper, color)
    paint_rect(frame, leg.x + leg.offset, bottom - HOOF_HEIGHT, LEG_WIDTH + 1, HOOF_HEIGHT, hoof)
    return frame


def paint_legs(frame: Frame, pose: Pose, color: int, shade: int, hoof: int) -> Frame:
    """Far legs in shade first, then near legs on top."""
    for leg in pose.far_legs:
        paint_leg(frame, leg, shade, hoof)
    for leg in pose.near_legs:
        paint_leg(frame, leg, color, hoof)
    return frame


def paint_shadow(frame: Frame, pose: Pose, color: int) -> Frame:
    """Ground shadow under the belly plus a smudge below each raised hoof."""
    paint_rect(frame, BODY_X + 4, GROUND, BODY_W - 8, 1, color)
    paint_rect(frame, BODY_X + 8, GROUND + 1, BODY_W - 16, 1, color)
    for leg in pose.legs:
        if leg.lift <= 0:
            continue
        # A forward-swinging hoof casts its shadow ahead of the leg
        shift = 2 if leg.forward else -2
        paint_rect(frame, leg.x + leg.offset + shift, GROUND, LEG_WIDTH, 1, color)
    return frame


# =============================================================================
# Composition
# =============================================================================

def compose_horse(
    pose: Pose,
    palette: Mapping[str, ColorDef] | None = None,
    width: int = FRAME_SIZE,
    height: int = FRAME_SIZE,
) -> Frame:
    """Build one frame of the horse in *pose*. Deterministic."""
    palette = palette or get_coat(DEFAULT_COAT)
    body = palette["body"].ansi
    shade = palette["shade"].ansi

    frame = Frame(width, height)
    by = BODY_Y + pose.bob
    paint_body(frame, BODY_X, by, body, shade)
    paint_neck(frame, BODY_X + 23, by - 3, body, pose.head_dip)
    paint_head(frame, BODY_X + 30, by - 19 + pose.head_dip, body,
               palette["muzzle"].ansi, palette["eye"].ansi)
    paint_mane(frame, BODY_X + 23, by - 5, palette["mane"].ansi, pose.head_dip)
    paint_tail(frame, BODY_X - 4, by + 1, palette["mane"].ansi, pose.tail_swing)
    paint_legs(frame, pose, body, shade, palette["hoof"].ansi)
    paint_shadow(frame, pose, palette["shadow"].ansi)
    return frame


@lru_cache(maxsize=None)
def build_horse_frames(
    coat: str = DEFAULT_COAT,
    width: int = FRAME_SIZE,
    height: int = FRAME_SIZE,
) -> tuple[Frame, ...]:
    """Compose every pose of the trot cycle once; frames are read-only.

    Raises:
        KeyError: for an unknown coat.
    """
    palette = get_coat(coat)
    return tuple(
        compose_horse(pose, palette, width, height).freeze()
        for pose in TROT_CYCLE
    )
