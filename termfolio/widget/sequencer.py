"""
Animation sequencer - cyclic playback over pre-built frames.

AnimationSequencer is the pure state machine (stopped/running, cursor).
AnimatedSprite wraps it as a live component: mounting arms a periodic
timer that advances the cursor, unmounting cancels it.
"""

from __future__ import annotations

import enum
import logging
from typing import Callable, Optional, Sequence

from ..core.scheduler import Scheduler, TimerLoop
from .framebuffer import Frame

logger = logging.getLogger(__name__)

# Seconds between frames
DEFAULT_PERIOD = 0.36


class SequencerState(str, enum.Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class AnimationSequencer:
    """
    Holds a fixed, non-empty list of frames and a playback cursor.

    Frames are built once up front and never recomputed. While running, each
    tick advances the cursor by one, wrapping at the end. There is no pause,
    reverse or speed control.
    """

    def __init__(self, frames: Sequence[Frame], period: float = DEFAULT_PERIOD):
        if not frames:
            raise ValueError("Animation needs at least one frame")
        size = frames[0].size
        if any(frame.size != size for frame in frames):
            raise ValueError("All frames in a sequence must have the same dimensions")
        if period <= 0:
            raise ValueError(f"Period must be positive, got {period}")

        self._frames: tuple[Frame, ...] = tuple(frames)
        self.period = period
        self.cursor = 0
        self.state = SequencerState.STOPPED

    @property
    def frames(self) -> tuple[Frame, ...]:
        return self._frames

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    @property
    def running(self) -> bool:
        return self.state is SequencerState.RUNNING

    @property
    def current(self) -> Frame:
        """The frame to display right now."""
        return self._frames[self.cursor]

    def start(self) -> None:
        """Enter the running state at the first frame."""
        self.cursor = 0
        self.state = SequencerState.RUNNING

    def stop(self) -> None:
        self.state = SequencerState.STOPPED

    def tick(self) -> Frame:
        """Advance one frame if running; a stopped sequencer stays put."""
        if self.running:
            self.cursor = (self.cursor + 1) % len(self._frames)
        return self.current


class AnimatedSprite:
    """
    Live component playing an AnimationSequencer on a timer loop.

    Usage:
        sprite = AnimatedSprite(AnimationSequencer(frames))
        unsubscribe = sprite.subscribe(lambda frame: draw(frame))
        sprite.mount(loop)   # starts ticking every period
        ...
        sprite.unmount()     # cancels the timer, no more redraws
    """

    TASK_NAME = "animation"

    def __init__(self, sequencer: AnimationSequencer, name: str = "sprite"):
        self.sequencer = sequencer
        self.name = name
        self._scheduler: Optional[Scheduler] = None
        self._listeners: list[Callable[[Frame], None]] = []

    @property
    def mounted(self) -> bool:
        return self._scheduler is not None

    @property
    def current(self) -> Frame:
        return self.sequencer.current

    def subscribe(self, callback: Callable[[Frame], None]) -> Callable[[], None]:
        """
        Ask to be called with the new frame after every tick.

        Returns:
            Unsubscribe function
        """
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def mount(self, loop: TimerLoop) -> None:
        """Reset to the first frame and start ticking on *loop*."""
        if self.mounted:
            return
        self.sequencer.start()
        scheduler = Scheduler(loop)
        scheduler.register(self.TASK_NAME, self._on_tick, interval=self.sequencer.period)
        self._scheduler = scheduler
        scheduler.start()
        logger.info("Mounted %s (%d frames every %.2fs)",
                    self.name, self.sequencer.frame_count, self.sequencer.period)

    def unmount(self) -> None:
        """Cancel the timer and stop playback. Safe to call more than once."""
        if self._scheduler is None:
            return
        self._scheduler.stop()
        self._scheduler = None
        self.sequencer.stop()
        self._listeners.clear()
        logger.info("Unmounted %s at frame %d", self.name, self.sequencer.cursor)

    def _on_tick(self) -> None:
        frame = self.sequencer.tick()
        for listener in list(self._listeners):
            listener(frame)
