"""Widget rendering - frame buffers, sprite composition, and animation playback."""

from .framebuffer import FRAME_SIZE, TRANSPARENT, Frame
from .composer import TROT_CYCLE, LegPose, Pose, build_horse_frames, compose_horse
from .sequencer import DEFAULT_PERIOD, AnimatedSprite, AnimationSequencer, SequencerState
