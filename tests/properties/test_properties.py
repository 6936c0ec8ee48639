"""Property-based tests using Hypothesis."""

from hypothesis import assume, given, settings, strategies as st

from termfolio.core.dispatcher import dispatch
from termfolio.core.profile import Profile
from termfolio.core.registry import CommandRegistry
from termfolio.core.renderables import Text, render_text
from termfolio.widget.composer import TROT_CYCLE, compose_horse, paint_rect
from termfolio.widget.framebuffer import TRANSPARENT, Frame
from termfolio.widget.sequencer import AnimationSequencer

PROFILE = Profile(name="P", role="R", location="L", summary="S")

names = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_.",
    min_size=1,
    max_size=12,
)
separators = st.text(alphabet=" \t\n", min_size=1, max_size=4)


def echo_registry(command_names):
    """Registry where each command returns its own name and args."""
    registry = CommandRegistry()
    for name in command_names:
        registry.register(name, f"{name} command",
                          lambda ctx, name=name: Text(" ".join([name, *ctx.args])))
    return registry


class TestDispatchProperties:
    """Property tests for command dispatch."""

    @given(command_names=st.lists(names, min_size=1, max_size=6, unique=True), data=st.data())
    def test_routes_to_named_handler(self, command_names, data):
        """The first token alone decides which handler runs."""
        registry = echo_registry(command_names)
        name = data.draw(st.sampled_from(command_names))
        args = data.draw(st.lists(names, max_size=4))
        result = dispatch(" ".join([name, *args]), registry, PROFILE)
        assert result == Text(" ".join([name, *args]))

    @given(command_names=st.lists(names, max_size=6, unique=True), token=names)
    def test_unknown_token_is_named_in_not_found(self, command_names, token):
        assume(token not in command_names)
        registry = echo_registry(command_names)
        text = render_text(dispatch(token, registry, PROFILE))
        assert text.startswith("Command not found: ")
        assert token in text
        assert "help" in text

    @given(name=names, args=st.lists(names, max_size=4), data=st.data())
    def test_whitespace_runs_collapse(self, name, args, data):
        """Any whitespace between or around tokens gives the same result."""
        registry = echo_registry([name])
        tokens = [name, *args]
        seps = [data.draw(separators) for _ in range(len(tokens) + 1)]
        raw = seps[0] + "".join(tok + sep for tok, sep in zip(tokens, seps[1:]))
        assert dispatch(raw, registry, PROFILE) == dispatch(" ".join(tokens), registry, PROFILE)

    @given(name=names)
    def test_lookup_is_case_sensitive(self, name):
        assume(name.swapcase() != name)
        registry = echo_registry([name])
        text = render_text(dispatch(name.swapcase(), registry, PROFILE))
        assert text.startswith("Command not found: ")


class TestFrameProperties:
    """Property tests for clipped painting."""

    @given(
        width=st.integers(min_value=1, max_value=32),
        height=st.integers(min_value=1, max_value=32),
        x=st.integers(min_value=-50, max_value=50),
        y=st.integers(min_value=-50, max_value=50),
        w=st.integers(min_value=-5, max_value=60),
        h=st.integers(min_value=-5, max_value=60),
    )
    def test_rect_paints_only_the_clipped_area(self, width, height, x, y, w, h):
        frame = paint_rect(Frame(width, height), x, y, w, h, 7)
        expected = (
            max(0, min(width, x + w) - max(0, x))
            * max(0, min(height, y + h) - max(0, y))
        )
        assert frame.painted_count() == expected
        for (cy, cx) in zip(*frame.painted_mask().nonzero()):
            assert x <= cx < x + w and y <= cy < y + h

    @given(
        x=st.integers(min_value=-100, max_value=100),
        y=st.integers(min_value=-100, max_value=100),
    )
    def test_out_of_bounds_reads_transparent(self, x, y):
        assume(not (0 <= x < 8 and 0 <= y < 8))
        frame = Frame(8, 8)
        frame.fill(0, 0, 8, 8, 3)
        assert frame[x, y] == TRANSPARENT


class TestSequencerProperties:
    """Property tests for animation playback."""

    @given(
        k=st.integers(min_value=1, max_value=10),
        m=st.integers(min_value=0, max_value=100),
    )
    def test_cursor_is_ticks_mod_frames(self, k, m):
        seq = AnimationSequencer([Frame(2, 2) for _ in range(k)])
        seq.start()
        for _ in range(m):
            seq.tick()
        assert seq.cursor == m % k


class TestComposerProperties:
    """Property tests for sprite composition."""

    @settings(max_examples=20)
    @given(
        pose=st.sampled_from(TROT_CYCLE),
        width=st.integers(min_value=1, max_value=80),
        height=st.integers(min_value=1, max_value=80),
    )
    def test_composition_is_deterministic(self, pose, width, height):
        a = compose_horse(pose, width=width, height=height)
        b = compose_horse(pose, width=width, height=height)
        assert a == b
        assert a.size == (width, height)
