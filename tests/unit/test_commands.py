"""Tests for the built-in commands."""

import pytest

from termfolio.commands import DEFAULT_TITLE, create_registry
from termfolio.core.colors import get_available_coats
from termfolio.core.dispatcher import dispatch
from termfolio.core.renderables import Element, LiveComponent, Text, render_text
from termfolio.widget.composer import TROT_CYCLE, build_horse_frames
from termfolio.widget.sequencer import AnimatedSprite


class TestCreateRegistry:
    def test_builtin_commands_in_order(self, registry):
        assert list(registry) == ["help", "about", "horse", "echo"]

    def test_descriptions_non_empty(self, registry):
        for name, description in registry.list():
            assert description.strip(), name

    def test_default_title(self, profile):
        reg = create_registry(profile)
        text = render_text(dispatch("help", reg, profile))
        assert text.startswith(DEFAULT_TITLE)


class TestHelp:
    def test_lists_every_command_once(self, registry, profile):
        result = dispatch("help", registry, profile)
        assert isinstance(result, Element)
        items = result.find_all("li")
        names = [item.find_all("span")[0].text_content() for item in items]
        assert names == [name for name, _ in registry.list()]

    def test_pairs_names_with_exact_descriptions(self, registry, profile):
        result = dispatch("help", registry, profile)
        pairs = []
        for item in result.find_all("li"):
            spans = item.find_all("span")
            pairs.append((spans[0].text_content(), spans[2].text_content()))
        assert pairs == registry.list()

    def test_includes_help_about_and_horse(self, registry, profile):
        text = render_text(dispatch("help", registry, profile))
        for name in ("help", "about", "horse"):
            assert name in text

    def test_banner_uses_title(self, registry, profile):
        first = dispatch("help", registry, profile).find_all("p")[0]
        assert first.text_content() == "test terminal - type a command and press enter."

    def test_ignores_args(self, registry, profile):
        assert render_text(dispatch("help me please", registry, profile)) == render_text(
            dispatch("help", registry, profile)
        )


class TestAbout:
    def test_contains_profile_fields_verbatim(self, registry, profile):
        text = render_text(dispatch("about", registry, profile))
        for value in (profile.name, profile.role, profile.location, profile.summary):
            assert value in text

    def test_one_link_per_entry_in_order(self, registry, profile):
        result = dispatch("about", registry, profile)
        anchors = result.find_all("a")
        assert [a.text_content() for a in anchors] == [link.label for link in profile.links]
        assert [a.attrs["href"] for a in anchors] == [link.url for link in profile.links]

    def test_profile_without_links(self, registry, profile):
        bare = profile.model_copy(update={"links": ()})
        result = dispatch("about", registry, bare)
        assert result.find_all("a") == []
        assert bare.name in render_text(result)

    def test_uses_context_profile(self, registry, profile):
        other = profile.model_copy(update={"name": "Someone Else"})
        assert "Someone Else" in render_text(dispatch("about", registry, other))


class TestHorse:
    def test_returns_unmounted_live_component(self, registry, profile):
        result = dispatch("horse", registry, profile)
        assert isinstance(result, AnimatedSprite)
        assert isinstance(result, LiveComponent)
        assert not result.mounted

    def test_frames_match_trot_cycle(self, registry, profile):
        sprite = dispatch("horse", registry, profile)
        seq = sprite.sequencer
        assert seq.frame_count == len(TROT_CYCLE)
        assert all(frame.size == (64, 64) for frame in seq.frames)
        assert seq.period == 0.1

    def test_each_invocation_gets_its_own_sequencer(self, registry, profile):
        a = dispatch("horse", registry, profile)
        b = dispatch("horse", registry, profile)
        assert a is not b
        assert a.sequencer is not b.sequencer

    def test_frames_built_once_per_coat(self, registry, profile):
        a = dispatch("horse", registry, profile)
        b = dispatch("horse", registry, profile)
        assert a.sequencer.frames is b.sequencer.frames

    @pytest.mark.parametrize("coat", get_available_coats())
    def test_coat_argument(self, registry, profile, coat):
        sprite = dispatch(f"horse {coat}", registry, profile)
        assert sprite.sequencer.frames == build_horse_frames(coat)

    def test_unknown_coat(self, registry, profile):
        result = dispatch("horse zebra", registry, profile)
        assert isinstance(result, Text)
        assert "zebra" in result.text
        for coat in get_available_coats():
            assert coat in result.text

    def test_configured_default_coat_and_size(self, profile):
        reg = create_registry(profile, coat="grey", frame_size=32)
        sprite = dispatch("horse", reg, profile)
        assert sprite.sequencer.frames == build_horse_frames("grey", 32, 32)
        assert sprite.current.size == (32, 32)


class TestEcho:
    def test_joins_args(self, registry, profile):
        assert dispatch("echo  hello   world", registry, profile) == Text("hello world")

    def test_no_args(self, registry, profile):
        assert dispatch("echo", registry, profile) == Text("")
