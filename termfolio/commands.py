"""Built-in terminal commands.

``create_registry`` is called once by the host at session start. Handlers
close over the profile and animation settings and receive a DispatchContext
per invocation.
"""

from __future__ import annotations

from .core.colors import DEFAULT_COAT, get_available_coats
from .core.dispatcher import DispatchContext
from .core.profile import Profile
from .core.registry import CommandRegistry
from .core.renderables import Element, Renderable, Text, el
from .widget.composer import build_horse_frames
from .widget.framebuffer import FRAME_SIZE
from .widget.sequencer import DEFAULT_PERIOD, AnimatedSprite, AnimationSequencer

DEFAULT_TITLE = "stivers.us terminal"


def _help(ctx: DispatchContext, title: str) -> Element:
    items = [
        el(
            "li",
            el("span", name, class_="command-name"),
            el("span", " - ", class_="command-separator"),
            el("span", description, class_="command-description"),
        )
        for name, description in ctx.registry.list()
    ]
    return el(
        "div",
        el("p", f"{title} - type a command and press enter."),
        el("ul", *items, class_="command-list"),
    )


def _about(ctx: DispatchContext) -> Element:
    profile = ctx.profile
    links: list = []
    for i, link in enumerate(profile.links):
        if i:
            links.append(" ")
        links.append(el("a", link.label, href=link.url, target="_blank", rel="noreferrer"))
    return el(
        "div",
        el("p", profile.name, class_="about-title"),
        el("p", profile.role, class_="about-subtitle"),
        el("p", profile.location, class_="about-detail"),
        el("p", profile.summary, class_="about-summary"),
        el("div", *links, class_="about-links"),
        class_="about-block",
    )


def _echo(ctx: DispatchContext) -> Text:
    return Text(" ".join(ctx.args))


def create_registry(
    profile: Profile,
    title: str = DEFAULT_TITLE,
    coat: str = DEFAULT_COAT,
    period: float = DEFAULT_PERIOD,
    frame_size: int = FRAME_SIZE,
) -> CommandRegistry:
    """Build the session's command registry.

    Args:
        profile: Shown by ``about``. Handlers also get it via the context.
        title: Terminal title used in the ``help`` banner.
        coat: Default horse coat when ``horse`` is called without arguments.
        period: Seconds between animation frames.
        frame_size: Edge length of each animation frame in cells.
    """
    registry = CommandRegistry()

    def horse(ctx: DispatchContext) -> Renderable:
        name = ctx.args[0] if ctx.args else coat
        if name not in get_available_coats():
            return Text(f"Unknown coat: {name}. Try one of: {', '.join(get_available_coats())}")
        frames = build_horse_frames(name, frame_size, frame_size)
        return AnimatedSprite(AnimationSequencer(frames, period), name=f"horse ({name})")

    registry.register(
        "help",
        "List available commands and information about the terminal",
        lambda ctx: _help(ctx, title),
    )
    registry.register("about", "Display the developer profile", _about)
    registry.register("horse", "Watch a pixel-art horse trot in place (optional coat name)", horse)
    registry.register("echo", "Print the arguments back", _echo)
    return registry
