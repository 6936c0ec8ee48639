"""
Renderable values returned by command handlers.

A renderable is one of:
- Text: a plain string
- Element: a small markup tree (tag, attrs, children)
- LiveComponent: an object with its own mount/unmount lifecycle (animations)

The host displays whatever it gets back; the core never inspects handler
output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Protocol, Union, runtime_checkable

# Tags that start a new line when flattened to text
BLOCK_TAGS = frozenset({"div", "p", "ul", "li"})


@dataclass(frozen=True)
class Text:
    """Plain text output."""
    text: str


@dataclass(frozen=True)
class Element:
    """A markup node. Children are nested Elements or raw strings."""
    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: tuple[Union["Element", str], ...] = ()

    __hash__ = None  # attrs is a dict

    @property
    def class_name(self) -> str:
        return self.attrs.get("class", "")

    def iter(self) -> Iterator["Element"]:
        """Depth-first iteration over this node and all descendant elements."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()

    def find_all(self, tag: str) -> list["Element"]:
        """All descendant elements (including self) with the given tag."""
        return [node for node in self.iter() if node.tag == tag]

    def text_content(self) -> str:
        """Concatenated text of all descendants, without any formatting."""
        parts = []
        for child in self.children:
            if isinstance(child, Element):
                parts.append(child.text_content())
            else:
                parts.append(child)
        return "".join(parts)


def el(tag: str, *children: Union[Element, str], **attrs: str) -> Element:
    """Build an Element. ``class_`` maps to the ``class`` attribute."""
    if "class_" in attrs:
        attrs["class"] = attrs.pop("class_")
    return Element(tag, dict(attrs), tuple(children))


@runtime_checkable
class LiveComponent(Protocol):
    """A renderable that manages its own timer while mounted."""

    def mount(self, loop: Any) -> None:
        """Start the component's timer on *loop* (anything with ``call_later``)."""
        ...

    def unmount(self) -> None:
        """Release the timer. No further updates happen after this."""
        ...

    @property
    def mounted(self) -> bool:
        ...


Renderable = Union[Text, Element, LiveComponent]


# =============================================================================
# Plain-text rendering
# =============================================================================

def _render_element(node: Element, lines: list[str], current: list[str], indent: int) -> None:
    block = node.tag in BLOCK_TAGS
    if block and current:
        lines.append("".join(current))
        current.clear()

    child_indent = indent + 2 if node.tag == "ul" else indent
    if node.tag == "li":
        current.append(" " * indent)

    for child in node.children:
        if isinstance(child, Element):
            _render_element(child, lines, current, child_indent)
        else:
            current.append(child)

    if node.tag == "a" and node.attrs.get("href"):
        current.append(f" <{node.attrs['href']}>")

    if block and current:
        lines.append("".join(current))
        current.clear()


def render_text(renderable: Renderable) -> str:
    """Flatten a renderable to plain text.

    Block tags break lines, list items are indented, and links show their
    target after the label. Live components render as a placeholder.
    """
    if isinstance(renderable, Text):
        return renderable.text
    if isinstance(renderable, Element):
        lines: list[str] = []
        current: list[str] = []
        _render_element(renderable, lines, current, 0)
        if current:
            lines.append("".join(current))
        return "\n".join(lines)
    if isinstance(renderable, LiveComponent):
        return f"[{type(renderable).__name__}]"
    raise TypeError(f"Not a renderable: {renderable!r}")
