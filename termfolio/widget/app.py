"""Terminal window - tkinter host for the command transcript.

Thin presentation layer: it feeds submitted lines to the Transcript and
draws whatever renderable comes back. Animated sprites are embedded as
tk canvases and driven by tk's own timer through TkTimerLoop.
"""

from __future__ import annotations

import logging
import tkinter as tk
import webbrowser
from tkinter import font as tkfont
from typing import Any, Callable

import numpy as np

from ..commands import create_registry
from ..core.colors import ColorDef
from ..core.profile import Profile
from ..core.renderables import BLOCK_TAGS, Element, LiveComponent, Text
from ..core.transcript import HistoryEntry, Transcript
from .config import TerminalConfig
from .framebuffer import TRANSPARENT, Frame
from .sequencer import AnimatedSprite

logger = logging.getLogger(__name__)


# =============================================================================
# Timer adapter
# =============================================================================

class _TkTimerHandle:
    def __init__(self, root: tk.Misc, after_id: str):
        self._root = root
        self._after_id = after_id

    def cancel(self) -> None:
        try:
            self._root.after_cancel(self._after_id)
        except tk.TclError:
            pass  # window already destroyed


class TkTimerLoop:
    """Exposes ``root.after`` through the ``call_later`` timer interface."""

    def __init__(self, root: tk.Misc):
        self.root = root

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> _TkTimerHandle:
        after_id = self.root.after(max(1, round(delay * 1000)), callback, *args)
        return _TkTimerHandle(self.root, after_id)


# =============================================================================
# Sprite view
# =============================================================================

class SpriteView:
    """Draws a sprite's current frame as a grid of rectangles on *canvas*."""

    def __init__(self, canvas: tk.Canvas, frame: Frame, cell_size: int, bg_color: str):
        self.canvas = canvas
        self.cell_size = cell_size
        self.bg_color = bg_color
        self._items = np.zeros((frame.height, frame.width), dtype=np.int64)
        for y in range(frame.height):
            for x in range(frame.width):
                self._items[y, x] = canvas.create_rectangle(
                    x * cell_size, y * cell_size,
                    (x + 1) * cell_size, (y + 1) * cell_size,
                    width=0, fill=bg_color,
                )
        self._shown = np.full((frame.height, frame.width), TRANSPARENT, dtype=np.int16)
        self.draw(frame)

    @classmethod
    def create(cls, parent: tk.Misc, frame: Frame, cell_size: int, bg_color: str) -> "SpriteView":
        """Build a canvas sized for *frame* inside *parent*."""
        canvas = tk.Canvas(
            parent,
            width=frame.width * cell_size,
            height=frame.height * cell_size,
            bg=bg_color,
            highlightthickness=0,
        )
        return cls(canvas, frame, cell_size, bg_color)

    def _color(self, code: int) -> str:
        return self.bg_color if code == TRANSPARENT else ColorDef.from_ansi(code).hex

    def draw(self, frame: Frame) -> None:
        """Repaint only the cells that changed since the last draw."""
        ys, xs = np.nonzero(frame.cells != self._shown)
        for y, x in zip(ys.tolist(), xs.tolist()):
            self.canvas.itemconfig(int(self._items[y, x]), fill=self._color(int(frame.cells[y, x])))
        self._shown[:] = frame.cells


# =============================================================================
# Window
# =============================================================================

class TerminalWindow:
    def __init__(self, config: TerminalConfig, profile: Profile):
        self.cfg = config
        display = config.display

        self.root = tk.Tk()
        self.root.title(display.title)
        self.root.configure(bg=display.bg_color)
        self.root.geometry(f"{display.window_width}x{display.window_height}")

        self.font = tkfont.Font(family=display.font_family, size=display.font_size)
        self.bold = tkfont.Font(family=display.font_family, size=display.font_size, weight="bold")

        header = tk.Label(self.root, text=display.title, font=self.bold,
                          bg=display.bg_color, fg=display.fg_color, anchor="center")
        header.pack(fill="x", pady=(6, 2))

        self.text = tk.Text(
            self.root, font=self.font, bg=display.bg_color, fg=display.fg_color,
            insertbackground=display.fg_color, wrap="word", borderwidth=0,
            highlightthickness=0, padx=10, pady=6,
        )
        self.text.pack(fill="both", expand=True)
        self.text.tag_configure("prompt", foreground=display.prompt_color)
        self.text.tag_configure("strong", font=self.bold)
        self.text.tag_configure("code", foreground=display.prompt_color)
        self.text.tag_configure("link", foreground=display.link_color, underline=True)
        self.text.tag_configure("error", foreground=display.error_color)
        self.text.configure(state="disabled")

        row = tk.Frame(self.root, bg=display.bg_color)
        row.pack(fill="x", padx=10, pady=(2, 8))
        tk.Label(row, text=display.prompt, font=self.font,
                 bg=display.bg_color, fg=display.prompt_color).pack(side="left")
        self.entry = tk.Entry(
            row, font=self.font, bg=display.bg_color, fg=display.fg_color,
            insertbackground=display.fg_color, borderwidth=0, highlightthickness=0,
        )
        self.entry.pack(side="left", fill="x", expand=True, padx=(6, 0))
        self._show_placeholder()

        self.loop = TkTimerLoop(self.root)
        animation = config.animation
        registry = create_registry(
            profile,
            title=display.title,
            coat=animation.coat,
            period=animation.period,
            frame_size=animation.frame_size,
        )
        self.transcript = Transcript(registry, profile)
        self.transcript.subscribe(self._render_entry)
        self._link_count = 0

        # Bindings
        self.entry.bind("<Return>", self._submit)
        self.entry.bind("<FocusIn>", lambda e: self._clear_placeholder())
        self.text.bind("<Button-1>", lambda e: self.entry.focus_set())
        self.root.bind("<Escape>", lambda e: self.close())
        self.root.protocol("WM_DELETE_WINDOW", self.close)

        self.entry.focus_set()

    # --- Input ---

    def _show_placeholder(self):
        self.entry.insert(0, self.cfg.display.placeholder)
        self._placeholder = True

    def _clear_placeholder(self):
        if self._placeholder:
            self.entry.delete(0, "end")
            self._placeholder = False

    def _submit(self, event=None):
        self._clear_placeholder()
        raw = self.entry.get()
        self.entry.delete(0, "end")
        try:
            self.transcript.submit(raw)
        except Exception:
            logger.exception("Command failed: %s", raw)
            self._append_line(self.cfg.display.prompt + " ", "prompt")
            self._append_line(raw.strip() + "\n")
            self._append_line("Command failed, see log for details.\n", "error")
        return "break"

    # --- Output ---

    def _append_line(self, text: str, *tags: str):
        self.text.configure(state="normal")
        self.text.insert("end", text, tags)
        self.text.configure(state="disabled")
        self.text.see("end")

    def _render_entry(self, entry: HistoryEntry):
        self.text.configure(state="normal")
        try:
            self.text.insert("end", self.cfg.display.prompt + " ", ("prompt",))
            self.text.insert("end", entry.command + "\n")
            self._render_output(entry.output)
            self.text.insert("end", "\n")
        finally:
            self.text.configure(state="disabled")
            self.text.see("end")

    def _render_output(self, output):
        if isinstance(output, Text):
            self.text.insert("end", output.text + "\n")
        elif isinstance(output, Element):
            self._render_element(output, indent=0)
            if self.text.get("end-2c", "end-1c") != "\n":
                self.text.insert("end", "\n")
        elif isinstance(output, AnimatedSprite):
            self._render_sprite(output)
        elif isinstance(output, LiveComponent):
            output.mount(self.loop)
        else:
            self.text.insert("end", f"{output}\n")

    def _render_element(self, node: Element, indent: int, tags: tuple = ()):
        block = node.tag in BLOCK_TAGS
        if block and self.text.get("end-2c", "end-1c") not in ("\n", ""):
            self.text.insert("end", "\n")

        if node.tag in ("strong", "code"):
            tags = tags + (node.tag,)
        elif node.tag == "a":
            self._link_count += 1
            link_tag = f"link-{self._link_count}"
            href = node.attrs.get("href", "")
            self.text.tag_bind(link_tag, "<Button-1>", lambda e, url=href: webbrowser.open(url))
            tags = tags + ("link", link_tag)

        if node.tag == "li":
            self.text.insert("end", " " * indent)
        child_indent = indent + 2 if node.tag == "ul" else indent

        for child in node.children:
            if isinstance(child, Element):
                self._render_element(child, child_indent, tags)
            else:
                self.text.insert("end", child, tags)

        if block:
            self.text.insert("end", "\n")

    def _render_sprite(self, sprite: AnimatedSprite):
        view = SpriteView.create(self.text, sprite.current, self.cfg.display.cell_size,
                                 self.cfg.display.bg_color)
        self.text.window_create("end", window=view.canvas)
        self.text.insert("end", "\n")
        sprite.subscribe(view.draw)
        sprite.mount(self.loop)

    # --- Lifecycle ---

    def close(self):
        self.transcript.close()
        self.root.destroy()

    def run(self):
        self.root.mainloop()
