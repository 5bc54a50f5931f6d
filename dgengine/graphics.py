"""A rendering system that owns the back buffer, viewport and frame presentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional

from dgengine.colors import BLACK, Color
from dgengine.debug import check
from dgengine.window import Message, MessageType, Window


@dataclass(frozen=True)
class Viewport:
    """The rectangle and depth range that rendering is mapped to."""

    top_left_x: float = 0.0
    top_left_y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    min_depth: float = 0.0
    max_depth: float = 1.0


class GraphicsSystem:
    """Back buffer and frame state for one window; one instance is installed at a time."""

    _instance: ClassVar[Optional["GraphicsSystem"]] = None

    @classmethod
    def static_initialize(cls, window: Window, fullscreen: bool) -> None:
        check(cls._instance is None, "GraphicsSystem: is already installed.")
        cls._instance = cls()
        cls._instance.initialize(window, fullscreen)

    @classmethod
    def static_terminate(cls) -> None:
        if cls._instance is not None:
            cls._instance.terminate()
            cls._instance = None

    @classmethod
    def get(cls) -> "GraphicsSystem":
        check(cls._instance is not None, "GraphicsSystem: is not initialized.")
        return cls._instance

    def __init__(self):
        self.clear_color: Color = BLACK
        self.vsync = True
        self._window: Optional[Window] = None
        self._initialized = False
        self._width = 0
        self._height = 0
        self._fullscreen = False
        self._viewport = Viewport()
        self._bound_viewport: Optional[Viewport] = None
        self._render_target_bound = False
        self._frame: list[tuple] = []
        self.last_frame: tuple[tuple, ...] = ()
        self.last_clear_color: Optional[Color] = None
        self.last_present_interval: Optional[int] = None
        self.frames_presented = 0

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def back_buffer_width(self) -> int:
        return self._width

    @property
    def back_buffer_height(self) -> int:
        return self._height

    @property
    def fullscreen(self) -> bool:
        return self._fullscreen

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def bound_viewport(self) -> Optional[Viewport]:
        """The viewport currently in use for rendering."""
        return self._bound_viewport

    @property
    def render_target_bound(self) -> bool:
        return self._render_target_bound

    def initialize(self, window: Window, fullscreen: bool) -> None:
        """Size the back buffer to the window's client area and start listening to it."""
        left, top, right, bottom = window.client_rect
        self._window = window
        self._width = right - left
        self._height = bottom - top
        self._fullscreen = bool(fullscreen)
        self._initialized = True
        self.resize(self._width, self._height)
        window.hook(self.handle_message)

    def terminate(self) -> None:
        if self._window is not None:
            self._window.unhook(self.handle_message)
            self._window = None
        self._render_target_bound = False
        self._bound_viewport = None
        self._frame = []
        self._initialized = False

    def handle_message(self, window: Window, message: Message) -> None:
        """Resize the back buffer when the window changes size."""
        if message.type == MessageType.SIZE:
            width = message.lparam & 0xFFFF
            height = (message.lparam >> 16) & 0xFFFF
            self.resize(width, height)

    def begin_render(self) -> None:
        """Bind the render target and clear it to the clear colour."""
        check(self._initialized, "GraphicsSystem: is not initialized.")
        self.reset_render_target()
        self.last_clear_color = self.clear_color
        self._frame = []

    def end_render(self) -> None:
        """Present the frame drawn since begin_render."""
        check(self._initialized, "GraphicsSystem: is not initialized.")
        self.last_frame = tuple(self._frame)
        self._frame = []
        self.last_present_interval = 1 if self.vsync else 0
        self.frames_presented += 1

    def draw(self, vertices: Iterable) -> None:
        """Submit a list of vertices to the current frame."""
        check(self._initialized, "GraphicsSystem: is not initialized.")
        self._frame.append(tuple(vertices))

    def toggle_fullscreen(self) -> None:
        self._fullscreen = not self._fullscreen

    def resize(self, width: int, height: int) -> None:
        """Recreate the back buffer views for a new size and reset the viewport."""
        check(self._initialized, "GraphicsSystem: is not initialized.")
        self._render_target_bound = False
        if width != self._width or height != self._height:
            self._width = width
            self._height = height
        self.reset_render_target()
        self._viewport = Viewport(width=float(self._width), height=float(self._height))
        self.reset_viewport()

    def reset_render_target(self) -> None:
        self._render_target_bound = True

    def reset_viewport(self) -> None:
        self._bound_viewport = self._viewport

    def back_buffer_aspect_ratio(self) -> float:
        """Width over height; a zero height raises ZeroDivisionError."""
        return self._width / self._height