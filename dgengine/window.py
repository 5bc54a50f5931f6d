"""An application window with a message queue and chained message handlers."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable


class MessageType(IntEnum):
    DESTROY = 0x0002
    SIZE = 0x0005
    QUIT = 0x0012
    ACTIVATEAPP = 0x001C
    KEYDOWN = 0x0100
    KEYUP = 0x0101
    MOUSEMOVE = 0x0200
    LBUTTONDOWN = 0x0201
    LBUTTONUP = 0x0202
    RBUTTONDOWN = 0x0204
    RBUTTONUP = 0x0205
    MBUTTONDOWN = 0x0207
    MBUTTONUP = 0x0208
    MOUSEWHEEL = 0x020A


@dataclass(frozen=True)
class Message:
    """A window message with its two parameters."""

    type: MessageType
    wparam: int = 0
    lparam: int = 0


def pack_lparam(low: int, high: int) -> int:
    """Pack two 16-bit words into one message parameter."""
    return ((high & 0xFFFF) << 16) | (low & 0xFFFF)


Handler = Callable[["Window", Message], None]


class Window:
    """A window centred on a screen of the given size."""

    def __init__(self, screen_width: int = 1920, screen_height: int = 1080):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.app_name = ""
        self.left = 0
        self.top = 0
        self.width = 0
        self.height = 0
        self._active = False
        self._queue: deque[Message] = deque()
        self._handlers: list[Handler] = []

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def client_rect(self) -> tuple[int, int, int, int]:
        """The client area as (left, top, right, bottom)."""
        return (0, 0, self.width, self.height)

    def initialize(self, app_name: str, width: int, height: int) -> None:
        self.app_name = app_name
        self.width = min(width, self.screen_width)
        self.height = min(height, self.screen_height)
        self.left = (self.screen_width - self.width) // 2
        self.top = (self.screen_height - self.height) // 2
        self._active = True

    def terminate(self) -> None:
        self._queue.clear()
        self._active = False

    def post_message(self, message: Message) -> None:
        self._queue.append(message)

    def close(self) -> None:
        """Ask the window to close, as when the user closes it."""
        self.post_message(Message(MessageType.DESTROY))

    def process_messages(self) -> None:
        """Deliver every queued message; a quit message deactivates the window."""
        while self._queue:
            message = self._queue.popleft()
            if message.type == MessageType.QUIT:
                self._active = False
                continue
            self._dispatch(message)

    def hook(self, handler: Handler) -> None:
        """Install ``handler``; it sees messages before earlier handlers."""
        self._handlers.append(handler)

    def unhook(self, handler: Handler) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            raise ValueError("handler is not hooked to this window") from None

    def _dispatch(self, message: Message) -> None:
        if message.type == MessageType.SIZE:
            self.width = message.lparam & 0xFFFF
            self.height = (message.lparam >> 16) & 0xFFFF
        for handler in reversed(tuple(self._handlers)):
            handler(self, message)
        if message.type == MessageType.DESTROY:
            self.post_message(Message(MessageType.QUIT))