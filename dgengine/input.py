"""Keyboard and mouse state gathered from window messages."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar, Optional

from dgengine.debug import check, log
from dgengine.window import Message, MessageType, Window

_KEY_LIMIT = 256
_WHEEL_DELTA = 120.0


class KeyCode(IntEnum):
    ESCAPE = 0x1B
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B

    GRAVE = 0xC0
    ONE = ord("1")
    TWO = ord("2")
    THREE = ord("3")
    FOUR = ord("4")
    FIVE = ord("5")
    SIX = ord("6")
    SEVEN = ord("7")
    EIGHT = ord("8")
    NINE = ord("9")
    ZERO = ord("0")
    MINUS = 0xBD
    EQUALS = 0xBB
    BACKSPACE = 0x08

    TAB = 0x09
    Q = ord("Q")
    W = ord("W")
    E = ord("E")
    R = ord("R")
    T = ord("T")
    Y = ord("Y")
    U = ord("U")
    I = ord("I")  # noqa: E741
    O = ord("O")  # noqa: E741
    P = ord("P")
    LBRACKET = 0xDB
    RBRACKET = 0xDD
    BACKSLASH = 0xDC

    A = ord("A")
    S = ord("S")
    D = ord("D")
    F = ord("F")
    G = ord("G")
    H = ord("H")
    J = ord("J")
    K = ord("K")
    L = ord("L")
    SEMICOLON = 0xBA
    APOSTROPHE = 0xDE
    ENTER = 0x0D

    Z = ord("Z")
    X = ord("X")
    C = ord("C")
    V = ord("V")
    B = ord("B")
    N = ord("N")
    M = ord("M")
    COMMA = 0xBC
    PERIOD = 0xBE
    SLASH = 0xBF

    CAPSLOCK = 0x14
    NUMLOCK = 0x90
    SCROLLLOCK = 0x91

    NUMPAD1 = 0x61
    NUMPAD2 = 0x62
    NUMPAD3 = 0x63
    NUMPAD4 = 0x64
    NUMPAD5 = 0x65
    NUMPAD6 = 0x66
    NUMPAD7 = 0x67
    NUMPAD8 = 0x68
    NUMPAD9 = 0x69
    NUMPAD0 = 0x60
    NUM_ADD = 0x6B
    NUM_SUB = 0x6D
    NUM_MUL = 0x6A
    NUM_DIV = 0x6F
    NUM_ENTER = 0x0D
    NUM_DECIMAL = 0x6E

    INS = 0x2D
    DEL = 0x2E
    HOME = 0x24
    END = 0x23
    PGUP = 0x21
    PGDN = 0x22

    LSHIFT = 0x10
    RSHIFT = 0x10
    LCONTROL = 0x11
    RCONTROL = 0x11
    LALT = 0x12
    RALT = 0x12
    LWIN = 0x5B
    RWIN = 0x5C
    SPACE = 0x20

    UP = 0x26
    DOWN = 0x28
    LEFT = 0x25
    RIGHT = 0x27


class MouseButton(IntEnum):
    LBUTTON = 0
    RBUTTON = 1
    MBUTTON = 2


_BUTTON_MESSAGES = {
    MessageType.LBUTTONDOWN: (MouseButton.LBUTTON, True),
    MessageType.LBUTTONUP: (MouseButton.LBUTTON, False),
    MessageType.RBUTTONDOWN: (MouseButton.RBUTTON, True),
    MessageType.RBUTTONUP: (MouseButton.RBUTTON, False),
    MessageType.MBUTTONDOWN: (MouseButton.MBUTTON, True),
    MessageType.MBUTTONUP: (MouseButton.MBUTTON, False),
}


def _signed16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


class InputSystem:
    """Tracks key and mouse state; one instance is installed at a time."""

    _instance: ClassVar[Optional["InputSystem"]] = None

    @classmethod
    def static_initialize(cls, window: Window) -> None:
        check(cls._instance is None, "InputSystem -- System already initialized!")
        cls._instance = cls()
        cls._instance.initialize(window)

    @classmethod
    def static_terminate(cls) -> None:
        if cls._instance is not None:
            cls._instance.terminate()
            cls._instance = None

    @classmethod
    def get(cls) -> "InputSystem":
        check(cls._instance is not None, "InputSystem -- No system registered.")
        return cls._instance

    def __init__(self):
        self._window: Optional[Window] = None
        self._initialized = False

        self._curr_keys: set[int] = set()
        self._prev_keys: set[int] = set()
        self._pressed_keys: set[int] = set()

        self._curr_buttons: set[int] = set()
        self._prev_buttons: set[int] = set()
        self._pressed_buttons: set[int] = set()

        self._curr_mouse = (-1, -1)
        self._prev_mouse = (-1, -1)
        self._mouse_move = (0, 0)
        self._mouse_wheel = 0.0

        self.mouse_left_edge = False
        self.mouse_right_edge = False
        self.mouse_top_edge = False
        self.mouse_bottom_edge = False

        self.clip_mouse_to_window = False
        self.cursor_visible = True

    def initialize(self, window: Window) -> None:
        if self._initialized:
            log("InputSystem -- System already initialized.")
            return
        log("InputSystem -- Initializing...")
        self._window = window
        window.hook(self.handle_message)
        self._initialized = True
        log("InputSystem -- System initialized.")

    def terminate(self) -> None:
        if not self._initialized:
            log("InputSystem -- System already terminated.")
            return
        log("InputSystem -- Terminating...")
        self._initialized = False
        if self._window is not None:
            self._window.unhook(self.handle_message)
            self._window = None
        log("InputSystem -- System terminated.")

    def handle_message(self, window: Window, message: Message) -> None:
        """Record the effect of one window message on the input state."""
        kind = message.type
        if kind == MessageType.ACTIVATEAPP:
            if not message.wparam:
                self.mouse_left_edge = False
                self.mouse_right_edge = False
                self.mouse_top_edge = False
                self.mouse_bottom_edge = False
        elif kind in _BUTTON_MESSAGES:
            button, down = _BUTTON_MESSAGES[kind]
            if down:
                self._curr_buttons.add(int(button))
            else:
                self._curr_buttons.discard(int(button))
        elif kind == MessageType.MOUSEWHEEL:
            self._mouse_wheel += _signed16(message.wparam >> 16) / _WHEEL_DELTA
        elif kind == MessageType.MOUSEMOVE:
            x = _signed16(message.lparam)
            y = _signed16(message.lparam >> 16)
            self._curr_mouse = (x, y)
            if self._prev_mouse[0] == -1:
                self._prev_mouse = (x, y)
            left, top, right, bottom = window.client_rect
            self.mouse_left_edge = x <= left
            self.mouse_right_edge = x + 1 >= right
            self.mouse_top_edge = y <= top
            self.mouse_bottom_edge = y + 1 >= bottom
        elif kind == MessageType.KEYDOWN:
            if message.wparam < _KEY_LIMIT:
                self._curr_keys.add(message.wparam)
        elif kind == MessageType.KEYUP:
            if message.wparam < _KEY_LIMIT:
                self._curr_keys.discard(message.wparam)

    def update(self) -> None:
        """Advance one frame: compute presses and mouse movement."""
        check(self._initialized, "InputSystem -- System not initialized.")
        self._pressed_keys = self._curr_keys - self._prev_keys
        self._prev_keys = set(self._curr_keys)

        cx, cy = self._curr_mouse
        px, py = self._prev_mouse
        self._mouse_move = (cx - px, cy - py)
        self._prev_mouse = self._curr_mouse

        self._pressed_buttons = self._curr_buttons - self._prev_buttons
        self._prev_buttons = set(self._curr_buttons)

    def is_key_down(self, key) -> bool:
        return int(key) in self._curr_keys

    def is_key_pressed(self, key) -> bool:
        return int(key) in self._pressed_keys

    def is_mouse_down(self, button) -> bool:
        return int(button) in self._curr_buttons

    def is_mouse_pressed(self, button) -> bool:
        return int(button) in self._pressed_buttons

    @property
    def mouse_move_x(self) -> int:
        return self._mouse_move[0]

    @property
    def mouse_move_y(self) -> int:
        return self._mouse_move[1]

    @property
    def mouse_move_z(self) -> float:
        """Accumulated wheel movement in notches."""
        return self._mouse_wheel

    @property
    def mouse_screen_x(self) -> int:
        return self._curr_mouse[0]

    @property
    def mouse_screen_y(self) -> int:
        return self._curr_mouse[1]