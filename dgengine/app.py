"""The application: a main loop driving one of several named states."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from dgengine.debug import check, log
from dgengine.graphics import GraphicsSystem
from dgengine.input import InputSystem, KeyCode
from dgengine.timeutil import get_delta_time
from dgengine.window import Window


@dataclass
class AppConfig:
    app_name: str = "AppName"
    win_width: int = 1280
    win_height: int = 720


class AppState:
    """One mode of the application; override the hooks that matter."""

    def initialize(self) -> None:
        pass

    def terminate(self) -> None:
        pass

    def update(self, delta_time: float) -> None:
        pass

    def render(self) -> None:
        pass

    def debug_ui(self) -> None:
        pass


class App:
    """Owns the states and runs the main loop."""

    def __init__(
        self,
        window_factory: Callable[[], Window] = Window,
        delta_time: Callable[[], float] = get_delta_time,
    ):
        self._window_factory = window_factory
        self._delta_time = delta_time
        self._states: dict[str, AppState] = {}
        self._current_state: Optional[AppState] = None
        self._next_state: Optional[AppState] = None
        self._running = False

    @property
    def states(self) -> Mapping[str, AppState]:
        return MappingProxyType(self._states)

    @property
    def current_state(self) -> Optional[AppState]:
        return self._current_state

    @property
    def next_state(self) -> Optional[AppState]:
        """The state that takes over at the start of the next frame."""
        return self._next_state

    @property
    def running(self) -> bool:
        return self._running

    def add_state(self, name: str, state_type: type) -> AppState:
        """Register a state under ``name``; an existing name keeps its state.

        The first state added becomes the current one.
        """
        if not (isinstance(state_type, type) and issubclass(state_type, AppState)):
            raise TypeError("App: add_state needs a subclass of AppState")
        if name in self._states:
            return self._states[name]
        state = state_type()
        self._states[name] = state
        if self._current_state is None:
            log("App: Current state %s", name)
            self._current_state = state
        return state

    def change_state(self, name: str) -> None:
        """Switch to the named state on the next frame; unknown names are ignored."""
        state = self._states.get(name)
        if state is not None:
            self._next_state = state

    def quit(self) -> None:
        self._running = False

    def run(self, config: AppConfig) -> None:
        """Open the window and loop until it closes, ESCAPE is pressed or quit is called."""
        check(self._current_state is not None, "App: need an app state to run")
        log("App Started")

        window = self._window_factory()
        window.initialize(config.app_name, config.win_width, config.win_height)
        try:
            GraphicsSystem.static_initialize(window, False)
            InputSystem.static_initialize(window)

            self._current_state.initialize()
            inputs = InputSystem.get()
            self._running = True
            while self._running:
                window.process_messages()
                inputs.update()

                if not window.is_active or inputs.is_key_pressed(KeyCode.ESCAPE):
                    self.quit()
                    continue

                if self._next_state is not None:
                    self._current_state.terminate()
                    self._current_state, self._next_state = self._next_state, None
                    self._current_state.initialize()

                self._current_state.update(self._delta_time())

                graphics = GraphicsSystem.get()
                graphics.begin_render()
                self._current_state.render()
                graphics.end_render()

            log("App Quit")
            self._current_state.terminate()
        finally:
            self._running = False
            InputSystem.static_terminate()
            GraphicsSystem.static_terminate()
            window.terminate()


@functools.lru_cache(maxsize=None)
def main_app() -> App:
    """The application shared by the whole program."""
    return App()