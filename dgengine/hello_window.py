"""Two states that hand over to each other every two seconds."""

from __future__ import annotations

from dgengine.app import AppConfig, AppState, main_app
from dgengine.debug import log

_LIFE_TIME = 2.0
_MIN_STEP = 0.01


class MainState(AppState):
    def __init__(self):
        self.life_time = 0.0

    def initialize(self) -> None:
        log("MAIN STATE INITIALIZED")
        self.life_time = _LIFE_TIME

    def terminate(self) -> None:
        log("MAIN STATE TERMINATED")

    def update(self, delta_time: float) -> None:
        self.life_time -= max(delta_time, _MIN_STEP)
        if self.life_time <= 0.0:
            main_app().change_state("GameState")


class GameState(AppState):
    def __init__(self):
        self.life_time = 0.0

    def initialize(self) -> None:
        log("GAME STATE INITIALIZED")
        self.life_time = _LIFE_TIME

    def terminate(self) -> None:
        log("GAME STATE TERMINATED")

    def update(self, delta_time: float) -> None:
        self.life_time -= max(delta_time, _MIN_STEP)
        if self.life_time <= 0.0:
            main_app().change_state("MainState")


def main(argv=None) -> int:
    config = AppConfig(app_name="Hello Window")
    app = main_app()
    app.add_state("MainState", MainState)
    app.add_state("GameState", GameState)
    app.run(config)
    return 0