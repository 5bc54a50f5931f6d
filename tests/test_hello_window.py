import pytest

from dgengine.app import main_app
from dgengine.hello_window import GameState, MainState


@pytest.fixture
def app():
    main_app.cache_clear()
    shared = main_app()
    shared.add_state("MainState", MainState)
    shared.add_state("GameState", GameState)
    yield shared
    main_app.cache_clear()


def test_initialize_sets_life_time():
    state = MainState()
    state.initialize()
    assert state.life_time == 2.0
    game = GameState()
    game.initialize()
    assert game.life_time == 2.0


def test_small_delta_uses_minimum_step():
    state = MainState()
    state.initialize()
    state.update(0.0)
    assert state.life_time == pytest.approx(1.99)


def test_large_delta_subtracted_fully():
    state = GameState()
    state.initialize()
    state.update(0.5)
    assert state.life_time == pytest.approx(1.5)


def test_main_state_hands_over_to_game_state(app):
    state = MainState()
    state.initialize()
    app.change_state("MainState")
    state.update(1.0)
    assert app.next_state is app.states["MainState"]
    state.update(1.0)
    assert app.next_state is app.states["GameState"]


def test_game_state_hands_over_to_main_state(app):
    state = GameState()
    state.initialize()
    app.change_state("GameState")
    state.update(2.5)
    assert state.life_time <= 0.0
    assert app.next_state is app.states["MainState"]


def test_registered_states_behave_as_their_types(app):
    main = app.states["MainState"]
    game = app.states["GameState"]
    main.initialize()
    game.initialize()
    assert (main.life_time, game.life_time) == (2.0, 2.0)
    main.update(3.0)
    assert app.next_state is game
    game.update(3.0)
    assert app.next_state is main