import pytest

from dgengine.app import App, AppConfig, AppState, main_app
from dgengine.debug import DebugAssertionError
from dgengine.graphics import GraphicsSystem
from dgengine.input import InputSystem, KeyCode
from dgengine.window import Message, MessageType, Window


class Idle(AppState):
    pass


def test_config_defaults():
    config = AppConfig()
    assert (config.app_name, config.win_width, config.win_height) == ("AppName", 1280, 720)


def test_first_state_added_becomes_current():
    app = App()
    first = app.add_state("One", Idle)
    app.add_state("Two", Idle)
    assert app.current_state is first
    assert set(app.states) == {"One", "Two"}


def test_duplicate_name_keeps_existing_state():
    app = App()
    first = app.add_state("One", Idle)
    again = app.add_state("One", Idle)
    assert again is first
    assert len(app.states) == 1


def test_add_state_rejects_non_state():
    app = App()
    with pytest.raises(TypeError):
        app.add_state("Bad", int)


def test_change_state_ignores_unknown_name():
    app = App()
    app.add_state("One", Idle)
    app.change_state("Missing")
    assert app.next_state is None


def test_change_state_sets_next_state():
    app = App()
    app.add_state("One", Idle)
    two = app.add_state("Two", Idle)
    app.change_state("Two")
    assert app.next_state is two


def test_run_without_state_raises():
    with pytest.raises(DebugAssertionError):
        App().run(AppConfig())


def test_run_loops_until_quit_and_cleans_up():
    app = App(delta_time=lambda: 0.25)
    events = []

    class Counting(AppState):
        def initialize(self):
            events.append("init")

        def update(self, delta_time):
            events.append(("update", delta_time))
            if sum(1 for e in events if isinstance(e, tuple)) >= 3:
                app.quit()

        def render(self):
            GraphicsSystem.get().draw(["v"])
            events.append("render")

        def terminate(self):
            events.append("terminate")

    app.add_state("Counting", Counting)
    app.run(AppConfig())

    assert events[0] == "init"
    assert events[-1] == "terminate"
    assert [e for e in events if isinstance(e, tuple)] == [("update", 0.25)] * 3
    assert events.count("render") == 3
    assert app.running is False
    with pytest.raises(DebugAssertionError):
        InputSystem.get()
    with pytest.raises(DebugAssertionError):
        GraphicsSystem.get()


def test_escape_quits_before_any_update():
    def factory():
        window = Window()
        window.post_message(Message(MessageType.KEYDOWN, wparam=int(KeyCode.ESCAPE)))
        return window

    events = []

    class Watch(AppState):
        def initialize(self):
            events.append("init")

        def update(self, delta_time):
            events.append("update")

        def terminate(self):
            events.append("terminate")

    app = App(window_factory=factory, delta_time=lambda: 0.0)
    watch = app.add_state("Watch", Watch)
    app.run(AppConfig())
    assert events == ["init", "terminate"]
    assert app.running is False
    assert app.current_state is watch


def test_closed_window_ends_run():
    def factory():
        window = Window()
        window.close()
        return window

    updates = []

    class Watch(AppState):
        def update(self, delta_time):
            updates.append(delta_time)

    app = App(window_factory=factory, delta_time=lambda: 0.0)
    watch = app.add_state("Watch", Watch)
    app.run(AppConfig())
    assert updates == []
    assert app.running is False
    assert app.current_state is watch


def test_state_change_during_run():
    app = App(delta_time=lambda: 0.0)
    events = []

    class First(AppState):
        def initialize(self):
            events.append("first.init")

        def update(self, delta_time):
            events.append("first.update")
            app.change_state("Second")

        def terminate(self):
            events.append("first.terminate")

    class Second(AppState):
        def initialize(self):
            events.append("second.init")

        def update(self, delta_time):
            events.append("second.update")
            app.quit()

        def terminate(self):
            events.append("second.terminate")

    app.add_state("First", First)
    second = app.add_state("Second", Second)
    app.run(AppConfig())
    assert events == [
        "first.init",
        "first.update",
        "first.terminate",
        "second.init",
        "second.update",
        "second.terminate",
    ]
    assert app.current_state is second
    assert app.next_state is None


def test_run_uses_config_window_size():
    sizes = []
    app = App(delta_time=lambda: 0.0)

    class Probe(AppState):
        def update(self, delta_time):
            gs = GraphicsSystem.get()
            sizes.append((gs.back_buffer_width, gs.back_buffer_height))
            app.quit()

    probe = app.add_state("Probe", Probe)
    app.run(AppConfig(app_name="Probe", win_width=320, win_height=200))
    assert sizes == [(320, 200)]
    assert app.running is False
    assert app.current_state is probe


def test_main_app_is_shared():
    main_app.cache_clear()
    try:
        added = main_app().add_state("SharedProbe", Idle)
        assert list(main_app().states) == ["SharedProbe"]
        assert main_app().current_state is added
    finally:
        main_app.cache_clear()