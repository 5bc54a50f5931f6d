import pytest

from dgengine.window import Message, MessageType, Window, pack_lparam


@pytest.fixture
def window():
    w = Window(screen_width=1920, screen_height=1080)
    w.initialize("Hello Window", 1280, 720)
    return w


def test_pack_lparam_words():
    assert pack_lparam(0xFFFF, 0) == 0xFFFF
    assert pack_lparam(0, 1) == 0x10000
    assert pack_lparam(-1, -1) == 0xFFFFFFFF


def test_initialize_centres_window(window):
    assert window.is_active
    assert window.app_name == "Hello Window"
    assert window.left * 2 + window.width == window.screen_width
    assert window.top * 2 + window.height == window.screen_height


def test_initialize_clamps_to_screen():
    w = Window(screen_width=800, screen_height=600)
    w.initialize("Big", 1280, 720)
    assert (w.width, w.height) == (800, 600)
    assert (w.left, w.top) == (0, 0)


def test_close_deactivates_after_processing(window):
    window.close()
    assert window.is_active
    window.process_messages()
    assert not window.is_active


def test_handlers_see_messages_newest_first(window):
    seen = []
    window.hook(lambda w, m: seen.append(("old", m.type)))
    window.hook(lambda w, m: seen.append(("new", m.type)))
    window.post_message(Message(MessageType.KEYDOWN, 65))
    window.process_messages()
    assert seen == [("new", MessageType.KEYDOWN), ("old", MessageType.KEYDOWN)]


def test_quit_is_not_delivered_to_handlers(window):
    seen = []
    window.hook(lambda w, m: seen.append(m.type))
    window.close()
    window.process_messages()
    assert seen == [MessageType.DESTROY]


def test_unhook_stops_delivery(window):
    seen = []

    def handler(w, m):
        seen.append(m)

    window.hook(handler)
    window.unhook(handler)
    window.post_message(Message(MessageType.KEYUP, 65))
    window.post_message(Message(MessageType.SIZE, 0, pack_lparam(320, 240)))
    window.process_messages()
    assert seen == []
    assert window.client_rect == (0, 0, 320, 240)
    with pytest.raises(ValueError):
        window.unhook(handler)


def test_unhook_unknown_handler_raises(window):
    with pytest.raises(ValueError):
        window.unhook(lambda w, m: None)


def test_size_message_updates_client_rect(window):
    window.post_message(Message(MessageType.SIZE, 0, pack_lparam(640, 480)))
    window.process_messages()
    assert window.client_rect == (0, 0, 640, 480)


def test_terminate_drops_pending_messages(window):
    seen = []
    window.hook(lambda w, m: seen.append(m))
    window.post_message(Message(MessageType.KEYDOWN, 65))
    window.terminate()
    window.process_messages()
    assert not window.is_active
    assert seen == []