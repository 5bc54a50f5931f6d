from dgengine.timeutil import Clock, get_delta_time, get_time


def _fake(values):
    it = iter(values)
    return lambda: next(it)


def test_time_starts_at_zero_then_counts_up():
    clock = Clock(_fake([5.0, 6.5]))
    assert clock.time() == 0.0
    assert clock.time() == 1.5


def test_time_truncates_to_milliseconds():
    clock = Clock(_fake([0.0, 0.0019]))
    clock.time()
    assert clock.time() == 0.001


def test_delta_time_measures_between_calls():
    clock = Clock(_fake([10.0, 10.25, 10.75]))
    assert clock.delta_time() == 0.0
    assert clock.delta_time() == 0.25
    assert clock.delta_time() == 0.5


def test_time_and_delta_have_separate_origins():
    clock = Clock(_fake([1.0, 3.0, 4.0]))
    assert clock.time() == 0.0
    assert clock.delta_time() == 0.0
    assert clock.time() == 3.0


def test_module_time_is_monotonic():
    first = get_time()
    second = get_time()
    assert 0.0 <= first <= second


def test_module_delta_is_non_negative():
    get_delta_time()
    assert get_delta_time() >= 0.0