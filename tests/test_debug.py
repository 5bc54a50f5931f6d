import logging

import pytest

from dgengine.debug import DebugAssertionError, check, log


def test_log_formats_arguments_with_time_prefix():
    line = log("value %d of %s", 5, "items")
    prefix, separator, body = line.partition(": ")
    assert separator == ": "
    assert body == "value 5 of items"
    assert prefix[0] == "{"
    assert prefix[-1] == "}"
    seconds = prefix[1:-1]
    assert float(seconds) >= 0.0
    assert len(seconds.split(".")[1]) == 3


def test_log_without_arguments_keeps_percent_signs():
    line = log("100% done")
    assert line.endswith(": 100% done")


def test_log_emits_record(caplog):
    with caplog.at_level(logging.DEBUG, logger="dgengine"):
        line = log("MAIN STATE INITIALIZED")
    assert line in caplog.messages


def test_check_false_raises_with_formatted_message():
    with pytest.raises(DebugAssertionError, match="value 3 out of range"):
        check(False, "value %d out of range", 3)


def test_check_error_is_an_assertion_error(caplog):
    with caplog.at_level(logging.DEBUG, logger="dgengine"):
        with pytest.raises(AssertionError):
            check(0, "need an app state to run")
    assert any("ASSERT! need an app state to run" in m for m in caplog.messages)


def test_check_true_logs_nothing(caplog):
    with caplog.at_level(logging.DEBUG, logger="dgengine"):
        check(True, "never shown")
    assert caplog.messages == []