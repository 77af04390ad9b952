import logging

from utils.logging.error_log import ErrorLog, format_error_detail, get_error_log


def test_add_joins_messages_and_truncates_detail():
    log = ErrorLog(debug=False)
    entry = log.add(["first", "second"], ValueError("x" * 200))

    assert entry.message == "first, second"
    assert entry.detail.startswith("ValueError('xxx")
    assert len(entry.detail) == 61
    assert log.entries == [entry]


def test_add_without_error():
    log = ErrorLog(debug=False)
    entry = log.add("only a message")

    assert entry.detail == ""
    assert str(entry) == "only a message\n"


def test_entries_is_a_copy():
    log = ErrorLog(debug=False)
    log.add("message")
    log.entries.clear()

    assert len(log) == 1


def test_debug_mirrors_to_logger(caplog):
    log = ErrorLog(debug=True)
    with caplog.at_level(logging.WARNING, logger="torrents.errors"):
        log.add("something broke", RuntimeError("boom"))

    assert "something broke" in caplog.text


def test_without_debug_nothing_is_warned(caplog):
    log = ErrorLog(debug=False)
    with caplog.at_level(logging.WARNING, logger="torrents.errors"):
        log.add("quiet")

    assert caplog.text == ""


def test_format_error_detail_limits_length():
    assert format_error_detail(RuntimeError("abcdef"), max_length=5) == "Runtim"


def test_shared_error_log_is_singleton():
    assert get_error_log() is get_error_log()
