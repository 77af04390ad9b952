import threading
import time

from utils.concurrency.lazy_field import is_computed, lazy_field


class Counter:
    def __init__(self):
        self.calls = 0

    @lazy_field
    def value(self):
        """Slow value."""
        self.calls += 1
        time.sleep(0.01)
        return self.calls


def test_value_is_computed_once():
    counter = Counter()

    assert not is_computed(counter, "value")
    assert counter.value == 1
    assert counter.value == 1
    assert counter.calls == 1
    assert is_computed(counter, "value")


def test_preseeded_value_is_kept():
    counter = Counter()
    counter.__dict__["value"] = 99

    assert counter.value == 99
    assert counter.calls == 0


def test_concurrent_access_computes_once():
    counter = Counter()
    threads = [threading.Thread(target=lambda: counter.value) for _ in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert counter.calls == 1


def test_instances_do_not_share_values():
    first, second = Counter(), Counter()
    first.value

    assert not is_computed(second, "value")


def test_descriptor_keeps_docstring():
    assert Counter.value.__doc__ == "Slow value."
