"""Tests for the per-key lock used by returns."""

import threading
import time

from rental_api.core.locks import KeyedLock


def test_same_key_is_serialized():
    locks = KeyedLock()
    active = []
    overlaps = []

    def work():
        with locks.hold("pair"):
            active.append(1)
            if len(active) > 1:
                overlaps.append(True)
            time.sleep(0.01)
            active.pop()

    threads = [threading.Thread(target=work) for _ in range(5)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert overlaps == []


def test_different_keys_do_not_block():
    locks = KeyedLock()
    entered = threading.Event()

    with locks.hold("a"):
        def other():
            with locks.hold("b"):
                entered.set()

        thread = threading.Thread(target=other)
        thread.start()
        assert entered.wait(timeout=1)
        thread.join()


def test_entries_are_released():
    locks = KeyedLock()

    with locks.hold("a"):
        assert len(locks) == 1

    assert len(locks) == 0
