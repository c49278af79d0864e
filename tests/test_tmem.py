import threading

import pytest

from prayengine.tmem import MemoryTracker

SIZE = 32


@pytest.mark.parametrize("method", ["calloc", "malloc"])
def test_tracking(method):
    tracker = MemoryTracker()

    def allocate():
        if method == "calloc":
            return tracker.calloc(1, SIZE)
        return tracker.malloc(SIZE)

    t1 = allocate()
    assert t1.size == SIZE
    stats = tracker.stats()
    assert stats.current == SIZE
    assert stats.peak == SIZE

    t2 = allocate()
    stats = tracker.stats()
    assert stats.current == SIZE * 2
    assert stats.peak == SIZE * 2

    tracker.free(t2)
    stats = tracker.stats()
    assert stats.current == SIZE
    assert stats.peak == SIZE * 2

    t3 = allocate()
    stats = tracker.stats()
    assert stats.current == SIZE * 2
    assert stats.peak == SIZE * 2

    tracker.free(t3)
    tracker.free(t1)
    stats = tracker.stats()
    assert stats.current == 0
    assert stats.peak == SIZE * 2
    assert stats.allocations == 3
    assert stats.frees == 3
    assert stats.alltime == SIZE * 3


def test_calloc_is_zero_filled_and_sized():
    tracker = MemoryTracker()
    allocation = tracker.calloc(4, 8)
    assert allocation.size == 32
    assert allocation.data == bytearray(32)
    assert tracker.stats().current == 32


def test_double_free_rejected():
    tracker = MemoryTracker()
    allocation = tracker.malloc(8)
    tracker.free(allocation)
    with pytest.raises(ValueError):
        tracker.free(allocation)
    assert tracker.stats().frees == 1


def test_foreign_allocation_rejected():
    first = MemoryTracker()
    second = MemoryTracker()
    allocation = first.malloc(4)
    with pytest.raises(ValueError):
        second.free(allocation)


def test_negative_size_rejected():
    tracker = MemoryTracker()
    with pytest.raises(ValueError):
        tracker.malloc(-1)
    with pytest.raises(ValueError):
        tracker.calloc(-1, 4)


def test_reset_zeroes_stats():
    tracker = MemoryTracker()
    tracker.malloc(16)
    tracker.reset()
    stats = tracker.stats()
    assert (stats.current, stats.peak, stats.alltime, stats.allocations, stats.frees) == (0, 0, 0, 0, 0)


def test_format_stats():
    tracker = MemoryTracker()
    allocation = tracker.malloc(10)
    tracker.free(allocation)
    text = tracker.format_stats()
    assert text.startswith("tmem stats:\n")
    assert "\tcurrent : 0b\n" in text
    assert "\tpeak    : 10b\n" in text
    assert "\tallocs  : 1\n" in text
    assert "\tfrees   : 1\n" in text


def test_thread_safe_counts():
    tracker = MemoryTracker()

    def work():
        for _ in range(200):
            tracker.free(tracker.malloc(4))

    threads = [threading.Thread(target=work) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    stats = tracker.stats()
    assert stats.allocations == 800
    assert stats.frees == 800
    assert stats.current == 0