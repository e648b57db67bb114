import threading
import time

import pytest

from vigilante_cables.feed.cache import SignalCache, UpstreamUnavailable


class FakeClock:
    def __init__(self, t=1000.0):
        self.t = t

    def __call__(self):
        return self.t


def test_cache_calls_loader_once_within_ttl():
    calls = []
    clock = FakeClock()
    cache = SignalCache(lambda: calls.append(1) or len(calls), ttl_seconds=180, clock=clock)
    assert cache.age_seconds is None
    assert cache.get() == 1
    clock.t += 179
    assert cache.get() == 1
    assert len(calls) == 1
    assert cache.age_seconds == 179


def test_cache_reloads_after_ttl():
    calls = []
    clock = FakeClock()
    cache = SignalCache(lambda: calls.append(1) or len(calls), ttl_seconds=180, clock=clock)
    cache.get()
    clock.t += 180
    assert not cache.is_fresh
    assert cache.get() == 2


def test_negative_window_after_loader_failure():
    state = {"fail": True, "calls": 0}

    def loader():
        state["calls"] += 1
        if state["fail"]:
            raise RuntimeError("upstream down")
        return "ok"

    clock = FakeClock()
    cache = SignalCache(loader, ttl_seconds=180, negative_ttl_seconds=300, clock=clock)
    with pytest.raises(RuntimeError):
        cache.get()
    # dentro de la ventana negativa no se vuelve a llamar al loader
    state["fail"] = False
    clock.t += 100
    with pytest.raises(UpstreamUnavailable):
        cache.get()
    assert state["calls"] == 1

    clock.t += 200
    assert cache.get() == "ok"
    assert state["calls"] == 2


def test_invalidate_forces_reload_and_clears_negative_window():
    calls = []
    clock = FakeClock()
    cache = SignalCache(lambda: calls.append(1) or len(calls), ttl_seconds=180, clock=clock)
    cache.get()
    cache.invalidate()
    assert cache.age_seconds is None
    assert cache.get() == 2

    def failing():
        raise RuntimeError("down")

    broken = SignalCache(failing, negative_ttl_seconds=300, clock=clock)
    with pytest.raises(RuntimeError):
        broken.get()
    broken.invalidate()
    # tras invalidar se reintenta de inmediato (vuelve a fallar con el error real)
    with pytest.raises(RuntimeError) as excinfo:
        broken.get()
    assert not isinstance(excinfo.value, UpstreamUnavailable)


def test_concurrent_callers_share_one_load():
    started = threading.Event()
    release = threading.Event()
    calls = []

    def loader():
        calls.append(1)
        started.set()
        release.wait(timeout=5)
        return ["señal"]

    cache = SignalCache(loader, ttl_seconds=60)
    results = []
    threads = [threading.Thread(target=lambda: results.append(cache.get())) for _ in range(8)]
    for t in threads:
        t.start()
    assert started.wait(timeout=5)
    release.set()
    for t in threads:
        t.join(timeout=5)

    assert len(calls) == 1
    assert results == [["señal"]] * 8


def test_get_is_safe_while_invalidating():
    cache = SignalCache(lambda: ["señal"], ttl_seconds=60)
    errors = []
    reads = []
    stop = threading.Event()

    def reader():
        n = 0
        while not stop.is_set():
            try:
                value = cache.get()
                if value != ["señal"]:
                    errors.append(value)
                n += 1
            except Exception as e:
                errors.append(e)
        reads.append(n)

    def purger():
        while not stop.is_set():
            cache.invalidate()

    threads = [threading.Thread(target=reader) for _ in range(4)] + [threading.Thread(target=purger)]
    for t in threads:
        t.start()
    time.sleep(0.5)
    stop.set()
    for t in threads:
        t.join(timeout=5)

    assert errors == []
    assert sum(reads) > 0


def test_age_seconds_never_fails_during_invalidate():
    cache = SignalCache(lambda: 1, ttl_seconds=60)
    stop = threading.Event()
    errors = []

    def purger():
        while not stop.is_set():
            cache.get()
            cache.invalidate()

    t = threading.Thread(target=purger)
    t.start()
    try:
        for _ in range(20000):
            try:
                age = cache.age_seconds
                assert age is None or age >= 0
            except Exception as e:
                errors.append(e)
    finally:
        stop.set()
        t.join(timeout=5)
    assert errors == []
