import threading

import pytest

from ballplate.graphic import GraphicTicker


def test_run_ticks_until_terminated():
    ticks = []

    def tick():
        ticks.append(True)
        if len(ticks) == 3:
            ticker.terminate()

    ticker = GraphicTicker(tick, interval=0)
    ticker.run()
    assert len(ticks) == 3
    assert ticker.is_alive is False


def test_not_alive_before_run():
    ticker = GraphicTicker(lambda: None)
    assert ticker.is_alive is False


def test_terminate_from_other_thread():
    ticks = []
    started = threading.Event()

    def tick():
        ticks.append(True)
        started.set()

    ticker = GraphicTicker(tick, interval=0.005)
    thread = threading.Thread(target=ticker.run)
    thread.start()
    assert started.wait(5)
    assert ticker.is_alive is True
    ticker.terminate()
    thread.join(timeout=5)
    assert not thread.is_alive()
    assert len(ticks) >= 1


def test_negative_interval_rejected():
    with pytest.raises(ValueError):
        GraphicTicker(lambda: None, interval=-1)