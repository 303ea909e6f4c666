import pytest

from sowa.timer import Timer


def test_not_started_does_nothing():
    fired = []
    timer = Timer(0.5)
    timer.on_timeout(lambda: fired.append(True))
    timer.update(10.0)
    assert fired == []
    assert timer.time_passed == 0.0


def test_auto_start_fires_and_stops():
    fired = []
    timer = Timer(1.0, auto_start=True)
    timer.on_timeout(lambda: fired.append(True))
    timer.update(0.6)
    assert fired == []
    timer.update(0.6)
    assert fired == [True]
    assert timer.started is False
    assert timer.time_passed == 0.0


def test_exact_timeout_does_not_fire():
    fired = []
    timer = Timer(1.0, auto_start=True)
    timer.on_timeout(lambda: fired.append(True))
    timer.update(1.0)
    assert fired == []
    assert timer.time_passed == 1.0


def test_pause_keeps_time_and_stop_resets():
    timer = Timer(5.0)
    timer.start()
    timer.update(2.0)
    timer.pause()
    timer.update(2.0)
    assert timer.time_passed == pytest.approx(2.0)
    timer.stop()
    assert timer.time_passed == 0.0
    assert timer.started is False


def test_callbacks_called_in_order():
    calls = []
    timer = Timer(0.1, auto_start=True)
    timer.on_timeout(lambda: calls.append("a"))
    timer.on_timeout(lambda: calls.append("b"))
    timer.update(1.0)
    assert calls == ["a", "b"]


def test_does_not_fire_again_after_stopping():
    calls = []
    timer = Timer(0.1, auto_start=True)
    timer.on_timeout(lambda: calls.append(1))
    timer.update(1.0)
    timer.update(1.0)
    assert calls == [1]


def test_default_timeout():
    assert Timer().timeout == 1.0