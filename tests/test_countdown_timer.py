from __future__ import annotations

import time

import pytest
from PySide6.QtCore import QCoreApplication

from quiz_player.core.countdown_timer import CountdownTimer


@pytest.fixture
def timer():
    countdown = CountdownTimer()
    countdown.ticks = []
    countdown.expirations = []
    countdown.ticked.connect(countdown.ticks.append)
    countdown.expired.connect(lambda: countdown.expirations.append(True))
    yield countdown
    countdown.stop()


def test_start_emits_initial_value(timer):
    timer.start(30)

    assert timer.ticks == [30]
    assert timer.is_running()
    assert timer.remaining == 30


def test_start_rejects_non_positive_budget(timer):
    with pytest.raises(ValueError):
        timer.start(0)


def test_counts_down_and_expires_exactly_once(timer):
    timer.start(3)

    for _ in range(5):
        timer.tick()

    assert timer.ticks == [3, 2, 1, 0]
    assert len(timer.expirations) == 1
    assert timer.remaining == 0
    assert not timer.is_running()


def test_stop_is_idempotent(timer):
    timer.start(5)
    timer.stop()
    generation = timer.generation

    timer.stop()

    assert timer.generation == generation
    assert not timer.is_running()


def test_ticks_after_stop_are_dropped(timer):
    timer.start(5)
    timer.stop()

    timer.tick()

    assert timer.ticks == [5]
    assert timer.expirations == []


def test_tick_from_previous_question_is_dropped(timer):
    timer.start(5)
    stale_generation = timer.generation
    timer.start(30)

    timer.tick(stale_generation)

    assert timer.remaining == 30
    assert timer.ticks == [5, 30]


def test_restart_resets_remaining(timer):
    timer.start(5)
    timer.tick()
    timer.tick()

    timer.start(30)

    assert timer.remaining == 30
    assert timer.is_running()


def test_qt_timer_drives_the_countdown():
    countdown = CountdownTimer(interval_ms=5)
    expirations = []
    countdown.expired.connect(lambda: expirations.append(True))

    countdown.start(3)
    deadline = time.monotonic() + 2.0
    while not expirations and time.monotonic() < deadline:
        QCoreApplication.processEvents()
        time.sleep(0.001)

    assert expirations == [True]
    assert countdown.remaining == 0
