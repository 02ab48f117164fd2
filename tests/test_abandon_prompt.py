from __future__ import annotations

import time

from PySide6.QtCore import QCoreApplication

from conftest import start_playing
from quiz_player.core.abandon_prompt import AbandonPromptRelay


class ScriptedAnswer:
    def __init__(self, confirm: bool) -> None:
        self.confirm = confirm
        self.asked = 0

    def __call__(self) -> bool:
        self.asked += 1
        return self.confirm


def process_events_until(condition, timeout=1.0):
    deadline = time.monotonic() + timeout
    while not condition() and time.monotonic() < deadline:
        QCoreApplication.processEvents()
        time.sleep(0.001)


def test_question_is_asked_after_the_snapshot_reached_every_observer(controller, api, dispatcher):
    start_playing(controller, api, dispatcher)
    answer = ScriptedAnswer(confirm=True)
    relay = AbandonPromptRelay(controller, answer)
    seen = []
    controller.snapshot_changed.connect(seen.append)

    controller.open_abandon_prompt()

    assert answer.asked == 0
    assert [snapshot.abandon_prompt_open for snapshot in seen] == [True]

    process_events_until(lambda: answer.asked)

    assert answer.asked == 1
    assert [snapshot.abandon_prompt_open for snapshot in seen] == [True, False]
    assert seen[-1].abandon_pending
    assert dispatcher.pending_names() == ["abandon_session"]
    relay.deleteLater()


def test_declined_question_cancels_without_a_call(controller, api, dispatcher):
    start_playing(controller, api, dispatcher)
    answer = ScriptedAnswer(confirm=False)
    relay = AbandonPromptRelay(controller, answer)

    controller.open_abandon_prompt()
    process_events_until(lambda: answer.asked)

    assert answer.asked == 1
    assert not controller.snapshot.abandon_prompt_open
    assert dispatcher.pending == []
    relay.deleteLater()


def test_prompt_closed_before_delivery_is_not_asked(controller, api, dispatcher):
    start_playing(controller, api, dispatcher)
    answer = ScriptedAnswer(confirm=True)
    relay = AbandonPromptRelay(controller, answer)

    controller.open_abandon_prompt()
    controller.cancel_abandon()
    for _ in range(10):
        QCoreApplication.processEvents()

    assert answer.asked == 0
    assert dispatcher.pending == []
    relay.deleteLater()
