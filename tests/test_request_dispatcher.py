from __future__ import annotations

import threading
import time

import pytest
from PySide6.QtCore import QCoreApplication, QThreadPool

from quiz_player.core.services.game_api import GameApiError
from quiz_player.core.services.request_dispatcher import RequestDispatcher


@pytest.fixture
def dispatcher():
    pool = QThreadPool()
    pool.setMaxThreadCount(2)
    request_dispatcher = RequestDispatcher(pool=pool)
    yield request_dispatcher
    request_dispatcher.wait_for_done()


def drain(dispatcher, timeout=2.0):
    deadline = time.monotonic() + timeout
    while dispatcher.pending_count() and time.monotonic() < deadline:
        QCoreApplication.processEvents()
        time.sleep(0.001)


def test_success_callback_runs_on_calling_thread(dispatcher):
    results = []
    callback_threads = []
    worker_threads = []

    def call():
        worker_threads.append(threading.get_ident())
        return 42

    def on_success(value):
        callback_threads.append(threading.get_ident())
        results.append(value)

    dispatcher.submit("answer", call, on_success, pytest.fail)
    drain(dispatcher)

    assert results == [42]
    assert callback_threads == [threading.get_ident()]
    assert worker_threads != callback_threads


def test_api_errors_reach_the_error_callback(dispatcher):
    errors = []

    def call():
        raise GameApiError("Session not found", 404)

    dispatcher.submit("answer", call, pytest.fail, errors.append)
    drain(dispatcher)

    assert len(errors) == 1
    assert errors[0].message == "Session not found"
    assert errors[0].is_not_found


def test_unexpected_exceptions_become_api_errors_without_a_message(dispatcher):
    errors = []

    def call():
        raise KeyError("session_id")

    dispatcher.submit("answer", call, pytest.fail, errors.append)
    drain(dispatcher)

    assert isinstance(errors[0], GameApiError)
    assert errors[0].message is None
    assert errors[0].status_code is None


def test_tickets_are_unique(dispatcher):
    first = dispatcher.submit("a", lambda: 1, lambda _: None, lambda _: None)
    second = dispatcher.submit("b", lambda: 2, lambda _: None, lambda _: None)
    drain(dispatcher)

    assert first != second
    assert dispatcher.pending_count() == 0
