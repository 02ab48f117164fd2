"""Runs blocking API calls off the GUI thread and reports back on it.

Workers never touch session state. Their outcome travels through a queued
signal into this object's thread, and only there are callbacks invoked, so the
session controller only ever runs on the Qt main thread.
"""

from __future__ import annotations

import logging
from itertools import count
from typing import Any, Callable

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from quiz_player.core.services.game_api import GameApiError

logger = logging.getLogger(__name__)

SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[GameApiError], None]


class _WorkerSignals(QObject):
    succeeded = Signal(int, object)
    failed = Signal(int, object)


class _RequestWorker(QRunnable):
    def __init__(self, ticket: int, name: str, call: Callable[[], Any], signals: _WorkerSignals) -> None:
        super().__init__()
        self._ticket = ticket
        self._name = name
        self._call = call
        self._signals = signals

    def run(self) -> None:
        try:
            result = self._call()
        except GameApiError as exc:
            self._signals.failed.emit(self._ticket, exc)
        except Exception as exc:
            logger.exception("Request %s crashed", self._name)
            self._signals.failed.emit(self._ticket, GameApiError())
        else:
            self._signals.succeeded.emit(self._ticket, result)


class RequestDispatcher(QObject):
    """Dispatches named calls to a thread pool; one callback pair per call."""

    def __init__(self, pool: QThreadPool | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._pool = pool or QThreadPool.globalInstance()
        self._tickets = count(1)
        self._pending: dict[int, tuple[str, SuccessCallback, ErrorCallback]] = {}
        # Created here so that its thread affinity is ours and emits from workers are queued.
        self._signals = _WorkerSignals(self)
        self._signals.succeeded.connect(self._handle_succeeded)
        self._signals.failed.connect(self._handle_failed)

    def pending_count(self) -> int:
        return len(self._pending)

    def submit(
        self,
        name: str,
        call: Callable[[], Any],
        on_success: SuccessCallback,
        on_error: ErrorCallback,
    ) -> int:
        ticket = next(self._tickets)
        self._pending[ticket] = (name, on_success, on_error)
        logger.debug("Dispatching %s (ticket %s)", name, ticket)
        self._pool.start(_RequestWorker(ticket, name, call, self._signals))
        return ticket

    def wait_for_done(self, timeout_ms: int = -1) -> bool:
        return self._pool.waitForDone(timeout_ms)

    @Slot(int, object)
    def _handle_succeeded(self, ticket: int, result: object) -> None:
        entry = self._pending.pop(ticket, None)
        if entry is None:
            return
        name, on_success, _ = entry
        logger.debug("%s finished (ticket %s)", name, ticket)
        on_success(result)

    @Slot(int, object)
    def _handle_failed(self, ticket: int, error: object) -> None:
        entry = self._pending.pop(ticket, None)
        if entry is None:
            return
        name, _, on_error = entry
        logger.debug("%s failed (ticket %s): %s", name, ticket, error)
        on_error(error)
