"""Per-question countdown driven by a Qt timer."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Signal

from quiz_player.constants.game_constants import TIMER_TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class CountdownTimer(QObject):
    """Counts whole seconds down to zero and signals expiry once.

    ``stop()`` is idempotent and may be called from any state. Every start and
    stop bumps a generation number; a timeout that Qt had already queued for
    an older generation is dropped instead of leaking into the next question.
    """

    ticked = Signal(int)
    expired = Signal()

    def __init__(self, interval_ms: int = TIMER_TICK_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._remaining: int = 0
        self._running: bool = False
        self._generation: int = 0
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._handle_timeout)
        self._armed_generation: int = self._generation

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def generation(self) -> int:
        return self._generation

    def is_running(self) -> bool:
        return self._running

    def start(self, seconds: int) -> None:
        if seconds <= 0:
            raise ValueError("Countdown must start from a positive number of seconds.")
        self._timer.stop()
        self._generation += 1
        self._armed_generation = self._generation
        self._remaining = seconds
        self._running = True
        self._timer.start()
        self.ticked.emit(self._remaining)

    def stop(self) -> None:
        if not self._running and not self._timer.isActive():
            return
        self._timer.stop()
        self._running = False
        self._generation += 1

    def _handle_timeout(self) -> None:
        self.tick(self._armed_generation)

    def tick(self, generation: int | None = None) -> None:
        """Advance by one second. Ticks for a stale generation are ignored."""
        if generation is None:
            generation = self._generation
        if not self._running or generation != self._generation:
            logger.debug("Dropping stale countdown tick (generation %s)", generation)
            return

        if self._remaining <= 1:
            self._remaining = 0
            self.stop()
            self.ticked.emit(0)
            self.expired.emit()
            return

        self._remaining -= 1
        self.ticked.emit(self._remaining)
