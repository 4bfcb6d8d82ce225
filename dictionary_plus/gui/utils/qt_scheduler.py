"""Scheduler implementation on top of the Qt event loop."""

import logging
from collections.abc import Callable
from typing import Any

from PyQt6.QtCore import QObject, QTimer, pyqtSlot

from dictionary_plus.gui.workers import TaskWorkerThread

logger = logging.getLogger(__name__)


class _TimerHandle:
    """Cancellable single-shot QTimer."""

    def __init__(self, scheduler: "QtScheduler", timer: QTimer, callback: Callable[[], None]):
        self._scheduler = scheduler
        self._timer = timer
        self._callback = callback
        self._done = False
        timer.timeout.connect(self._fire)

    def _fire(self) -> None:
        if self._done:
            return
        self._release()
        self._callback()

    def cancel(self) -> None:
        if self._done:
            return
        self._timer.stop()
        self._release()

    def _release(self) -> None:
        self._done = True
        self._timer.deleteLater()
        self._scheduler._timers.discard(self)


class _TaskRelay(QObject):
    """Receives a worker's signals on the GUI thread and forwards them.

    Living in the GUI thread makes Qt queue the worker's signals, so the
    callbacks always run where the search state is owned.
    """

    def __init__(
        self,
        scheduler: "QtScheduler",
        worker: TaskWorkerThread,
        on_success: Callable[[Any], None],
        on_error: Callable[[Exception], None],
    ):
        super().__init__(scheduler)
        self._scheduler = scheduler
        self._worker = worker
        self._on_success = on_success
        self._on_error = on_error
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True
        self._worker.cancel()

    @pyqtSlot(object)
    def deliver_result(self, result: Any) -> None:
        if not self._cancelled:
            self._on_success(result)

    @pyqtSlot(object)
    def deliver_error(self, error: Exception) -> None:
        if not self._cancelled:
            self._on_error(error)

    @pyqtSlot()
    def release(self) -> None:
        self._scheduler._relays.discard(self)
        self._worker.deleteLater()
        self.deleteLater()


class QtScheduler(QObject):
    """Runs timers with QTimer and blocking calls on worker QThreads.

    Implements Scheduler protocol. Must be created on the GUI thread.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._timers: set[_TimerHandle] = set()
        self._relays: set[_TaskRelay] = set()

    def call_later(self, delay: float, callback: Callable[[], None]) -> _TimerHandle:
        timer = QTimer(self)
        timer.setSingleShot(True)
        handle = _TimerHandle(self, timer, callback)
        self._timers.add(handle)
        timer.start(max(0, int(delay * 1000)))
        return handle

    def run_in_background(
        self,
        task: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_error: Callable[[Exception], None],
    ) -> _TaskRelay:
        worker = TaskWorkerThread(task)
        relay = _TaskRelay(self, worker, on_success, on_error)
        worker.result_ready.connect(relay.deliver_result)
        worker.error.connect(relay.deliver_error)
        worker.finished.connect(relay.release)
        self._relays.add(relay)
        worker.start()
        return relay

    def shutdown(self, wait_ms: int = 2000) -> None:
        """Cancel everything pending and wait for running workers.

        Args:
            wait_ms: Maximum time to wait for each worker thread
        """
        for handle in list(self._timers):
            handle.cancel()
        for relay in list(self._relays):
            relay.cancel()
            if not relay._worker.wait(wait_ms):
                logger.warning("Background request still running at shutdown")
