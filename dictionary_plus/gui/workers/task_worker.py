"""Worker thread running a single blocking call."""

from collections.abc import Callable
from typing import Any

from PyQt6.QtCore import pyqtSignal

from dictionary_plus.gui.workers.base_worker import CancellableWorker


class TaskWorkerThread(CancellableWorker):
    """Worker thread for one network call (lookup or suggestion fetch).

    Emits result_ready with the call's return value, or error with the
    exception it raised. Emits nothing once cancelled.
    """

    result_ready = pyqtSignal(object)

    def __init__(self, task: Callable[[], Any], parent=None):
        """Initialize the task worker thread.

        Args:
            task: Blocking function to run in the background
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.task = task

    def run(self) -> None:
        """Execute the task in background thread."""
        try:
            if self.check_cancelled():
                return

            result = self.task()

            if not self.check_cancelled():
                self.result_ready.emit(result)
        except Exception as e:
            if not self.check_cancelled():
                self.error.emit(e)
