"""Background worker threads for GUI."""

from .base_worker import CancellableWorker
from .task_worker import TaskWorkerThread

__all__ = [
    "CancellableWorker",
    "TaskWorkerThread",
]
