"""Protocol for scheduling timers and background work."""

from collections.abc import Callable
from typing import Any, Protocol


class Cancellable(Protocol):
    """Handle to a pending timer or background task."""

    def cancel(self) -> None:
        """Request that the callback never runs.

        Cancellation is cooperative: a task already running may still
        finish, so callers must also check their own currency.
        """
        ...


class Scheduler(Protocol):
    """Interface for running deferred and background work.

    All callbacks are delivered on the thread that owns the search state
    (the GUI thread in the desktop app), so callers never need locks.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> Cancellable:
        """Run ``callback`` once after ``delay`` seconds.

        Args:
            delay: Delay in seconds
            callback: Function to call

        Returns:
            Handle that can cancel the timer
        """
        ...

    def run_in_background(
        self,
        task: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_error: Callable[[Exception], None],
    ) -> Cancellable:
        """Run a blocking ``task`` off the owning thread.

        Args:
            task: Blocking function to execute
            on_success: Called with the task's return value
            on_error: Called with the exception the task raised

        Returns:
            Handle that can cancel delivery of the outcome
        """
        ...
