"""Background fetch task and its per-widget manager."""

from typing import Callable, Any, List, Optional, Tuple
from PyQt6.QtCore import QThread, pyqtSignal

# --- Module-level constants ---
CLEANUP_WAIT_MS = 200     # Wait time per task during widget close cleanup


class BackgroundTask(QThread):
    """
    Run a callable off the GUI thread and deliver its result by signal.

    Usage:
        task = BackgroundTask(target=cache.fetch_batch, args=(ids,))
        task.result_ready.connect(on_done)
        task.error_occurred.connect(on_error)  # Receives Exception, not str
        task.start()

    Signals are queued back to the thread that owns the task, so handlers run
    on the GUI thread.
    """

    result_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(Exception)

    def __init__(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        parent=None
    ):
        super().__init__(parent)
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}

    def run(self):
        try:
            result = self._target(*self._args, **self._kwargs)
            self.result_ready.emit(result)
        except Exception as e:
            self.error_occurred.emit(e)


class BackgroundTaskManager:
    """
    Keeps background tasks alive until they finish.

    Tasks are never cancelled: a fetch that finishes after the collection was
    replaced still writes into a cache keyed by record id, so its result is
    harmless. Earlier tasks are only dropped from the tracking list once done.

    Usage in widget:
        self._task_manager = BackgroundTaskManager()

        def _schedule_fetch(self, ids):
            self._task_manager.run(
                target=self._cache.fetch_batch,
                args=(ids,),
                on_success=lambda _: self.refresh_cards(),
            )

        def closeEvent(self, event):
            self._task_manager.cleanup()
            super().closeEvent(event)
    """

    def __init__(self):
        self._tasks: List[BackgroundTask] = []

    def run(
        self,
        target: Callable[..., Any],
        args: Tuple = (),
        kwargs: dict = None,
        on_success: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> BackgroundTask:
        """
        Start target in a new background task.

        Args:
            target: Function to execute in background
            args: Positional arguments for target
            kwargs: Keyword arguments for target
            on_success: Callback for successful result
            on_error: Callback for error (receives Exception, not str)

        Returns:
            The started BackgroundTask
        """
        task = BackgroundTask(target=target, args=args, kwargs=kwargs)
        if on_success:
            task.result_ready.connect(on_success)
        if on_error:
            task.error_occurred.connect(on_error)
        task.finished.connect(lambda: self._discard(task))

        self._tasks.append(task)
        task.start()
        return task

    def _discard(self, task: BackgroundTask) -> None:
        # Queued after result_ready, so the result has already been delivered
        if task in self._tasks:
            self._tasks.remove(task)

    def cleanup(self):
        """Wait briefly for running tasks. Call from closeEvent."""
        for task in self._tasks:
            if task.isRunning():
                task.wait(CLEANUP_WAIT_MS)
        self._tasks = []
