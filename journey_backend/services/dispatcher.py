"""
dispatcher.py — Process-lifetime background worker pool
Fire-and-forget jobs that must outlive the request that queued them.
The application starts one at startup and shuts it down at shutdown.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait


class BackgroundDispatcher:
    def __init__(self, max_workers: int = 2, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger(__name__)
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="journey-bg")
        self._pending: set[Future] = set()
        self._lock = threading.Lock()
        self._closed = False

    def submit(self, job_name: str, fn, *args) -> Future | None:
        """Queue fn(*args). Failures are logged, never returned to the caller."""
        with self._lock:
            if self._closed:
                self.logger.warning(f"Dropping background job {job_name}: dispatcher is shut down")
                return None
            future = self._executor.submit(self._run, job_name, fn, *args)
            self._pending.add(future)
        future.add_done_callback(self._forget)
        return future

    def _run(self, job_name: str, fn, *args):
        try:
            fn(*args)
        except Exception:
            self.logger.exception(f"Background job {job_name} failed")

    def _forget(self, future: Future):
        with self._lock:
            self._pending.discard(future)

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Block until every queued job has finished. False on timeout."""
        with self._lock:
            pending = list(self._pending)
        _, not_done = wait(pending, timeout=timeout)
        return not not_done

    def shutdown(self, wait: bool = True):
        with self._lock:
            self._closed = True
        self._executor.shutdown(wait=wait)
        self.logger.info("Background dispatcher stopped.")
