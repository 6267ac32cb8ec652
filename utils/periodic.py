# utils/periodic.py

import logging
import threading
import time
from typing import Callable, Optional

from utils.shared_state import LockUnavailable

log = logging.getLogger(__name__)


class PeriodicTask:
    """Runs ``tick`` on a fixed-interval schedule in a daemon thread.

    The first tick fires on start. Deadlines advance by exactly one interval,
    so a late thread fires back-to-back until it is on schedule again.
    """

    def __init__(self, name: str, interval: float, tick: Callable[[], object]):
        self.name = name
        self._interval = interval
        self._tick = tick

        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_once(self) -> None:
        try:
            self._tick()
        except LockUnavailable as e:
            log.debug("[%s] skipped tick: %s", self.name, e)
        except Exception:
            log.exception("[%s] tick failed", self.name)

    def _run(self) -> None:
        next_at = time.monotonic()
        while not self._stop.is_set():
            self.run_once()
            next_at += self._interval
            delay = next_at - time.monotonic()
            if delay > 0 and self._stop.wait(delay):
                break
