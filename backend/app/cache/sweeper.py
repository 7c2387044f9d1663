"""Background thread that periodically purges expired cache entries."""
import logging
import threading
from typing import Optional

from .ttl_cache import TTLCache

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL_SECONDS = 5 * 60


class CacheSweeper:
    """
    Runs ``cache.cleanup()`` every ``interval`` seconds on a daemon thread.

    Owned by whoever owns the cache (the FastAPI lifespan in ``main.py``),
    which starts it on startup and stops it on shutdown.

    Example:
        >>> sweeper = CacheSweeper(cache, interval=300)
        >>> sweeper.start()
        >>> ...
        >>> sweeper.stop()
    """

    def __init__(self, cache: TTLCache, interval: float = DEFAULT_SWEEP_INTERVAL_SECONDS):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.cache = cache
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start sweeping. Calling start on a running sweeper does nothing."""
        if self.is_running:
            if self._stop_event.is_set():
                # A previous stop() timed out; that loop exits after its current sweep
                logger.warning("Cache sweeper is still shutting down; not restarting")
            return

        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run_loop, name="cache-sweeper", daemon=True
        )
        self._thread.start()
        logger.info(f"Cache sweeper started (interval={self.interval}s)")

    def stop(self, timeout: float = 5.0) -> None:
        """Signal the loop to exit and wait for the thread."""
        if self._thread is None:
            return

        self._stop_event.set()
        self._thread.join(timeout=timeout)
        if self._thread.is_alive():
            # Keep the reference so start() cannot spawn a second loop
            logger.warning(f"Cache sweeper did not stop within {timeout}s")
            return

        logger.info("Cache sweeper stopped")
        self._thread = None

    def run_once(self) -> int:
        """Sweep once on the calling thread. Returns the number of entries purged."""
        removed = self.cache.cleanup()
        if removed:
            logger.debug(f"Cache sweep removed {removed} expired entries")
        return removed

    def _run_loop(self) -> None:
        # wait() returns True once stop() is called
        while not self._stop_event.wait(self.interval):
            try:
                self.run_once()
            except Exception as e:
                logger.error(f"Cache sweep failed: {e}")
