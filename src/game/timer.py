"""
Whack-a-Mole - Timer Facility
Periodic background timer and the inbox that carries its ticks to the
thread that owns the game state
"""

import logging
import queue
import threading
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class PeriodicTimer:
    """
    Calls a callback on a daemon thread, once immediately and then once
    per interval, until cancelled
    """
    
    def __init__(self, interval: float, callback: Callable[[], None], name: str = "mole-timer"):
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        
        self.interval = interval
        self.callback = callback
        self._cancelled = threading.Event()
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
    
    def start(self) -> "PeriodicTimer":
        """Start firing; returns self so it can be used as a timer factory result"""
        self._thread.start()
        logger.debug("Timer %s started (every %.3fs)", self._thread.name, self.interval)
        return self
    
    def _run(self):
        while not self._cancelled.is_set():
            self.callback()
            # Fixed delay between firings; returns early once cancelled
            if self._cancelled.wait(self.interval):
                break
    
    def cancel(self):
        """Stop firing. Safe to call more than once"""
        if not self._cancelled.is_set():
            self._cancelled.set()
            logger.debug("Timer %s cancelled", self._thread.name)
    
    def join(self, timeout: Optional[float] = None):
        """Wait for the timer thread to exit"""
        if self._thread.is_alive():
            self._thread.join(timeout)
    
    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()
    
    def is_alive(self) -> bool:
        """Check if the timer thread is still running"""
        return self._thread.is_alive()


def start_periodic_timer(interval: float, callback: Callable[[], None]) -> PeriodicTimer:
    """Default timer factory used by the round controller"""
    return PeriodicTimer(interval, callback).start()


class TickInbox:
    """
    Thread-safe mailbox of tick messages
    
    Timer threads only post; the owning thread drains and applies the ticks,
    so game state is never touched from the timer thread.
    """
    
    def __init__(self):
        self._queue: "queue.Queue[int]" = queue.Queue()
    
    def post(self, generation: int):
        """Queue one tick tagged with the generation of the timer that fired it"""
        self._queue.put(generation)
    
    def drain(self, limit: Optional[int] = None) -> List[int]:
        """Remove and return queued ticks, oldest first"""
        ticks = []
        while limit is None or len(ticks) < limit:
            try:
                ticks.append(self._queue.get_nowait())
            except queue.Empty:
                break
        return ticks
    
    def clear(self) -> int:
        """Drop every queued tick and return how many were dropped"""
        return len(self.drain())
    
    def __len__(self) -> int:
        return self._queue.qsize()
