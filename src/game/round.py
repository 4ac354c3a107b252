"""
Whack-a-Mole - Round Controller
Drives the repeating "pop a mole" tick and ends the round on a whack
"""

import logging
import random
from typing import Callable, Optional, Protocol

from .board import Grid
from .config import TICK_INTERVAL_MS
from .timer import TickInbox, start_periodic_timer

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """Anything returned by a timer factory that can be cancelled"""

    def cancel(self) -> None:
        ...


# (interval in seconds, callback) -> running timer
TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


class RoundController:
    """
    Owns the grid, the active mole position and the periodic timer

    Timer firings are only posted to an inbox; they change the grid when the
    owning thread calls process_pending(). Clicks are handled on that same
    thread, so every state change is serialized.
    """

    def __init__(self, grid: Optional[Grid] = None,
                 timer_factory: TimerFactory = start_periodic_timer,
                 rng: Optional[random.Random] = None,
                 interval_ms: int = TICK_INTERVAL_MS,
                 listener: Optional[Callable[[], None]] = None):
        if interval_ms <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval_ms} ms")

        self._grid = grid if grid is not None else Grid()
        self._timer_factory = timer_factory
        self._rng = rng if rng is not None else random.Random()
        self._interval_ms = interval_ms
        self._inbox = TickInbox()
        self._timer: Optional[TimerHandle] = None
        self._generation = 0
        self._active_index: Optional[int] = None
        self.listener = listener

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def active_index(self) -> Optional[int]:
        """Index of the hole the mole was last sent to, or None"""
        return self._active_index

    @property
    def is_running(self) -> bool:
        return self._timer is not None

    def start(self):
        """Clear the grid and start popping moles, replacing any running timer"""
        if self._cancel_timer():
            logger.info("Restarting round; previous timer cancelled")

        self._grid.clear_all()
        self._active_index = None

        self._generation += 1
        generation = self._generation
        self._timer = self._timer_factory(
            self._interval_ms / 1000.0,
            lambda: self._inbox.post(generation)
        )
        logger.info("Round started (generation %d, every %d ms)", generation, self._interval_ms)
        self._notify()

    def stop(self):
        """Cancel the periodic timer; does nothing when no round is running"""
        if not self._cancel_timer():
            return

        logger.info("Round stopped (generation %d)", self._generation)
        self._notify()

    def on_tick(self):
        """Hide the current mole and pop one out at a random hole"""
        if not self.is_running:
            logger.debug("Ignoring tick, no round running")
            return

        if self._active_index is not None:
            self._grid.cell_at(self._active_index).set_empty()
            self._active_index = None

        # Sampling with replacement; the mole may come back up in the same hole
        index = self._rng.randrange(len(self._grid))
        self._grid.cell_at(index).set_mole_out()
        self._active_index = index

        logger.debug("Mole out at hole %d %s", index, self._grid.position_of(index))
        self._notify()

    def on_cell_clicked(self, index: int) -> bool:
        """
        Whack the hole at index
        Returns True if a mole was hit, which ends the round
        """
        cell = self._grid.cell_at(index)
        if cell is None:
            logger.warning("Click on unknown hole %r ignored", index)
            return False

        if not cell.try_whack():
            logger.debug("Missed: hole %d has no mole out", index)
            return False

        logger.info("Whacked mole at hole %d", index)
        if self.is_running:
            self.stop()
        else:
            self._notify()
        return True

    def on_cell_clicked_at(self, row: int, col: int) -> bool:
        """Whack the hole at (row, col)"""
        if self._grid.get_cell(row, col) is None:
            logger.warning("Click on unknown hole (%r, %r) ignored", row, col)
            return False
        return self.on_cell_clicked(self._grid.index_of(row, col))

    def process_pending(self) -> int:
        """
        Apply ticks posted by the timer since the last call
        Must run on the thread that owns the grid. Ticks from a cancelled
        timer are discarded. Returns the number of ticks applied.
        """
        applied = 0
        for generation in self._inbox.drain():
            if generation != self._generation or not self.is_running:
                logger.debug("Discarding stale tick from generation %d", generation)
                continue
            self.on_tick()
            applied += 1
        return applied

    def _cancel_timer(self) -> bool:
        """Cancel the current timer, returning True if one was running"""
        if self._timer is None:
            return False

        self._timer.cancel()
        self._timer = None
        return True

    def _notify(self):
        if self.listener is not None:
            self.listener()
