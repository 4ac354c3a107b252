"""
Shared fixtures for the whack-a-mole tests
"""

import random

import pytest
from game import Grid, RoundController


class FakeTimer:
    """Timer handle that only fires when a test tells it to"""
    
    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self.cancel_count = 0
    
    def fire(self, times=1):
        """Simulate the timer thread firing"""
        for _ in range(times):
            self.callback()
    
    def cancel(self):
        self.cancel_count += 1
    
    @property
    def cancelled(self):
        return self.cancel_count > 0


class FakeTimerFactory:
    """Timer factory recording every timer the controller starts"""
    
    def __init__(self):
        self.timers = []
    
    def __call__(self, interval, callback):
        timer = FakeTimer(interval, callback)
        self.timers.append(timer)
        return timer
    
    @property
    def latest(self):
        return self.timers[-1]


@pytest.fixture
def timers():
    return FakeTimerFactory()


@pytest.fixture
def grid():
    return Grid()


@pytest.fixture
def controller(grid, timers):
    """Controller with a fake timer and a seeded random source"""
    return RoundController(grid=grid, timer_factory=timers, rng=random.Random(1234))


@pytest.fixture
def tick(controller, timers):
    """Fire the latest timer and apply the ticks on this thread"""
    def _tick(times=1):
        timers.latest.fire(times)
        return controller.process_pending()
    return _tick
