"""
Game package initialization
"""

from .board import Grid, Cell, CellStatus
from .round import RoundController
from .timer import PeriodicTimer, TickInbox, start_periodic_timer

__all__ = [
    'Grid',
    'Cell',
    'CellStatus',
    'RoundController',
    'PeriodicTimer',
    'TickInbox',
    'start_periodic_timer'
]
