"""
Unit tests for the RoundController class
Tests start/stop, tick handling and the click race
"""

import random

import pytest
from unittest.mock import Mock
from game import Grid, RoundController, CellStatus
from game.config import TICK_INTERVAL_MS


class TestRoundStart:
    """Test cases for starting a round"""
    
    def test_initial_state(self, controller):
        """Test a fresh controller is idle"""
        assert controller.is_running is False
        assert controller.active_index is None
        assert controller.interval_ms == TICK_INTERVAL_MS == 600
    
    def test_start_resets_grid(self, controller, grid, timers):
        """Test start clears every hole before the first tick"""
        grid.cell_at(3).set_mole_out()
        grid.cell_at(3).try_whack()
        grid.cell_at(5).set_mole_out()
        
        controller.start()
        
        assert controller.is_running is True
        assert controller.active_index is None
        for cell in grid.cells():
            assert cell.status == CellStatus.EMPTY
            assert cell.feedback == ""
    
    def test_start_schedules_timer(self, controller, timers):
        """Test start asks for a 600 ms periodic timer"""
        controller.start()
        
        assert len(timers.timers) == 1
        assert timers.latest.interval == pytest.approx(0.6)
        assert timers.latest.cancelled is False
    
    def test_restart_cancels_previous_timer(self, controller, timers):
        """Test a second start never leaves two timers alive"""
        controller.start()
        first = timers.latest
        
        controller.start()
        second = timers.latest
        
        assert first is not second
        assert first.cancel_count == 1
        assert second.cancelled is False
    
    def test_restart_discards_stale_ticks(self, controller, timers, grid):
        """Test ticks queued by the old timer are dropped after restart"""
        controller.start()
        old_timer = timers.latest
        old_timer.fire(3)
        
        controller.start()
        assert controller.process_pending() == 0
        assert grid.mole_out_indices() == []
        
        # The old thread may still post after being cancelled
        old_timer.fire()
        assert controller.process_pending() == 0
    
    def test_invalid_interval(self, grid, timers):
        """Test a non-positive interval is rejected"""
        with pytest.raises(ValueError):
            RoundController(grid=grid, timer_factory=timers, interval_ms=0)


class TestRoundStop:
    """Test cases for stopping a round"""
    
    def test_stop_cancels_timer(self, controller, timers):
        """Test stop cancels the running timer"""
        controller.start()
        controller.stop()
        
        assert controller.is_running is False
        assert timers.latest.cancel_count == 1
    
    def test_stop_when_idle(self, controller, timers):
        """Test stop without a round is a no-op"""
        controller.stop()
        assert controller.is_running is False
        assert timers.timers == []
    
    def test_stop_twice(self, controller, timers):
        """Test a second stop does not cancel again"""
        controller.start()
        controller.stop()
        controller.stop()
        assert timers.latest.cancel_count == 1
    
    def test_no_ticks_after_stop(self, controller, timers, grid, tick):
        """Test ticks posted before or after stop are never applied"""
        controller.start()
        tick()
        mole = controller.active_index
        
        timers.latest.fire(2)
        controller.stop()
        timers.latest.fire()
        
        assert controller.process_pending() == 0
        assert controller.active_index == mole
        assert grid.mole_out_indices() == [mole]
    
    def test_manual_tick_after_stop(self, controller, grid, tick):
        """Test on_tick does nothing once the round is over"""
        controller.start()
        tick()
        before = [(cell.status, cell.feedback) for cell in grid.cells()]
        
        controller.stop()
        controller.on_tick()
        
        assert [(cell.status, cell.feedback) for cell in grid.cells()] == before


class TestRoundTick:
    """Test cases for the mole repositioning tick"""
    
    def test_first_tick_places_mole(self, controller, grid, tick):
        """Test the first tick pops exactly one mole out"""
        controller.start()
        assert tick() == 1
        
        index = controller.active_index
        assert 0 <= index < 9
        assert grid.mole_out_indices() == [index]
    
    def test_tick_hides_previous_mole(self, grid, timers):
        """Test the previous hole goes empty before the next pop"""
        rng = Mock()
        rng.randrange.side_effect = [2, 7]
        controller = RoundController(grid=grid, timer_factory=timers, rng=rng)
        
        controller.start()
        controller.on_tick()
        grid.cell_at(2).feedback = "stale"
        controller.on_tick()
        
        assert grid.cell_at(2).status == CellStatus.EMPTY
        assert grid.cell_at(2).feedback == ""
        assert grid.cell_at(7).status == CellStatus.MOLE_OUT
        assert controller.active_index == 7
        rng.randrange.assert_called_with(9)
    
    def test_tick_may_repeat_hole(self, grid, timers):
        """Test the mole may come back up in the same hole"""
        rng = Mock()
        rng.randrange.side_effect = [4, 4]
        controller = RoundController(grid=grid, timer_factory=timers, rng=rng)
        
        controller.start()
        controller.on_tick()
        controller.on_tick()
        
        assert controller.active_index == 4
        assert grid.mole_out_indices() == [4]
    
    def test_at_most_one_mole_out(self, controller, grid, tick):
        """Test no sequence of ticks shows two moles"""
        controller.start()
        for _ in range(200):
            tick()
            assert len(grid.mole_out_indices()) == 1
            assert grid.mole_out_indices() == [controller.active_index]
    
    def test_all_holes_reachable(self, controller, tick):
        """Test uniform sampling eventually visits every hole"""
        controller.start()
        seen = set()
        for _ in range(500):
            tick()
            seen.add(controller.active_index)
        assert seen == set(range(9))
    
    def test_multiple_ticks_applied_in_order(self, controller, timers):
        """Test several queued ticks are all applied by one drain"""
        controller.start()
        timers.latest.fire(5)
        assert controller.process_pending() == 5
        assert controller.process_pending() == 0


class TestRoundClick:
    """Test cases for clicks on holes"""
    
    def test_whack_active_mole(self, controller, grid, timers, tick):
        """Test hitting the mole ends the round"""
        controller.start()
        tick()
        index = controller.active_index
        
        assert controller.on_cell_clicked(index) is True
        
        cell = grid.cell_at(index)
        assert cell.status == CellStatus.MOLE_RETREATING
        assert cell.feedback == "Ouch!!"
        assert controller.is_running is False
        assert timers.latest.cancelled is True
    
    def test_no_tick_alters_grid_after_whack(self, controller, grid, timers, tick):
        """Test the grid freezes after a whack"""
        controller.start()
        tick()
        controller.on_cell_clicked(controller.active_index)
        before = [(cell.status, cell.feedback) for cell in grid.cells()]
        
        controller.on_tick()
        timers.latest.fire()
        controller.process_pending()
        
        assert [(cell.status, cell.feedback) for cell in grid.cells()] == before
    
    def test_miss_changes_nothing(self, controller, grid, timers, tick):
        """Test clicking any other hole is ignored"""
        controller.start()
        tick()
        index = controller.active_index
        before = [(cell.status, cell.feedback) for cell in grid.cells()]
        
        for other in range(9):
            if other == index:
                continue
            assert controller.on_cell_clicked(other) is False
        
        assert [(cell.status, cell.feedback) for cell in grid.cells()] == before
        assert controller.is_running is True
        assert timers.latest.cancelled is False
    
    def test_click_before_first_tick(self, controller):
        """Test clicks before any mole appears are ignored"""
        controller.start()
        assert controller.on_cell_clicked(0) is False
        assert controller.is_running is True
    
    def test_second_whack_misses(self, controller, tick):
        """Test the retreating mole cannot be whacked again"""
        controller.start()
        tick()
        index = controller.active_index
        
        assert controller.on_cell_clicked(index) is True
        assert controller.on_cell_clicked(index) is False
    
    def test_whack_after_stop(self, controller, grid, timers, tick):
        """Test a mole frozen by Stop can still be whacked"""
        controller.start()
        tick()
        controller.stop()
        
        assert controller.on_cell_clicked(controller.active_index) is True
        assert grid.cell_at(controller.active_index).feedback == "Ouch!!"
        assert timers.latest.cancel_count == 1
    
    @pytest.mark.parametrize("index", [-1, 9, 100])
    def test_unknown_hole(self, controller, index):
        """Test clicks outside the grid are ignored"""
        controller.start()
        assert controller.on_cell_clicked(index) is False
    
    def test_click_by_position(self, controller, grid, tick):
        """Test whacking by (row, col)"""
        controller.start()
        tick()
        row, col = grid.position_of(controller.active_index)
        
        assert controller.on_cell_clicked_at(row, col) is True
        assert controller.is_running is False
    
    def test_click_by_position_out_of_bounds(self, controller):
        """Test a position outside the grid is ignored"""
        controller.start()
        assert controller.on_cell_clicked_at(3, 0) is False
        assert controller.on_cell_clicked_at(0, -1) is False


class TestRoundListener:
    """Test cases for change notifications"""
    
    def test_listener_called_on_changes(self, grid, timers):
        """Test the listener hears start, ticks, whack and stop"""
        listener = Mock()
        rng = random.Random(7)
        controller = RoundController(grid=grid, timer_factory=timers, rng=rng, listener=listener)
        
        controller.start()
        assert listener.call_count == 1
        
        timers.latest.fire()
        controller.process_pending()
        assert listener.call_count == 2
        
        controller.on_cell_clicked(controller.active_index)
        assert listener.call_count == 3
    
    def test_listener_not_called_on_miss_or_idle_stop(self, grid, timers):
        """Test ignored events do not trigger repaints"""
        listener = Mock()
        controller = RoundController(grid=grid, timer_factory=timers, listener=listener)
        
        controller.stop()
        controller.on_cell_clicked(0)
        controller.on_tick()
        listener.assert_not_called()
    
    def test_default_grid(self, timers):
        """Test the controller builds its own 3x3 grid when none is given"""
        controller = RoundController(timer_factory=timers)
        assert isinstance(controller.grid, Grid)
        assert len(controller.grid) == 9
