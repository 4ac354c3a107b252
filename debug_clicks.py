#!/usr/bin/env python3
"""
Debug script to test hole click handling
"""

import logging
import tkinter as tk
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from game import Grid
from ui import HoleButton, load_hole_images, setup_logging

logger = logging.getLogger("ui.debug_clicks")


def create_test_gui():
    """Create a bare 3x3 grid of holes and log every press"""
    setup_logging(logging.DEBUG)

    root = tk.Tk()
    root.title("Click Debug Test")
    images = load_hole_images(root)
    grid = Grid()

    def debug_click_callback(index):
        row, col = grid.position_of(index)
        logger.debug("Press on hole %d (%d, %d)", index, row, col)

    for cell in grid.cells():
        button = HoleButton(root, cell.index, images, debug_click_callback)
        button.grid(row=cell.row, column=cell.col, padx=1, pady=1)

    logger.info("Debug GUI created. Click the holes; each press is logged with its index.")
    root.mainloop()


if __name__ == "__main__":
    create_test_gui()
