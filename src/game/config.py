"""
Whack-a-Mole - Game Constants
Grid dimensions, tick timing and feedback text shared by the game model
"""

# Grid layout (rows, cols)
GRID_ROWS = 3
GRID_COLS = 3

# Mole repositioning period; the first tick fires immediately on start
TICK_INTERVAL_MS = 600

# Feedback shown over a hole after a successful whack
WHACK_MARKER = "Ouch!!"
