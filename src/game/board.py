"""
Whack-a-Mole - Grid and Cell Model
Holds the 3x3 grid of holes and the per-hole mole state machine
"""

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .config import GRID_ROWS, GRID_COLS, WHACK_MARKER


class CellStatus(Enum):
    """Enumeration for what a hole is currently showing"""
    EMPTY = "empty"
    MOLE_OUT = "out"
    MOLE_RETREATING = "in"


class Cell:
    """Represents a single hole on the grid"""
    
    def __init__(self, row: int, col: int, index: int):
        self.row = row
        self.col = col
        self.index = index
        self.status = CellStatus.EMPTY
        self.feedback = ""
    
    def set_empty(self):
        """Show an empty hole and drop any feedback text"""
        self.status = CellStatus.EMPTY
        self.feedback = ""
    
    def set_mole_out(self):
        """Pop the mole out of this hole"""
        self.status = CellStatus.MOLE_OUT
    
    def set_mole_retreating(self):
        """Show the mole going back into the hole"""
        self.status = CellStatus.MOLE_RETREATING
    
    def try_whack(self) -> bool:
        """
        Whack this hole
        Returns True and sends the mole back in if it was out, otherwise
        leaves the hole untouched and returns False
        """
        if self.status != CellStatus.MOLE_OUT:
            return False
        
        self.feedback = WHACK_MARKER
        self.set_mole_retreating()
        return True
    
    def clear_feedback(self):
        """Clear feedback text without touching the mole"""
        self.feedback = ""
    
    # Short names
    hide = set_empty
    pop_out = set_mole_out
    pop_in = set_mole_retreating
    whack = try_whack
    clear_text = clear_feedback
    
    def is_empty(self) -> bool:
        """Check if the hole is empty"""
        return self.status == CellStatus.EMPTY
    
    def is_mole_out(self) -> bool:
        """Check if the mole is out of this hole"""
        return self.status == CellStatus.MOLE_OUT
    
    def is_retreating(self) -> bool:
        """Check if the mole is going back into this hole"""
        return self.status == CellStatus.MOLE_RETREATING
    
    def __repr__(self) -> str:
        return f"Cell(row={self.row}, col={self.col}, status={self.status.name})"


class Grid:
    """Fixed grid of holes addressed by linear index or (row, col)"""
    
    def __init__(self, rows: int = GRID_ROWS, cols: int = GRID_COLS):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid needs at least one row and column, got {rows}x{cols}")
        
        self.rows = rows
        self.cols = cols
        self.board: List[List[Cell]] = []
        
        for row in range(rows):
            board_row = []
            for col in range(cols):
                board_row.append(Cell(row, col, self.index_of(row, col)))
            self.board.append(board_row)
    
    def __len__(self) -> int:
        return self.rows * self.cols
    
    def index_of(self, row: int, col: int) -> int:
        """Convert a (row, col) position to a linear index"""
        return row * self.cols + col
    
    def position_of(self, index: int) -> Tuple[int, int]:
        """Convert a linear index to a (row, col) position"""
        return divmod(index, self.cols)
    
    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at specified position"""
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.board[row][col]
        return None
    
    def cell_at(self, index: int) -> Optional[Cell]:
        """Get cell at specified linear index"""
        if 0 <= index < len(self):
            row, col = self.position_of(index)
            return self.board[row][col]
        return None
    
    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in index order"""
        for board_row in self.board:
            yield from board_row
    
    def clear_all(self):
        """Clear feedback text and hide every mole"""
        for cell in self.cells():
            cell.clear_feedback()
            cell.set_empty()
    
    def mole_out_indices(self) -> List[int]:
        """Indices of the holes currently showing the mole"""
        return [cell.index for cell in self.cells() if cell.is_mole_out()]
