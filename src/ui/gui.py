"""
Whack-a-Mole GUI - tkinter Interface
3x3 grid of holes with Start/Stop buttons, forwarding clicks and timer
ticks to the round controller
"""

import tkinter as tk
from tkinter import messagebox, Menu
import logging
from typing import Callable, Dict, List, Optional

from game import Cell, CellStatus, RoundController
from .assets import load_hole_images

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Whack a Mole"
WINDOW_WIDTH = 561
WINDOW_HEIGHT = 400

# How often the Tk main loop drains ticks posted by the timer thread
POLL_INTERVAL_MS = 20


class HoleButton(tk.Frame):
    """One hole on the grid: the hole image with the feedback text on top"""

    def __init__(self, parent, index: int, images: Dict[CellStatus, tk.PhotoImage],
                 click_callback: Callable[[int], None]):
        super().__init__(parent, bd=0, highlightthickness=0)

        self.index = index
        self.images = images
        self.click_callback = click_callback

        # compound='center' draws the text over the image
        self.label = tk.Label(
            self,
            image=self.images[CellStatus.EMPTY],
            text='',
            compound='center',
            font=('Helvetica', 16, 'bold'),
            fg='red',
            bd=0,
            highlightthickness=0,
            padx=0,
            pady=0
        )
        self.label.pack(fill=tk.BOTH, expand=True)

        # React on press, not release, so a quick whack still counts
        for widget in [self, self.label]:
            widget.bind('<Button-1>', self._on_press)

    def _on_press(self, event):
        """Handle mouse button press"""
        self.click_callback(self.index)
        return "break"

    def update_display(self, cell: Cell):
        """Show the image and feedback text for the cell's state"""
        self.label.config(image=self.images[cell.status], text=cell.feedback)


class WhackAMoleGUI:
    """Main GUI class for the whack-a-mole game"""

    def __init__(self, controller: Optional[RoundController] = None):
        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        self.root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.root.resizable(False, False)

        self.controller = controller if controller is not None else RoundController()
        self.controller.listener = self._update_display

        self.hole_buttons: List[HoleButton] = []
        self.poll_id: Optional[str] = None
        self.closed = False

        # Loaded once and shared by every hole; failure aborts startup
        self.images = load_hole_images(self.root)

        self._setup_gui()
        self._update_display()

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self._poll_ticks()

    def _setup_gui(self):
        """Setup the main GUI components"""
        main_frame = tk.Frame(self.root)
        main_frame.pack(fill='both', expand=True)

        # Start/Stop bar along the bottom, centered
        button_frame = tk.Frame(main_frame)
        button_frame.pack(side='bottom', pady=5)

        start_button = tk.Button(button_frame, text="Start", command=self._on_start)
        start_button.pack(side='left', padx=5)
        stop_button = tk.Button(button_frame, text="Stop", command=self._on_stop)
        stop_button.pack(side='left', padx=5)

        # Grid of holes in the remaining space
        grid_frame = tk.Frame(main_frame)
        grid_frame.pack(expand=True)

        grid = self.controller.grid
        for cell in grid.cells():
            button = HoleButton(grid_frame, cell.index, self.images, self._on_hole_click)
            button.grid(row=cell.row, column=cell.col, padx=0, pady=0)
            self.hole_buttons.append(button)

        self._setup_menu()

    def _setup_menu(self):
        """Setup the menu bar"""
        menubar = Menu(self.root)
        self.root.config(menu=menubar)

        game_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Game", menu=game_menu)
        game_menu.add_command(label="Start", command=self._on_start)
        game_menu.add_command(label="Stop", command=self._on_stop)
        game_menu.add_separator()
        game_menu.add_command(label="Exit", command=self._on_close)

        help_menu = Menu(menubar, tearoff=0)
        menubar.add_cascade(label="Help", menu=help_menu)
        help_menu.add_command(label="How to Play", command=self._show_help)
        help_menu.add_command(label="About", command=self._show_about)

    def _on_start(self):
        self.controller.start()
        # Pick up the immediate first tick without waiting a full poll period
        self.controller.process_pending()

    def _on_stop(self):
        self.controller.stop()

    def _on_hole_click(self, index: int):
        """Handle a press on a hole"""
        # Apply any tick that landed before the click so the click sees it
        self.controller.process_pending()
        self.controller.on_cell_clicked(index)

    def _poll_ticks(self):
        """Apply timer ticks on the Tk main thread and reschedule"""
        self.controller.process_pending()
        self.poll_id = self.root.after(POLL_INTERVAL_MS, self._poll_ticks)

    def _update_display(self):
        """Update all hole widgets from the grid"""
        grid = self.controller.grid
        for button in self.hole_buttons:
            button.update_display(grid.cell_at(button.index))

    def _show_help(self):
        """Show help dialog"""
        help_text = """How to Play Whack a Mole:

Press Start and a mole begins popping out of the holes.

Click the mole while it is out of its hole to whack it.
A whack ends the round.

Press Stop at any time to freeze the mole where it is."""

        messagebox.showinfo("How to Play", help_text)

    def _show_about(self):
        """Show about dialog"""
        about_text = """Whack a Mole

Created with Python and tkinter"""

        messagebox.showinfo("About Whack a Mole", about_text)

    def _on_close(self):
        """Stop the round and tear down the window"""
        if self.closed:
            return
        self.closed = True

        self.controller.stop()
        if self.poll_id:
            self.root.after_cancel(self.poll_id)
            self.poll_id = None
        self.root.destroy()

    def run(self):
        """Start the GUI main loop"""
        logger.info("Starting %s", WINDOW_TITLE)
        self.root.mainloop()
