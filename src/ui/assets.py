"""
Whack-a-Mole - Asset Paths & Image Loading
Resolves the assets directory and loads the three hole images shared by
every hole widget. A missing or unreadable image is fatal.
"""

import logging
import os
import sys
import tkinter as tk
from pathlib import Path
from typing import Dict, Optional

from game import CellStatus

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # assets.py lives in src/ui/, the project root is two levels up
    project_root: Path = Path(__file__).resolve().parent.parent.parent
    return os.path.join(str(project_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")

# One image per hole status
IMAGE_FILES: Dict[CellStatus, str] = {
    CellStatus.EMPTY: "empty.png",
    CellStatus.MOLE_OUT: "out.png",
    CellStatus.MOLE_RETREATING: "in.png",
}


class AssetLoadError(RuntimeError):
    """Raised when a hole image cannot be found or decoded"""


def load_hole_images(master: Optional[tk.Misc] = None,
                     assets_dir: str = ASSETS_PATH) -> Dict[CellStatus, tk.PhotoImage]:
    """
    Load the empty/out/in images.

    Args:
        master: Tk widget owning the images (defaults to the default root)
        assets_dir: Directory containing the image files

    Returns:
        Mapping from hole status to its image

    Raises:
        AssetLoadError: if any image is missing or unreadable
    """
    paths = {status: os.path.join(assets_dir, filename) for status, filename in IMAGE_FILES.items()}
    missing = [path for path in paths.values() if not os.path.isfile(path)]
    if missing:
        raise AssetLoadError(f"Image file not found: {', '.join(missing)}")

    images: Dict[CellStatus, tk.PhotoImage] = {}
    for status, image_path in paths.items():
        try:
            images[status] = tk.PhotoImage(master=master, file=image_path)
        except tk.TclError as e:
            raise AssetLoadError(f"Error loading image {image_path}: {e}") from e

        logger.info("Loaded hole image: %s", os.path.basename(image_path))

    return images
