"""
UI package initialization
"""

from .assets import AssetLoadError, load_hole_images
from .gui import WhackAMoleGUI, HoleButton
from .logging_config import setup_logging

__all__ = ['WhackAMoleGUI', 'HoleButton', 'AssetLoadError', 'load_hole_images', 'setup_logging']
