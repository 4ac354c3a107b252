"""
Whack a Mole - Main Entry Point
Click the mole before it moves on
"""

import logging
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from ui import AssetLoadError, WhackAMoleGUI, setup_logging

logger = logging.getLogger("ui.main")


def main():
    """Main entry point for the whack-a-mole game"""
    setup_logging()
    try:
        # Create and run the game
        game = WhackAMoleGUI()
        game.run()
    except KeyboardInterrupt:
        logger.info("Game interrupted by user")
        sys.exit(0)
    except AssetLoadError as e:
        logger.error("Cannot start without hole images: %s", e)
        logger.error("Run generate_mole_images.py to create them")
        sys.exit(1)
    except Exception as e:
        logger.exception("Error running whack a mole: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
