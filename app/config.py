# app/config.py
import logging
import os

class Config:
    # Screen settings
    WIDTH = 1024
    HEIGHT = 768
    FPS = 30

    # Board settings
    BOARD_SIZE = 512
    SQUARE_SIZE = BOARD_SIZE // 8

    # Paths (bisa di-override lewat env)
    ASSETS_PATH = os.environ.get("CHESS_ASSETS_PATH", os.path.join("assets", "p1"))
    BOARD_IMAGE_PATH = os.path.join("assets", "boards", "rect-8x8.svg")

    # Colors
    COLOR_WHITE = (255, 255, 255)
    COLOR_BLACK = (0, 0, 0)
    COLOR_LIGHT_SQUARE = (240, 217, 181)
    COLOR_DARK_SQUARE = (181, 136, 99)
    COLOR_VALID_MOVE = (144, 238, 144)
    COLOR_CAPTURE = (255, 140, 0)
    COLOR_SELECTED = (255, 0, 0)

    # Fonts
    FONT_MAIN = "DejaVu Sans"

    # Logging
    LOG_LEVEL = os.environ.get("CHESS_LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level=None):
    """basicConfig sekali di entry point; library cuma pakai getLogger."""
    level = level or Config.LOG_LEVEL
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.WARNING), format=Config.LOG_FORMAT)
