import io
import logging
import os
import sys

import cairosvg
import pygame

from .config import Config

logger = logging.getLogger(__name__)

PIECE_NAME_MAP = {"K": "king", "Q": "queen", "R": "rook", "B": "bishop", "N": "knight", "P": "pawn"}


class AssetManager:
    def __init__(self):
        self.sprites = {}
        self.board_image = None
        self.fonts = {}

    def load_all(self):
        """Load semua aset"""
        try:
            self._load_fonts()
            self._load_images()
            logger.info("Assets loaded successfully.")
        except (pygame.error, OSError) as e:
            logger.error("ERROR loading assets: %s", e)
            sys.exit(1)

    def _load_fonts(self):
        self.fonts['default'] = pygame.font.SysFont(Config.FONT_MAIN, 32)
        self.fonts['title'] = pygame.font.SysFont(Config.FONT_MAIN, 42, bold=True)
        self.fonts['small'] = pygame.font.SysFont(Config.FONT_MAIN, 20)

    def _load_images(self):
        size = (Config.BOARD_SIZE, Config.BOARD_SIZE)
        self.board_image = None
        if os.path.exists(Config.BOARD_IMAGE_PATH):
            self.board_image = self._load_svg(Config.BOARD_IMAGE_PATH, size)
        # Fallback klo gambar gaada atau gagal di-load: papan kotak-kotak polos
        if self.board_image is None:
            self.board_image = self._plain_board(size)

        for color in ("w", "b"):
            for p_char, p_name in PIECE_NAME_MAP.items():
                path = os.path.join(Config.ASSETS_PATH, f"{p_name}-{color}.svg")
                self.sprites[f"{color}{p_char}"] = self._load_svg(path, (Config.SQUARE_SIZE, Config.SQUARE_SIZE))

    @staticmethod
    def _plain_board(size):
        surf = pygame.Surface(size)
        for r in range(8):
            for c in range(8):
                color = Config.COLOR_LIGHT_SQUARE if (r + c) % 2 == 0 else Config.COLOR_DARK_SQUARE
                rect = (c * Config.SQUARE_SIZE, r * Config.SQUARE_SIZE, Config.SQUARE_SIZE, Config.SQUARE_SIZE)
                pygame.draw.rect(surf, color, rect)
        return surf

    def _load_svg(self, path, size):
        """Helper private untuk konversi SVG ke Surface."""
        try:
            if not os.path.exists(path):
                raise FileNotFoundError(f"File not found: {path}")

            png_bytes = cairosvg.svg2png(url=path, output_width=size[0], output_height=size[1])
            return pygame.image.load(io.BytesIO(png_bytes)).convert_alpha()
        except (OSError, ValueError, SyntaxError, pygame.error) as e:
            logger.warning("Failed to load %s: %s", path, e)
            # None -> renderer gambar huruf bidak sebagai fallback
            return None
