# app/game.py
import logging
import sys

import pygame

from .config import Config, setup_logging
from .assets import AssetManager
from chessrules import ChessBoard, PieceType, Rules, TeamColor
from render.renderer import Renderer, board_origin, view_to_position

logger = logging.getLogger(__name__)


class ExplorerState:
    """
    State klik explorer, dipisah dari pygame biar bisa dites.
    - klik bidak -> select + hitung move
    - klik kotak yang di-highlight -> apply move (promosi default queen)
    - klik lain -> batal select
    """
    def __init__(self, board=None):
        self.board = board if board is not None else ChessBoard(setup=True)
        self.selected = None
        self.valid_moves = []
        self.move_log = []
        self._counts = None

    def reset(self):
        self.board.reset_board()
        self.clear_selection()
        self.move_log = []
        self._counts = None

    def clear_selection(self):
        self.selected = None
        self.valid_moves = []

    def move_counts(self):
        # dihitung ulang hanya setelah papan berubah (move / reset)
        if self._counts is None:
            self._counts = {color: len(Rules.team_moves(self.board, color)) for color in TeamColor}
        return self._counts

    def click(self, pos):
        if self.selected is not None:
            candidates = [mv for mv in self.valid_moves if mv.end == pos]
            if candidates:
                move = next((mv for mv in candidates if mv.promotion in (None, PieceType.QUEEN)), candidates[0])
                captured = self.board.apply_move(move)
                self.move_log.append(f"{move.uci()}{' x' if captured else ''}")
                logger.info("moved %s", move.uci())
                self._counts = None
                self.clear_selection()
                return move

            if pos == self.selected:
                self.clear_selection()
                return None

        if self.board.get_piece(pos) is not None:
            self.selected = pos
            self.valid_moves = sorted(Rules.piece_moves(self.board, pos), key=lambda mv: mv.uci())
        else:
            self.clear_selection()
        return None


class Game:
    def __init__(self):
        pygame.init()
        self.screen = pygame.display.set_mode((Config.WIDTH, Config.HEIGHT))
        pygame.display.set_caption("Chess Move Explorer")

        self.assets = AssetManager()
        self.assets.load_all()

        self.renderer = Renderer(self.screen, self.assets)
        self.state = ExplorerState()
        self.flipped = False

    def start(self):
        clock = pygame.time.Clock()

        while True:
            clock.tick(Config.FPS)

            self.renderer.draw_game(
                self.state.board,
                selected=self.state.selected,
                valid_moves=self.state.valid_moves,
                flipped=self.flipped,
                move_log=self.state.move_log,
                move_count=self.state.move_counts(),
            )

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    pygame.quit(); sys.exit()

                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        pygame.quit(); sys.exit()
                    elif event.key == pygame.K_r:
                        self.state.reset()
                    elif event.key == pygame.K_f:
                        self.flipped = not self.flipped

                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

    def _handle_click(self, pos):
        x_off, y_off = board_origin()
        mx, my = pos
        if mx < x_off or my < y_off:
            return
        view_c = (mx - x_off) // Config.SQUARE_SIZE
        view_r = (my - y_off) // Config.SQUARE_SIZE
        if not (0 <= view_r < 8 and 0 <= view_c < 8):
            return

        self.state.click(view_to_position(view_r, view_c, self.flipped))


def main():
    setup_logging()
    Game().start()


if __name__ == "__main__":
    main()
