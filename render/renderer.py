# render/renderer.py
import pygame

from app.config import Config
from chessrules import ChessPosition, TeamColor


def position_to_view(pos, flipped=False):
    """ChessPosition (row 1 = bawah) -> (view_r, view_c) dengan view_r=0 di atas layar."""
    view_r = 8 - pos.row
    view_c = pos.column - 1
    if flipped:
        return 7 - view_r, 7 - view_c
    return view_r, view_c


def view_to_position(view_r, view_c, flipped=False):
    if flipped:
        view_r, view_c = 7 - view_r, 7 - view_c
    return ChessPosition(8 - view_r, view_c + 1)


def board_origin():
    x_off = (Config.WIDTH - Config.BOARD_SIZE) // 2
    y_off = (Config.HEIGHT - Config.BOARD_SIZE) // 2
    return x_off, y_off


class Renderer:
    def __init__(self, screen, assets):
        self.screen = screen
        self.assets = assets

    def draw_game(self, board_obj, selected=None, valid_moves=None, flipped=False, move_log=None, move_count=None):
        if valid_moves is None:
            valid_moves = []

        self.screen.fill((50, 50, 50))
        self.screen.blit(self.assets.board_image, board_origin())

        # Highlight valid moves (capture beda warna)
        for mv in valid_moves:
            target = board_obj.get_piece(mv.end)
            color = Config.COLOR_CAPTURE if target is not None else Config.COLOR_VALID_MOVE
            self._draw_rect(mv.end, color, alpha=100, flipped=flipped)

        if selected is not None:
            self._draw_rect(selected, Config.COLOR_SELECTED, width=4, flipped=flipped)

        self._draw_pieces(board_obj, flipped=flipped)
        self._draw_hud(selected, valid_moves, flipped, move_count)

        if move_log:
            self._draw_move_log(move_log)

        pygame.display.update()

    def _draw_hud(self, selected, valid_moves, flipped, move_count):
        """Panel instruksi kecil di kiri atas."""
        font = self.assets.fonts.get("small") or self.assets.fonts["default"]

        lines = ["Click a piece to see its moves", "R: reset   F: flip   ESC: quit"]
        if selected is not None:
            lines.append(f"Selected {selected.name}: {len(valid_moves)} moves")
        if move_count is not None:
            for color, n in move_count.items():
                lines.append(f"{'White' if color is TeamColor.WHITE else 'Black'} total: {n}")
        if flipped:
            lines.append("View flipped")

        pad = 10
        rendered = [font.render(t, True, Config.COLOR_WHITE) for t in lines]
        w = max(s.get_width() for s in rendered) + pad * 2
        h = sum(s.get_height() + 4 for s in rendered) + pad * 2

        # Panel bg transparan
        panel = pygame.Surface((w, h), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 170))
        self.screen.blit(panel, (20, 20))

        y = 20 + pad
        for surf in rendered:
            self.screen.blit(surf, (20 + pad, y))
            y += surf.get_height() + 4

    def _square_xy(self, pos, flipped):
        x_off, y_off = board_origin()
        view_r, view_c = position_to_view(pos, flipped)
        return x_off + view_c * Config.SQUARE_SIZE, y_off + view_r * Config.SQUARE_SIZE

    def _draw_pieces(self, board_obj, flipped=False):
        font = self.assets.fonts.get("default")

        for pos, p in board_obj.pieces():
            x, y = self._square_xy(pos, flipped)
            img = self.assets.sprites.get(p.code)
            if img:
                self.screen.blit(img, (x, y))
            else:
                # gaada sprite, pakai huruf
                color = Config.COLOR_WHITE if p.color is TeamColor.WHITE else Config.COLOR_BLACK
                txt = font.render(p.type.letter, True, color)
                self.screen.blit(txt, (x + (Config.SQUARE_SIZE - txt.get_width()) // 2,
                                       y + (Config.SQUARE_SIZE - txt.get_height()) // 2))

    def _draw_rect(self, pos, color, alpha=255, width=0, flipped=False):
        x, y = self._square_xy(pos, flipped)
        rect = (x, y, Config.SQUARE_SIZE, Config.SQUARE_SIZE)

        if alpha < 255:
            s = pygame.Surface((Config.SQUARE_SIZE, Config.SQUARE_SIZE), pygame.SRCALPHA)
            s.set_alpha(alpha)
            s.fill(color)
            self.screen.blit(s, (x, y))
        else:
            pygame.draw.rect(self.screen, color, rect, width)

    def _draw_move_log(self, log):
        pygame.draw.rect(self.screen, (30, 30, 30), (Config.WIDTH - 200, 50, 180, 140))
        font = self.assets.fonts.get("small") or self.assets.fonts["default"]
        title = font.render("Log", True, Config.COLOR_WHITE)
        self.screen.blit(title, (Config.WIDTH - 190, 55))
        for i, txt in enumerate(log[-4:]):
            surf = font.render(str(txt), True, (200, 200, 200))
            self.screen.blit(surf, (Config.WIDTH - 190, 85 + i * 25))
