"""Pygame-based board renderer and input helper."""

import time


class WindowClosed(RuntimeError):
    """Raised from wait_for_move when the user closes the window."""


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (40, 30, 20)
    COLOR_WOOD = (209, 179, 135)
    COLOR_GRID = (60, 40, 20)
    COLOR_TEXT = (230, 230, 230)
    COLOR_RED = (200, 0, 0)
    COLOR_BLACK_STONE = (20, 20, 20)
    COLOR_WHITE_STONE = (240, 240, 240)
    COLOR_WIN = (255, 215, 0)
    COLOR_ALERT = (180, 40, 40)

    PANEL_HEIGHT = 80
    ALERT_SECONDS = 1.5

    def __init__(self, board_size, window_size=640):
        import pygame

        self.board_size = board_size
        self.window_size = window_size
        self._pygame = pygame

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size))
        pygame.display.set_caption("Gomoku")

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 36)

        # The board sits below the info panel
        self.board_display_size = window_size - self.PANEL_HEIGHT
        self.margin_px = self.board_display_size / (2 * board_size)
        self.tile_size = (self.board_display_size - 2 * self.margin_px) / (board_size - 1)
        self.board_origin = ((window_size - self.board_display_size) // 2, self.PANEL_HEIGHT)
        self.board_surface = self._build_board_surface(self.board_display_size)

        self._alert_text = None
        self._alert_until = 0.0
        self._alert_move = None

    def _grid_origin(self):
        ox, oy = self.board_origin
        return ox + self.margin_px, oy + self.margin_px

    def _cell_center(self, row, col):
        gx, gy = self._grid_origin()
        return gx + col * self.tile_size, gy + row * self.tile_size

    def _build_board_surface(self, size_px):
        pygame = self._pygame
        surf = pygame.Surface((size_px, size_px)).convert()
        surf.fill(self.COLOR_WOOD)
        grid_start = self.margin_px
        grid_end = size_px - self.margin_px
        for i in range(self.board_size):
            offset = grid_start + i * self.tile_size
            pygame.draw.line(surf, self.COLOR_GRID, (grid_start, offset), (grid_end, offset), 1)
            pygame.draw.line(surf, self.COLOR_GRID, (offset, grid_start), (offset, grid_end), 1)
        return surf

    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_stones(self, cells):
        radius = self.tile_size * 0.45
        for row, values in enumerate(cells):
            for col, value in enumerate(values):
                if value == 0:
                    continue
                color = self.COLOR_BLACK_STONE if value == 1 else self.COLOR_WHITE_STONE
                self._pygame.draw.circle(self.screen, color, self._cell_center(row, col), radius)

    def _draw_last_move_marker(self, last_move):
        if not last_move:
            return
        # A simple red dot in the center of the stone
        self._pygame.draw.circle(self.screen, self.COLOR_RED, self._cell_center(*last_move), self.tile_size * 0.2)

    def _draw_win_line(self, win_line):
        for row, col in win_line or ():
            self._pygame.draw.circle(self.screen, self.COLOR_WIN, self._cell_center(row, col), self.tile_size * 0.48, 3)

    def _draw_info_panel(self, status):
        panel_rect = self._pygame.Rect(0, 0, self.window_size, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_GRID, panel_rect)
        self._draw_text(status, self.font_medium, self.COLOR_TEXT, (self.window_size / 2, self.PANEL_HEIGHT / 2))

    def _draw_alert(self):
        if not self._alert_text or time.time() > self._alert_until:
            return
        center = (self.window_size / 2, self.PANEL_HEIGHT + self.board_display_size / 2)
        self._draw_text(self._alert_text, self.font_large, self.COLOR_ALERT, center)

    def render(self, session):
        if session.last_alert and session.last_move != self._alert_move:
            self._alert_text = f"{session.last_alert} in a row"
            self._alert_until = time.time() + self.ALERT_SECONDS
            self._alert_move = session.last_move

        self.screen.fill(self.COLOR_BACKGROUND)
        self.screen.blit(self.board_surface, self.board_origin)

        self._draw_stones(session.snapshot())
        self._draw_win_line(session.win_line)
        self._draw_last_move_marker(session.last_move)
        self._draw_info_panel(session.status_text())
        self._draw_alert()

        self._pygame.display.flip()

    def _get_coords_from_mouse(self, pos):
        mx, my = pos
        gx, gy = self._grid_origin()
        col = int(round((mx - gx) / self.tile_size))
        row = int(round((my - gy) / self.tile_size))
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return row, col
        return None

    def wait_for_move(self, session):
        pygame = self._pygame
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise WindowClosed("Window closed")
                if event.type == pygame.MOUSEBUTTONDOWN:
                    coords = self._get_coords_from_mouse(event.pos)
                    if coords:
                        return coords

            self.render(session)
            pygame.time.delay(10)

    def close(self):
        self._pygame.quit()
