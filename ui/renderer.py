import logging

import numpy as np
import pygame

import config

logger = logging.getLogger(__name__)


class Presenter:
    """게임 화면을 그리는 모든 클래스가 상속받을 기본 클래스입니다."""
    def render(self, board):
        """보드 내용을 화면에 반영합니다."""
        raise NotImplementedError("이 메소드는 서브클래스에서 반드시 구현되어야 합니다.")

    def show_score(self, score):
        raise NotImplementedError("이 메소드는 서브클래스에서 반드시 구현되어야 합니다.")

    def show_game_over(self):
        raise NotImplementedError("이 메소드는 서브클래스에서 반드시 구현되어야 합니다.")

    def hide_game_over(self):
        raise NotImplementedError("이 메소드는 서브클래스에서 반드시 구현되어야 합니다.")


class Tile:
    def __init__(self, value, pos, tile_size):
        self.value = value
        self.pos = pos  # board 위치 (r, c)
        self.tile_size = tile_size
        self.pixel_pos = self._get_pixel_pos(pos)

    def _get_pixel_pos(self, pos):
        """보드 좌표 (r, c)를 픽셀 좌표로 변환"""
        r, c = pos
        return [c * self.tile_size, r * self.tile_size]

    def draw(self, surface):
        x, y = self.pixel_pos
        size = self.tile_size - config.TILE_GAP
        rect = pygame.Rect(x, y, size, size)
        color = config.TILE_COLORS.get(self.value, config.DEFAULT_TILE_COLOR)
        pygame.draw.rect(surface, color, rect)

        text_surface = config.TILE_FONT.render(str(self.value), True, config.TEXT_COLOR)
        text_rect = text_surface.get_rect(center=(x + self.tile_size / 2, y + self.tile_size / 2))
        surface.blit(text_surface, text_rect)


class BoardRenderer:
    def __init__(self, board_size, width):
        self.board_size = board_size
        self.width = width
        self.tile_size = width / board_size
        self.tiles = []

    def set_board(self, board):
        self.tiles = [Tile(int(val), (r, c), self.tile_size)
                      for (r, c), val in np.ndenumerate(board) if val != 0]

    def draw(self, surface, x_offset, y_offset):
        board_surface = pygame.Surface((self.width, self.width))
        board_surface.fill(config.BACKGROUND_COLOR)

        # 빈칸을 먼저 그리고 그 위에 타일을 올립니다.
        cell = self.tile_size - config.TILE_GAP
        for r in range(self.board_size):
            for c in range(self.board_size):
                pygame.draw.rect(board_surface, config.EMPTY_TILE_COLOR,
                                 (c * self.tile_size, r * self.tile_size, cell, cell))

        for tile in self.tiles:
            tile.draw(board_surface)

        surface.blit(board_surface, (x_offset, y_offset))


class GameRenderer(Presenter):
    """pygame 화면에 점수판, 보드, 게임 오버 오버레이를 그립니다."""
    def __init__(self, screen, board_size=config.BOARD_SIZE):
        if screen is None:
            raise RuntimeError("그릴 화면(Surface)을 사용할 수 없습니다.")
        if config.TILE_FONT is None:
            config.init_fonts()
        self.screen = screen
        board_width = min(screen.get_width(), screen.get_height() - config.SCORE_PANEL_HEIGHT)
        self.board_renderer = BoardRenderer(board_size, board_width)
        self.score = 0
        self.is_game_over = False

    def render(self, board):
        self.board_renderer.set_board(board)

    def show_score(self, score):
        self.score = score

    def show_game_over(self):
        self.is_game_over = True

    def hide_game_over(self):
        self.is_game_over = False

    def draw(self):
        """현재 상태로 한 프레임을 그립니다. display.flip()은 호출하는 쪽에서 합니다."""
        self.screen.fill(config.BACKGROUND_COLOR)

        score_text = config.SCORE_FONT.render(f"Score: {self.score}", True, config.TEXT_COLOR)
        score_rect = score_text.get_rect(midleft=(config.TILE_GAP * 2, config.SCORE_PANEL_HEIGHT / 2))
        self.screen.blit(score_text, score_rect)

        self.board_renderer.draw(self.screen, 0, config.SCORE_PANEL_HEIGHT)

        if self.is_game_over:
            self.draw_game_over_overlay(self.screen, 0, config.SCORE_PANEL_HEIGHT)

    def draw_game_over_overlay(self, surface, x_offset, y_offset):
        board_width = self.board_renderer.width
        overlay = pygame.Surface((board_width, board_width), pygame.SRCALPHA)
        overlay.fill((255, 255, 255, 128))
        text_surface = config.OVERLAY_FONT.render("GAME OVER", True, config.TEXT_COLOR)
        text_rect = text_surface.get_rect(center=(board_width / 2, board_width / 2))
        overlay.blit(text_surface, text_rect)
        surface.blit(overlay, (x_offset, y_offset))


class ConsoleRenderer(Presenter):
    """화면 없이 로그로 보드와 점수를 출력합니다 (헤드리스 모드용)."""
    def __init__(self):
        self.board = None
        self.score = 0
        self.is_game_over = False

    def render(self, board):
        self.board = np.copy(board)
        logger.info("보드:\n%s", self.format_board(self.board))

    def show_score(self, score):
        self.score = score
        logger.info("Score: %d", score)

    def show_game_over(self):
        if not self.is_game_over:
            logger.info("GAME OVER")
        self.is_game_over = True

    def hide_game_over(self):
        self.is_game_over = False

    @staticmethod
    def format_board(board):
        width = max(4, len(str(int(np.max(board)))) + 1)
        return "\n".join("".join(f"{('.' if v == 0 else int(v)):>{width}}" for v in row)
                         for row in board)
