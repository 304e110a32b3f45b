import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pygame
import pytest

import config
from ui.renderer import GameRenderer


def tile_pixel(surface, r, c, tile_size=200):
    # 글자와 겹치지 않도록 타일의 왼쪽 위 모서리 근처를 읽습니다.
    return tuple(surface.get_at((c * tile_size + 10, config.SCORE_PANEL_HEIGHT + r * tile_size + 10)))[:3]


@pytest.fixture
def screen():
    return pygame.Surface((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))


def test_missing_surface_is_fatal():
    with pytest.raises(RuntimeError):
        GameRenderer(None)


def test_draw_board_and_score(screen):
    renderer = GameRenderer(screen)
    board = np.zeros((4, 4), dtype=int)
    board[0, 0] = 2
    board[3, 3] = 4096
    renderer.render(board)
    renderer.show_score(36)
    renderer.draw()

    assert tile_pixel(screen, 0, 0) == config.TILE_COLORS[2]
    assert tile_pixel(screen, 3, 3) == config.DEFAULT_TILE_COLOR
    assert tile_pixel(screen, 1, 1) == config.EMPTY_TILE_COLOR
    assert tuple(screen.get_at((config.SCREEN_WIDTH - 5, 5)))[:3] == config.BACKGROUND_COLOR


def test_draw_game_over_overlay(screen, checkerboard):
    renderer = GameRenderer(screen)
    renderer.render(checkerboard)
    renderer.draw()
    plain = tile_pixel(screen, 0, 0)
    assert plain == config.TILE_COLORS[2]

    renderer.show_game_over()
    renderer.draw()
    covered = tile_pixel(screen, 0, 0)
    assert covered != plain
    # 반투명 흰색 오버레이라서 원래 색보다 밝아집니다.
    assert all(after >= before for after, before in zip(covered, plain))

    renderer.hide_game_over()
    renderer.draw()
    assert tile_pixel(screen, 0, 0) == plain
