import logging

import pygame

from game.grid import Direction, GameStatus, MoveResult

logger = logging.getLogger(__name__)

# 방향키와 WASD만 처리하고 나머지 키는 무시합니다.
KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}


class GameController:
    """입력 -> 이동 -> 새 타일 -> 종료 판정 -> 다시 그리기 한 사이클을 처리합니다."""
    def __init__(self, game, presenter):
        self.game = game
        self.presenter = presenter
        self.moves = 0
        self._announced_over = False
        self.redraw()

    def handle_key(self, key):
        """키 입력을 처리합니다. 방향키가 아니면 아무것도 하지 않고 False를 반환합니다."""
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        return self.handle_direction(direction).changed

    def handle_direction(self, direction):
        if self.game.status == GameStatus.OVER:
            return MoveResult(False, 0)

        result = self.game.move(direction)
        if result.changed:
            self.moves += 1
            self.redraw()
        return result

    def restart(self):
        """점수와 보드를 초기화하고 새 게임을 시작합니다."""
        logger.info("재시작 (이전 점수: %d, 이동 횟수: %d)", self.game.score, self.moves)
        self.game.reset()
        self.moves = 0
        self._announced_over = False
        self.presenter.hide_game_over()
        self.redraw()

    def redraw(self):
        self.presenter.render(self.game.board)
        self.presenter.show_score(self.game.score)
        if self.game.status == GameStatus.OVER:
            if not self._announced_over:
                logger.info("게임 오버! 점수: %d, 최고 타일: %d, 이동 횟수: %d",
                            self.game.score, int(self.game.board.max()), self.moves)
                self._announced_over = True
            self.presenter.show_game_over()
