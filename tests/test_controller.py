import numpy as np
import pygame

from game.grid import Direction, MoveResult
from ui.controller import GameController
from ui.renderer import ConsoleRenderer, Presenter


class RecordingPresenter(Presenter):
    def __init__(self):
        self.calls = []

    def render(self, board):
        self.calls.append(("render", board.copy()))

    def show_score(self, score):
        self.calls.append(("score", score))

    def show_game_over(self):
        self.calls.append(("game_over",))

    def hide_game_over(self):
        self.calls.append(("hide_game_over",))

    def names(self):
        return [call[0] for call in self.calls]


def make_controller(game, board=None, score=0):
    if board is not None:
        game.set_board(board, score=score)
    presenter = RecordingPresenter()
    controller = GameController(game, presenter)
    return controller, presenter


def test_initial_draw(game):
    _, presenter = make_controller(game)
    assert presenter.names() == ["render", "score"]


def test_unknown_key_is_ignored(game):
    controller, presenter = make_controller(game)
    before = game.board.copy()
    presenter.calls.clear()
    assert controller.handle_key(pygame.K_q) is False
    assert presenter.calls == []
    np.testing.assert_array_equal(game.board, before)


def test_arrow_key_moves_and_redraws(game):
    controller, presenter = make_controller(
        game, [[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
    presenter.calls.clear()
    assert controller.handle_key(pygame.K_LEFT) is True
    assert presenter.names() == ["render", "score"]
    assert presenter.calls[1] == ("score", 4)
    assert controller.moves == 1


def test_wasd_keys(game):
    controller, _ = make_controller(
        game, [[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [2, 0, 0, 0]])
    assert controller.handle_key(pygame.K_w) is True
    assert game.board[0, 0] == 2


def test_unchanged_move_does_not_redraw(game):
    controller, presenter = make_controller(
        game, [[2, 4, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
    presenter.calls.clear()
    assert controller.handle_direction(Direction.LEFT) == MoveResult(False, 0)
    assert presenter.calls == []


def test_game_over_is_shown(game, checkerboard):
    controller, presenter = make_controller(game, checkerboard)
    assert presenter.names() == ["render", "score", "game_over"]
    presenter.calls.clear()
    assert controller.handle_key(pygame.K_UP) is False
    assert presenter.calls == []


def test_move_into_game_over(game):
    # 왼쪽으로 밀면 마지막 빈칸에 새 타일이 들어가고 더 이상 움직일 수 없게 됩니다.
    board = np.array([
        [2, 4, 2, 4],
        [4, 2, 4, 2],
        [2, 4, 2, 8],
        [0, 8, 16, 32],
    ])
    controller, presenter = make_controller(game, board)
    presenter.calls.clear()
    result = controller.handle_direction(Direction.LEFT)
    assert result == MoveResult(True, 0)
    np.testing.assert_array_equal(game.board[3, :3], [8, 16, 32])
    assert game.board[3, 3] in (2, 4)
    assert presenter.names() == ["render", "score", "game_over"]
    assert game.game_over


def test_restart(game, checkerboard):
    controller, presenter = make_controller(game, checkerboard, score=64)
    presenter.calls.clear()
    controller.restart()
    assert presenter.names() == ["hide_game_over", "render", "score"]
    assert presenter.calls[-1] == ("score", 0)
    assert np.count_nonzero(game.board) == 2
    assert controller.moves == 0


def test_console_renderer(game, checkerboard):
    presenter = ConsoleRenderer()
    game.set_board(checkerboard, score=8)
    GameController(game, presenter)
    np.testing.assert_array_equal(presenter.board, checkerboard)
    assert presenter.score == 8
    assert presenter.is_game_over
    lines = ConsoleRenderer.format_board(checkerboard).splitlines()
    assert len(lines) == 4
    assert lines[0].split() == ["2", "4", "2", "4"]
