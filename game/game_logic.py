import logging
import random

import numpy as np

import config
from game.grid import (Direction, GameStatus, MoveResult, create_empty_grid,
                       validate_grid)
from game.spawner import TileSpawner

logger = logging.getLogger(__name__)


def reduce_line(line):
    """
    한 줄(행 또는 열)을 인덱스 0 쪽으로 밀고 합칩니다.

    같은 값이 이웃하면 한 번만 합쳐지며, 합쳐진 타일은 같은 이동에서 다시 합쳐지지 않습니다.
    예: [2, 2, 2, 2] -> [4, 4, 0, 0]

    Returns:
        (np.ndarray, int): 길이가 같은 새 줄, 이번 줄에서 얻은 점수.
    """
    line = np.asarray(line)
    row = line[line != 0]
    new_row = []
    score = 0
    j = 0
    while j < len(row):
        if j + 1 < len(row) and row[j] == row[j+1]:
            new_value = int(row[j]) * 2
            new_row.append(new_value)
            score += new_value
            j += 2
        else:
            new_row.append(int(row[j]))
            j += 1
    reduced = np.zeros(len(line), dtype=int)
    reduced[:len(new_row)] = new_row
    return reduced, score


def line_indices(size, direction):
    """
    방향별로 보드를 줄 단위로 읽는 순서를 만듭니다.

    각 줄은 (rows, cols) 인덱스 배열 쌍이며, 타일이 밀려가는 쪽이 0번째입니다.
    우/하 방향은 인덱스를 뒤집어 두었기 때문에 같은 reduce_line을 그대로 씁니다.
    """
    direction = Direction(direction)
    forward = np.arange(size)
    backward = forward[::-1]
    lines = []
    for idx in range(size):
        fixed = np.full(size, idx)
        if direction == Direction.UP:  # 위 -> 아래
            lines.append((forward, fixed))
        elif direction == Direction.DOWN:  # 아래 -> 위
            lines.append((backward, fixed))
        elif direction == Direction.LEFT:  # 왼쪽 -> 오른쪽
            lines.append((fixed, forward))
        else:  # 오른쪽 -> 왼쪽
            lines.append((fixed, backward))
    return lines


def apply_move(board, direction):
    """보드를 주어진 방향으로 움직입니다 (제자리 수정). 새 타일은 추가하지 않습니다."""
    changed = False
    score_delta = 0
    for rows, cols in line_indices(board.shape[0], direction):
        original = board[rows, cols]
        reduced, score = reduce_line(original)
        if not np.array_equal(original, reduced):
            board[rows, cols] = reduced
            changed = True
        score_delta += score
    return MoveResult(changed, score_delta)


def is_terminal(board):
    """빈칸이 없고 상하좌우로 같은 값이 붙어있지 않으면 True (더 이상 움직일 수 없음)."""
    if np.any(board == 0):
        return False
    if np.any(board[:, :-1] == board[:, 1:]):
        return False
    if np.any(board[:-1, :] == board[1:, :]):
        return False
    return True


def get_status(board):
    return GameStatus.OVER if is_terminal(board) else GameStatus.ONGOING


class Game2048:
    def __init__(self, size=config.BOARD_SIZE, rng=None, seed=None, spawner=None):
        """
        Args:
            size (int): 보드 한 변의 길이.
            rng (random.Random): 타일 생성에 쓸 난수 생성기.
            seed (int): rng가 없을 때 사용할 시드.
            spawner (TileSpawner): 직접 만든 스포너. 주어지면 rng/seed는 무시됩니다.
        """
        self.size = int(size)
        if spawner is None:
            if rng is None and seed is not None:
                rng = random.Random(seed)
            spawner = TileSpawner(rng=rng)
        self.spawner = spawner
        self.reset()

    def reset(self):
        """게임을 초기 상태로 리셋합니다."""
        self.board = create_empty_grid(self.size)
        self.score = 0
        self.spawner.spawn_many(self.board, config.INITIAL_TILES)
        logger.debug("새 게임 시작:\n%s", self.board)

    def set_board(self, board, score=0):
        """외부 보드를 불러옵니다. 크기는 생성 시의 크기와 같아야 합니다."""
        board = validate_grid(board)
        if board.shape != (self.size, self.size):
            raise ValueError(f"보드 크기가 맞지 않습니다: {board.shape} != {(self.size, self.size)}")
        if score < 0:
            raise ValueError(f"점수는 음수일 수 없습니다: {score}")
        self.board = board
        self.score = int(score)

    @property
    def status(self):
        return get_status(self.board)

    @property
    def game_over(self):
        return is_terminal(self.board)

    def move(self, direction):
        """
        주어진 방향으로 보드를 움직이고, 변화가 있었다면 새 타일을 추가합니다.

        Returns:
            MoveResult: (changed, score_delta)
        """
        direction = Direction.from_value(direction)
        result = apply_move(self.board, direction)
        self.score += result.score_delta

        if result.changed:
            placed = self.spawner.spawn(self.board)
            logger.debug("%s: +%d점, 새 타일 %s", direction.name, result.score_delta, placed)
        else:
            logger.debug("%s: 변화 없음", direction.name)
        return result

    def simulate(self, direction):
        """게임 상태를 바꾸지 않고 이동 결과만 계산합니다 (새 타일 없음)."""
        board = np.copy(self.board)
        result = apply_move(board, Direction.from_value(direction))
        return board, result

    def get_available_moves(self):
        """보드를 바꿀 수 있는 방향 목록을 반환합니다."""
        return [d for d in Direction if self.simulate(d)[1].changed]
