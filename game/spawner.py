import logging
import random

import numpy as np

import config

logger = logging.getLogger(__name__)


class TileSpawner:
    """빈칸 중 하나를 균등하게 골라 새 타일(2 또는 4)을 놓습니다."""
    def __init__(self, rng=None, four_probability=config.FOUR_PROBABILITY):
        """
        Args:
            rng (random.Random): 난수 생성기. 테스트에서는 시드를 고정한 인스턴스를 넘깁니다.
            four_probability (float): 새 타일이 4가 될 확률.
        """
        self.rng = rng if rng is not None else random.Random()
        self.four_probability = four_probability

    def get_empty_tiles(self, board):
        """비어있는 타일의 위치를 (행, 열) 튜플 리스트로 반환합니다."""
        return [(int(r), int(c)) for r, c in zip(*np.where(board == 0))]

    def spawn(self, board):
        """
        보드에 타일 하나를 추가합니다. 빈칸이 없으면 아무것도 하지 않습니다.

        Returns:
            tuple | None: (행, 열, 값) 또는 빈칸이 없을 때 None.
        """
        empty_tiles = self.get_empty_tiles(board)
        if not empty_tiles:
            logger.debug("빈칸이 없어 타일을 추가하지 않습니다.")
            return None

        pos = self.rng.choice(empty_tiles)
        value = 4 if self.rng.random() < self.four_probability else 2
        board[pos] = value
        return pos[0], pos[1], value

    def spawn_many(self, board, count):
        placements = []
        for _ in range(count):
            placed = self.spawn(board)
            if placed is None:
                break
            placements.append(placed)
        return placements
