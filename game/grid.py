from collections import namedtuple
from enum import Enum, IntEnum

import numpy as np


class Direction(IntEnum):
    """이동 방향. 0:상, 1:하, 2:좌, 3:우"""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3

    @classmethod
    def from_value(cls, value):
        """정수, 이름 문자열('left', 'L' 등) 또는 Direction을 Direction으로 변환합니다."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper()
            for member in cls:
                if name in (member.name, member.name[0]):
                    return member
            raise ValueError(f"알 수 없는 방향입니다: {value!r}")
        # bool은 int의 하위 타입이지만 방향으로 받지 않습니다.
        if isinstance(value, (bool, np.bool_)):
            raise ValueError(f"알 수 없는 방향입니다: {value!r}")
        if isinstance(value, (float, np.floating)):
            if not float(value).is_integer():
                raise ValueError(f"알 수 없는 방향입니다: {value!r}")
            value = int(value)
        if not isinstance(value, (int, np.integer)):
            raise ValueError(f"알 수 없는 방향입니다: {value!r}")
        try:
            return cls(int(value))
        except ValueError:
            raise ValueError(f"알 수 없는 방향입니다: {value!r}") from None


class GameStatus(Enum):
    ONGOING = "ongoing"
    OVER = "over"


# 한 번의 이동 결과. 저장되지 않고 호출자가 바로 사용합니다.
MoveResult = namedtuple("MoveResult", ["changed", "score_delta"])


def create_empty_grid(size):
    """size x size 크기의 빈 보드(모두 0)를 만듭니다."""
    if int(size) < 1:
        raise ValueError(f"보드 크기는 1 이상이어야 합니다: {size}")
    return np.zeros((int(size), int(size)), dtype=int)


def is_valid_tile(value):
    """0 또는 2 이상의 2의 거듭제곱이면 True."""
    value = int(value)
    return value == 0 or (value >= 2 and value & (value - 1) == 0)


def validate_grid(board):
    """
    외부에서 주어진 보드가 불변식을 만족하는지 검사하고 int 배열로 반환합니다.

    Raises:
        ValueError: 정사각 2차원이 아니거나, 0/2의 거듭제곱이 아닌 값이 있는 경우.
    """
    array = np.array(board)
    if array.ndim != 2 or array.shape[0] != array.shape[1] or array.shape[0] == 0:
        raise ValueError(f"보드는 비어있지 않은 정사각 행렬이어야 합니다: shape={array.shape}")
    if not np.issubdtype(array.dtype, np.integer):
        if not np.all(np.mod(array, 1) == 0):
            raise ValueError("보드에는 정수만 들어갈 수 있습니다.")
    array = array.astype(int)
    bad = [int(v) for v in np.unique(array) if not is_valid_tile(v)]
    if bad:
        raise ValueError(f"허용되지 않는 타일 값: {bad}")
    return array
