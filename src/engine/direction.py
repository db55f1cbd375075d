"""
向き（Facing）と相対方位（Heading）、移動・旋回コスト表を定義するモジュール
"""

from enum import Enum, IntEnum
from typing import Dict, Optional, Tuple

Coord = Tuple[int, int]  # (x, y) x は右、y は下が正


class Direction(IntEnum):
    """駒の向き（時計回りに 90° ずつ）"""
    N = 0
    E = 1
    S = 2
    W = 3

    @property
    def opposite(self) -> 'Direction':
        """反対の向きを返す"""
        return turn(self, ABOUT_FACE)


class Heading(Enum):
    """向きを基準にした隣接マスの相対方位"""
    F = "F"     # 前
    FR = "FR"   # 右前
    R = "R"     # 右
    BR = "BR"   # 右後
    B = "B"     # 後
    BL = "BL"   # 左後
    L = "L"     # 左
    FL = "FL"   # 左前


# 旋回量
LEFT = -1
RIGHT = 1
ABOUT_FACE = 2

# 1ターンあたりのAP（リセット値も同じ）
AP_PER_TURN = 4

# 向きごとの単位ベクトル (dx, dy)
DIR_VEC: Dict[Direction, Coord] = {
    Direction.N: (0, -1),
    Direction.E: (1, 0),
    Direction.S: (0, 1),
    Direction.W: (-1, 0),
}

# 8方位の絶対方向（北から時計回り、45° 単位）
_OFFSET_TO_OCTANT: Dict[Coord, int] = {
    (0, -1): 0,   # N
    (1, -1): 1,   # NE
    (1, 0): 2,    # E
    (1, 1): 3,    # SE
    (0, 1): 4,    # S
    (-1, 1): 5,   # SW
    (-1, 0): 6,   # W
    (-1, -1): 7,  # NW
}

# 相対方位（前から時計回り）
_HEADINGS_CLOCKWISE = [
    Heading.F, Heading.FR, Heading.R, Heading.BR,
    Heading.B, Heading.BL, Heading.L, Heading.FL,
]

# 移動コスト（前・斜め前は1、それ以外は2）
MOVE_COST: Dict[Heading, int] = {
    Heading.F: 1,
    Heading.FR: 1,
    Heading.FL: 1,
    Heading.R: 2,
    Heading.L: 2,
    Heading.B: 2,
    Heading.BR: 2,
    Heading.BL: 2,
}

# 旋回コスト（正規化した旋回量 0..3 をキーにする）
TURN_COST: Dict[int, int] = {
    0: 0,  # そのまま
    1: 1,  # 右
    2: 2,  # 回れ右
    3: 1,  # 左
}


def normalize_delta(delta: int) -> int:
    """旋回量を 0..3 に正規化（-1 は 3 = 左）"""
    return delta % 4


def turn(facing: Direction, delta: int) -> Direction:
    """
    旋回後の向きを返す
    delta: -1=左, 1=右, 2=回れ右
    """
    return Direction((int(facing) + normalize_delta(delta)) % 4)


def turn_cost(delta: int) -> int:
    """旋回量に対応するAPコスト"""
    return TURN_COST[normalize_delta(delta)]


def chebyshev(dx: int, dy: int) -> int:
    """チェビシェフ距離"""
    return max(abs(dx), abs(dy))


def step(coord: Coord, direction: Direction) -> Coord:
    """指定の向きに1マス進んだ座標"""
    dx, dy = DIR_VEC[direction]
    return (coord[0] + dx, coord[1] + dy)


def is_adjacent(a: Coord, b: Coord) -> bool:
    """8近傍で隣接しているか（同一マスは含まない）"""
    return chebyshev(b[0] - a[0], b[1] - a[1]) == 1


def heading_to(from_coord: Coord, to_coord: Coord, facing: Direction) -> Optional[Heading]:
    """
    from_coord から見た to_coord の相対方位を返す
    隣接していない場合・同一マスの場合は None

    向きが1つ進むと45°単位で2つ分回転するので、絶対方位から 2*facing を引く
    """
    if not is_adjacent(from_coord, to_coord):
        return None
    offset = (to_coord[0] - from_coord[0], to_coord[1] - from_coord[1])
    octant = _OFFSET_TO_OCTANT[offset]
    relative = (octant - 2 * int(facing)) % 8
    return _HEADINGS_CLOCKWISE[relative]
