"""
視線（Line of Sight）判定を行うモジュール

マスの中心同士を結ぶ線をたどり、途中のマスに視線を妨げる地形効果があれば遮られる。
- 縦・横・45°の線は1マスずつ進める
- それ以外（斜めの浅い角度）は max(|dx|, |dy|)+1 点で等間隔にサンプリングし、
  最も近い整数座標に丸める
始点と終点は判定に含めない。
"""

import math
from typing import List

from .board import Board
from .direction import Coord
from .square import Square


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def trace_line(start: Coord, end: Coord) -> List[Coord]:
    """start から end までに通過するマスの座標（両端を含む）"""
    x0, y0 = start
    x1, y1 = end
    if start == end:
        return [start]

    dx = x1 - x0
    dy = y1 - y0
    points: List[Coord] = []

    is_oblique = dx != 0 and dy != 0 and abs(dx) != abs(dy)
    if is_oblique:
        steps = max(abs(dx), abs(dy))
        for i in range(steps + 1):
            t = i / steps
            point = (_round_half_up(x0 + t * dx), _round_half_up(y0 + t * dy))
            if not points or points[-1] != point:
                points.append(point)
    else:
        sx, sy = _sign(dx), _sign(dy)
        x, y = x0, y0
        points.append((x, y))
        while (x, y) != (x1, y1):
            x += sx
            y += sy
            points.append((x, y))

    return points


def has_line_of_sight(board: Board, a: Square, b: Square) -> bool:
    """a から b への視線が通っているか"""
    if a.coord == b.coord:
        return True

    for x, y in trace_line(a.coord, b.coord)[1:-1]:
        square = board.get_square(x, y)
        if square is not None and square.blocks_los():
            return False
    return True
