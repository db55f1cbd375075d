"""
盤面（Board）を管理するモジュール
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .direction import Coord
from .square import CORRIDOR_SECTION, UNASSIGNED_SECTION, Square, SquareKind

logger = logging.getLogger(__name__)

# 8近傍のオフセット（左上から行優先）
NEIGHBOR_OFFSETS: List[Coord] = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
]


def _read_record(record: Any) -> Tuple[int, int, SquareKind, int]:
    """
    マス定義（SquareSpec または dict）から (x, y, kind, section) を取り出す
    section が省略された場合は 0（通路・デフォルト）
    """
    if isinstance(record, dict):
        x, y = record["x"], record["y"]
        kind = record.get("kind", SquareKind.CORRIDOR)
        section = record.get("section")
    else:
        x, y = record.x, record.y
        kind = getattr(record, "kind", SquareKind.CORRIDOR)
        section = getattr(record, "section", None)
    if section is None:
        section = CORRIDOR_SECTION
    return x, y, SquareKind(kind), section


class Board:
    """ゲーム盤面。width x height の全マスを所有する"""

    def __init__(self, width: int, height: int, squares: Optional[Iterable[Any]] = None):
        """
        squares: マス定義のリスト（x, y, kind, section）
        リストに含まれない盤内の座標は未割り当てのマス（section=-1）で埋める
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid board size: {width}x{height}")
        self.width = width
        self.height = height
        self.grid: Dict[Coord, Square] = {}
        self._adjacent_cache: Dict[Square, Tuple[Square, ...]] = {}

        for record in squares or []:
            x, y, kind, section = _read_record(record)
            if not self.in_bounds((x, y)):
                raise ValueError(f"Square ({x}, {y}) is outside a {width}x{height} board")
            if (x, y) in self.grid:
                raise ValueError(f"Duplicate square ({x}, {y})")
            self.grid[(x, y)] = Square(x, y, section, kind)

        listed = len(self.grid)
        for y in range(height):
            for x in range(width):
                if (x, y) not in self.grid:
                    self.grid[(x, y)] = Square(x, y, UNASSIGNED_SECTION)
        logger.debug("Board %dx%d built (%d listed, %d backfilled)",
                     width, height, listed, len(self.grid) - listed)

    @classmethod
    def from_section_map(cls, section_map: Sequence[Sequence[int]]) -> 'Board':
        """
        セクションIDの2次元配列（section_map[y][x]）から盤面を作成
        幅は最長の行に合わせ、欠けたマスは未割り当てになる
        """
        height = len(section_map)
        width = max((len(row) for row in section_map), default=0)
        records = []
        for y, row in enumerate(section_map):
            for x, section in enumerate(row):
                if section == UNASSIGNED_SECTION:
                    continue
                kind = SquareKind.ROOM if section > CORRIDOR_SECTION else SquareKind.CORRIDOR
                records.append({"x": x, "y": y, "kind": kind, "section": section})
        return cls(width, height, records)

    def in_bounds(self, coord: Coord) -> bool:
        """座標が盤面内か確認"""
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def get_square(self, x: int, y: int) -> Optional[Square]:
        """指定座標のマスを取得（盤外なら None）"""
        return self.grid.get((x, y))

    def get(self, x: int, y: int) -> Optional[Square]:
        return self.get_square(x, y)

    def all_squares(self) -> Iterator[Square]:
        """全マスを行優先で返す"""
        for y in range(self.height):
            for x in range(self.width):
                yield self.grid[(x, y)]

    def adjacents_of(self, square: Square) -> Tuple[Square, ...]:
        """
        8近傍の隣接マスを返す（自分自身と盤外は含まない）
        結果はマスごとに一度だけ計算してキャッシュする
        この盤面のマスでなければ空のタプル
        """
        cached = self._adjacent_cache.get(square)
        if cached is not None:
            return cached
        if self.get_square(*square.coord) is not square:
            return ()

        x, y = square.coord
        adjacents = []
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = self.get_square(x + dx, y + dy)
            if neighbor is not None:
                adjacents.append(neighbor)
        result = tuple(adjacents)
        self._adjacent_cache[square] = result
        return result

    def is_passable(self, coord: Coord) -> bool:
        """盤内で、移動を妨げる地形効果がなければ True"""
        square = self.get_square(*coord)
        if square is None:
            return False
        return not square.blocks_move()

    def section(self, section_id: int) -> List[Square]:
        """指定セクション（部屋・通路）に属するマス"""
        return [s for s in self.all_squares() if s.section_id == section_id]

    def section_ids(self) -> List[int]:
        """盤面に存在するセクションID（未割り当てを除く）"""
        return sorted({s.section_id for s in self.grid.values() if s.section_id != UNASSIGNED_SECTION})

    def __str__(self):
        """
        盤面の文字列表現
        '#' 移動不可, '+' ドア, '.' 通路, 数字 部屋, ' ' 未割り当て
        """
        rows = []
        for y in range(self.height):
            row = ""
            for x in range(self.width):
                square = self.grid[(x, y)]
                if any(f.kind == "door" for f in square.features):
                    row += "+"
                elif square.blocks_move():
                    row += "#"
                elif square.section_id == UNASSIGNED_SECTION:
                    row += " "
                elif square.kind == SquareKind.ROOM:
                    row += str(square.section_id % 10)
                else:
                    row += "."
            rows.append(row)
        return "\n".join(rows)

    def to_dict(self) -> dict:
        """盤面を辞書形式に変換（API用）"""
        return {
            "width": self.width,
            "height": self.height,
            "squares": [s.to_dict() for s in self.all_squares()],
        }
