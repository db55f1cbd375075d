"""
盤面の1マス（Square）を表すモジュール
"""

from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from .direction import Coord, Direction, Heading, chebyshev, heading_to, is_adjacent

if TYPE_CHECKING:
    from .feature import Feature


# セクションID
UNASSIGNED_SECTION = -1  # 未割り当て（ミッションに含まれないマス）
CORRIDOR_SECTION = 0     # 通路・デフォルト


class SquareKind(str, Enum):
    """マスの種類"""
    CORRIDOR = "corridor"
    ROOM = "room"


class Square:
    """盤面の1マス。座標は生成後に変更できない"""

    def __init__(
        self,
        x: int,
        y: int,
        section_id: int = CORRIDOR_SECTION,
        kind: SquareKind = SquareKind.CORRIDOR,
    ):
        self._coord: Coord = (x, y)
        self.section_id = section_id
        self.kind = kind
        self.features: List['Feature'] = []

    @property
    def coord(self) -> Coord:
        return self._coord

    @property
    def x(self) -> int:
        return self._coord[0]

    @property
    def y(self) -> int:
        return self._coord[1]

    def __repr__(self):
        return f"Square({self.x}, {self.y}, section={self.section_id}, kind={self.kind.value})"

    def add_feature(self, feature: 'Feature') -> None:
        """地形効果（ドア・壁など）を追加"""
        if feature.square is not self:
            raise ValueError(f"Feature belongs to {feature.square!r}, not {self!r}")
        self.features.append(feature)

    def remove_feature(self, feature: 'Feature') -> None:
        self.features.remove(feature)

    def blocks_move(self) -> bool:
        """移動を妨げる地形効果があるか"""
        return any(f.blocks_move() for f in self.features)

    def blocks_los(self) -> bool:
        """視線を妨げる地形効果があるか"""
        return any(f.blocks_los() for f in self.features)

    def is_adjacent(self, other: 'Square') -> bool:
        """8近傍で隣接しているか"""
        return is_adjacent(self._coord, other.coord)

    def distance(self, other: 'Square') -> int:
        """チェビシェフ距離"""
        return chebyshev(other.x - self.x, other.y - self.y)

    def heading_to(self, other: 'Square', facing: Direction = Direction.N) -> Optional[Heading]:
        """
        向き facing を基準にした other の相対方位
        隣接していない場合は None
        """
        return heading_to(self._coord, other.coord, facing)

    def to_dict(self) -> dict:
        """マスを辞書形式に変換（API用）"""
        return {
            "x": self.x,
            "y": self.y,
            "section": self.section_id,
            "kind": self.kind.value,
            "features": [f.to_dict() for f in self.features],
        }
