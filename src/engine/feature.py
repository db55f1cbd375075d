"""
マスに付く地形効果（ドア・壁）を定義するモジュール
"""

from typing import TYPE_CHECKING

from .direction import Direction

if TYPE_CHECKING:
    from .square import Square


class Feature:
    """
    マスに付く地形効果の基底クラス
    何も妨げない。派生クラスで blocks_move / blocks_los を上書きする
    """

    kind = "feature"

    def __init__(self, square: 'Square'):
        self.square = square  # 所有しない（逆参照）

    def blocks_move(self) -> bool:
        """True ならこのマスに入れない"""
        return False

    def blocks_los(self) -> bool:
        """True ならこのマスを視線が通らない"""
        return False

    def __repr__(self):
        return f"{type(self).__name__}({self.square.x}, {self.square.y})"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "blocks_move": self.blocks_move(),
            "blocks_los": self.blocks_los(),
        }


class Wall(Feature):
    """移動も視線も常に妨げる障害物"""

    kind = "wall"

    def blocks_move(self) -> bool:
        return True

    def blocks_los(self) -> bool:
        return True


class Door(Feature):
    """開閉できるドア。初期状態は閉"""

    kind = "door"

    def __init__(self, square: 'Square', facing: Direction = Direction.N):
        super().__init__(square)
        self.facing = facing
        self.closed = True

    def open(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def toggle(self) -> None:
        """開閉を切り替える"""
        if self.closed:
            self.open()
        else:
            self.close()

    def blocks_move(self) -> bool:
        return self.closed

    def blocks_los(self) -> bool:
        return self.closed

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["facing"] = self.facing.name
        data["closed"] = self.closed
        return data
