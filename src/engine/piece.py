"""
盤上の駒（Piece）と、APを消費する移動・旋回を定義するモジュール
"""

import logging
from enum import Enum, auto
from typing import Optional, Union

from .board import Board
from .direction import (
    AP_PER_TURN,
    MOVE_COST,
    Coord,
    Direction,
    step,
    turn,
    turn_cost,
)
from .square import Square

logger = logging.getLogger(__name__)


class Side(Enum):
    """陣営"""
    MARINE = auto()   # ターミネーター側
    STEALER = auto()  # ジーンスティーラー側


class PieceKind(Enum):
    """駒の種類"""
    STORM_BOLTER_MARINE = auto()  # ストームボルター装備のターミネーター
    GENESTEALER = auto()          # ジーンスティーラー


# 描画クライアント用のスプライトキー
PIECE_SPRITE_KEYS = {
    PieceKind.STORM_BOLTER_MARINE: "terminator_storm_bolter",
    PieceKind.GENESTEALER: "genestealer",
}

# 駒の種類ごとの陣営
PIECE_SIDES = {
    PieceKind.STORM_BOLTER_MARINE: Side.MARINE,
    PieceKind.GENESTEALER: Side.STEALER,
}


class Piece:
    """
    盤上の駒
    移動・旋回はAPを消費する。不正な行動は例外を出さず、
    can_* は None、move / turn は False を返して状態を変えない
    """

    def __init__(
        self,
        board: Board,
        start: Union[Coord, Square],
        facing: Direction = Direction.N,
        kind: PieceKind = PieceKind.STORM_BOLTER_MARINE,
    ):
        square = start if isinstance(start, Square) else board.get_square(*start)
        if square is None or board.get_square(*square.coord) is not square:
            raise ValueError(f"Invalid start position: {start}")
        if not board.is_passable(square.coord):
            raise ValueError(f"Start position is blocked: {square.coord}")

        self.board = board
        self.square = square
        self.facing = Direction(facing)
        self.kind = kind
        self.ap_remaining = AP_PER_TURN

    @classmethod
    def storm_bolter_marine(cls, board: Board, start: Union[Coord, Square],
                            facing: Direction = Direction.N) -> 'Piece':
        return cls(board, start, facing, PieceKind.STORM_BOLTER_MARINE)

    @classmethod
    def genestealer(cls, board: Board, start: Union[Coord, Square],
                    facing: Direction = Direction.N) -> 'Piece':
        return cls(board, start, facing, PieceKind.GENESTEALER)

    def __repr__(self):
        return (
            f"Piece({self.kind.name}, at={self.coord}, "
            f"facing={self.facing.name}, ap={self.ap_remaining})"
        )

    @property
    def coord(self) -> Coord:
        return self.square.coord

    @property
    def sprite_key(self) -> str:
        return PIECE_SPRITE_KEYS[self.kind]

    @property
    def side(self) -> Side:
        return PIECE_SIDES[self.kind]

    def reset_ap(self) -> None:
        """APを1ターン分に戻す"""
        self.ap_remaining = AP_PER_TURN

    def _resolve(self, dest: Union[Coord, Square]) -> Optional[Square]:
        if isinstance(dest, Square):
            return dest if self.board.get_square(*dest.coord) is dest else None
        return self.board.get_square(*dest)

    def can_move(self, dest: Union[Coord, Square]) -> Optional[int]:
        """
        dest へ移動するAPコストを返す
        隣接していない・盤外・移動を妨げる地形効果がある・AP不足の場合は None
        """
        square = self._resolve(dest)
        if square is None:
            return None
        heading = self.square.heading_to(square, self.facing)
        if heading is None:
            return None
        if not self.board.is_passable(square.coord):
            return None
        cost = MOVE_COST[heading]
        return cost if cost <= self.ap_remaining else None

    def move(self, dest: Union[Coord, Square]) -> bool:
        """
        dest へ移動する
        成功したらAPを消費して位置を更新し True
        """
        cost = self.can_move(dest)
        if cost is None:
            logger.debug("%r: move to %s rejected", self, dest)
            return False
        self.ap_remaining -= cost
        self.square = self._resolve(dest)
        return True

    def can_turn(self, delta: int) -> Optional[int]:
        """
        旋回のAPコストを返す（-1=左, 1=右, 2=回れ右, 0=そのまま）
        APが残っていない、またはAP不足の場合は None
        """
        if self.ap_remaining == 0:
            return None
        cost = turn_cost(delta)
        return cost if cost <= self.ap_remaining else None

    def turn(self, delta: int) -> bool:
        """旋回する。成功したらAPを消費して向きを更新し True"""
        cost = self.can_turn(delta)
        if cost is None:
            logger.debug("%r: turn by %s rejected", self, delta)
            return False
        self.ap_remaining -= cost
        self.facing = turn(self.facing, delta)
        return True

    def move_forward(self) -> bool:
        """向いている方向へ1マス進む"""
        return self.move(step(self.coord, self.facing))

    def move_backward(self) -> bool:
        """向きを変えずに1マス下がる"""
        return self.move(step(self.coord, self.facing.opposite))

    def to_dict(self) -> dict:
        """駒を辞書形式に変換（API用）"""
        return {
            "kind": self.kind.name,
            "side": self.side.name,
            "sprite_key": self.sprite_key,
            "x": self.coord[0],
            "y": self.coord[1],
            "facing": self.facing.name,
            "ap_remaining": self.ap_remaining,
        }
