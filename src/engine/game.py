"""
ミッションから盤面・駒・フェイズ進行を組み立てるモジュール
"""

import logging
from typing import Dict, Optional

from .board import Board
from .direction import Coord, Direction
from .feature import Door, Wall
from .los import has_line_of_sight
from .mission import Mission
from .phase import GameCycle, Phase
from .piece import Piece, PieceKind, Side
from .square import UNASSIGNED_SECTION

logger = logging.getLogger(__name__)

# フェイズ開始時にAPをリセットする陣営
PHASE_ACTIVE_SIDE = {
    Phase.MARINE_ACTION: Side.MARINE,
    Phase.STEALER_ACTION: Side.STEALER,
}


class GameEngine:
    """1ゲーム分の状態（盤面・駒・フェイズ）"""

    def __init__(self, mission: Mission):
        self.mission = mission
        self.board = Board(mission.width, mission.height, mission.squares)
        # ミッションに含まれないマスは壁
        for square in self.board.all_squares():
            if square.section_id == UNASSIGNED_SECTION:
                square.add_feature(Wall(square))

        self.pieces: Dict[str, Piece] = {}
        self.cycle = GameCycle(
            enter_hooks={phase: [self._reset_side_ap] for phase in PHASE_ACTIVE_SIDE}
        )

    def _reset_side_ap(self, cycle: GameCycle, phase: Phase) -> None:
        side = PHASE_ACTIVE_SIDE[phase]
        for piece in self.pieces.values():
            if piece.side == side:
                piece.reset_ap()
        logger.debug("Turn %d %s: AP reset for %s", cycle.turn_number, phase.value, side.name)

    def place_piece(
        self,
        piece_id: str,
        kind: PieceKind,
        coord: Coord,
        facing: Direction = Direction.N,
    ) -> Piece:
        """駒を配置する。IDの重複や不正な位置は ValueError"""
        if piece_id in self.pieces:
            raise ValueError(f"Duplicate piece id: {piece_id}")
        piece = Piece(self.board, coord, facing, kind)
        self.pieces[piece_id] = piece
        return piece

    def get_piece(self, piece_id: str) -> Optional[Piece]:
        return self.pieces.get(piece_id)

    def add_door(self, coord: Coord, facing: Direction = Direction.N) -> Door:
        """指定マスに閉じたドアを置く"""
        square = self.board.get_square(*coord)
        if square is None:
            raise ValueError(f"Invalid door position: {coord}")
        door = Door(square, facing)
        square.add_feature(door)
        return door

    def get_door(self, coord: Coord) -> Optional[Door]:
        square = self.board.get_square(*coord)
        if square is None:
            return None
        for feature in square.features:
            if isinstance(feature, Door):
                return feature
        return None

    def line_of_sight(self, a: Coord, b: Coord) -> Optional[bool]:
        """座標同士の視線判定。盤外の座標があれば None"""
        start = self.board.get_square(*a)
        end = self.board.get_square(*b)
        if start is None or end is None:
            return None
        return has_line_of_sight(self.board, start, end)

    def to_dict(self) -> dict:
        """ゲーム状態を辞書形式に変換（API用）"""
        return {
            "mission": self.mission.name,
            "board": self.board.to_dict(),
            "pieces": {pid: p.to_dict() for pid, p in self.pieces.items()},
            "cycle": self.cycle.to_dict(),
        }
