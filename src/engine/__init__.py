"""
Hulk 戦術ボードゲームのルールエンジン - パッケージ初期化
"""

from .direction import (
    Direction, Heading, LEFT, RIGHT, ABOUT_FACE, AP_PER_TURN,
    MOVE_COST, TURN_COST, turn, heading_to, chebyshev,
)
from .square import Square, SquareKind, UNASSIGNED_SECTION, CORRIDOR_SECTION
from .feature import Feature, Door, Wall
from .board import Board
from .los import has_line_of_sight, trace_line
from .piece import Piece, PieceKind, Side, PIECE_SPRITE_KEYS
from .phase import Phase, GameCycle, PHASE_TRANSITIONS
from .mission import (
    Mission, SquareSpec, MissionLoader, InvalidMissionError,
    parse_mission, load_mission, load_mission_file,
)
from .game import GameEngine

__all__ = [
    'Direction',
    'Heading',
    'LEFT',
    'RIGHT',
    'ABOUT_FACE',
    'AP_PER_TURN',
    'MOVE_COST',
    'TURN_COST',
    'turn',
    'heading_to',
    'chebyshev',
    'Square',
    'SquareKind',
    'UNASSIGNED_SECTION',
    'CORRIDOR_SECTION',
    'Feature',
    'Door',
    'Wall',
    'Board',
    'has_line_of_sight',
    'trace_line',
    'Piece',
    'PieceKind',
    'Side',
    'PIECE_SPRITE_KEYS',
    'Phase',
    'GameCycle',
    'PHASE_TRANSITIONS',
    'Mission',
    'SquareSpec',
    'MissionLoader',
    'InvalidMissionError',
    'parse_mission',
    'load_mission',
    'load_mission_file',
    'GameEngine',
]
