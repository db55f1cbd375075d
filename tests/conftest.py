"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def empty_board():
    """5x5の空の盤面を提供するフィクスチャ"""
    from src.engine import Board
    return Board(5, 5, [])


@pytest.fixture
def marine(empty_board):
    """中央(2,2)で北を向いたAP4のマリーンを提供するフィクスチャ"""
    from src.engine import Piece, Direction
    return Piece.storm_bolter_marine(empty_board, (2, 2), Direction.N)


@pytest.fixture
def demo_mission():
    """同梱のデモミッションを提供するフィクスチャ"""
    from src.engine import MissionLoader
    from src.engine.mission import PACKAGED_MISSIONS_DIR
    return MissionLoader(PACKAGED_MISSIONS_DIR).load("demo_board")


@pytest.fixture
def junction_engine():
    """未割り当てのマスが壁になるミッションのゲームを提供するフィクスチャ"""
    from src.engine import GameEngine, MissionLoader
    from src.engine.mission import PACKAGED_MISSIONS_DIR
    mission = MissionLoader(PACKAGED_MISSIONS_DIR).load("corridor_junction")
    return GameEngine(mission)
