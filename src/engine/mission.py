"""
ミッションデータ（JSON）の読み込みと検証を行うモジュール

形式:
    {"name": str, "width": int, "height": int,
     "squares": [{"x": int, "y": int, "kind": "corridor"|"room", "section": int?}]}
width / height が省略された場合は座標の最大値+1 を使う。
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

from .square import SquareKind

logger = logging.getLogger(__name__)

# 同梱のミッションファイル置き場
PACKAGED_MISSIONS_DIR = Path(__file__).resolve().parent / "missions"


class InvalidMissionError(ValueError):
    """ミッションデータが不正"""


class SquareSpec(BaseModel):
    """ミッション中の1マスの定義"""
    x: int = Field(ge=0)
    y: int = Field(ge=0)
    kind: SquareKind = SquareKind.CORRIDOR
    section: Optional[int] = None


class Mission(BaseModel):
    """検証済みのミッション"""
    name: str
    width: Optional[int] = Field(default=None, gt=0)
    height: Optional[int] = Field(default=None, gt=0)
    squares: List[SquareSpec] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_squares(self) -> 'Mission':
        if not self.squares:
            raise ValueError("invalid mission: squares missing/empty")

        if self.width is None:
            self.width = max(sq.x for sq in self.squares) + 1
        if self.height is None:
            self.height = max(sq.y for sq in self.squares) + 1

        seen = set()
        for sq in self.squares:
            if sq.x >= self.width or sq.y >= self.height:
                raise ValueError(
                    f"invalid mission: square ({sq.x}, {sq.y}) outside {self.width}x{self.height}"
                )
            if (sq.x, sq.y) in seen:
                raise ValueError(f"invalid mission: duplicate square ({sq.x}, {sq.y})")
            seen.add((sq.x, sq.y))
        return self


def parse_mission(data: Dict[str, Any]) -> Mission:
    """辞書からミッションを作成。不正なら InvalidMissionError"""
    try:
        return Mission.model_validate(data)
    except ValidationError as e:
        raise InvalidMissionError(f"invalid mission: {e}") from e


def load_mission_file(path: Union[str, Path]) -> Mission:
    """JSONファイルからミッションを読み込む"""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidMissionError(f"invalid mission: {path.name} is not valid JSON ({e})") from e
    if not isinstance(data, dict):
        raise InvalidMissionError(f"invalid mission: {path.name} must contain a JSON object")
    mission = parse_mission(data)
    logger.info("Loaded mission %r (%dx%d, %d squares) from %s",
                mission.name, mission.width, mission.height, len(mission.squares), path)
    return mission


class MissionLoader:
    """
    名前でミッションを読み込むローダー
    一度読み込んだミッションは名前ごとにキャッシュし、同じオブジェクトを返す
    """

    def __init__(self, search_dir: Union[str, Path, None] = None):
        if search_dir is None:
            search_dir = os.environ.get("HULK_MISSIONS_DIR") or PACKAGED_MISSIONS_DIR
        self.search_dir = Path(search_dir)
        self._cache: Dict[str, Mission] = {}

    def path_for(self, name: str) -> Path:
        if not name or Path(name).name != name:
            raise InvalidMissionError(f"invalid mission name: {name!r}")
        return self.search_dir / f"{name}.json"

    def load(self, name: str) -> Mission:
        """
        ミッションを名前で読み込む
        ファイルがない場合は FileNotFoundError
        """
        cached = self._cache.get(name)
        if cached is not None:
            logger.debug("Mission %r served from cache", name)
            return cached

        path = self.path_for(name)
        if not path.is_file():
            raise FileNotFoundError(f"Mission not found: {name} ({path})")
        mission = load_mission_file(path)
        self._cache[name] = mission
        return mission

    def available(self) -> List[str]:
        """読み込み可能なミッション名"""
        if not self.search_dir.is_dir():
            return []
        return sorted(p.stem for p in self.search_dir.glob("*.json"))

    def clear_cache(self) -> None:
        self._cache.clear()


_default_loader: Optional[MissionLoader] = None


def default_loader() -> MissionLoader:
    global _default_loader
    if _default_loader is None:
        _default_loader = MissionLoader()
    return _default_loader


def load_mission(name: str) -> Mission:
    """既定のローダーでミッションを読み込む"""
    return default_loader().load(name)
