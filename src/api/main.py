"""
Hulk FastAPI サーバ
ゲームの状態管理と、移動・旋回・フェイズ進行・視線判定のエンドポイントを提供
"""

import logging
import uuid
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from ..engine import Direction, GameEngine, InvalidMissionError, PieceKind, load_mission
from ..engine.mission import default_loader

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Hulk API",
    description="Hulk 戦術ボードゲームのルールエンジンAPI",
    version="1.0.0"
)

# CORS設定（描画クライアントからのアクセスを許可）
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ゲームの状態を保持する辞書
games: Dict[str, GameEngine] = {}


# Pydanticモデル（リクエスト/レスポンス用）

class NewGameRequest(BaseModel):
    mission: str = "demo_board"


class NewGameResponse(BaseModel):
    game_id: str
    message: str
    game_state: dict


class PlacePieceRequest(BaseModel):
    piece_id: str
    kind: str = "STORM_BOLTER_MARINE"
    x: int
    y: int
    facing: str = "N"


class MoveRequest(BaseModel):
    piece_id: str
    x: Optional[int] = None
    y: Optional[int] = None
    direction: Optional[str] = None  # "forward" / "backward"（x, y の代わり）


class TurnRequest(BaseModel):
    piece_id: str
    delta: int  # -1=左, 1=右, 2=回れ右


class DoorRequest(BaseModel):
    x: int
    y: int
    facing: str = "N"


class ActionResponse(BaseModel):
    success: bool
    message: str
    cost: Optional[int] = None
    game_state: dict


def _get_game(game_id: str) -> GameEngine:
    if game_id not in games:
        raise HTTPException(status_code=404, detail="ゲームが見つかりません")
    return games[game_id]


def _get_piece(game: GameEngine, piece_id: str):
    piece = game.get_piece(piece_id)
    if piece is None:
        raise HTTPException(status_code=404, detail=f"駒が見つかりません: {piece_id}")
    return piece


def _parse_direction(name: str) -> Direction:
    try:
        return Direction[name]
    except KeyError:
        raise HTTPException(status_code=400, detail=f"無効な向き: {name}")


# エンドポイント

@app.get("/api")
async def root():
    """APIルート"""
    return {
        "message": "Hulk API へようこそ",
        "version": "1.0.0",
        "missions": default_loader().available(),
        "endpoints": [
            "/new_game",
            "/get_game/{game_id}",
            "/place_piece/{game_id}",
            "/move/{game_id}",
            "/turn/{game_id}",
            "/step_phase/{game_id}",
            "/line_of_sight/{game_id}",
            "/toggle_door/{game_id}",
            "/delete_game/{game_id}",
        ]
    }


@app.post("/new_game", response_model=NewGameResponse)
async def new_game(request: Optional[NewGameRequest] = None):
    """ミッションを読み込んで新しいゲームを開始する"""
    request = request or NewGameRequest()
    try:
        mission = load_mission(request.mission)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"ミッションが見つかりません: {request.mission}")
    except InvalidMissionError as e:
        raise HTTPException(status_code=422, detail=str(e))

    game_id = str(uuid.uuid4())
    game = GameEngine(mission)
    games[game_id] = game
    logger.info("New game %s on mission %r", game_id, mission.name)

    return NewGameResponse(
        game_id=game_id,
        message="新しいゲームを開始しました",
        game_state=game.to_dict()
    )


@app.get("/get_game/{game_id}")
async def get_game(game_id: str):
    """ゲームの状態を取得"""
    return _get_game(game_id).to_dict()


@app.post("/place_piece/{game_id}")
async def place_piece(game_id: str, request: PlacePieceRequest):
    """駒を配置する"""
    game = _get_game(game_id)
    try:
        kind = PieceKind[request.kind]
    except KeyError:
        raise HTTPException(status_code=400, detail=f"無効な駒の種類: {request.kind}")
    facing = _parse_direction(request.facing)

    try:
        piece = game.place_piece(request.piece_id, kind, (request.x, request.y), facing)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"message": "駒を配置しました", "piece": piece.to_dict()}


@app.post("/move/{game_id}", response_model=ActionResponse)
async def move(game_id: str, request: MoveRequest):
    """
    駒を移動する
    移動できない場合もエラーにはせず success=False を返す
    """
    game = _get_game(game_id)
    piece = _get_piece(game, request.piece_id)
    ap_before = piece.ap_remaining

    if request.direction == "forward":
        success = piece.move_forward()
    elif request.direction == "backward":
        success = piece.move_backward()
    elif request.direction is not None:
        raise HTTPException(status_code=400, detail=f"無効な方向: {request.direction}")
    elif request.x is None or request.y is None:
        raise HTTPException(status_code=400, detail="移動先の座標が必要です")
    else:
        success = piece.move((request.x, request.y))

    return ActionResponse(
        success=success,
        message="移動しました" if success else "移動できません",
        cost=ap_before - piece.ap_remaining if success else None,
        game_state=game.to_dict()
    )


@app.post("/turn/{game_id}", response_model=ActionResponse)
async def turn(game_id: str, request: TurnRequest):
    """駒を旋回する"""
    game = _get_game(game_id)
    piece = _get_piece(game, request.piece_id)
    cost = piece.can_turn(request.delta)
    success = piece.turn(request.delta)

    return ActionResponse(
        success=success,
        message="旋回しました" if success else "旋回できません",
        cost=cost if success else None,
        game_state=game.to_dict()
    )


@app.post("/step_phase/{game_id}")
async def step_phase(game_id: str):
    """フェイズを1つ進める"""
    game = _get_game(game_id)
    phase = game.cycle.step()
    return {
        "phase": phase.value,
        "turn_number": game.cycle.turn_number,
        "game_state": game.to_dict()
    }


@app.get("/line_of_sight/{game_id}")
async def line_of_sight(game_id: str, ax: int, ay: int, bx: int, by: int):
    """2マス間の視線判定"""
    game = _get_game(game_id)
    result = game.line_of_sight((ax, ay), (bx, by))
    if result is None:
        raise HTTPException(status_code=400, detail="盤外の座標です")
    return {"from": [ax, ay], "to": [bx, by], "line_of_sight": result}


@app.post("/toggle_door/{game_id}")
async def toggle_door(game_id: str, request: DoorRequest):
    """
    ドアを開閉する
    指定マスにドアがなければ閉じたドアを置く
    """
    game = _get_game(game_id)
    door = game.get_door((request.x, request.y))
    if door is None:
        try:
            door = game.add_door((request.x, request.y), _parse_direction(request.facing))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        message = "ドアを置きました"
    else:
        door.toggle()
        message = "ドアを閉じました" if door.closed else "ドアを開けました"
    return {"message": message, "door": door.to_dict()}


@app.delete("/delete_game/{game_id}")
async def delete_game(game_id: str):
    """ゲームを削除"""
    _get_game(game_id)
    del games[game_id]
    return {"message": "ゲームを削除しました"}
