"""Web 演示服务 - 发牌、识别牌型并通过 WebSocket 实时推送"""

import asyncio
import json
import logging
import os
import random
from pathlib import Path
from typing import List, Set, Tuple

from fastapi import FastAPI, HTTPException, Query, WebSocket, WebSocketDisconnect
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse
from pydantic import BaseModel

from src.poker.card import Card, deck_unshuffled, deal_cards
from src.poker.combo_type import Combo
from src.poker.combo_detector import detect_combo, compare_combos

logger = logging.getLogger(__name__)

DEFAULT_DEAL_SIZE = int(os.getenv("POKER_DEAL_SIZE", "7"))
WS_DELAY = float(os.getenv("POKER_WS_DELAY", "0.3"))
MIN_CARDS = 5
MAX_WS_ROUNDS = 20


# ============================================================
#  序列化工具
# ============================================================

def card_to_dict(c: Card) -> dict:
    """将 Card 序列化为前端可用的 dict"""
    return {
        "rank": int(c.rank),
        "suit": c.suit.value,
        "display": c.display,
        "ascii": c.ascii,
        "glyph": c.glyph,
    }


def combo_to_dict(combo: Combo) -> dict:
    """将 Combo 序列化"""
    return {
        "combo_rank": combo.combo_rank.name,
        "label": combo.combo_rank.label,
        "strength": int(combo.combo_rank),
        "cards": [card_to_dict(c) for c in combo.cards],
        "display": combo.display,
        "ascii": combo.ascii,
        "glyph": combo.glyph,
    }


def parse_hand(texts: List[str]) -> List[Card]:
    """解析并校验客户端提交的手牌，不合法时抛出 400"""
    try:
        cards = [Card.from_string(t) for t in texts]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if len(cards) < MIN_CARDS:
        raise HTTPException(status_code=400, detail=f"至少需要{MIN_CARDS}张牌，只有{len(cards)}张")
    if len(set(cards)) != len(cards):
        raise HTTPException(status_code=400, detail="手牌中有重复的牌")
    return cards


def deal_and_detect(count: int, rng=None) -> Tuple[List[Card], Combo]:
    """发一手牌并识别"""
    cards = deal_cards(count, rng)
    return cards, detect_combo(cards)


def deal_event(cards: List[Card], combo: Combo) -> dict:
    """生成发牌推送事件"""
    return {
        "type": "deal",
        "cards": [card_to_dict(c) for c in cards],
        "combo": combo_to_dict(combo),
    }


# ============================================================
#  FastAPI 应用
# ============================================================

STATIC_DIR = Path(__file__).parent / "static"

app = FastAPI(title="扑克牌型识别")
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# WebSocket 连接池
connections: Set[WebSocket] = set()


class HandRequest(BaseModel):
    cards: List[str]


class CompareRequest(BaseModel):
    first: List[str]
    second: List[str]


@app.get("/")
async def index():
    """返回前端页面"""
    return FileResponse(str(STATIC_DIR / "index.html"))


@app.get("/api/deck")
async def get_deck():
    """未洗的一副牌"""
    return {"cards": [card_to_dict(c) for c in deck_unshuffled()]}


@app.get("/api/deal")
async def get_deal(count: int = Query(DEFAULT_DEAL_SIZE, ge=MIN_CARDS, le=52)):
    """随机发一手牌并识别"""
    return deal_event(*deal_and_detect(count))


@app.post("/api/combo")
async def post_combo(req: HandRequest):
    """识别给定手牌的最佳组合"""
    cards = parse_hand(req.cards)
    return {"cards": [card_to_dict(c) for c in cards], "combo": combo_to_dict(detect_combo(cards))}


@app.post("/api/compare")
async def post_compare(req: CompareRequest):
    """比较两手牌"""
    first = detect_combo(parse_hand(req.first))
    second = detect_combo(parse_hand(req.second))
    winner = {1: "first", 0: "tie", -1: "second"}[compare_combos(first, second)]
    return {"first": combo_to_dict(first), "second": combo_to_dict(second), "winner": winner}


async def broadcast(msg: dict) -> None:
    """向所有连接的客户端广播消息"""
    data = json.dumps(msg, ensure_ascii=False)
    dead = set()
    for ws in list(connections):
        try:
            await ws.send_text(data)
        except Exception:
            dead.add(ws)
    if dead:
        logger.warning("移除 %d 个已断开的连接", len(dead))
    connections.difference_update(dead)


@app.websocket("/ws")
async def websocket_endpoint(ws: WebSocket):
    """WebSocket 端点：客户端连接后等待 deal 指令"""
    await ws.accept()
    connections.add(ws)
    try:
        while True:
            data = await ws.receive_text()
            msg = json.loads(data)
            if msg.get("action") == "deal":
                await run_deals_async(int(msg.get("count", DEFAULT_DEAL_SIZE)),
                                      int(msg.get("rounds", 1)))
    except (WebSocketDisconnect, RuntimeError):
        pass
    finally:
        connections.discard(ws)


# ============================================================
#  异步发牌驱动
# ============================================================

async def run_deals_async(count: int, rounds: int) -> None:
    """逐手发牌识别，每手实时推送"""
    if not MIN_CARDS <= count <= 52:
        await broadcast({"type": "error", "detail": f"每手发牌数必须在 {MIN_CARDS}~52 之间"})
        return
    rounds = max(1, min(rounds, MAX_WS_ROUNDS))
    logger.info("WebSocket 发牌: %d 轮，每手 %d 张", rounds, count)

    rng = random.Random()
    best = None
    for i in range(rounds):
        cards, combo = deal_and_detect(count, rng)
        event = deal_event(cards, combo)
        event["round"] = i + 1
        await broadcast(event)
        if best is None or combo > best:
            best = combo
        await asyncio.sleep(WS_DELAY)

    await broadcast({"type": "done", "rounds": rounds, "best": combo_to_dict(best)})
