"""牌型检测器 - 从至少5张牌中找出最大的标准扑克组合"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .card import Card, Rank, Suit
from .basket import split_by_rank, find_basket, flatten, get_kickers
from .combo_type import Combo, ComboRank, COMBO_SIZE

logger = logging.getLogger(__name__)


# 所有可能的顺子，从 A 高到 A-5（A 当最小）
_STRAIGHT_RUNS: List[Tuple[Rank, ...]] = [
    tuple(Rank(top - i) for i in range(COMBO_SIZE))
    for top in range(Rank.ACE, Rank.SIX - 1, -1)
] + [(Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.DEUCE, Rank.ACE)]


def detect_combo(cards: Sequence[Card]) -> Combo:
    """
    识别一组牌中最大的组合。
    至少需要5张牌；输入不会被修改。
    """
    assert len(cards) >= COMBO_SIZE, "less than 5 cards passed to detect_combo"

    # 按牌型从大到小依次尝试，第一个命中即为最大
    for combo_rank, detector in COMBO_DETECTORS:
        combo = detector(cards)
        if combo is not None:
            logger.debug("检测到牌型 %s: %r", combo_rank.name, combo)
            return combo

    raise AssertionError("detect_high_card 必定命中")


# ============================================================
#  辅助函数
# ============================================================

def _find_straight(cards: Sequence[Card]) -> Optional[List[Card]]:
    """找最大的顺子，每个点数取一张，返回从大到小的5张牌"""
    by_rank = {basket.rank: basket.cards[0] for basket in split_by_rank(cards)}
    for run in _STRAIGHT_RUNS:
        if all(rank in by_rank for rank in run):
            return [by_rank[rank] for rank in run]
    return None


def _flush_suits(cards: Sequence[Card]) -> List[List[Card]]:
    """张数足够组成同花的各花色的牌"""
    by_suit: Dict[Suit, List[Card]] = {}
    for card in cards:
        by_suit.setdefault(card.suit, []).append(card)
    return [group for group in by_suit.values() if len(group) >= COMBO_SIZE]


def _best_straight_flush(cards: Sequence[Card]) -> Optional[Combo]:
    """在各同花子集内找顺子，取最大的一条；A 高为皇家同花顺"""
    runs = [run for run in (_find_straight(group) for group in _flush_suits(cards)) if run]
    if not runs:
        return None
    best = max(runs, key=lambda run: run[0].rank)
    if best[0].rank == Rank.ACE:
        return Combo(ComboRank.ROYAL_FLUSH, best)
    return Combo(ComboRank.STRAIGHT_FLUSH, best)


def _with_kickers(combo_rank: ComboRank, group: List[Card], rest: List[Card]) -> Combo:
    """主牌在前，剩余位置用最大的踢脚牌补满"""
    return Combo(combo_rank, group + get_kickers(rest, COMBO_SIZE - len(group)))


# ============================================================
#  各牌型检测
# ============================================================

def detect_high_card(cards: Sequence[Card]) -> Optional[Combo]:
    """高牌：最大的5张，必定命中"""
    return Combo(ComboRank.HIGH_CARD, get_kickers(cards, COMBO_SIZE))


def detect_pair(cards: Sequence[Card]) -> Optional[Combo]:
    """一对 + 3张踢脚"""
    baskets = split_by_rank(cards)
    pair = find_basket(baskets, 2)
    if pair is None:
        return None
    return _with_kickers(ComboRank.PAIR, pair.cards, flatten(baskets))


def detect_two_pair(cards: Sequence[Card]) -> Optional[Combo]:
    """
    两对 + 1张踢脚。
    第二对必须来自另一个点数：同一点数有4张时也只算一对。
    """
    baskets = split_by_rank(cards)
    high = find_basket(baskets, 2)
    if high is None:
        return None
    low = find_basket(baskets, 2, exclude=(high.rank,))
    if low is None:
        return None
    return _with_kickers(ComboRank.TWO_PAIR, high.cards + low.cards, flatten(baskets))


def detect_three_of_kind(cards: Sequence[Card]) -> Optional[Combo]:
    """三条 + 2张踢脚"""
    baskets = split_by_rank(cards)
    triple = find_basket(baskets, 3)
    if triple is None:
        return None
    return _with_kickers(ComboRank.THREE_OF_KIND, triple.cards, flatten(baskets))


def detect_straight(cards: Sequence[Card]) -> Optional[Combo]:
    """顺子：5个连续点数，花色不限；A-2-3-4-5 为最小顺子"""
    run = _find_straight(cards)
    if run is None:
        return None
    return Combo(ComboRank.STRAIGHT, run)


def detect_flush(cards: Sequence[Card]) -> Optional[Combo]:
    """同花：同一花色最大的5张；多个花色都够5张时取最大的一组"""
    candidates = [get_kickers(group, COMBO_SIZE) for group in _flush_suits(cards)]
    if not candidates:
        return None
    best = max(candidates, key=lambda top: [c.rank for c in top])
    return Combo(ComboRank.FLUSH, best)


def detect_full_house(cards: Sequence[Card]) -> Optional[Combo]:
    """葫芦：最大的三条 + 另一个点数中最大的对子（可以取自第二组三条）"""
    baskets = split_by_rank(cards)
    triple = find_basket(baskets, 3)
    if triple is None:
        return None
    pair = find_basket(baskets, 2, exclude=(triple.rank,))
    if pair is None:
        return None
    return Combo(ComboRank.FULL_HOUSE, triple.cards + pair.cards)


def detect_four_of_kind(cards: Sequence[Card]) -> Optional[Combo]:
    """四条 + 1张踢脚"""
    baskets = split_by_rank(cards)
    quad = find_basket(baskets, 4)
    if quad is None:
        return None
    return _with_kickers(ComboRank.FOUR_OF_KIND, quad.cards, flatten(baskets))


def detect_straight_flush(cards: Sequence[Card]) -> Optional[Combo]:
    """同花顺（A 高时即为皇家同花顺）"""
    return _best_straight_flush(cards)


def detect_royal_flush(cards: Sequence[Card]) -> Optional[Combo]:
    """皇家同花顺：同一花色 T-J-Q-K-A"""
    combo = _best_straight_flush(cards)
    if combo is not None and combo.combo_rank == ComboRank.ROYAL_FLUSH:
        return combo
    return None


# 检测优先级：严格按牌型从大到小，顺序决定了牌型的优先关系
COMBO_DETECTORS: List[Tuple[ComboRank, Callable[[Sequence[Card]], Optional[Combo]]]] = [
    (ComboRank.ROYAL_FLUSH, detect_royal_flush),
    (ComboRank.STRAIGHT_FLUSH, detect_straight_flush),
    (ComboRank.FOUR_OF_KIND, detect_four_of_kind),
    (ComboRank.FULL_HOUSE, detect_full_house),
    (ComboRank.FLUSH, detect_flush),
    (ComboRank.STRAIGHT, detect_straight),
    (ComboRank.THREE_OF_KIND, detect_three_of_kind),
    (ComboRank.TWO_PAIR, detect_two_pair),
    (ComboRank.PAIR, detect_pair),
    (ComboRank.HIGH_CARD, detect_high_card),
]


# ============================================================
#  牌型比较
# ============================================================

def compare_combos(a: Combo, b: Combo) -> int:
    """a 大返回 1，相等返回 0，a 小返回 -1"""
    if a == b:
        return 0
    return 1 if a > b else -1


def can_beat(current: Combo, previous: Combo) -> bool:
    """判断 current 能否压过 previous（点数完全相同视为平局，不能压过）"""
    return current > previous
