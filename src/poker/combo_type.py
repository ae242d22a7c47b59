"""牌型定义 - 标准扑克十种牌型及其比较"""

from enum import IntEnum
from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple

from .card import Card, Rank


class ComboRank(IntEnum):
    """牌型枚举（数值越大牌型越大）"""
    HIGH_CARD = 0          # 高牌
    PAIR = 1               # 一对
    TWO_PAIR = 2           # 两对
    THREE_OF_KIND = 3      # 三条
    STRAIGHT = 4           # 顺子
    FLUSH = 5              # 同花
    FULL_HOUSE = 6         # 葫芦
    FOUR_OF_KIND = 7       # 四条
    STRAIGHT_FLUSH = 8     # 同花顺
    ROYAL_FLUSH = 9        # 皇家同花顺

    @property
    def label(self) -> str:
        return COMBO_RANK_NAME[self]


COMBO_RANK_NAME = {
    ComboRank.HIGH_CARD: "high card",
    ComboRank.PAIR: "pair",
    ComboRank.TWO_PAIR: "two pair",
    ComboRank.THREE_OF_KIND: "three of kind",
    ComboRank.STRAIGHT: "straight",
    ComboRank.FLUSH: "flush",
    ComboRank.FULL_HOUSE: "full house",
    ComboRank.FOUR_OF_KIND: "four of kind",
    ComboRank.STRAIGHT_FLUSH: "straight flush",
    ComboRank.ROYAL_FLUSH: "royal flush",
}

COMBO_SIZE = 5


@total_ordering
@dataclass(frozen=True, eq=False)
class Combo:
    """
    一手牌的最佳5张组合。

    cards 按重要性排列：构成牌型的牌在前（如三条的三张），
    踢脚牌在后并按点数从大到小；顺子从最大的一张往下排（A-5 顺子为 5-4-3-2-A）。
    比较时先比牌型，再逐位比点数，花色不参与。
    """
    combo_rank: ComboRank
    cards: Tuple[Card, ...]

    def __post_init__(self) -> None:
        # 允许传入 list，统一存为 tuple
        object.__setattr__(self, "cards", tuple(self.cards))
        if len(self.cards) != COMBO_SIZE:
            raise ValueError(f"Combo 必须恰好 {COMBO_SIZE} 张牌，实际 {len(self.cards)} 张")

    @property
    def ranks(self) -> Tuple[Rank, ...]:
        return tuple(c.rank for c in self.cards)

    @property
    def key(self) -> Tuple[int, ...]:
        """比较键：牌型 + 5 张牌的点数"""
        return (int(self.combo_rank),) + tuple(int(r) for r in self.ranks)

    @property
    def high_rank(self) -> Rank:
        """主牌点数（顺子为最大一张）"""
        return self.cards[0].rank

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Combo):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: "Combo") -> bool:
        if not isinstance(other, Combo):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    # ------------------------------------------------------------
    #  渲染
    # ------------------------------------------------------------

    def _render(self, parts) -> str:
        return f"{self.combo_rank.label}: {' '.join(parts)}"

    @property
    def glyph(self) -> str:
        return self._render(c.glyph for c in self.cards)

    @property
    def display(self) -> str:
        return self._render(c.display for c in self.cards)

    @property
    def ascii(self) -> str:
        return self._render(c.ascii for c in self.cards)

    def __repr__(self) -> str:
        return f"[{self.combo_rank.name}] {' '.join(c.display for c in self.cards)}"
