"""按点数分组 - 牌型检测共用的分组与踢脚工具"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .card import Card, Rank


@dataclass
class RankBasket:
    """同一点数的一组牌（检测过程中的临时结构）"""
    rank: Rank
    cards: List[Card] = field(default_factory=list)

    @property
    def size(self) -> int:
        return len(self.cards)


def split_by_rank(cards: Iterable[Card]) -> List[RankBasket]:
    """
    按点数把牌分组，返回按点数从大到小排列的新列表。
    组内保留输入顺序；返回的篮子归调用方独占。
    """
    by_rank = {}
    for card in cards:
        by_rank.setdefault(card.rank, []).append(card)
    return [
        RankBasket(rank=rank, cards=by_rank[rank])
        for rank in sorted(by_rank, reverse=True)
    ]


def find_basket(
    baskets: List[RankBasket],
    k: int,
    exclude: Sequence[Rank] = (),
) -> Optional[RankBasket]:
    """
    按现有顺序（点数从大到小）找第一个至少有 k 张且点数不在 exclude 中的篮子，
    从中取出恰好 k 张作为新的 RankBasket 返回。
    原篮子相应减少，空了就从列表中移除。找不到返回 None。
    """
    for i, basket in enumerate(baskets):
        if basket.rank in exclude or basket.size < k:
            continue
        taken, basket.cards = basket.cards[:k], basket.cards[k:]
        if not basket.cards:
            del baskets[i]
        return RankBasket(rank=basket.rank, cards=taken)
    return None


def flatten(baskets: Iterable[RankBasket]) -> List[Card]:
    """篮子中剩余的所有牌"""
    return [card for basket in baskets for card in basket.cards]


def get_kickers(cards: Iterable[Card], n: int) -> List[Card]:
    """按点数从大到小排序，取前 n 张"""
    ordered = sorted(cards, key=lambda c: c.rank, reverse=True)
    assert n <= len(ordered), f"踢脚牌不足: 需要 {n} 张，只有 {len(ordered)} 张"
    return ordered[:n]
