"""牌的定义 - 标准52张扑克牌的数据模型"""

from enum import IntEnum, Enum
from dataclasses import dataclass
from typing import List, Optional
import random
import re


class Rank(IntEnum):
    """点数枚举（数值越大牌越大，A 最大）"""
    DEUCE = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(str, Enum):
    """花色枚举（只比较相等，不分大小）"""
    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"


# 点数显示映射
RANK_DISPLAY = {
    Rank.DEUCE: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7",
    Rank.EIGHT: "8", Rank.NINE: "9", Rank.TEN: "t",
    Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K",
    Rank.ACE: "A",
}

# 花色 ASCII 编码
SUIT_ASCII = {
    Suit.SPADES: "a",
    Suit.HEARTS: "b",
    Suit.DIAMONDS: "c",
    Suit.CLUBS: "d",
}

# Unicode 扑克牌区块: 每个花色占16个码位，0xC 是骑士(Knight)，标准牌不用
_GLYPH_SUIT_BASE = {
    Suit.SPADES: 0x1F0A0,
    Suit.HEARTS: 0x1F0B0,
    Suit.DIAMONDS: 0x1F0C0,
    Suit.CLUBS: 0x1F0D0,
}

_GLYPH_RANK_OFFSET = {
    Rank.ACE: 0x1, Rank.DEUCE: 0x2, Rank.THREE: 0x3,
    Rank.FOUR: 0x4, Rank.FIVE: 0x5, Rank.SIX: 0x6,
    Rank.SEVEN: 0x7, Rank.EIGHT: 0x8, Rank.NINE: 0x9,
    Rank.TEN: 0xA, Rank.JACK: 0xB, Rank.QUEEN: 0xD,
    Rank.KING: 0xE,
}

# (点数, 花色) → 单字符牌面，共52项
CARD_GLYPH = {
    (rank, suit): chr(base + _GLYPH_RANK_OFFSET[rank])
    for suit, base in _GLYPH_SUIT_BASE.items()
    for rank in Rank
}

# 解析用的反向映射（大小写不敏感，另外接受 "10"）
_RANK_PARSE = {text.upper(): rank for rank, text in RANK_DISPLAY.items()}
_RANK_PARSE["10"] = Rank.TEN
_SUIT_PARSE = {code: suit for suit, code in SUIT_ASCII.items()}
_SUIT_PARSE.update({suit.value: suit for suit in Suit})


@dataclass(frozen=True)
class Card:
    """一张扑克牌"""
    rank: Rank
    suit: Suit

    @property
    def display(self) -> str:
        """长格式 Unicode，如 A♠"""
        return f"{RANK_DISPLAY[self.rank]}{self.suit.value}"

    @property
    def ascii(self) -> str:
        """长格式 ASCII，如 Aa"""
        return f"{RANK_DISPLAY[self.rank]}{SUIT_ASCII[self.suit]}"

    @property
    def glyph(self) -> str:
        """短格式：单个 Unicode 扑克牌字符"""
        return CARD_GLYPH[(self.rank, self.suit)]

    def __repr__(self) -> str:
        return self.display

    def __lt__(self, other: "Card") -> bool:
        return self.rank < other.rank

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    @classmethod
    def from_string(cls, text: str) -> "Card":
        """
        解析一张牌，如 "Aa"、"A♠"、"tb"、"10♥"。
        点数不区分大小写；花色可用 a/b/c/d 或 ♠♥♦♣。

        Raises:
            ValueError: 无法解析
        """
        text = text.strip()
        if len(text) < 2:
            raise ValueError(f"Invalid card string: {text!r}")

        rank_str, suit_str = text[:-1], text[-1]
        rank = _RANK_PARSE.get(rank_str.upper())
        suit = _SUIT_PARSE.get(suit_str.lower())
        if rank is None or suit is None:
            raise ValueError(f"Invalid rank or suit in: {text!r}")
        return cls(rank=rank, suit=suit)


def parse_cards(text: str) -> List[Card]:
    """解析空格/逗号分隔的多张牌"""
    return [Card.from_string(part) for part in re.split(r"[\s,]+", text) if part]


# ============================================================
#  52 张牌常量
# ============================================================

DEUCE_OF_SPADES = Card(Rank.DEUCE, Suit.SPADES)
DEUCE_OF_HEARTS = Card(Rank.DEUCE, Suit.HEARTS)
DEUCE_OF_DIAMONDS = Card(Rank.DEUCE, Suit.DIAMONDS)
DEUCE_OF_CLUBS = Card(Rank.DEUCE, Suit.CLUBS)

THREE_OF_SPADES = Card(Rank.THREE, Suit.SPADES)
THREE_OF_HEARTS = Card(Rank.THREE, Suit.HEARTS)
THREE_OF_DIAMONDS = Card(Rank.THREE, Suit.DIAMONDS)
THREE_OF_CLUBS = Card(Rank.THREE, Suit.CLUBS)

FOUR_OF_SPADES = Card(Rank.FOUR, Suit.SPADES)
FOUR_OF_HEARTS = Card(Rank.FOUR, Suit.HEARTS)
FOUR_OF_DIAMONDS = Card(Rank.FOUR, Suit.DIAMONDS)
FOUR_OF_CLUBS = Card(Rank.FOUR, Suit.CLUBS)

FIVE_OF_SPADES = Card(Rank.FIVE, Suit.SPADES)
FIVE_OF_HEARTS = Card(Rank.FIVE, Suit.HEARTS)
FIVE_OF_DIAMONDS = Card(Rank.FIVE, Suit.DIAMONDS)
FIVE_OF_CLUBS = Card(Rank.FIVE, Suit.CLUBS)

SIX_OF_SPADES = Card(Rank.SIX, Suit.SPADES)
SIX_OF_HEARTS = Card(Rank.SIX, Suit.HEARTS)
SIX_OF_DIAMONDS = Card(Rank.SIX, Suit.DIAMONDS)
SIX_OF_CLUBS = Card(Rank.SIX, Suit.CLUBS)

SEVEN_OF_SPADES = Card(Rank.SEVEN, Suit.SPADES)
SEVEN_OF_HEARTS = Card(Rank.SEVEN, Suit.HEARTS)
SEVEN_OF_DIAMONDS = Card(Rank.SEVEN, Suit.DIAMONDS)
SEVEN_OF_CLUBS = Card(Rank.SEVEN, Suit.CLUBS)

EIGHT_OF_SPADES = Card(Rank.EIGHT, Suit.SPADES)
EIGHT_OF_HEARTS = Card(Rank.EIGHT, Suit.HEARTS)
EIGHT_OF_DIAMONDS = Card(Rank.EIGHT, Suit.DIAMONDS)
EIGHT_OF_CLUBS = Card(Rank.EIGHT, Suit.CLUBS)

NINE_OF_SPADES = Card(Rank.NINE, Suit.SPADES)
NINE_OF_HEARTS = Card(Rank.NINE, Suit.HEARTS)
NINE_OF_DIAMONDS = Card(Rank.NINE, Suit.DIAMONDS)
NINE_OF_CLUBS = Card(Rank.NINE, Suit.CLUBS)

TEN_OF_SPADES = Card(Rank.TEN, Suit.SPADES)
TEN_OF_HEARTS = Card(Rank.TEN, Suit.HEARTS)
TEN_OF_DIAMONDS = Card(Rank.TEN, Suit.DIAMONDS)
TEN_OF_CLUBS = Card(Rank.TEN, Suit.CLUBS)

JACK_OF_SPADES = Card(Rank.JACK, Suit.SPADES)
JACK_OF_HEARTS = Card(Rank.JACK, Suit.HEARTS)
JACK_OF_DIAMONDS = Card(Rank.JACK, Suit.DIAMONDS)
JACK_OF_CLUBS = Card(Rank.JACK, Suit.CLUBS)

QUEEN_OF_SPADES = Card(Rank.QUEEN, Suit.SPADES)
QUEEN_OF_HEARTS = Card(Rank.QUEEN, Suit.HEARTS)
QUEEN_OF_DIAMONDS = Card(Rank.QUEEN, Suit.DIAMONDS)
QUEEN_OF_CLUBS = Card(Rank.QUEEN, Suit.CLUBS)

KING_OF_SPADES = Card(Rank.KING, Suit.SPADES)
KING_OF_HEARTS = Card(Rank.KING, Suit.HEARTS)
KING_OF_DIAMONDS = Card(Rank.KING, Suit.DIAMONDS)
KING_OF_CLUBS = Card(Rank.KING, Suit.CLUBS)

ACE_OF_SPADES = Card(Rank.ACE, Suit.SPADES)
ACE_OF_HEARTS = Card(Rank.ACE, Suit.HEARTS)
ACE_OF_DIAMONDS = Card(Rank.ACE, Suit.DIAMONDS)
ACE_OF_CLUBS = Card(Rank.ACE, Suit.CLUBS)


# ============================================================
#  牌堆
# ============================================================

# 每个花色内的顺序：A, 2, 3, ..., K
_DECK_RANK_ORDER = [Rank.ACE] + [r for r in Rank if r != Rank.ACE]


def deck_unshuffled() -> List[Card]:
    """创建一副未洗的52张牌（♠♥♦♣ 依次，每个花色 A→K）"""
    deck: List[Card] = []
    for suit in Suit:
        for rank in _DECK_RANK_ORDER:
            deck.append(Card(rank=rank, suit=suit))

    assert len(deck) == 52, f"牌数错误: {len(deck)}"
    return deck


def deck_shuffled(rng: Optional[random.Random] = None) -> List[Card]:
    """洗好的一副牌（均匀随机排列）"""
    deck = deck_unshuffled()
    (rng or random).shuffle(deck)
    return deck


def deal_cards(count: int, rng: Optional[random.Random] = None) -> List[Card]:
    """洗牌后发出 count 张"""
    if not 0 <= count <= 52:
        raise ValueError(f"发牌数必须在 0~52 之间: {count}")
    return deck_shuffled(rng)[:count]


def sort_cards(cards: List[Card]) -> List[Card]:
    """按点数排序手牌（从大到小）"""
    return sorted(cards, key=lambda c: c.rank, reverse=True)
