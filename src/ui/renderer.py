"""终端可视化渲染器 - 在终端中展示发牌与牌型识别结果"""

import os
import time
from typing import List

from src.poker.card import Card, Suit
from src.poker.combo_type import Combo, ComboRank


# 颜色常量 (ANSI)
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

# 牌型中文名
COMBO_TYPE_NAME = {
    ComboRank.HIGH_CARD: "高牌",
    ComboRank.PAIR: "一对",
    ComboRank.TWO_PAIR: "两对",
    ComboRank.THREE_OF_KIND: "三条",
    ComboRank.STRAIGHT: "顺子",
    ComboRank.FLUSH: "同花",
    ComboRank.FULL_HOUSE: "葫芦",
    ComboRank.FOUR_OF_KIND: "四条 💣",
    ComboRank.STRAIGHT_FLUSH: "同花顺 🔥",
    ComboRank.ROYAL_FLUSH: "皇家同花顺 👑",
}

# 渲染风格 → Card 属性名
STYLES = {
    "glyph": "glyph",
    "unicode": "display",
    "ascii": "ascii",
}

_RED_SUITS = (Suit.HEARTS, Suit.DIAMONDS)


class TerminalRenderer:
    """终端可视化渲染器"""

    def __init__(self, delay: float = 0.8, style: str = "unicode", color: bool = True):
        if style not in STYLES:
            raise ValueError(f"未知渲染风格: {style}")
        self.delay = delay  # 每步之间的延迟（秒）
        self.style = style
        self.color = color

    def clear(self) -> None:
        """清屏"""
        os.system("clear" if os.name != "nt" else "cls")

    def pause(self, seconds: float = 0) -> None:
        """暂停"""
        time.sleep(seconds or self.delay)

    # ============================================================
    #  牌面渲染
    # ============================================================

    def format_card(self, card: Card) -> str:
        text = getattr(card, STYLES[self.style])
        # 红色花色高亮
        if self.color and card.suit in _RED_SUITS:
            return f"{RED}{text}{RESET}"
        return text

    def format_cards(self, cards: List[Card]) -> str:
        """将牌列表格式化为字符串"""
        return " ".join(self.format_card(c) for c in cards)

    def format_combo(self, combo: Combo) -> str:
        """牌型名 + 5张牌"""
        name = COMBO_TYPE_NAME.get(combo.combo_rank, combo.combo_rank.label)
        if self.color:
            name = f"{GREEN}{BOLD}{name}{RESET}"
        return f"[{name}] {self.format_cards(list(combo.cards))}"

    # ============================================================
    #  分隔线与标题
    # ============================================================

    @staticmethod
    def separator(char: str = "─", width: int = 60) -> str:
        return char * width

    def print_header(self, title: str) -> None:
        """打印带框的标题"""
        if self.color:
            print(f"\n{YELLOW}{BOLD}{'═' * 60}{RESET}")
            print(f"{YELLOW}{BOLD}  {title}{RESET}")
            print(f"{YELLOW}{BOLD}{'═' * 60}{RESET}\n")
        else:
            print(f"\n{'═' * 60}\n  {title}\n{'═' * 60}\n")

    # ============================================================
    #  结果展示
    # ============================================================

    def show_hand(self, cards: List[Card], combo: Combo) -> None:
        """展示一手牌及其最佳组合"""
        print(f"  手牌 ({len(cards)}张): {self.format_cards(cards)}")
        print(f"  最佳组合: {self.format_combo(combo)}")
        print(f"  {DIM if self.color else ''}{combo.ascii}{RESET if self.color else ''}")
        print()

    def show_compare(self, first: Combo, second: Combo) -> None:
        """展示两手牌的比较结果"""
        print(f"  {self.separator('─', 40)}")
        if first == second:
            verdict = "平局"
        elif first > second:
            verdict = "第一手胜"
        else:
            verdict = "第二手胜"
        color = CYAN if self.color else ""
        reset = RESET if self.color else ""
        print(f"  {color}{self.format_combo(first)}  vs  {self.format_combo(second)}{reset}")
        print(f"  结果: {verdict}")
        print()
