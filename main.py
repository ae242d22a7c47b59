"""扑克牌型识别演示 - 主入口"""

import argparse
import logging
import os
import random

from src.poker.card import deal_cards, parse_cards
from src.poker.combo_detector import detect_combo
from src.ui.renderer import TerminalRenderer, STYLES

logger = logging.getLogger(__name__)


def run_one_round(renderer: TerminalRenderer, count: int, rng: random.Random):
    """发一手牌并展示最佳组合，返回该组合"""
    cards = deal_cards(count, rng)
    combo = detect_combo(cards)
    renderer.show_hand(cards, combo)
    return combo


def main():
    """命令行入口"""
    parser = argparse.ArgumentParser(description="扑克牌型识别演示")
    parser.add_argument("--cards", type=int, default=int(os.getenv("POKER_DEAL_SIZE", "7")),
                        help="每手发牌数 (默认7，至少5)")
    parser.add_argument("--rounds", type=int, default=1, help="发牌轮数 (默认1)")
    parser.add_argument("--hand", type=str, default=None,
                        help='直接识别给定的牌，如 "Aa Kb Qc Jd ta"')
    parser.add_argument("--style", choices=sorted(STYLES), default="unicode", help="牌面渲染风格")
    parser.add_argument("--seed", type=int, default=None, help="随机种子")
    parser.add_argument("--delay", type=float, default=0.8, help="每轮延迟秒数 (默认0.8)")
    parser.add_argument("--fast", action="store_true", help="快速模式 (无延迟)")
    parser.add_argument("--no-color", action="store_true", help="关闭颜色")
    parser.add_argument("--verbose", action="store_true", help="输出调试日志")
    args = parser.parse_args()

    level = "DEBUG" if args.verbose else os.getenv("POKER_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    renderer = TerminalRenderer(
        delay=0.0 if args.fast else args.delay,
        style=args.style,
        color=not args.no_color,
    )

    # 给定手牌模式
    if args.hand:
        try:
            cards = parse_cards(args.hand)
        except ValueError as e:
            parser.error(str(e))
        if len(cards) < 5:
            parser.error(f"至少需要5张牌，只给了 {len(cards)} 张")
        if len(set(cards)) != len(cards):
            parser.error("手牌中有重复的牌")
        renderer.print_header("🃏 牌型识别")
        renderer.show_hand(cards, detect_combo(cards))
        return

    if not 5 <= args.cards <= 52:
        parser.error(f"每手发牌数必须在 5~52 之间: {args.cards}")

    rng = random.Random(args.seed)
    logger.info("开始发牌: %d 轮，每手 %d 张，seed=%s", args.rounds, args.cards, args.seed)

    previous = None
    for i in range(args.rounds):
        renderer.print_header(f"🃏 第 {i + 1}/{args.rounds} 手")
        combo = run_one_round(renderer, args.cards, rng)
        if previous is not None:
            renderer.show_compare(previous, combo)
        previous = combo
        if i + 1 < args.rounds:
            renderer.pause()


if __name__ == "__main__":
    main()
