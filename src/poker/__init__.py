# 扑克牌型识别模块
from .card import (
    Card, Rank, Suit, RANK_DISPLAY, SUIT_ASCII, CARD_GLYPH,
    deck_unshuffled, deck_shuffled, deal_cards, sort_cards, parse_cards,
)
from .basket import RankBasket, split_by_rank, find_basket, get_kickers
from .combo_type import Combo, ComboRank, COMBO_RANK_NAME
from .combo_detector import detect_combo, compare_combos, can_beat, COMBO_DETECTORS
