"""牌模型单元测试 - 点数、花色、渲染、解析与牌堆"""

import random

import pytest
from src.poker.card import (
    Card, Rank, Suit, CARD_GLYPH,
    deck_unshuffled, deck_shuffled, deal_cards, sort_cards, parse_cards,
    ACE_OF_SPADES, ACE_OF_HEARTS, DEUCE_OF_SPADES, TEN_OF_HEARTS,
    QUEEN_OF_HEARTS, KING_OF_CLUBS, JACK_OF_DIAMONDS,
)


class TestRankAndSuit:
    """点数顺序与花色"""

    def test_rank_order(self):
        assert list(Rank) == sorted(Rank)
        assert Rank.DEUCE < Rank.THREE < Rank.TEN < Rank.KING < Rank.ACE
        assert len(Rank) == 13

    def test_suits(self):
        assert [s.value for s in Suit] == ["♠", "♥", "♦", "♣"]

    def test_card_compares_by_rank(self):
        assert DEUCE_OF_SPADES < ACE_OF_HEARTS
        assert Card(Rank.ACE, Suit.SPADES) == ACE_OF_SPADES
        assert ACE_OF_SPADES != ACE_OF_HEARTS

    def test_card_is_hashable_and_immutable(self):
        assert len({ACE_OF_SPADES, Card(Rank.ACE, Suit.SPADES), ACE_OF_HEARTS}) == 2
        with pytest.raises(AttributeError):
            ACE_OF_SPADES.rank = Rank.KING


class TestRendering:
    """短/长 Unicode 与 ASCII 渲染"""

    def test_display(self):
        assert ACE_OF_SPADES.display == "A♠"
        assert TEN_OF_HEARTS.display == "t♥"
        assert repr(KING_OF_CLUBS) == "K♣"

    def test_ascii(self):
        assert ACE_OF_SPADES.ascii == "Aa"
        assert TEN_OF_HEARTS.ascii == "tb"
        assert JACK_OF_DIAMONDS.ascii == "Jc"
        assert KING_OF_CLUBS.ascii == "Kd"

    def test_glyph(self):
        assert ACE_OF_SPADES.glyph == "\U0001F0A1"
        assert DEUCE_OF_SPADES.glyph == "\U0001F0A2"
        assert QUEEN_OF_HEARTS.glyph == "\U0001F0BD"
        assert JACK_OF_DIAMONDS.glyph == "\U0001F0CB"
        assert KING_OF_CLUBS.glyph == "\U0001F0DE"

    def test_glyph_table_has_52_distinct_symbols(self):
        assert len(CARD_GLYPH) == 52
        assert len(set(CARD_GLYPH.values())) == 52
        # 跳过骑士码位
        assert not any(ord(g) & 0xF == 0xC for g in CARD_GLYPH.values())


class TestParsing:
    """Card.from_string 与 parse_cards"""

    @pytest.mark.parametrize("text,expected", [
        ("Aa", ACE_OF_SPADES),
        ("A♠", ACE_OF_SPADES),
        ("ab", ACE_OF_HEARTS),
        ("tb", TEN_OF_HEARTS),
        ("Tb", TEN_OF_HEARTS),
        ("10♥", TEN_OF_HEARTS),
        ("KD", KING_OF_CLUBS),
        (" Qb ", QUEEN_OF_HEARTS),
    ])
    def test_from_string(self, text, expected):
        assert Card.from_string(text) == expected

    @pytest.mark.parametrize("text", ["", "A", "Ax", "1a", "Zz", "11b"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            Card.from_string(text)

    def test_round_trip_whole_deck(self):
        deck = deck_unshuffled()
        assert [Card.from_string(c.ascii) for c in deck] == deck
        assert [Card.from_string(c.display) for c in deck] == deck

    def test_parse_cards(self):
        assert parse_cards("Aa, Kd  tb") == [ACE_OF_SPADES, KING_OF_CLUBS, TEN_OF_HEARTS]
        assert parse_cards("") == []


class TestDeck:
    """牌堆构造、洗牌与发牌"""

    def test_unshuffled_order(self):
        deck = deck_unshuffled()
        assert len(deck) == 52
        assert len(set(deck)) == 52
        assert deck[0] == ACE_OF_SPADES
        assert deck[1] == DEUCE_OF_SPADES
        assert deck[13] == ACE_OF_HEARTS
        assert deck[-1] == KING_OF_CLUBS
        assert [c.suit for c in deck[::13]] == [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]

    def test_shuffled_is_permutation(self):
        deck = deck_shuffled()
        assert len(deck) == 52
        assert set(deck) == set(deck_unshuffled())

    def test_seeded_shuffle_is_reproducible(self):
        assert deck_shuffled(random.Random(42)) == deck_shuffled(random.Random(42))

    def test_deal_cards(self):
        hand = deal_cards(7, random.Random(1))
        assert len(hand) == 7
        assert len(set(hand)) == 7

    @pytest.mark.parametrize("count", [-1, 53])
    def test_deal_cards_out_of_range(self, count):
        with pytest.raises(ValueError):
            deal_cards(count)

    def test_sort_cards_descending(self):
        ordered = sort_cards([DEUCE_OF_SPADES, ACE_OF_HEARTS, TEN_OF_HEARTS])
        assert [c.rank for c in ordered] == [Rank.ACE, Rank.TEN, Rank.DEUCE]
