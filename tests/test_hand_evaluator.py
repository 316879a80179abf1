"""牌型评估器单元测试 - 覆盖分桶、十种牌型、百搭牌补位与花色平局"""

import pytest
from typing import List

from cardminnow.engine.card import Card, Rank, Suit, create_deck
from cardminnow.engine.hand_type import HandType
from cardminnow.engine.hand_evaluator import (
    bucket_cards, best_collection, best_straight, best_flush,
    best_straight_flush, straight_from_ordered, evaluate_cards,
)
from cardminnow.shell.interpreter import interpret


# ============================================================
#  辅助：快速构造牌
# ============================================================

def cards(text: str) -> List[Card]:
    """用输入语法构造一组牌，例如 "w, as, 10h"；空串表示空组"""
    if not text.strip():
        return []
    return interpret(text)


def evaluate(text: str):
    result = evaluate_cards(cards(text))
    assert result is not None
    return result


# ============================================================
#  分桶
# ============================================================

class TestBucketCards:
    """按点数 / 花色 / 连续段分桶"""

    def test_simple_buckets(self):
        b = bucket_cards(cards("2s, 3d, 3s, 2h, 3h"))
        assert b.has_wild is False
        assert b.by_rank[3] == tuple(cards("3s, 3h, 3d"))
        assert b.by_rank[2] == tuple(cards("2s, 2h"))
        assert b.by_suit[Suit.SPADES] == tuple(cards("3s, 2s"))
        assert b.by_suit[Suit.HEARTS] == tuple(cards("3h, 2h"))
        assert b.by_suit[Suit.DIAMONDS] == tuple(cards("3d"))
        assert Suit.CLUBS not in b.by_suit
        assert list(b.runs) == [Card(3, Suit.SPADES)]
        assert b.runs[Card(3, Suit.SPADES)] == tuple(cards("3s, 2s"))

    def test_complicated_buckets(self):
        b = bucket_cards(cards("W, ah, ks, qs, js, jh, 10h, 9s, 7d, 4c, 3d, 3c, 2d"))
        assert b.has_wild is True

        assert len(b.runs) == 3
        assert b.runs[Card(14, Suit.HEARTS)] == tuple(cards("ah, ks, qs, js, 10h, 9s"))
        assert b.runs[Card(7, Suit.DIAMONDS)] == tuple(cards("7d"))
        assert b.runs[Card(4, Suit.CLUBS)] == tuple(cards("4c, 3d, 2d"))

        assert b.by_suit[Suit.HEARTS] == tuple(cards("ah, jh, 10h"))
        assert b.by_suit[Suit.SPADES] == tuple(cards("ks, qs, js, 9s"))
        assert b.by_suit[Suit.DIAMONDS] == tuple(cards("7d, 3d, 2d"))
        assert b.by_suit[Suit.CLUBS] == tuple(cards("4c, 3c"))

        assert b.by_rank[14] == tuple(cards("ah"))
        assert b.by_rank[11] == tuple(cards("js, jh"))
        assert b.by_rank[3] == tuple(cards("3d, 3c"))

    def test_wild_never_bucketed(self):
        b = bucket_cards(cards("w, 5h"))
        assert b.has_wild is True
        assert all(not c.is_wild for g in b.by_rank.values() for c in g)
        assert all(not c.is_wild for g in b.by_suit.values() for c in g)

    def test_invalid_hand_not_bucketed(self):
        assert bucket_cards([]) is None
        assert bucket_cards([Card(), Card()]) is None
        assert bucket_cards([Card(30, Suit.SPADES)]) is None
        assert bucket_cards(cards("as, as")) is None


# ============================================================
#  同点数组合
# ============================================================

class TestBestCollection:
    """对子、两对、三条、葫芦、四条"""

    def test_full_house_from_two_groups(self):
        result = best_collection(bucket_cards(cards("ah, as, kc, jd, 10d, 10c, 10s, 2d, 2h, 2s")))
        assert result.type == HandType.FULL_HOUSE
        assert result.has_wild is False
        assert list(result.primary) == cards("10s, 10d, 10c")
        assert list(result.secondary) == cards("as, ah")

    def test_wild_makes_three(self):
        result = best_collection(bucket_cards(cards("w, js, 10s, 10h")))
        assert result.type == HandType.THREE_OF_A_KIND
        assert result.has_wild is True
        assert list(result.primary) == cards("10s, 10h")
        assert result.secondary == ()

    def test_wild_makes_full_house(self):
        result = best_collection(bucket_cards(cards("w, 8s, 8d, 7d, 7c")))
        assert result.type == HandType.FULL_HOUSE
        assert list(result.primary) == cards("8s, 8d")
        assert list(result.secondary) == cards("7d, 7c")

    def test_four_of_a_kind(self):
        result = best_collection(bucket_cards(cards("4s, 4h, 4d, 4c")))
        assert result.type == HandType.FOUR_OF_A_KIND
        assert list(result.primary) == cards("4s, 4h, 4d, 4c")
        assert result.secondary == ()

    def test_equal_size_groups_prefer_higher_rank(self):
        result = best_collection(bucket_cards(cards("5s, 5h, qs, qh, 9s, 9h")))
        assert result.type == HandType.TWO_PAIR
        assert list(result.primary) == cards("qs, qh")
        assert list(result.secondary) == cards("9s, 9h")

    def test_two_triples_make_full_house(self):
        result = best_collection(bucket_cards(cards("4s, 4h, 4d, ks, kh, kd")))
        assert result.type == HandType.FULL_HOUSE
        assert list(result.primary) == cards("ks, kh, kd")
        assert list(result.secondary) == cards("4s, 4h")

    def test_five_of_a_kind_needs_wild(self):
        result = best_collection(bucket_cards(cards("w, 9s, 9h, 9d, 9c")))
        assert result.type == HandType.FIVE_OF_A_KIND
        assert list(result.primary) == cards("9s, 9h, 9d, 9c")


# ============================================================
#  顺子
# ============================================================

class TestStraights:
    """普通顺子与竞争顺子"""

    def test_too_few_cards_with_wild(self):
        result = best_straight(bucket_cards(cards("w, as, ks, kh, qs")))
        assert result.type == HandType.HIGH_CARD
        assert result.has_wild is True
        assert result.primary == ()

    def test_hole_breaks_straight(self):
        result = best_straight(bucket_cards(cards("10s, 9h, 8d, 6c, 3s")))
        assert result.type == HandType.HIGH_CARD
        assert result.has_wild is False
        assert result.primary == ()
        assert result.secondary == ()

    def test_simple_straight(self):
        straight = cards("jh, 10s, 9d, 8c, 7h")
        result = best_straight(bucket_cards(straight))
        assert result.type == HandType.STRAIGHT
        assert list(result.primary) == straight

    def test_highest_of_competing_straights(self):
        result = best_straight(bucket_cards(cards("ad, ks, qh, jh, 10s, 8d, 7c, 6h, 5h, 4s")))
        assert result.type == HandType.STRAIGHT
        assert list(result.primary) == cards("ad, ks, qh, jh, 10s")

    def test_duplicate_ranks_use_highest_suit(self):
        result = best_straight(bucket_cards(cards("ad, ks, kh, kd, qs, jd, 10c, 6h, 5h, 4s")))
        assert result.type == HandType.STRAIGHT
        assert list(result.primary) == cards("ad, ks, qs, jd, 10c")

    def test_no_wheel(self):
        """A 只当最大牌，A-2-3-4-5 不成顺"""
        result = best_straight(bucket_cards(cards("as, 5h, 4d, 3c, 2s")))
        assert result.type == HandType.HIGH_CARD

    def test_requires_ordered_input(self):
        assert straight_from_ordered(None, True) == ()
        assert straight_from_ordered(cards("9s, 8s, 7s"), True) == ()


class TestWildStraights:
    """百搭牌补头尾、补内部空缺"""

    def test_outside_straight(self):
        result = best_straight(bucket_cards(cards("w, 10s, 9d, 8c, 7h")))
        assert result.type == HandType.STRAIGHT
        assert list(result.primary) == cards("10s, 9d, 8c, 7h")

    def test_inside_straight(self):
        result = best_straight(bucket_cards(cards("w, js, 9d, 8c, 7h")))
        assert result.type == HandType.STRAIGHT
        assert list(result.primary) == cards("js, 9d, 8c, 7h")

    def test_competing_wild_straights(self):
        result = best_straight(bucket_cards(cards("w, ah, ks, kh, jh, 10s, 6d, 5c, 4h, 3c")))
        assert result.type == HandType.STRAIGHT
        assert list(result.primary) == cards("ah, ks, jh, 10s")

    def test_two_holes_rewind_after_gap(self):
        result = best_straight(bucket_cards(cards("w, ah, ks, kh, jh, 9s, 8d, 7c, 6d, 5c, 4h, 3c")))
        assert result.type == HandType.STRAIGHT
        assert list(result.primary) == cards("jh, 9s, 8d, 7c")

    def test_gap_right_after_first_card(self):
        """空缺紧跟在第一张牌之后，断开时也要回退到空缺后的那张"""
        result = best_straight(bucket_cards(cards("w, kh, jd, 9c, 8s, 7h")))
        assert result.type == HandType.STRAIGHT
        assert list(result.primary) == cards("jd, 9c, 8s, 7h")

    def test_break_without_gap_keeps_current_card(self):
        result = best_straight(bucket_cards(cards("w, ah, 9s, 8d, 7c, 6h")))
        assert result.type == HandType.STRAIGHT
        assert list(result.primary) == cards("9s, 8d, 7c, 6h")

    def test_scattered_cards_no_straight(self):
        result = best_straight(bucket_cards(cards("w, ah, 7s, 3h, 2s")))
        assert result.type == HandType.HIGH_CARD

    def test_wild_never_in_result(self):
        result = best_straight(bucket_cards(cards("w, 6s, 5h, 4d, 3c")))
        assert all(not c.is_wild for c in result.primary)


# ============================================================
#  同花 / 同花顺
# ============================================================

class TestFlushes:
    """同花取最大五张，花色平局按 黑桃 > 红桃 > 方块 > 梅花"""

    def test_top_five_of_suit(self):
        result = best_flush(bucket_cards(cards("ah, qh, 9h, 7h, 4h, 2h")))
        assert result.type == HandType.FLUSH
        assert list(result.primary) == cards("ah, qh, 9h, 7h, 4h")

    def test_wild_needs_four(self):
        result = best_flush(bucket_cards(cards("w, as, 7s, 6h, 5d, 4c, 3s, 2s, 2h")))
        assert result.type == HandType.FLUSH
        assert list(result.primary) == cards("as, 7s, 3s, 2s")

    def test_no_flush(self):
        result = best_flush(bucket_cards(cards("as, ks, qs, js, 10h")))
        assert result.type == HandType.HIGH_CARD
        assert result.primary == ()

    def test_tie_goes_to_spades(self):
        result = best_flush(bucket_cards(cards("as, ks, 9s, 5s, 3s, ah, kh, 9h, 5h, 3h")))
        assert list(result.primary) == cards("as, ks, 9s, 5s, 3s")

    def test_tie_goes_to_hearts_over_diamonds(self):
        result = best_flush(bucket_cards(cards("qd, 10d, 8d, 6d, 4d, qh, 10h, 8h, 6h, 4h")))
        assert list(result.primary) == cards("qh, 10h, 8h, 6h, 4h")

    def test_tie_goes_to_diamonds_over_clubs(self):
        result = best_flush(bucket_cards(cards("ad, kd, 9d, 5d, 3d, ac, kc, 9c, 5c, 3c")))
        assert list(result.primary) == cards("ad, kd, 9d, 5d, 3d")

    def test_higher_card_beats_suit_priority(self):
        result = best_flush(bucket_cards(cards("as, ks, 9s, 5s, 3s, ah, kh, 9h, 5h, 4h")))
        assert list(result.primary) == cards("ah, kh, 9h, 5h, 4h")

    def test_straight_flush_per_suit(self):
        result = best_straight_flush(bucket_cards(cards("w, as, 7s, 6s, 5s, 4s, 3s, 2s")))
        assert result.type == HandType.STRAIGHT_FLUSH
        assert list(result.primary) == cards("7s, 6s, 5s, 4s")

    def test_straight_flush_higher_suit_wins(self):
        result = best_straight_flush(bucket_cards(cards("9c, 8c, 7c, 6c, 5c, 8h, 7h, 6h, 5h, 4h")))
        assert list(result.primary) == cards("9c, 8c, 7c, 6c, 5c")


# ============================================================
#  完整评估
# ============================================================

class TestEvaluate:
    """从任意张数的牌中选出最佳牌型"""

    @pytest.mark.parametrize("text, hand_type, primary, secondary", [
        ("8c, 2d", HandType.HIGH_CARD, "8c", ""),
        ("w, 2c", HandType.PAIR, "2c", ""),
        ("as, 3c, 3s, 2h, 2d", HandType.TWO_PAIR, "3s, 3c", "2h, 2d"),
        ("w, ah, jd, 10h, 10c, 9h", HandType.THREE_OF_A_KIND, "10h, 10c", ""),
        ("kh, kd, 7s, 6h, 5d, 4c, 3s, 2s, 2h", HandType.STRAIGHT, "7s, 6h, 5d, 4c, 3s", ""),
        ("w, As, 7s, 6h, 5d, 4c, 3s, 2s, 2h", HandType.FLUSH, "As, 7s, 3s, 2s", ""),
        ("w, As, Ah, 7s, 6h, 5d, 4c, 3s, 2s, 2h", HandType.FULL_HOUSE, "As, Ah", "2s, 2h"),
        ("w, As, Ah, 7s, 6h, 5d, 4c, 3s, 2s, 2h, 2d", HandType.FOUR_OF_A_KIND, "2s, 2h, 2d", ""),
        ("w, As, Ah, 7s, 6s, 5s, 4s, 3s, 2s, 2h, 2d", HandType.STRAIGHT_FLUSH, "7s, 6s, 5s, 4s", ""),
        ("w, As, Ah, 7s, 6s, 5s, 4s, 3s, 2s, 2h, 2d, 2c", HandType.FIVE_OF_A_KIND, "2s, 2h, 2d, 2c", ""),
        ("w, js, 9d, 8c, 7h", HandType.STRAIGHT, "js, 9d, 8c, 7h", ""),
        ("w, kh, jd, 9c, 8s, 7h", HandType.STRAIGHT, "jd, 9c, 8s, 7h", ""),
        ("9h, 8h, 7c, 6h, 5h, 2h", HandType.FLUSH, "9h, 8h, 6h, 5h, 2h", ""),
        ("as, ad, ac, ks, kd, 9s, 5s, 3s", HandType.FULL_HOUSE, "as, ad, ac", "ks, kd"),
    ])
    def test_best_hand(self, text, hand_type, primary, secondary):
        result = evaluate(text)
        assert result.type == hand_type
        assert list(result.primary) == cards(primary)
        assert list(result.secondary) == cards(secondary)

    def test_whole_deck(self):
        result = evaluate_cards(create_deck())
        assert result.type == HandType.STRAIGHT_FLUSH
        assert list(result.primary) == cards("As, Ks, Qs, Js, 10s")

    def test_whole_deck_with_wild(self):
        result = evaluate_cards(create_deck(with_wild=True))
        assert result.type == HandType.FIVE_OF_A_KIND
        assert list(result.primary) == cards("As, Ah, Ad, Ac")

    def test_lone_wild_is_high_card(self):
        result = evaluate_cards([Card()])
        assert result.type == HandType.HIGH_CARD
        assert result.primary == (Card(),)
        assert result.has_wild is True

    def test_input_order_irrelevant(self):
        forward = cards("2h, 3h, 4h, 5h, 6h, 6s")
        assert evaluate_cards(forward) == evaluate_cards(list(reversed(forward)))

    def test_input_not_mutated(self):
        hand = cards("2h, as, 9d")
        snapshot = list(hand)
        evaluate_cards(hand)
        assert hand == snapshot

    def test_invalid_returns_none(self):
        assert evaluate_cards([]) is None
        assert evaluate_cards([Card(), Card(Rank.ACE, Suit.WILD)]) is None
