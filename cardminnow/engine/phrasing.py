"""牌型描述 - 把评估结果渲染成一句英文"""

from typing import Callable, Dict

from .card import Card, Rank, capitalize
from .exceptions import InvalidHandError
from .hand_type import HandType, Classification, NEEDS_SECONDARY

ROYAL_FLUSH = "**ROYAL FLUSH**"


def plural(card: Card) -> str:
    """点数名复数：six 加 es，其余加 s"""
    if not card.is_wild and card.rank == Rank.SIX:
        return card.name + "es"
    return card.name + "s"


def _high_card(c: Classification) -> str:
    return f"{capitalize(c.high_card.name)} high."


def _pair(c: Classification) -> str:
    return f"Pair of {plural(c.high_card)}."


def _two_pair(c: Classification) -> str:
    return f"Two pair, {plural(c.high_card)} and {plural(c.secondary[0])}."


def _three_of_a_kind(c: Classification) -> str:
    return f"Three {plural(c.high_card)}."


def _straight(c: Classification) -> str:
    return f"{capitalize(c.high_card.name)}-high straight."


def _flush(c: Classification) -> str:
    high = c.high_card
    return f"{capitalize(high.name)}-high flush of {high.suit_name}."


def _full_house(c: Classification) -> str:
    return f"Full house, {plural(c.high_card)} over {plural(c.secondary[0])}."


def _four_of_a_kind(c: Classification) -> str:
    return f"Four {plural(c.high_card)}!"


def _straight_flush(c: Classification) -> str:
    high = c.high_card
    if high.rank == Rank.ACE:
        return f"{ROYAL_FLUSH} of {capitalize(high.suit_name)}!"
    return f"{capitalize(high.name)}-high straight flush of {high.suit_name}!"


def _five_of_a_kind(c: Classification) -> str:
    return f"Five {plural(c.high_card)}! Someone's feeling lucky."


PHRASES: Dict[HandType, Callable[[Classification], str]] = {
    HandType.HIGH_CARD: _high_card,
    HandType.PAIR: _pair,
    HandType.TWO_PAIR: _two_pair,
    HandType.THREE_OF_A_KIND: _three_of_a_kind,
    HandType.STRAIGHT: _straight,
    HandType.FLUSH: _flush,
    HandType.FULL_HOUSE: _full_house,
    HandType.FOUR_OF_A_KIND: _four_of_a_kind,
    HandType.STRAIGHT_FLUSH: _straight_flush,
    HandType.FIVE_OF_A_KIND: _five_of_a_kind,
}


def describe(classification: Classification) -> str:
    """生成描述；关键牌组缺失时抛 InvalidHandError"""
    if not classification.primary:
        raise InvalidHandError("The primary group is empty; this hand should be invalid.")
    if classification.type in NEEDS_SECONDARY and not classification.secondary:
        name = classification.type.name.lower().replace("_", " ")
        raise InvalidHandError(f"Invalid {name} created: missing secondary group.")
    return PHRASES[classification.type](classification)
