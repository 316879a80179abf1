"""牌的定义 - 52张标准扑克牌 + 一张百搭牌(wild)的数据模型"""

from enum import IntEnum
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, List, Optional, Sequence


class Rank(IntEnum):
    """点数枚举（数值越大牌越大）"""
    TWO = 2
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


class Suit(IntEnum):
    """花色枚举：梅花 < 方块 < 红桃 < 黑桃 < 百搭"""
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    SPADES = 4
    WILD = 5


MIN_RANK = int(Rank.TWO)
MAX_RANK = int(Rank.ACE)

# 点数英文名（用于描述文本）
RANK_NAME = {
    Rank.TWO: "deuce", Rank.THREE: "three", Rank.FOUR: "four",
    Rank.FIVE: "five", Rank.SIX: "six", Rank.SEVEN: "seven",
    Rank.EIGHT: "eight", Rank.NINE: "nine", Rank.TEN: "ten",
    Rank.JACK: "jack", Rank.QUEEN: "queen", Rank.KING: "king",
    Rank.ACE: "ace",
}

# 点数简写显示
RANK_DISPLAY = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7",
    Rank.EIGHT: "8", Rank.NINE: "9", Rank.TEN: "10",
    Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K",
    Rank.ACE: "A",
}

SUIT_NAME = {
    Suit.CLUBS: "clubs",
    Suit.DIAMONDS: "diamonds",
    Suit.HEARTS: "hearts",
    Suit.SPADES: "spades",
    Suit.WILD: "joker",
}

SUIT_SYMBOL = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
    Suit.WILD: "🃏",
}

WILD_NAME = "joker"
INVALID_NAME = "invalid"


def _rank_in_range(rank: int) -> bool:
    return MIN_RANK <= rank <= MAX_RANK


@total_ordering
@dataclass(frozen=True)
class Card:
    """
    一张扑克牌（不可变）。

    点数超出 [2, 14] 时构造不会抛异常，点数保持默认值 0，
    这样的非百搭牌 is_valid() 为 False，需要调用方显式检查。
    无参构造得到一张百搭牌。
    """
    rank: int = 0
    suit: Suit = Suit.WILD

    def __post_init__(self):
        if _rank_in_range(self.rank):
            object.__setattr__(self, "rank", Rank(self.rank))
        else:
            object.__setattr__(self, "rank", 0)

    @property
    def is_wild(self) -> bool:
        return self.suit == Suit.WILD

    def is_valid(self) -> bool:
        """百搭牌任何点数都合法；普通牌点数必须在 [2, 14]"""
        if self.is_wild:
            return True
        return _rank_in_range(self.rank)

    def with_rank(self, rank: int) -> Optional["Card"]:
        """
        返回换了点数的新牌。
        点数非法时返回 None，原牌保持不变。
        """
        if not _rank_in_range(rank):
            return None
        return Card(rank=rank, suit=self.suit)

    @property
    def name(self) -> str:
        """点数的英文名，例如 deuce / six / ace"""
        if not self.is_valid():
            return INVALID_NAME
        if self.is_wild:
            return WILD_NAME
        return RANK_NAME[self.rank]

    @property
    def suit_name(self) -> str:
        return SUIT_NAME[self.suit]

    @property
    def display(self) -> str:
        if self.is_wild:
            return "W"
        if not self.is_valid():
            return f"?{SUIT_SYMBOL[self.suit]}"
        return f"{RANK_DISPLAY[self.rank]}{SUIT_SYMBOL[self.suit]}"

    def compare(self, other: "Card") -> int:
        """
        全序比较：所有百搭牌相等且大于任何普通牌；
        普通牌先比点数，再比花色。
        返回负数 / 0 / 正数。
        """
        if self.is_wild:
            return 0 if other.is_wild else 1
        if other.is_wild:
            return -1
        diff = self.rank - other.rank
        if diff != 0:
            return diff
        return self.suit - other.suit

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.compare(other) < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        if self.is_wild or other.is_wild:
            return self.is_wild and other.is_wild
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        if self.is_wild:
            return hash(Suit.WILD)
        return hash((self.rank, self.suit))

    def __repr__(self) -> str:
        return self.display

    def __str__(self) -> str:
        if self.is_wild:
            return WILD_NAME
        return f"{self.name} of {self.suit_name}"


WILD = Card()


# ============================================================
#  牌组工具
# ============================================================

def cards_are_valid(cards: Sequence[Card]) -> bool:
    """非空、每张牌合法、且没有重复牌（两张百搭牌也算重复）"""
    if not cards:
        return False
    seen = set()
    for card in cards:
        if not card.is_valid() or card in seen:
            return False
        seen.add(card)
    return True


def sort_cards(cards: Iterable[Card], descending: bool = True) -> List[Card]:
    """排序手牌（默认从大到小，百搭牌最大）"""
    return sorted(cards, reverse=descending)


def top_n(cards: Optional[Sequence[Card]], n: int) -> List[Card]:
    """取已排序列表的前 n 张；不足 n 张时返回空列表"""
    if cards is None or len(cards) < n:
        return []
    return list(cards[:n])


def cards_of_suit(suit: Suit) -> List[Card]:
    """某花色从 A 到 2 的 13 张牌；百搭“花色”只返回一张百搭牌"""
    if suit == Suit.WILD:
        return [Card()]
    return [Card(rank=r, suit=suit) for r in sorted(Rank, reverse=True)]


def create_deck(with_wild: bool = False) -> List[Card]:
    """创建一副 52 张标准扑克牌（从大到小），可选附带一张百搭牌"""
    deck: List[Card] = []
    for suit in (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS):
        deck.extend(cards_of_suit(suit))
    if with_wild:
        deck.append(Card())

    assert len(deck) == 52 + int(with_wild), f"牌数错误: {len(deck)}"
    return sort_cards(deck)


def capitalize(word: str) -> str:
    """只把首字母大写"""
    return word[:1].upper() + word[1:]
