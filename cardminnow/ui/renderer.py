"""终端渲染器 - 在终端中展示提示语、牌面和评估结果"""

import sys
from typing import List, Optional, TextIO

from cardminnow.engine.card import Card, Suit
from cardminnow.engine.hand import Hand
from cardminnow.engine.hand_type import HandType


# 颜色常量 (ANSI)
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
BOLD = "\033[1m"
DIM = "\033[2m"
RESET = "\033[0m"

# 牌型名
HAND_TYPE_NAME = {
    HandType.HIGH_CARD: "High card",
    HandType.PAIR: "Pair",
    HandType.TWO_PAIR: "Two pair",
    HandType.THREE_OF_A_KIND: "Three of a kind",
    HandType.STRAIGHT: "Straight",
    HandType.FLUSH: "Flush",
    HandType.FULL_HOUSE: "Full house",
    HandType.FOUR_OF_A_KIND: "Four of a kind",
    HandType.STRAIGHT_FLUSH: "Straight flush",
    HandType.FIVE_OF_A_KIND: "Five of a kind",
}


INTRODUCTION = (
    "Welcome to CardMinnow, an interactive command line game that evaluates poker hands.\n"
    "Just input a poker hand, like 'ah, js, 10d, 9c, 7d' to have it evaluated.\n"
    "You can use 'w' (wild) for a joker.\n"
    "A hand can only contain one of each card.\n"
    "If you'd like to know more about the rules, just type 'rules' or 'help'.\n"
    "If you'd like to quit, type 'quit' or 'exit'.\n"
)

STANDARD_PROMPT = "Input hand or command:\n"
ERR_PROMPT = "Try again:\n"
MANY_ERR_PROMPT = (
    "It seems like you're having trouble with your input.\n"
    "If you'd like to know more about the rules of CardMinnow, just type 'rules' or 'help'.\n"
    "I'm only a simple program and can't understand everything that users can. Have mercy.\n"
)

RULES = (
    "CardMinnow can evaluate any set of cards for its optimal 5-card poker hand.\n"
    "Every card must be unique, however, so you can't have two aces of spades, for instance.\n"
    "I can understand something like 12h, qh, or Qh to be the Queen of Hearts.\n"
    "I'm bad at reading, though, so I won't understand you if you type 'Queen of Hearts'.\n"
    "No matter how many cards you enter, I evaluate for the best five card hand.\n"
    "If you enter 'as, ks, qs, js, 10s, 9s, 8s', I'll find the royal flush.\n"
    "Jokers don't count towards evaluation except in a single-card hand,\n"
    "so 'w ks qs js 10s' is a king-high straight flush, not a royal flush.\n"
    "Separate your card entries by spaces, commas, or semicolons.\n"
)

GOODBYE = "Goodbye, and thanks for playing CardMinnow.\n"
YOU_HAVE = "Your best hand is: "
INVALID_HAND = "That's an invalid hand. Remember, you're not allowed to have duplicates.\n"


class TerminalRenderer:
    """终端渲染器；color=False 时输出纯文本"""

    def __init__(self, out: Optional[TextIO] = None, color: bool = True):
        self.out = out or sys.stdout
        self.color = color

    def _paint(self, text: str, *codes: str) -> str:
        if not self.color or not codes:
            return text
        return "".join(codes) + text + RESET

    def write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    # ============================================================
    #  牌面渲染
    # ============================================================

    def format_card(self, card: Card) -> str:
        if card.is_wild:
            return self._paint(card.display, CYAN, BOLD)
        if card.suit in (Suit.HEARTS, Suit.DIAMONDS):
            return self._paint(card.display, RED)
        return card.display

    def format_cards(self, cards: List[Card]) -> str:
        """将牌列表格式化为（可能带颜色的）字符串"""
        return " ".join(self.format_card(c) for c in cards)

    # ============================================================
    #  提示语
    # ============================================================

    def show_intro(self) -> None:
        self.write(self._paint(INTRODUCTION, YELLOW))

    def show_prompt(self, error_count: int, max_errors: int) -> None:
        """按连续输错次数选择提示语"""
        if error_count == 0:
            self.write(STANDARD_PROMPT)
        elif error_count < max_errors:
            self.write(ERR_PROMPT)
        else:
            self.write(self._paint(MANY_ERR_PROMPT, DIM))

    def show_rules(self) -> None:
        self.write(RULES)

    def show_goodbye(self) -> None:
        self.write(GOODBYE)

    def show_error(self, message: str) -> None:
        self.write(self._paint(message, RED) + "\n")

    def show_invalid_hand(self) -> None:
        self.write(self._paint(INVALID_HAND, RED))

    # ============================================================
    #  评估结果
    # ============================================================

    def show_hand(self, hand: Hand) -> None:
        """展示最佳牌型及关键牌"""
        description = hand.describe()
        self.write(YOU_HAVE + self._paint(description, GREEN, BOLD) + "\n")

        type_name = HAND_TYPE_NAME.get(hand.hand_type, "")
        key_cards = self.format_cards(hand.primary_group)
        if hand.secondary_group:
            key_cards += " / " + self.format_cards(hand.secondary_group)
        self.write(f"  [{type_name}] {key_cards}\n")
