"""输入解释器 - 把用户输入的文本解析为牌，例如 "ah, js 10d; w" """

import logging
import re
from typing import List, Sequence

from cardminnow.engine.card import Card, Rank, Suit
from cardminnow.engine.exceptions import CardParseError
from cardminnow.engine.hand import Hand

logger = logging.getLogger(__name__)

ERROR_POLITE = "I can't understand what you mean by "

# 末尾字符 -> 花色
SUIT_CHARS = {
    "s": Suit.SPADES,
    "h": Suit.HEARTS,
    "d": Suit.DIAMONDS,
    "c": Suit.CLUBS,
    "w": Suit.WILD,
}

FACE_VALUES = {
    "a": Rank.ACE,
    "k": Rank.KING,
    "q": Rank.QUEEN,
    "j": Rank.JACK,
}

# 百搭牌可以不带点数；普通牌必须是数字或 a/k/q/j 加花色字母
_TOKEN_PATTERN = re.compile(r"((\d*|[akqj])w)|((\d+|[akqj])[shdcw])", re.IGNORECASE)
_SEPARATORS = re.compile(r"[\s,;]+")


def tokenize(line: str) -> List[str]:
    """按空白、逗号、分号切分，丢弃空片段"""
    return [t for t in _SEPARATORS.split(line.strip()) if t]


def bad_format_tokens(tokens: Sequence[str]) -> List[str]:
    """返回所有格式不对、无法构成牌的片段"""
    return [t for t in tokens if not _TOKEN_PATTERN.fullmatch(t)]


def token_to_card(token: str) -> Card:
    """
    单个片段 -> 牌。
    点数越界（如 30s）不报错，返回的牌 is_valid() 为 False。
    """
    lowered = token.lower()
    suit = SUIT_CHARS.get(lowered[-1:])
    if suit is None:
        raise CardParseError(
            f"'{token}' doesn't contain enough data for me to understand it. "
            "I need a value and a suit.",
            [token],
        )
    if suit == Suit.WILD:
        return Card()

    value_part = lowered[:-1]
    if value_part in FACE_VALUES:
        value = int(FACE_VALUES[value_part])
    else:
        try:
            value = int(value_part)
        except ValueError:
            raise CardParseError(f"'{token}' is not a valid card value.", [token]) from None
    return Card(rank=value, suit=suit)


def error_message(bad_tokens: Sequence[str]) -> str:
    """列出全部无法理解的片段：'x' / 'x' or 'y' / 'x', 'y', or 'z'"""
    quoted = [f"'{t}'" for t in bad_tokens]
    if len(quoted) == 1:
        body = quoted[0]
    elif len(quoted) == 2:
        body = f"{quoted[0]} or {quoted[1]}"
    else:
        body = ", ".join(quoted[:-1]) + ", or " + quoted[-1]
    return f"{ERROR_POLITE}{body}."


def interpret(line: str) -> List[Card]:
    """
    解析一行输入。
    先检查格式，再检查点数范围；每一步都会收集全部错误片段后一起报告。
    """
    tokens = tokenize(line)
    if not tokens:
        # 只有空白或分隔符，整行当作一个无法理解的片段
        raise CardParseError(error_message([line.strip()]), [line.strip()])

    bad = bad_format_tokens(tokens)
    if bad:
        logger.debug("badly formatted tokens: %s", bad)
        raise CardParseError(error_message(bad), bad)

    cards: List[Card] = []
    for token in tokens:
        card = token_to_card(token)
        if card.is_valid():
            cards.append(card)
        else:
            bad.append(token)

    if bad:
        logger.debug("tokens with invalid values: %s", bad)
        raise CardParseError(error_message(bad), bad)
    return cards


def parse_hand(line: str) -> Hand:
    """解析一行输入并构造 Hand（手牌合法性需调用方另行检查）"""
    return Hand(interpret(line))
