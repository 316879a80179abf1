"""牌型定义 - 十种五张牌型及评估结果"""

from enum import IntEnum
from dataclasses import dataclass
from typing import Tuple

from .card import Card


class HandType(IntEnum):
    """牌型枚举（数值越大牌型越大）"""
    HIGH_CARD = 0        # 高牌
    PAIR = 1             # 一对
    TWO_PAIR = 2         # 两对
    THREE_OF_A_KIND = 3  # 三条
    STRAIGHT = 4         # 顺子
    FLUSH = 5            # 同花
    FULL_HOUSE = 6       # 葫芦
    FOUR_OF_A_KIND = 7   # 四条
    STRAIGHT_FLUSH = 8   # 同花顺
    FIVE_OF_A_KIND = 9   # 五条（必须有百搭牌）


# 描述时必须有第二组关键牌的牌型
NEEDS_SECONDARY = frozenset({HandType.TWO_PAIR, HandType.FULL_HOUSE})


@dataclass(frozen=True)
class Classification:
    """
    一手牌的评估结果（不可变）。

    primary:   决定牌型的关键牌（如三条中的三张），从大到小
    secondary: 第二组关键牌，只有两对和葫芦使用，其余为空
    has_wild:  评估时手里是否有百搭牌（百搭牌本身不进入关键牌组）
    """
    type: HandType = HandType.HIGH_CARD
    primary: Tuple[Card, ...] = ()
    secondary: Tuple[Card, ...] = ()
    has_wild: bool = False

    @property
    def high_card(self) -> Card:
        return self.primary[0]

    def outranks(self, other: "Classification") -> bool:
        """仅按牌型比较"""
        return self.type > other.type

    def __repr__(self) -> str:
        parts = [f"[{self.type.name}]", " ".join(c.display for c in self.primary)]
        if self.secondary:
            parts.append("/ " + " ".join(c.display for c in self.secondary))
        return " ".join(parts)
