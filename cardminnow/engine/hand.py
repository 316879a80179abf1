"""手牌模型 - 任意张数的一手牌及其评估结果"""

import logging
import threading
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence, Tuple

from .card import Card, cards_are_valid
from .exceptions import InvalidHandError
from .hand_type import HandType, Classification
from .hand_evaluator import HandEvaluator, DEFAULT_EVALUATOR
from .phrasing import describe

logger = logging.getLogger(__name__)


def group_is_ordered(cards: Sequence[Card]) -> bool:
    """
    关键牌组是否合法：每张牌合法、从大到小排列，
    百搭牌只能单独出现（长度为 1 的组）。
    """
    previous: Optional[Card] = None
    for card in cards:
        if not card.is_valid() or (card.is_wild and len(cards) > 1):
            return False
        if previous is not None and previous < card:
            return False
        previous = card
    return True


class Hand:
    """
    一手牌：牌按传入顺序保存（不可变元组），评估结果只有两种状态：
    未评估（None）或已评估（Classification）。

    评估结果在第一次 classify() 时计算并缓存，写入受锁保护，
    读取方只会看到 None 或完整的结果。
    """

    def __init__(self, cards: Iterable[Card] = (), evaluator: Optional[HandEvaluator] = None):
        self._cards: Tuple[Card, ...] = tuple(cards)
        self._evaluator = evaluator or DEFAULT_EVALUATOR
        self._classification: Optional[Classification] = None
        self._lock = threading.Lock()

    # ============================================================
    #  基本属性
    # ============================================================

    @property
    def cards(self) -> List[Card]:
        """返回副本，外部修改不影响这手牌"""
        return list(self._cards)

    @property
    def size(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def is_valid(self) -> bool:
        """非空、每张牌合法、没有重复牌（因此最多一张百搭牌）"""
        return cards_are_valid(self._cards)

    # ============================================================
    #  评估
    # ============================================================

    @property
    def classification(self) -> Optional[Classification]:
        return self._classification

    @property
    def is_classified(self) -> bool:
        return self._classification is not None

    def classify(self) -> Optional[HandType]:
        """
        返回牌型；第一次调用时评估并缓存。
        非法手牌不评估，返回 None。
        """
        result = self._classification
        if result is None:
            with self._lock:
                if self._classification is None:
                    self._classification = self._evaluator.evaluate(self._cards)
                result = self._classification
        return result.type if result is not None else None

    @property
    def hand_type(self) -> Optional[HandType]:
        return self.classify()

    @property
    def primary_group(self) -> List[Card]:
        result = self._classification
        return list(result.primary) if result is not None else []

    @property
    def secondary_group(self) -> List[Card]:
        result = self._classification
        return list(result.secondary) if result is not None else []

    def set_primary_group(self, cards: Optional[Sequence[Card]]) -> bool:
        """替换关键牌组；不合法的组直接忽略并返回 False"""
        return self._set_group("primary", cards)

    def set_secondary_group(self, cards: Optional[Sequence[Card]]) -> bool:
        return self._set_group("secondary", cards)

    def _set_group(self, field_name: str, cards: Optional[Sequence[Card]]) -> bool:
        if cards is None or not group_is_ordered(cards):
            logger.debug("ignored %s group %r: not ordered", field_name, cards)
            return False
        if self.classify() is None:
            return False
        with self._lock:
            self._classification = replace(self._classification, **{field_name: tuple(cards)})
        return True

    # ============================================================
    #  描述
    # ============================================================

    def describe(self) -> str:
        """一句话描述最佳牌型；非法手牌抛 InvalidHandError"""
        if not self.is_valid():
            raise InvalidHandError("Trying to evaluate an invalid hand.")
        self.classify()
        return describe(self._classification)

    def __repr__(self) -> str:
        cards_str = " ".join(c.display for c in self._cards)
        if self._classification is None:
            return f"Hand({cards_str})"
        return f"Hand({cards_str}) {self._classification!r}"
