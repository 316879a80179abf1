"""牌型评估器 - 从任意张数的牌中找出最佳五张牌型（支持一张百搭牌）"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence, Tuple

from .card import Card, Suit, WILD, cards_are_valid, sort_cards, top_n
from .hand_type import HandType, Classification

logger = logging.getLogger(__name__)

# 无论手里有多少张牌，都只按最好的五张计分
SCORING_HAND_SIZE = 5

# 同花/同花顺的比较顺序，点数完全相同时先出现的花色胜出
_SUIT_PRIORITY = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)

CardGroup = Tuple[Card, ...]


# ============================================================
#  分桶
# ============================================================

@dataclass(frozen=True)
class BucketedHand:
    """
    一次扫描得到的三种分桶（均不含百搭牌，组内从大到小）。

    by_rank: 点数 -> 该点数的所有牌
    by_suit: 花色 -> 该花色的所有牌
    runs:    每段“点数连续递减”序列的首张牌 -> 该段序列（每个点数只取一张）
    """
    has_wild: bool
    by_rank: Dict[int, CardGroup]
    by_suit: Dict[Suit, CardGroup]
    runs: Dict[Card, CardGroup]

    def distinct_ranks(self) -> List[Card]:
        """把所有连续段按顺序拼起来：每个点数一张，从大到小"""
        merged: List[Card] = []
        for run in self.runs.values():
            merged.extend(run)
        return merged


def bucket_cards(cards: Sequence[Card]) -> Optional[BucketedHand]:
    """对牌分桶。非法牌组（空、含非法牌、有重复）返回 None，不做任何分桶。"""
    if not cards_are_valid(cards):
        return None

    has_wild = False
    by_rank: Dict[int, List[Card]] = {}
    by_suit: Dict[Suit, List[Card]] = {}
    runs: Dict[Card, List[Card]] = {}
    run_head: Optional[Card] = None
    last_rank = 0

    # 先从大到小排序，后续所有桶都天然有序
    for card in sort_cards(cards):
        if card.is_wild:
            has_wild = True
            continue

        if card.rank == last_rank:
            by_rank[card.rank].append(card)
        else:
            if run_head is not None and card.rank == last_rank - 1:
                runs[run_head].append(card)
            else:
                run_head = card
                runs[card] = [card]
            by_rank[card.rank] = [card]
            last_rank = card.rank

        by_suit.setdefault(card.suit, []).append(card)

    return BucketedHand(
        has_wild=has_wild,
        by_rank={r: tuple(g) for r, g in by_rank.items()},
        by_suit={s: tuple(g) for s, g in by_suit.items()},
        runs={head: tuple(g) for head, g in runs.items()},
    )


# ============================================================
#  同点数组合：高牌 / 对子 / 两对 / 三条 / 葫芦 / 四条 / 五条
# ============================================================

def _best_natural_group(by_rank: Dict[int, CardGroup], exclude: Optional[int] = None) -> CardGroup:
    """张数最多的同点数组，张数相同取点数大的"""
    best: CardGroup = ()
    for rank, group in by_rank.items():
        if rank == exclude:
            continue
        if len(group) > len(best):
            best = group
        elif best and len(group) == len(best) and group[0].rank > best[0].rank:
            best = group
    return best


def _best_natural_pair(by_rank: Dict[int, CardGroup], exclude: Optional[int] = None) -> CardGroup:
    """点数最大的、至少两张的同点数组里最大的两张"""
    best: CardGroup = ()
    for rank, group in by_rank.items():
        if rank == exclude or len(group) < 2:
            continue
        if not best or group[0].rank > best[0].rank:
            best = group[:2]
    return best


def best_collection(hand: BucketedHand) -> Classification:
    """只看同点数组合的最佳牌型；百搭牌总是补进当前最大的一组"""
    primary = _best_natural_group(hand.by_rank)
    secondary: CardGroup = ()
    hand_type = HandType.HIGH_CARD

    complement = SCORING_HAND_SIZE - len(primary)
    if hand.has_wild:
        complement -= 1
    exclude = primary[0].rank if primary else None

    if complement == 3:
        secondary = _best_natural_group(hand.by_rank, exclude)
        if len(secondary) == 2:
            hand_type = HandType.TWO_PAIR
        else:
            hand_type = HandType.PAIR
            secondary = ()
    elif complement == 2:
        secondary = _best_natural_pair(hand.by_rank, exclude)
        if secondary:
            hand_type = HandType.FULL_HOUSE
        else:
            hand_type = HandType.THREE_OF_A_KIND
    elif complement == 1:
        hand_type = HandType.FOUR_OF_A_KIND
    elif complement == 0:
        hand_type = HandType.FIVE_OF_A_KIND
    # complement == 4: 高牌，不记录第二大的牌

    return Classification(hand_type, primary, secondary, hand.has_wild)


# ============================================================
#  顺子
# ============================================================

def straight_from_ordered(cards: Optional[Sequence[Card]], with_wild: bool) -> CardGroup:
    """
    在“从大到小、点数不重复”的列表里找最大的顺子。

    有百搭牌时：
      - 每段最多用百搭牌补一个内部空缺（相邻点数差 2）
      - 或者 4 张连续牌直接成立（百搭牌补在头或尾）
    返回值不含百搭牌；找不到时返回空元组。
    """
    min_size = SCORING_HAND_SIZE - 1 if with_wild else SCORING_HAND_SIZE
    if cards is None or len(cards) < min_size:
        return ()

    run: List[Card] = []
    start_rank = 0
    last_rank = 0
    gap_index: Optional[int] = None  # 补洞后那张牌的下标
    i = 0
    while i < len(cards):
        card = cards[i]
        if not run:
            start_rank = card.rank
        elif card.rank == last_rank - 1:
            pass
        elif with_wild and gap_index is None and card.rank == last_rank - 2:
            gap_index = i
        else:
            # 断了：用过百搭牌就回到补洞后的那张重新开始，否则从当前牌开始
            if gap_index is not None:
                i = gap_index
                card = cards[i]
                gap_index = None
            run = []
            start_rank = card.rank

        run.append(card)
        last_rank = card.rank
        span = start_rank - last_rank + 1
        if span == SCORING_HAND_SIZE:
            return tuple(run)
        if span == SCORING_HAND_SIZE - 1 and with_wild and gap_index is None:
            return tuple(run)
        i += 1

    return ()


def best_straight(hand: BucketedHand) -> Classification:
    straight = straight_from_ordered(hand.distinct_ranks(), hand.has_wild)
    if straight:
        return Classification(HandType.STRAIGHT, straight, (), hand.has_wild)
    return Classification(has_wild=hand.has_wild)


# ============================================================
#  同花 / 同花顺
# ============================================================

def _better_suit_group(incumbent: CardGroup, challenger: CardGroup) -> CardGroup:
    """
    比较两个候选组：非空胜空；等长时从最大牌逐张比点数；
    完全相同保留先到者。
    """
    if not incumbent:
        return challenger if challenger else incumbent
    if len(challenger) != len(incumbent):
        return incumbent
    for mine, theirs in zip(incumbent, challenger):
        if mine.rank > theirs.rank:
            return incumbent
        if mine.rank < theirs.rank:
            return challenger
    return incumbent


def best_flush(hand: BucketedHand) -> Classification:
    size = SCORING_HAND_SIZE - 1 if hand.has_wild else SCORING_HAND_SIZE
    best: CardGroup = ()
    for suit in _SUIT_PRIORITY:
        candidate = tuple(top_n(hand.by_suit.get(suit), size))
        best = _better_suit_group(best, candidate)

    if best:
        return Classification(HandType.FLUSH, best, (), hand.has_wild)
    return Classification(has_wild=hand.has_wild)


def best_straight_flush(hand: BucketedHand) -> Classification:
    best: CardGroup = ()
    for suit in _SUIT_PRIORITY:
        candidate = straight_from_ordered(hand.by_suit.get(suit), hand.has_wild)
        best = _better_suit_group(best, candidate)

    if best:
        return Classification(HandType.STRAIGHT_FLUSH, best, (), hand.has_wild)
    return Classification(has_wild=hand.has_wild)


# ============================================================
#  总入口
# ============================================================

def evaluate_cards(cards: Sequence[Card]) -> Optional[Classification]:
    """
    评估一组牌的最佳五张牌型。
    非法牌组返回 None。
    """
    bucketed = bucket_cards(cards)
    if bucketed is None:
        return None

    best = best_collection(bucketed)

    # 五条已经封顶
    if best.type < HandType.FIVE_OF_A_KIND:
        candidate = best_straight_flush(bucketed)
        if candidate.outranks(best):
            best = candidate
        elif best.type < HandType.FULL_HOUSE:
            # 葫芦及以上只可能被同花顺超过
            candidate = best_flush(bucketed)
            if candidate.outranks(best):
                best = candidate
            else:
                candidate = best_straight(bucketed)
                if candidate.outranks(best):
                    best = candidate

    # 只有一张百搭牌时，用它作为高牌
    if best.type == HandType.HIGH_CARD and not best.primary:
        best = replace(best, primary=(WILD,))

    logger.debug("evaluated %d cards -> %r", len(cards), best)
    return best


class HandEvaluator:
    """无状态评估服务，可在多个调用方之间共享"""

    def evaluate(self, cards: Sequence[Card]) -> Optional[Classification]:
        return evaluate_cards(cards)


DEFAULT_EVALUATOR = HandEvaluator()
