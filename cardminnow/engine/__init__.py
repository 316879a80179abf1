# 牌型评估引擎
from .card import Card, Rank, Suit, WILD, create_deck, cards_of_suit, sort_cards, top_n
from .hand_type import HandType, Classification
from .hand_evaluator import HandEvaluator, evaluate_cards
from .hand import Hand
from .exceptions import CardMinnowError, InvalidHandError, CardParseError
