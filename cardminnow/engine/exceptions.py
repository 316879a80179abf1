"""
CardMinnow 异常定义
用户输入错误(CardParseError)向上抛给交互层展示，
手牌状态错误(InvalidHandError)只在生成描述时抛出
"""

from typing import List, Sequence


class CardMinnowError(Exception):
    """CardMinnow 基础异常类"""
    pass


class InvalidHandError(CardMinnowError):
    """手牌非法，或评估结果缺少描述所需的关键牌组"""
    pass


class CardParseError(CardMinnowError, ValueError):
    """无法把用户输入解析为牌；bad_tokens 保存全部无法识别的片段"""

    def __init__(self, message: str, bad_tokens: Sequence[str] = ()):
        super().__init__(message)
        self.bad_tokens: List[str] = list(bad_tokens)
