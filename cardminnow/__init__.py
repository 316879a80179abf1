"""CardMinnow - 任意张数扑克牌的最佳五张牌型评估"""

__version__ = "1.0.0"
