# 终端展示模块
from .renderer import TerminalRenderer
