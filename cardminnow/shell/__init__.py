# 交互终端模块
from .config import ShellConfig, load_config
from .interpreter import interpret, parse_hand, tokenize
from .controller import CardMinnowShell
