"""交互终端 - 读取一行输入，解释并输出最佳牌型，直到用户退出"""

import logging
import sys
from typing import Optional, TextIO

from cardminnow.engine.exceptions import CardParseError
from cardminnow.shell.config import ShellConfig
from cardminnow.shell.interpreter import parse_hand
from cardminnow.ui.renderer import TerminalRenderer

logger = logging.getLogger(__name__)

HELP_COMMANDS = {"help", "rules"}
EXIT_COMMANDS = {"exit", "quit"}


class CardMinnowShell:
    """交互终端控制器：关键字在这里处理，其余输入交给解释器"""

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.config = config or ShellConfig()
        self.stdin = stdin or sys.stdin
        self.renderer = TerminalRenderer(out=stdout or sys.stdout, color=self.config.color)
        self.error_count = 0  # 连续输错次数

    def run(self) -> None:
        """运行交互循环，直到 exit/quit 或输入结束"""
        self.renderer.show_intro()
        while True:
            self.renderer.show_prompt(self.error_count, self.config.max_errors)
            line = self.stdin.readline()
            if not line:
                # EOF
                self.renderer.show_goodbye()
                break
            if not self.handle_line(line):
                break

    def handle_line(self, line: str) -> bool:
        """
        处理一行输入。
        返回 False 表示用户要求退出。
        """
        trimmed = line.strip()
        command = trimmed.lower()

        if command in HELP_COMMANDS:
            self.renderer.show_rules()
            self.error_count = 0
            return True
        if command in EXIT_COMMANDS:
            self.renderer.show_goodbye()
            return False
        if not trimmed:
            return True

        try:
            hand = parse_hand(trimmed)
        except CardParseError as e:
            self.renderer.show_error(str(e))
            self.error_count += 1
            return True

        if hand.is_valid():
            self.renderer.show_hand(hand)
            self.error_count = 0
        else:
            logger.info("invalid hand: %r", hand)
            self.renderer.show_invalid_hand()
            self.error_count += 1
        return True
