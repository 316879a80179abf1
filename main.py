"""CardMinnow 扑克牌型评估 - 主入口"""

import sys
import logging
import argparse
from typing import List, Optional

from cardminnow.engine.exceptions import CardParseError
from cardminnow.shell.config import ShellConfig, load_config
from cardminnow.shell.controller import CardMinnowShell
from cardminnow.shell.interpreter import parse_hand
from cardminnow.ui.renderer import TerminalRenderer


def build_config(args: argparse.Namespace) -> ShellConfig:
    """环境变量为默认值，命令行参数覆盖"""
    config = load_config()
    if args.no_color:
        config.color = False
    if args.log_level:
        config.log_level = args.log_level.upper()
    if args.max_errors is not None:
        config.max_errors = max(args.max_errors, 1)
    return config


def evaluate_once(line: str, config: ShellConfig) -> int:
    """评估一手牌后退出：成功返回 0，输入或手牌非法返回 1"""
    renderer = TerminalRenderer(color=config.color)
    try:
        hand = parse_hand(line)
    except CardParseError as e:
        renderer.show_error(str(e))
        return 1
    if not hand.is_valid():
        renderer.show_invalid_hand()
        return 1
    renderer.show_hand(hand)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """命令行入口"""
    parser = argparse.ArgumentParser(description="CardMinnow: find the best 5-card poker hand")
    parser.add_argument("--hand", type=str, default=None,
                        help="评估一手牌后退出，例如 \"as ks qs js 10s\"")
    parser.add_argument("--no-color", action="store_true", help="关闭 ANSI 颜色")
    parser.add_argument("--log-level", type=str, default=None, help="日志级别 (默认 WARNING)")
    parser.add_argument("--max-errors", type=int, default=None,
                        help="连续输错几次后显示完整提示 (默认 2)")
    args = parser.parse_args(argv)

    config = build_config(args)
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.hand is not None:
        return evaluate_once(args.hand, config)

    CardMinnowShell(config=config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
