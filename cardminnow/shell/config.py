"""交互终端配置 - 从环境变量读取，命令行参数可覆盖"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_ERRORS = 2


@dataclass
class ShellConfig:
    """交互终端的设置"""
    color: bool = True                     # 是否输出 ANSI 颜色
    log_level: str = DEFAULT_LOG_LEVEL     # 日志级别
    max_errors: int = DEFAULT_MAX_ERRORS   # 连续输错几次后显示完整提示

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.max_errors < 1:
            raise ValueError(f"max_errors 必须为正数: {self.max_errors}")


def load_config() -> ShellConfig:
    """根据环境变量创建配置。

    环境变量：
      CARDMINNOW_COLOR       "0" 关闭颜色
      CARDMINNOW_LOG_LEVEL   日志级别，默认 WARNING
      CARDMINNOW_MAX_ERRORS  连续输错次数阈值，默认 2
    """
    color = os.getenv("CARDMINNOW_COLOR", "1") != "0"
    log_level = os.getenv("CARDMINNOW_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    raw_max = os.getenv("CARDMINNOW_MAX_ERRORS", str(DEFAULT_MAX_ERRORS))
    try:
        max_errors = int(raw_max)
    except ValueError:
        logger.warning("CARDMINNOW_MAX_ERRORS 非法: %s，使用默认值 %d", raw_max, DEFAULT_MAX_ERRORS)
        max_errors = DEFAULT_MAX_ERRORS
    return ShellConfig(color=color, log_level=log_level, max_errors=max(max_errors, 1))
