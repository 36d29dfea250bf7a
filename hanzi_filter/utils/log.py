"""
日志配置

库本身只通过 logging.getLogger(__name__) 记录日志，不安装任何 handler。
嵌入方应用或演示脚本可调用 setup_logging() 使用统一格式输出。
"""

import logging
from typing import Optional, Union

__all__ = ['setup_logging', 'DEFAULT_LOG_FORMAT']

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[Union[str, int]] = None, force: bool = False) -> int:
    """
    配置根日志

    Args:
        level: 日志级别，为 None 时读取 settings.log_level (debug 模式下为 DEBUG)
        force: 是否替换已有 handler

    Returns:
        实际使用的日志级别 (整数)
    """
    if level is None:
        from hanzi_filter.config import settings
        level = "DEBUG" if settings.debug else settings.log_level

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=DEFAULT_LOG_FORMAT, force=force)
    logging.getLogger("hanzi_filter").setLevel(level)
    return level
