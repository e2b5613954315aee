"""
日志工具模块
Logger Utility Module
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any

# 所有组件日志记录器的公共前缀
ROOT_LOGGER_NAME = "HMAC_RPS"

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_log_level(level_str: str) -> int:
    """
    从字符串获取日志级别

    Args:
        level_str: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL）

    Returns:
        int: 日志级别，无法识别时返回WARNING
    """
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL
    }
    return level_map.get(str(level_str).upper(), logging.WARNING)


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    log_file: Optional[str] = None,
    level: int = logging.WARNING,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    设置日志记录器

    日志输出到stderr，stdout只留给游戏协议本身。

    Args:
        name: 日志记录器名称
        log_file: 日志文件路径（可选）
        level: 日志级别
        format_string: 日志格式字符串（可选）

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    # 已配置过的记录器只更新级别，并补挂尚未存在的文件处理器
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        if log_file:
            _add_file_handler(logger, log_file, level, formatter)
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        _add_file_handler(logger, log_file, level, formatter)

    # 避免重复输出到根记录器
    logger.propagate = False
    return logger


def setup_logger_from_config(config: Dict[str, Any], name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    从配置字典设置日志记录器

    除了name指定的记录器，所有已创建的 HMAC_RPS.* 组件记录器的级别
    也会同步更新；log_file 只挂到name对应的记录器上。

    Args:
        config: 配置字典（包含level和file键）
        name: 日志记录器名称

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    level = get_log_level(config.get('level', 'WARNING'))
    log_file = config.get('file')

    for logger_name in list(logging.root.manager.loggerDict):
        if logger_name == ROOT_LOGGER_NAME or logger_name.startswith(ROOT_LOGGER_NAME + "."):
            setup_logger(name=logger_name, level=level)

    return setup_logger(name=name, log_file=log_file, level=level)


def _add_file_handler(logger: logging.Logger, log_file: str, level: int, formatter: logging.Formatter):
    """同一路径只挂一个文件处理器"""
    log_path = Path(log_file).resolve()
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == log_path:
            return
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
