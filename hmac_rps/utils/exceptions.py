"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional


class ConfigurationException(Exception):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
        self.message = message


class MoveSetException(ConfigurationException):
    """招式列表（命令行参数）不合法"""
    def __init__(self, message: str, reason: Optional[str] = None):
        super().__init__(message, config_key="moves")
        self.reason = reason


class RandomSourceException(Exception):
    """安全随机源不可用，不允许降级到普通随机数"""
    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source
        self.message = message


class GameException(Exception):
    """游戏逻辑异常"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state
        self.message = message


class InvalidInputException(Exception):
    """玩家输入无法解析"""
    def __init__(self, message: str, raw_input: Optional[str] = None):
        super().__init__(message)
        self.raw_input = raw_input
        self.message = message
