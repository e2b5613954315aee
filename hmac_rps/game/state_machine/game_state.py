"""
回合状态枚举
Round State Enumeration
"""
from enum import Enum, auto


class GameState(Enum):
    """回合状态枚举"""
    START = auto()             # 选择电脑招式并公布 HMAC
    AWAITING_INPUT = auto()    # 等待玩家输入
    HELP = auto()              # 显示帮助表
    EXIT = auto()              # 玩家退出（终止）
    RESOLVED = auto()          # 已判定结果（终止）
    ERROR = auto()             # 错误状态（终止）

    def __str__(self):
        return self.name

    @property
    def is_terminal(self) -> bool:
        return self in (GameState.EXIT, GameState.RESOLVED, GameState.ERROR)
