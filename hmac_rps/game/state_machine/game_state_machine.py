"""
回合状态机
Round State Machine
"""
from typing import Optional, Callable, Dict, List
from .game_state import GameState
from ...utils.logger import setup_logger

logger = setup_logger("HMAC_RPS.GameStateMachine")


class GameStateMachine:
    """回合状态机类"""

    # 状态转换规则（无效输入时 AWAITING_INPUT 保持不变）
    VALID_TRANSITIONS: Dict[GameState, List[GameState]] = {
        GameState.START: [GameState.AWAITING_INPUT, GameState.ERROR],
        GameState.AWAITING_INPUT: [GameState.AWAITING_INPUT, GameState.HELP,
                                   GameState.EXIT, GameState.RESOLVED],
        GameState.HELP: [GameState.AWAITING_INPUT],
        GameState.EXIT: [],
        GameState.RESOLVED: [],
        GameState.ERROR: []
    }

    def __init__(self, initial_state: GameState = GameState.START):
        """
        初始化状态机

        Args:
            initial_state: 初始状态
        """
        self.current_state = initial_state
        self.previous_state: Optional[GameState] = None
        self.transition_handlers: List[Callable[[GameState, GameState], None]] = []

        logger.debug(f"回合状态机初始化，初始状态: {self.current_state}")

    def register_transition_handler(self, handler: Callable[[GameState, GameState], None]):
        """
        注册状态转换处理函数

        Args:
            handler: 处理函数，签名为 handler(from_state, to_state)
        """
        self.transition_handlers.append(handler)

    def transition_to(self, new_state: GameState) -> bool:
        """
        转换到新状态

        Args:
            new_state: 新状态

        Returns:
            bool: 转换是否成功
        """
        if not self.can_transition_to(new_state):
            logger.warning(f"无效的状态转换: {self.current_state} -> {new_state}")
            return False

        old_state = self.current_state
        self.previous_state = old_state
        self.current_state = new_state

        logger.debug(f"状态转换: {old_state} -> {new_state}")

        for handler in self.transition_handlers:
            handler(old_state, new_state)

        return True

    def get_current_state(self) -> GameState:
        """获取当前状态"""
        return self.current_state

    def get_previous_state(self) -> Optional[GameState]:
        """获取上一个状态"""
        return self.previous_state

    def can_transition_to(self, state: GameState) -> bool:
        """
        检查是否可以转换到指定状态

        Args:
            state: 目标状态

        Returns:
            bool: 是否可以转换
        """
        return state in self.VALID_TRANSITIONS.get(self.current_state, [])

    def is_in_state(self, state: GameState) -> bool:
        """检查是否在指定状态"""
        return self.current_state == state

    def is_finished(self) -> bool:
        """是否已进入终止状态"""
        return self.current_state.is_terminal
