"""
回合状态机模块
Round State Machine Module
"""
from .game_state import GameState
from .game_state_machine import GameStateMachine

__all__ = ['GameState', 'GameStateMachine']
