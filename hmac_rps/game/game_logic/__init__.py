"""
游戏逻辑模块
Game Logic Module
"""
from .move_set import Move, MoveSet
from .game_rules import GameRules, GameResult, OutcomeMatrix

__all__ = [
    'Move',
    'MoveSet',
    'GameRules',
    'GameResult',
    'OutcomeMatrix'
]
