"""
游戏模块
Game Module
"""
from .game_controller import RoundController, RoundResult, RoundState
from .game_logic import Move, MoveSet, GameRules, GameResult, OutcomeMatrix
from .commitment import Commitment, CommitmentProvider, SecureRandomSource
from .state_machine import GameState, GameStateMachine
from .help_table import HelpTableGenerator
from .player_input import CommandType, PlayerCommand, parse_player_input

__all__ = [
    'RoundController',
    'RoundResult',
    'RoundState',
    'Move',
    'MoveSet',
    'GameRules',
    'GameResult',
    'OutcomeMatrix',
    'Commitment',
    'CommitmentProvider',
    'SecureRandomSource',
    'GameState',
    'GameStateMachine',
    'HelpTableGenerator',
    'CommandType',
    'PlayerCommand',
    'parse_player_input'
]
