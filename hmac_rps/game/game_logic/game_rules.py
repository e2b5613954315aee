"""
游戏规则实现
Game Rules Implementation
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple
from .move_set import Move, MoveSet
from ...utils.logger import setup_logger

logger = setup_logger("HMAC_RPS.GameRules")


class GameResult(Enum):
    """游戏结果枚举（从"己方"招式的角度）"""
    WIN = "Win"
    LOSE = "Lose"
    DRAW = "Draw"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class OutcomeMatrix:
    """
    N×N 结果表

    cell(i, j) 是招式 i 对招式 j 时，从招式 i 角度看的结果。
    """
    move_set: MoveSet
    rows: Tuple[Tuple[GameResult, ...], ...]

    def cell(self, i: int, j: int) -> GameResult:
        return self.rows[i][j]

    def __len__(self) -> int:
        return len(self.rows)


class GameRules:
    """N 招式循环规则"""

    @staticmethod
    def result_of(self_move: Move, other_move: Move, move_set: MoveSet) -> GameResult:
        """
        判断 self_move 对 other_move 的结果

        顺时针距离 dcw = (j - i + N) % N，逆时针距离 dccw = (i - j + N) % N。
        相等（仅当 i == j）为平局。对方在己方之前更近（dccw < dcw）为胜，
        否则为负：每个招式战胜它之前的 (N-1)/2 个招式，输给之后的 (N-1)/2 个，
        与 rock, paper, scissors 的常规规则一致。

        Args:
            self_move: 己方招式（名称或下标）
            other_move: 对方招式（名称或下标）
            move_set: 招式集合

        Returns:
            GameResult: 从己方角度的结果
        """
        total = len(move_set)
        assert total % 2 == 1, "move set must have an odd number of moves"

        i = move_set.index_of(self_move)
        j = move_set.index_of(other_move)

        distance_clockwise = (j - i + total) % total
        distance_counter_clockwise = (i - j + total) % total

        if distance_clockwise == distance_counter_clockwise:
            return GameResult.DRAW
        if distance_counter_clockwise < distance_clockwise:
            return GameResult.WIN
        return GameResult.LOSE

    @staticmethod
    def build_matrix(move_set: MoveSet) -> OutcomeMatrix:
        """
        构建完整结果表

        Args:
            move_set: 招式集合

        Returns:
            OutcomeMatrix: N×N 结果表
        """
        size = len(move_set)
        rows = tuple(
            tuple(GameRules.result_of(i, j, move_set) for j in range(size))
            for i in range(size)
        )
        logger.debug(f"结果表构建完成: {size}x{size}")
        return OutcomeMatrix(move_set=move_set, rows=rows)

    @staticmethod
    def lookup(matrix: OutcomeMatrix, self_move: Move, other_move: Move) -> GameResult:
        """
        从预先构建的结果表中查询结果

        Args:
            matrix: 结果表
            self_move: 己方招式
            other_move: 对方招式

        Returns:
            GameResult: 从己方角度的结果
        """
        move_set = matrix.move_set
        return matrix.cell(move_set.index_of(self_move), move_set.index_of(other_move))

    @staticmethod
    def beats(move: Move, move_set: MoveSet) -> List[str]:
        """
        获取会被指定招式战胜的招式

        Args:
            move: 目标招式

        Returns:
            List[str]: 从近到远，位于其之前的 (N-1)/2 个招式
        """
        i = move_set.index_of(move)
        half = len(move_set) // 2
        return [move_set[(i - step) % len(move_set)] for step in range(1, half + 1)]

    @staticmethod
    def beaten_by(move: Move, move_set: MoveSet) -> List[str]:
        """
        获取能战胜指定招式的招式

        Args:
            move: 目标招式

        Returns:
            List[str]: 从近到远，位于其之后的 (N-1)/2 个招式
        """
        i = move_set.index_of(move)
        half = len(move_set) // 2
        return [move_set[(i + step) % len(move_set)] for step in range(1, half + 1)]
