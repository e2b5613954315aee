"""
玩家输入解析
Player Input Parsing
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from .game_logic import MoveSet
from ..utils.exceptions import InvalidInputException

EXIT_COMMAND = "0"
HELP_COMMAND = "?"


class CommandType(Enum):
    """输入命令类型"""
    EXIT = "exit"
    HELP = "help"
    MOVE = "move"


@dataclass(frozen=True)
class PlayerCommand:
    """一行输入解析后的命令"""
    kind: CommandType
    move: Optional[str] = None


def parse_player_input(line: str, move_set: MoveSet) -> PlayerCommand:
    """
    解析一行玩家输入

    "0" 退出，"?" 帮助，1..N 的整数选择对应招式。

    Args:
        line: 输入行
        move_set: 招式集合

    Returns:
        PlayerCommand: 解析结果

    Raises:
        InvalidInputException: 无法解析或编号超出范围
    """
    text = line.strip()
    if text == EXIT_COMMAND:
        return PlayerCommand(CommandType.EXIT)
    if text == HELP_COMMAND:
        return PlayerCommand(CommandType.HELP)

    if not (text.isascii() and text.isdigit()):
        raise InvalidInputException("not a number", raw_input=line)
    number = int(text)

    try:
        return PlayerCommand(CommandType.MOVE, move_set.from_choice(number))
    except IndexError:
        raise InvalidInputException(f"choice out of range 1..{len(move_set)}", raw_input=line) from None
