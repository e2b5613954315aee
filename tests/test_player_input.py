"""
玩家输入与帮助表测试
Player Input and Help Table Tests
"""
import pytest

from hmac_rps.game import CommandType, GameRules, HelpTableGenerator, MoveSet, parse_player_input
from hmac_rps.utils.exceptions import InvalidInputException

MOVES = MoveSet(["rock", "paper", "scissors"])


@pytest.mark.parametrize("line, kind, move", [
    ("0", CommandType.EXIT, None),
    (" 0\n", CommandType.EXIT, None),
    ("?", CommandType.HELP, None),
    ("1", CommandType.MOVE, "rock"),
    (" 2 ", CommandType.MOVE, "paper"),
    ("3", CommandType.MOVE, "scissors"),
])
def test_valid_input(line, kind, move):
    command = parse_player_input(line, MOVES)
    assert command.kind == kind
    assert command.move == move


@pytest.mark.parametrize("line", ["99", "4", "-1", "00", "", "rock", "1.5", "??",
                                  "+1", "1_0", "\u0661", "\uff12"])
def test_invalid_input(line):
    with pytest.raises(InvalidInputException) as excinfo:
        parse_player_input(line, MOVES)
    assert excinfo.value.raw_input == line


def test_help_table_layout():
    matrix = GameRules.build_matrix(MOVES)
    text = HelpTableGenerator.generate_table(matrix)
    lines = text.splitlines()

    header = next(line for line in lines if "v User\\PC >" in line)
    assert header.index("rock") < header.index("paper") < header.index("scissors")

    rows = {line.split("|")[1].strip(): [cell.strip() for cell in line.split("|")[2:-1]]
            for line in lines if line.startswith("|") and "v User" not in line}
    assert rows == {
        "rock": ["Draw", "Lose", "Win"],
        "paper": ["Win", "Draw", "Lose"],
        "scissors": ["Lose", "Win", "Draw"],
    }

    assert 'if you select "paper" and the computer selects "rock", the result is "Win"' in text


def test_menu_lines():
    assert HelpTableGenerator.generate_menu(MOVES) == [
        "Available moves:",
        "1 - rock",
        "2 - paper",
        "3 - scissors",
        "0 - exit",
        "? - help",
    ]


def test_help_table_keeps_numeric_looking_names():
    moves = MoveSet(["1.0", "2.50", "1e3"])
    text = HelpTableGenerator.generate_table(GameRules.build_matrix(moves))
    labels = [line.split("|")[1].strip() for line in text.splitlines()
              if line.startswith("|") and "v User" not in line]
    assert labels == ["1.0", "2.50", "1e3"]
