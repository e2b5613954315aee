"""
帮助表与菜单渲染
Help Table and Menu Rendering
"""
from typing import List
from tabulate import tabulate
from .game_logic import MoveSet, OutcomeMatrix
from .player_input import EXIT_COMMAND, HELP_COMMAND

CORNER_LABEL = "v User\\PC >"

CAPTION = (
    "The result is described from the user's point of view: "
    "rows are your moves, columns are the computer's moves.\n"
    'Example: if you select "{self_move}" and the computer selects "{other_move}", '
    'the result is "{result}".'
)


class HelpTableGenerator:
    """帮助表生成器"""

    @staticmethod
    def generate_table(matrix: OutcomeMatrix) -> str:
        """
        生成结果表文本（N 行 × N+1 列，首列为行招式名称）

        Args:
            matrix: 结果表

        Returns:
            str: 表格与说明文字
        """
        move_set = matrix.move_set
        headers = [CORNER_LABEL] + list(move_set)
        rows = [
            [name] + [str(result) for result in matrix.rows[i]]
            for i, name in enumerate(move_set)
        ]
        table = tabulate(rows, headers=headers, tablefmt="grid", disable_numparse=True)

        # 以第二个招式对第一个招式为例（第二个总是战胜第一个）
        caption = CAPTION.format(self_move=move_set[1], other_move=move_set[0],
                                 result=matrix.cell(1, 0))
        return f"{table}\n{caption}"

    @staticmethod
    def generate_menu(move_set: MoveSet) -> List[str]:
        """
        生成可选项菜单

        Args:
            move_set: 招式集合

        Returns:
            List[str]: 菜单各行
        """
        lines = ["Available moves:"]
        lines.extend(f"{number} - {name}" for number, name in move_set.menu().items())
        lines.append(f"{EXIT_COMMAND} - exit")
        lines.append(f"{HELP_COMMAND} - help")
        return lines
