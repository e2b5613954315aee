"""
回合控制器
Round Controller - 整合规则、承诺和交互输入
"""
from dataclasses import dataclass, field
from typing import Optional, Callable
from .commitment import Commitment, CommitmentProvider, SecureRandomSource
from .game_logic import GameRules, GameResult, MoveSet
from .help_table import HelpTableGenerator
from .player_input import CommandType, parse_player_input
from .state_machine import GameState, GameStateMachine
from ..utils.exceptions import GameException, InvalidInputException, RandomSourceException
from ..utils.logger import setup_logger

logger = setup_logger("HMAC_RPS.RoundController")

PROMPT = "Enter your move: "

RESULT_TEXT = {
    GameResult.WIN: "You win!",
    GameResult.LOSE: "You lose!",
    GameResult.DRAW: "It's a tie!"
}


@dataclass
class RoundState:
    """单个回合的临时状态"""
    computer_move: str
    commitment: Commitment
    human_move: Optional[str] = None


@dataclass(frozen=True)
class RoundResult:
    """回合结果"""
    human_move: str
    computer_move: str
    result: GameResult
    digest: str
    key: bytes = field(repr=False)

    @property
    def key_hex(self) -> str:
        return self.key.hex()

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'human_move': self.human_move,
            'computer_move': self.computer_move,
            'result': self.result.value,
            'digest': self.digest,
            'key': self.key_hex
        }


class RoundController:
    """回合控制器类"""

    def __init__(self,
                 move_set: MoveSet,
                 commitment_provider: Optional[CommitmentProvider] = None,
                 random_source: Optional[SecureRandomSource] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        """
        初始化回合控制器

        Args:
            move_set: 招式集合
            commitment_provider: 承诺提供者（默认与控制器共用随机源）
            random_source: 随机源，用于选择电脑招式
            input_func: 读取一行输入，参数为提示文字（默认 input）
            output_func: 输出一行文字（默认 print）
        """
        self.move_set = move_set
        if random_source is None:
            random_source = commitment_provider.random_source if commitment_provider else SecureRandomSource()
        self.random_source = random_source
        self.commitment_provider = commitment_provider or CommitmentProvider(random_source)
        self.input_func = input_func or input
        self.output_func = output_func or print

        # 结果表只构建一次，回合内查询
        self.matrix = GameRules.build_matrix(move_set)

        self.state_machine = GameStateMachine(initial_state=GameState.START)
        self.state_machine.register_transition_handler(self._notify_state_changed)

        self.round_state: Optional[RoundState] = None
        self.result: Optional[RoundResult] = None

        # 回调函数
        self.on_state_changed: Optional[Callable[[GameState], None]] = None

        logger.debug(f"回合控制器初始化完成，招式数: {len(move_set)}")

    def play(self) -> Optional[RoundResult]:
        """
        进行一个完整回合

        Returns:
            Optional[RoundResult]: 回合结果，玩家退出时返回None

        Raises:
            RandomSourceException: 安全随机源不可用（在任何输出之前）
        """
        self._handle_start()

        while not self.state_machine.is_finished():
            try:
                line = self.input_func(PROMPT)
            except EOFError:
                logger.info("输入已结束，按退出处理")
                self._transition(GameState.EXIT)
                break
            self._handle_input(line)

        return self.result

    def _handle_start(self):
        """选择电脑招式，生成承诺并公布摘要"""
        try:
            computer_move = self.move_set[self.random_source.randbelow(len(self.move_set))]
            commitment = self.commitment_provider.create(computer_move)
        except RandomSourceException:
            self._transition(GameState.ERROR)
            raise

        self.round_state = RoundState(computer_move=computer_move, commitment=commitment)
        logger.info("电脑已选择招式并生成承诺")

        self.output_func(f"HMAC: {commitment.digest}")
        self._show_menu()
        self._transition(GameState.AWAITING_INPUT)

    def _handle_input(self, line: str):
        """
        处理一行输入

        Args:
            line: 输入行
        """
        try:
            command = parse_player_input(line, self.move_set)
        except InvalidInputException as e:
            logger.debug(f"无效输入 {e.raw_input!r}: {e.message}")
            self.output_func("Invalid input, please choose one of the options below.")
            self._show_menu()
            self._transition(GameState.AWAITING_INPUT)
            return

        if command.kind == CommandType.EXIT:
            self._transition(GameState.EXIT)
        elif command.kind == CommandType.HELP:
            self._transition(GameState.HELP)
            self._handle_help()
        else:
            self.round_state.human_move = command.move
            self._transition(GameState.RESOLVED)
            self._handle_resolved()

    def _handle_help(self):
        """显示结果表和菜单，然后继续等待输入"""
        self.output_func(HelpTableGenerator.generate_table(self.matrix))
        self._show_menu()
        self._transition(GameState.AWAITING_INPUT)

    def _handle_resolved(self):
        """判定结果并揭示密钥"""
        state = self.round_state
        result = GameRules.lookup(self.matrix, state.human_move, state.computer_move)
        self.result = RoundResult(
            human_move=state.human_move,
            computer_move=state.computer_move,
            result=result,
            digest=state.commitment.digest,
            key=state.commitment.key
        )
        logger.info(f"回合结束: {state.human_move} vs {state.computer_move} -> {result}")

        self.output_func(f"Your move: {state.human_move}")
        self.output_func(f"Computer move: {state.computer_move}")
        self.output_func(RESULT_TEXT[result])
        self.output_func(f"HMAC key: {self.result.key_hex}")
        self.output_func(
            f"Verify: HMAC-{self.commitment_provider.digest.upper()}(key, \"{state.computer_move}\") "
            f"must equal the HMAC shown at the start of the round."
        )

    def _show_menu(self):
        for line in HelpTableGenerator.generate_menu(self.move_set):
            self.output_func(line)

    def _transition(self, new_state: GameState):
        if not self.state_machine.transition_to(new_state):
            raise GameException(
                f"illegal transition {self.state_machine.get_current_state()} -> {new_state}",
                game_state=str(self.state_machine.get_current_state())
            )

    def _notify_state_changed(self, old_state: GameState, new_state: GameState):
        """通知状态改变"""
        if self.on_state_changed:
            self.on_state_changed(new_state)

    def get_current_state(self) -> GameState:
        """获取当前状态"""
        return self.state_machine.get_current_state()
