"""
应用程序主类
Application Main Class
"""
from typing import Optional, Sequence, Callable
from .game import RoundController, RoundResult, MoveSet, CommitmentProvider, SecureRandomSource
from .game.state_machine import GameState
from .utils.config_loader import ConfigLoader, GameConfig
from .utils.error_handler import global_error_handler
from .utils.exceptions import ConfigurationException, RandomSourceException, GameException
from .utils.logger import setup_logger, setup_logger_from_config

logger = setup_logger("HMAC_RPS.App")


class Application:
    """应用程序主类：加载配置、组装组件并进行一个回合"""

    def __init__(self,
                 move_set: MoveSet,
                 config_path: Optional[str] = None,
                 key_length: Optional[int] = None,
                 log_level: Optional[str] = None,
                 random_source: Optional[SecureRandomSource] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        """
        初始化应用程序

        Args:
            move_set: 已校验的招式集合
            config_path: 配置文件路径（None 时使用默认配置文件）
            key_length: 覆盖配置中的密钥长度
            log_level: 覆盖配置中的日志级别
            random_source: 随机源（测试时注入）
            input_func: 输入函数
            output_func: 输出函数
        """
        self.move_set = move_set
        self.config_path = config_path
        self.key_length = key_length
        self.log_level = log_level
        self.random_source = random_source
        self.input_func = input_func
        self.output_func = output_func

        self.config: dict = {}
        self.game_config: Optional[GameConfig] = None
        self.round_controller: Optional[RoundController] = None
        self.result: Optional[RoundResult] = None

    def initialize(self) -> bool:
        """
        初始化所有组件

        Returns:
            bool: 初始化是否成功
        """
        try:
            self._load_config()
            self._initialize_round_controller()
        except ConfigurationException as e:
            global_error_handler.handle(e, "初始化")
            return False

        logger.info("应用程序初始化成功")
        return True

    def _load_config(self):
        """加载配置文件并应用日志配置"""
        self.config = ConfigLoader.load_config(self.config_path)

        logging_config = dict(ConfigLoader.get_logging_config(self.config))
        if self.log_level:
            logging_config['level'] = self.log_level
        setup_logger_from_config(logging_config, "HMAC_RPS.App")

        game_section = dict(self.config.get('game') or {})
        if self.key_length is not None:
            game_section['key_length'] = self.key_length
        self.game_config = GameConfig.from_dict(game_section)

        logger.debug(f"游戏配置: {self.game_config}")

    def _initialize_round_controller(self):
        """初始化回合控制器"""
        random_source = self.random_source or SecureRandomSource()
        provider = CommitmentProvider(
            random_source=random_source,
            key_length=self.game_config.key_length,
            digest=self.game_config.digest
        )
        self.round_controller = RoundController(
            move_set=self.move_set,
            commitment_provider=provider,
            random_source=random_source,
            input_func=self.input_func,
            output_func=self.output_func
        )
        self.round_controller.on_state_changed = self._on_game_state_changed

    def _on_game_state_changed(self, state: GameState):
        """回合状态改变回调"""
        logger.debug(f"回合状态改变: {state}")

    def run(self) -> bool:
        """
        进行一个回合

        Returns:
            bool: 回合是否正常结束（判定结果或玩家退出）
        """
        try:
            self.result = self.round_controller.play()
        except (RandomSourceException, GameException) as e:
            global_error_handler.handle(e, "回合")
            return False

        if self.result is None:
            logger.info("玩家退出")
        return True

    def start(self) -> bool:
        """
        启动应用程序

        Returns:
            bool: 是否成功
        """
        if not self.initialize():
            logger.error("应用程序启动失败")
            return False
        return self.run()
