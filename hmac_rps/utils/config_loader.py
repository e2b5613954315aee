"""
配置加载工具模块
Configuration Loader Utility
"""
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional
from .exceptions import ConfigurationException
from .logger import setup_logger

logger = setup_logger("HMAC_RPS.ConfigLoader")

# 默认配置文件位置：项目根目录下的 config/config.yaml
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "config.yaml"

MIN_KEY_LENGTH = 16

# 只允许 256 位及以上的 SHA-2 / SHA-3 摘要
ALLOWED_DIGESTS = ("sha256", "sha384", "sha512", "sha3_256", "sha3_384", "sha3_512")


@dataclass(frozen=True)
class GameConfig:
    """游戏配置"""
    key_length: int = 32
    digest: str = "sha256"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GameConfig":
        """
        从配置字典创建游戏配置并校验

        Args:
            data: game 配置段（可为None）

        Returns:
            GameConfig: 游戏配置

        Raises:
            ConfigurationException: 配置值不合法
        """
        data = data or {}
        key_length = data.get('key_length', cls.key_length)
        digest = str(data.get('digest', cls.digest)).lower()

        if isinstance(key_length, bool) or not isinstance(key_length, int):
            raise ConfigurationException(
                f"key_length 必须是整数: {key_length!r}", config_key="game.key_length")
        if key_length < MIN_KEY_LENGTH:
            raise ConfigurationException(
                f"key_length 不能小于 {MIN_KEY_LENGTH} 字节: {key_length}",
                config_key="game.key_length")
        if digest not in ALLOWED_DIGESTS:
            raise ConfigurationException(
                f"不支持的摘要算法: {digest}", config_key="game.digest")

        return cls(key_length=key_length, digest=digest)


class ConfigLoader:
    """配置加载器类"""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        从YAML文件加载配置

        未指定路径时读取默认配置文件，默认文件不存在则返回空配置。

        Args:
            config_path: 配置文件路径

        Returns:
            Dict[str, Any]: 配置字典

        Raises:
            ConfigurationException: 指定的文件不存在或YAML解析错误
        """
        if config_path is None:
            config_file = DEFAULT_CONFIG_PATH
            if not config_file.exists():
                logger.info(f"默认配置文件不存在，使用内置默认值: {config_file}")
                return {}
        else:
            config_file = Path(config_path)
            if not config_file.exists():
                raise ConfigurationException(f"配置文件不存在: {config_path}", config_key="config")

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML解析错误: {e}")
            raise ConfigurationException(f"YAML解析错误: {e}", config_key="config") from e

        if config is None:
            logger.warning(f"配置文件为空: {config_file}")
            return {}
        if not isinstance(config, dict):
            raise ConfigurationException(f"配置文件顶层必须是映射: {config_file}", config_key="config")

        logger.info(f"成功加载配置文件: {config_file}")
        return config

    @staticmethod
    def get_game_config(config: Dict[str, Any]) -> GameConfig:
        """
        从配置中获取游戏配置

        Args:
            config: 完整配置字典

        Returns:
            GameConfig: 游戏配置
        """
        return GameConfig.from_dict(config.get('game'))

    @staticmethod
    def get_logging_config(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        从配置中获取日志配置

        Args:
            config: 完整配置字典

        Returns:
            Dict[str, Any]: 日志配置字典
        """
        return config.get('logging') or {}
