"""
安全随机源
Secure Random Source
"""
import secrets
from ...utils.exceptions import RandomSourceException
from ...utils.logger import setup_logger

logger = setup_logger("HMAC_RPS.RandomSource")


class SecureRandomSource:
    """
    基于操作系统 CSPRNG 的随机源

    作为显式依赖注入到 CommitmentProvider 和 RoundController，
    测试时可替换为确定性实现（只需提供 token_bytes 和 randbelow）。
    失败时抛出 RandomSourceException，绝不退回到 random 模块。
    """

    name = "secrets"

    def token_bytes(self, length: int) -> bytes:
        """
        生成安全随机字节

        Args:
            length: 字节数

        Returns:
            bytes: 随机字节

        Raises:
            RandomSourceException: 系统随机源不可用
        """
        try:
            return secrets.token_bytes(length)
        except (OSError, NotImplementedError) as e:
            logger.critical(f"系统安全随机源不可用: {e}")
            raise RandomSourceException(f"secure random source unavailable: {e}", source=self.name) from e

    def randbelow(self, upper: int) -> int:
        """
        生成 [0, upper) 内均匀分布的随机整数

        Raises:
            RandomSourceException: 系统随机源不可用
        """
        try:
            return secrets.randbelow(upper)
        except (OSError, NotImplementedError) as e:
            logger.critical(f"系统安全随机源不可用: {e}")
            raise RandomSourceException(f"secure random source unavailable: {e}", source=self.name) from e
