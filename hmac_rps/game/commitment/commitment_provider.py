"""
承诺-揭示（HMAC）实现
Commit-Reveal Commitment Provider

电脑在玩家出招前公布 HMAC(key, move)，回合结束后公布 key。
验证方法：用公布的 key 对电脑招式名称（UTF-8）重新计算 HMAC-SHA256，
结果必须与回合开始时公布的 HMAC 完全一致。
"""
import hmac
from dataclasses import dataclass, field
from typing import Optional
from .random_source import SecureRandomSource
from ...utils.logger import setup_logger

logger = setup_logger("HMAC_RPS.Commitment")

DEFAULT_KEY_LENGTH = 32
DEFAULT_DIGEST = "sha256"


@dataclass(frozen=True)
class Commitment:
    """一次承诺：密钥在回合结束前保密，摘要立即公开"""
    message: str
    digest: str
    key: bytes = field(repr=False)

    @property
    def key_hex(self) -> str:
        return self.key.hex()


class CommitmentProvider:
    """承诺提供者"""

    def __init__(self,
                 random_source: Optional[SecureRandomSource] = None,
                 key_length: int = DEFAULT_KEY_LENGTH,
                 digest: str = DEFAULT_DIGEST):
        """
        初始化承诺提供者

        Args:
            random_source: 随机源（默认使用系统 CSPRNG）
            key_length: 密钥长度（字节）
            digest: hashlib 摘要算法名
        """
        self.random_source = random_source or SecureRandomSource()
        self.key_length = key_length
        self.digest = digest

    def generate_secret(self, length_bytes: Optional[int] = None) -> bytes:
        """
        生成密钥

        Args:
            length_bytes: 字节数，默认使用 key_length

        Returns:
            bytes: 密钥

        Raises:
            RandomSourceException: 随机源不可用
        """
        return self.random_source.token_bytes(length_bytes or self.key_length)

    def commit(self, secret: bytes, message: str) -> str:
        """
        计算 HMAC 摘要

        Args:
            secret: 密钥
            message: 被承诺的消息

        Returns:
            str: 十六进制摘要
        """
        return hmac.new(secret, message.encode("utf-8"), self.digest).hexdigest()

    def create(self, message: str) -> Commitment:
        """
        为消息生成新密钥并计算摘要

        Args:
            message: 被承诺的消息

        Returns:
            Commitment: 承诺
        """
        secret = self.generate_secret()
        commitment = Commitment(message=message, digest=self.commit(secret, message), key=secret)
        logger.debug(f"已生成承诺 {self.digest}: {commitment.digest}")
        return commitment

    def verify(self, secret: bytes, message: str, digest: str) -> bool:
        """
        验证摘要

        Args:
            secret: 揭示的密钥
            message: 揭示的消息
            digest: 事先公布的十六进制摘要

        Returns:
            bool: 重新计算的摘要是否一致
        """
        return hmac.compare_digest(self.commit(secret, message), digest.strip().lower())
