"""
测试公共夹具
Shared Test Fixtures
"""
import sys
from pathlib import Path

import pytest

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hmac_rps.utils.exceptions import RandomSourceException  # noqa: E402

FIXED_KEY = bytes(range(32))


class FixedRandomSource:
    """确定性随机源：固定的电脑招式下标和密钥"""

    name = "fixed"

    def __init__(self, index: int = 0, key: bytes = FIXED_KEY):
        self.index = index
        self.key = key
        self.requested_lengths = []

    def token_bytes(self, length: int) -> bytes:
        self.requested_lengths.append(length)
        return (self.key * (length // len(self.key) + 1))[:length]

    def randbelow(self, upper: int) -> int:
        return self.index % upper


class BrokenRandomSource:
    """模拟系统随机源耗尽"""

    name = "broken"

    def token_bytes(self, length: int) -> bytes:
        raise RandomSourceException("entropy exhausted", source=self.name)

    def randbelow(self, upper: int) -> int:
        raise RandomSourceException("entropy exhausted", source=self.name)


class ScriptedInput:
    """按顺序返回预设输入行，用完后抛出 EOFError"""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def fixed_random():
    return FixedRandomSource


@pytest.fixture
def broken_random():
    return BrokenRandomSource()


@pytest.fixture
def scripted_input():
    return ScriptedInput
