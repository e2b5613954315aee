"""
HMAC 剪刀石头布主程序入口
HMAC Rock Paper Scissors Main Entry
"""
import sys
import argparse
from typing import List, Optional

from .app import Application
from .game import CommitmentProvider, MoveSet
from .utils.config_loader import ConfigLoader
from .utils.error_handler import global_error_handler
from .utils.exceptions import ConfigurationException, MoveSetException
from .utils.logger import setup_logger

logger = setup_logger("HMAC_RPS.Main")

EXAMPLE_USAGE = "Example usage: hmac-rps rock paper scissors lizard Spock"


def build_parser() -> argparse.ArgumentParser:
    """构建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog='hmac-rps',
        description='Rock paper scissors for any odd number of moves, '
                    'with an HMAC proving the computer chose first.'
    )
    parser.add_argument('moves', nargs='*', metavar='MOVE',
                        help='an odd number (>= 3) of distinct move names')
    parser.add_argument('--config', type=str, default=None,
                        help='configuration file (default: config/config.yaml)')
    parser.add_argument('--key-length', type=int, default=None,
                        help='HMAC key length in bytes')
    parser.add_argument('--log-level', type=str, default=None,
                        help='DEBUG, INFO, WARNING, ERROR or CRITICAL')
    parser.add_argument('--verify', nargs=3, metavar=('KEY', 'MOVE', 'HMAC'), default=None,
                        help='recompute the HMAC of MOVE with the revealed KEY and compare')
    return parser


def print_usage_error(error: MoveSetException):
    """输出招式参数错误和用法示例"""
    print("Invalid input.", file=sys.stderr)
    print(f"Reason: {error.message}", file=sys.stderr)
    print(EXAMPLE_USAGE, file=sys.stderr)


def verify(key_hex: str, move: str, digest_hex: str, config_path: Optional[str] = None) -> int:
    """
    验证揭示的密钥和招式是否与公布的 HMAC 一致

    Args:
        key_hex: 十六进制密钥
        move: 电脑招式名称
        digest_hex: 回合开始时公布的十六进制 HMAC
        config_path: 配置文件路径（决定摘要算法）

    Returns:
        int: 退出码，一致为0
    """
    try:
        key = bytes.fromhex(key_hex)
        bytes.fromhex(digest_hex)
    except ValueError:
        print("KEY and HMAC must be hex strings.", file=sys.stderr)
        return 1

    try:
        game_config = ConfigLoader.get_game_config(ConfigLoader.load_config(config_path))
    except ConfigurationException as e:
        global_error_handler.handle(e, "验证")
        return 1

    provider = CommitmentProvider(digest=game_config.digest)
    if provider.verify(key, move, digest_hex):
        print("OK")
        return 0
    print("MISMATCH")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    主函数

    Returns:
        int: 退出码（0 正常结束或退出，1 参数错误或致命错误）
    """
    args = build_parser().parse_args(argv)

    if args.verify:
        return verify(*args.verify, config_path=args.config)

    # 在构造任何游戏组件之前校验招式列表
    try:
        move_set = MoveSet(args.moves)
    except MoveSetException as e:
        logger.debug(f"招式列表不合法: {e.message}")
        print_usage_error(e)
        return 1

    app = Application(
        move_set=move_set,
        config_path=args.config,
        key_length=args.key_length,
        log_level=args.log_level
    )

    try:
        success = app.start()
    except KeyboardInterrupt:
        logger.info("用户中断程序")
        return 0

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
