"""
招式集合
Move Set
"""
from typing import Dict, Iterator, Sequence, Tuple, Union
from ...utils.exceptions import MoveSetException

# 招式既可以用名字也可以用下标引用
Move = Union[str, int]

MIN_MOVES = 3


class MoveSet:
    """
    有序、不可变的招式集合

    顺序决定了循环距离规则中的相邻关系：每个招式战胜其后 (N-1)/2 个招式，
    输给其前 (N-1)/2 个招式。构造时一次性建立 名字 -> 下标 映射。
    """

    __slots__ = ('_names', '_index')

    def __init__(self, moves: Sequence[str]):
        """
        初始化招式集合

        Args:
            moves: 招式名称序列

        Raises:
            MoveSetException: 数量不足、数量为偶数或存在重复名称
        """
        names = tuple(moves)
        MoveSet.validate(names)
        object.__setattr__(self, '_names', names)
        object.__setattr__(self, '_index', {name: i for i, name in enumerate(names)})

    @staticmethod
    def validate(names: Sequence[str]):
        """
        校验招式列表

        Args:
            names: 招式名称序列

        Raises:
            MoveSetException: 校验失败
        """
        if len(names) < MIN_MOVES:
            raise MoveSetException(
                f"at least {MIN_MOVES} moves are required, got {len(names)}",
                reason="too_few")
        if len(names) % 2 == 0:
            raise MoveSetException(
                f"the number of moves must be odd, got {len(names)}",
                reason="even_count")
        seen = set()
        for name in names:
            if name in seen:
                raise MoveSetException(f"duplicate move: {name}", reason="duplicate")
            seen.add(name)

    def __setattr__(self, key, value):
        raise AttributeError("MoveSet is immutable")

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    def index_of(self, move: Move) -> int:
        """
        获取招式下标

        Args:
            move: 招式名称或下标

        Returns:
            int: 0..N-1 的下标

        Raises:
            KeyError: 招式不在集合中
        """
        if isinstance(move, int) and not isinstance(move, bool):
            if 0 <= move < len(self._names):
                return move
            raise KeyError(move)
        return self._index[move]

    def from_choice(self, number: int) -> str:
        """
        菜单编号（从1开始）转换为招式名称

        Args:
            number: 菜单编号 1..N

        Returns:
            str: 招式名称

        Raises:
            IndexError: 编号超出范围
        """
        if not 1 <= number <= len(self._names):
            raise IndexError(f"choice {number} out of range 1..{len(self._names)}")
        return self._names[number - 1]

    def menu(self) -> Dict[int, str]:
        """菜单编号 -> 招式名称"""
        return {i + 1: name for i, name in enumerate(self._names)}

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __getitem__(self, index: int) -> str:
        return self._names[index]

    def __contains__(self, move) -> bool:
        return move in self._index

    def __eq__(self, other) -> bool:
        if not isinstance(other, MoveSet):
            return NotImplemented
        return self._names == other._names

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"MoveSet({list(self._names)!r})"
