# coding: utf-8
"""
用户白名单/黑名单字符集

将用户提供的 include/exclude 字符列表展开为单字符集合，并与区间表组合成
allowed/denied 两个判定函数。

用户列表中的字符一律按字面处理: `*`、`.`、`-`、`[`、`]` 等只代表它们自身，
空白字符也只匹配同一个空白字符。

优先级: 黑名单 > 白名单 > 默认区间。
"""

__all__ = ['CharacterInput', 'to_char_set', 'build_matchers']

import logging
from typing import Callable, FrozenSet, Iterable, Optional, Tuple, Union

from .unicode_ranges import (
    CHINESE_TABLE,
    CHINESE_WITH_PUNCTUATION_TABLE,
    join_surrogates,
)

logger = logging.getLogger(__name__)

CharacterInput = Optional[Union[str, Iterable[str]]]
CharPredicate = Callable[[str], bool]


def to_char_set(chars: CharacterInput) -> FrozenSet[str]:
    """
    将字符串、字符串序列或字符串集合展开为单字符集合

    多字符条目会被拆分为各个字符；非字符串条目会被跳过。

    Args:
        chars: 用户提供的字符列表

    Returns:
        单字符 frozenset

    Examples:
        >>> sorted(to_char_set(['你好', '，', 3]))
        ['你', '好', '，']
    """
    if chars is None:
        return frozenset()

    if isinstance(chars, str):
        return frozenset(join_surrogates(chars))

    try:
        entries = iter(chars)
    except TypeError:
        logger.debug(f"Ignoring non-iterable character list: {chars!r}")
        return frozenset()

    result = set()
    for entry in entries:
        if not isinstance(entry, str):
            logger.debug(f"Skipping non-string character entry: {entry!r}")
            continue
        result.update(join_surrogates(entry))

    return frozenset(result)


def build_matchers(
    remove_punctuation: bool = True,
    include: CharacterInput = None,
    exclude: CharacterInput = None,
) -> Tuple[CharPredicate, CharPredicate]:
    """
    构建 allowed/denied 判定函数

    Args:
        remove_punctuation: 为 False 时中文标点也属于允许集合
        include: 白名单字符
        exclude: 黑名单字符

    Returns:
        (allowed, denied)
        allowed(c): c 落在区间表内或在白名单中
        denied(c): c 在黑名单中
    """
    table = CHINESE_TABLE if remove_punctuation else CHINESE_WITH_PUNCTUATION_TABLE
    include_set = to_char_set(include)
    exclude_set = to_char_set(exclude)

    def allowed(char: str) -> bool:
        return char in table or char in include_set

    def denied(char: str) -> bool:
        return char in exclude_set

    return allowed, denied
