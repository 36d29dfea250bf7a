# coding: utf-8
"""
中文字符 Unicode 区间表

以闭区间 [start, end] 描述"中文字符"所覆盖的码位，并提供基于二分查找的
成员判断。区间来源: https://www.unicode.org/charts/

与常见实现的差异:
- 不包含 CJK Compatibility [0x3300, 0x33ff]
- 不包含 CJK Compatibility Forms [0xfe30, 0xfe4f] (标点表中的 0xfe4f 除外)
- 不包含 Ideographic Description Characters [0x2ff0, 0x2fff]，它们只是结构描述符

用法示例:
    from hanzi_filter.core.text_processor import CHINESE_TABLE

    '中' in CHINESE_TABLE      # True
    0x20000 in CHINESE_TABLE   # True
    'a' in CHINESE_TABLE       # False
"""

__all__ = [
    'RangeTable',
    'CHINESE_CHARACTER_RANGES',
    'PUNCTUATION_RANGES',
    'CHINESE_TABLE',
    'PUNCTUATION_TABLE',
    'CHINESE_WITH_PUNCTUATION_TABLE',
    'join_surrogates',
    'is_chinese_char',
    'contains_chinese',
]

import logging
import re
from bisect import bisect_right
from typing import Iterable, Iterator, Tuple, Union

logger = logging.getLogger(__name__)

UnicodeRange = Tuple[int, int]


# 汉字、扩展区、兼容汉字、部首与笔画
CHINESE_CHARACTER_RANGES: Tuple[UnicodeRange, ...] = (
    (0x4E00, 0x9FFF),    # CJK Unified Ideographs
    (0x3400, 0x4DBF),    # CJK Extension A
    (0x20000, 0x2A6DF),  # CJK Extension B
    (0x2A700, 0x2B739),  # CJK Extension C
    (0x2B740, 0x2B81D),  # CJK Extension D
    (0x2B820, 0x2CEA1),  # CJK Extension E
    (0x2CEB0, 0x2EBE0),  # CJK Extension F
    (0x30000, 0x3134A),  # CJK Extension G
    (0x31350, 0x323AF),  # CJK Extension H
    (0x2EBF0, 0x2EE5D),  # CJK Extension I

    (0xF900, 0xFAD9),    # CJK Compatibility Ideographs
    (0x2F800, 0x2FA1D),  # CJK Compatibility Ideographs Supplement

    (0x2F00, 0x2FD5),    # Kangxi Radicals
    (0x2E80, 0x2EF3),    # CJK Radicals Supplement
    (0x31C0, 0x31E5),    # CJK Strokes (0x31ef 是结构描述符)
)

# 中文标点 (句末点号 + 非句末标点)，不含全角空格 U+3000
PUNCTUATION_RANGES: Tuple[UnicodeRange, ...] = (
    (0x00B7, 0x00B7),    # 间隔号 ·
    (0x2013, 0x2014),    # 连接号、破折号
    (0x2018, 0x2019),    # 单引号
    (0x201B, 0x201F),    # 双引号
    (0x2026, 0x2027),    # 省略号、连字点
    (0x3001, 0x3003),    # 、。〃
    (0x3008, 0x3011),    # 〈〉《》「」『』【】
    (0x3014, 0x301F),    # 〔〕〖〗〘〙〚〛〜〝〞〟
    (0x3030, 0x3030),    # 〰
    (0x303E, 0x303F),
    (0xFE4F, 0xFE4F),
    (0xFE51, 0xFE51),    # 小写顿号
    (0xFE54, 0xFE54),    # 小写分号
    (0xFF01, 0xFF0D),    # 全角 ！＂＃＄％＆＇（）＊＋，－
    (0xFF0F, 0xFF0F),    # ／
    (0xFF1A, 0xFF20),    # ：；＜＝＞？＠
    (0xFF3B, 0xFF40),    # ［＼］＾＿｀
    (0xFF5B, 0xFF64),    # ｛｜｝～｟｠ 及半角 ｡｢｣､
)

_SURROGATE_PATTERN = re.compile('[\ud800-\udfff]')
_SURROGATE_PAIR_PATTERN = re.compile('[\ud800-\udbff][\udc00-\udfff]')


class RangeTable:
    """
    不可变的码位区间表

    构造时对区间排序并合并重叠/相邻区间，查询时对区间起点做二分查找。
    支持 `in` 运算: 参数可以是单个字符或整数码位。

    用法:
        table = RangeTable([(0x4E00, 0x9FFF), (0x3400, 0x4DBF)])
        '中' in table   # True
    """

    __slots__ = ('_starts', '_ends')

    def __init__(self, ranges: Iterable[UnicodeRange]):
        merged = []
        for start, end in sorted(ranges):
            if start > end:
                raise ValueError(f"Invalid range: [{start:#x}, {end:#x}]")
            if merged and start <= merged[-1][1] + 1:
                merged[-1][1] = max(merged[-1][1], end)
            else:
                merged.append([start, end])

        self._starts = tuple(start for start, _ in merged)
        self._ends = tuple(end for _, end in merged)

    def __contains__(self, item: Union[str, int]) -> bool:
        if isinstance(item, str):
            if len(item) != 1:
                return False
            item = ord(item)
        elif not isinstance(item, int) or isinstance(item, bool):
            return False

        index = bisect_right(self._starts, item) - 1
        return index >= 0 and item <= self._ends[index]

    def __iter__(self) -> Iterator[UnicodeRange]:
        return iter(zip(self._starts, self._ends))

    def __len__(self) -> int:
        return len(self._starts)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RangeTable):
            return NotImplemented
        return self._starts == other._starts and self._ends == other._ends

    def __hash__(self) -> int:
        return hash((self._starts, self._ends))

    def __repr__(self) -> str:
        body = ', '.join(f'({start:#x}, {end:#x})' for start, end in self)
        return f'RangeTable([{body}])'

    @property
    def ranges(self) -> Tuple[UnicodeRange, ...]:
        """合并后的区间元组"""
        return tuple(self)

    def contains(self, char: Union[str, int]) -> bool:
        """判断字符或码位是否落在任一区间内"""
        return char in self

    def union(self, other: Iterable[UnicodeRange]) -> 'RangeTable':
        """返回包含两组区间的新表"""
        return RangeTable(list(self) + list(other))


CHINESE_TABLE = RangeTable(CHINESE_CHARACTER_RANGES)
PUNCTUATION_TABLE = RangeTable(PUNCTUATION_RANGES)
CHINESE_WITH_PUNCTUATION_TABLE = CHINESE_TABLE.union(PUNCTUATION_TABLE)

logger.debug(
    f"Built range tables: {len(CHINESE_TABLE)} character ranges, "
    f"{len(PUNCTUATION_TABLE)} punctuation ranges"
)


def _combine_pair(match) -> str:
    high, low = match.group()
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


def join_surrogates(text: str) -> str:
    """
    将字符串中成对的 UTF-16 代理项合并为对应的单个码位

    Python 字符串按码位存储，但经 surrogatepass 解码或 JSON 转义得到的
    文本可能包含代理对。未配对的代理项保持原样。

    Args:
        text: 输入文本

    Returns:
        合并代理对后的文本

    Examples:
        >>> join_surrogates('\\ud840\\udc00') == '\\U00020000'
        True
    """
    if not text or not _SURROGATE_PATTERN.search(text):
        return text
    return _SURROGATE_PAIR_PATTERN.sub(_combine_pair, text)


def is_chinese_char(char: Union[str, int], include_punctuation: bool = False) -> bool:
    """
    判断单个字符是否属于中文字符区间

    Args:
        char: 单个字符或码位
        include_punctuation: 是否把中文标点视为中文字符

    Returns:
        是否为中文字符
    """
    table = CHINESE_WITH_PUNCTUATION_TABLE if include_punctuation else CHINESE_TABLE
    return char in table


def contains_chinese(text: str) -> bool:
    """判断文本中是否含有至少一个中文字符 (不含标点)"""
    if not text or not isinstance(text, str):
        return False
    return any(char in CHINESE_TABLE for char in join_surrogates(text))
