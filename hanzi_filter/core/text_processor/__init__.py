"""
中文字符过滤模块

提供中文字符提取相关功能：
- 中文字符区间表 (unicode ranges)
- Unicode 兼容性归一化 (NFKC)
- 白名单/黑名单字符集 (include/exclude)
- 重复字符移除 (deduplication)
- 中文字符提取 (extract chinese)
"""

from .unicode_ranges import (
    RangeTable,
    CHINESE_CHARACTER_RANGES,
    PUNCTUATION_RANGES,
    CHINESE_TABLE,
    PUNCTUATION_TABLE,
    CHINESE_WITH_PUNCTUATION_TABLE,
    join_surrogates,
    is_chinese_char,
    contains_chinese,
)
from .normalizer import UnicodeNormalizer, normalize_text
from .char_sets import to_char_set, build_matchers
from .deduplicator import remove_duplicates
from .chinese_extractor import (
    ExtractorOptions,
    ChineseExtractor,
    resolve_options,
    filter_characters,
    extract_chinese,
    get_default_extractor,
)

__all__ = [
    # 区间表
    'RangeTable',
    'CHINESE_CHARACTER_RANGES',
    'PUNCTUATION_RANGES',
    'CHINESE_TABLE',
    'PUNCTUATION_TABLE',
    'CHINESE_WITH_PUNCTUATION_TABLE',
    'join_surrogates',
    'is_chinese_char',
    'contains_chinese',
    # 归一化
    'UnicodeNormalizer',
    'normalize_text',
    # 白名单/黑名单
    'to_char_set',
    'build_matchers',
    # 去重
    'remove_duplicates',
    # 提取
    'ExtractorOptions',
    'ChineseExtractor',
    'resolve_options',
    'filter_characters',
    'extract_chinese',
    'get_default_extractor',
]
