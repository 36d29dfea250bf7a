"""hanzi_filter: extract Chinese characters from arbitrary text."""

from hanzi_filter.core.text_processor import (
    ChineseExtractor,
    ExtractorOptions,
    extract_chinese,
    get_default_extractor,
    is_chinese_char,
    contains_chinese,
)

__version__ = "1.0.0"

__all__ = [
    'ChineseExtractor',
    'ExtractorOptions',
    'extract_chinese',
    'get_default_extractor',
    'is_chinese_char',
    'contains_chinese',
]
