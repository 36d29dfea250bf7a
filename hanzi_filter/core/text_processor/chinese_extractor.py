# coding: utf-8
"""
中文字符提取模块

从任意文本中提取中文字符，过滤拉丁字母、数字、空白、表情符号、其他文字等。

处理顺序:
1. 合并 UTF-16 代理对
2. Unicode 归一化 (NFKC，白名单/黑名单中的字符保持原样)
3. 按区间表 + 白名单 + 黑名单过滤
4. 去重 (可选)

用法示例:
    from hanzi_filter import extract_chinese

    extract_chinese("Super idol的笑容都没你的甜")
    # '的笑容都没你的甜'

    extract_chinese("反反复复圈圈", remove_duplicates=True)
    # '反复圈'

    extract_chinese("反，反，复。", include_characters="，。")
    # '反，反，复。'
"""

__all__ = [
    'ExtractorOptions',
    'ChineseExtractor',
    'resolve_options',
    'filter_characters',
    'extract_chinese',
    'get_default_extractor',
]

import logging
from dataclasses import dataclass, fields
from typing import Any, Callable, Iterator, Mapping, Optional, Union

from .char_sets import CharacterInput, build_matchers, to_char_set
from .deduplicator import remove_duplicates
from .normalizer import UnicodeNormalizer
from .unicode_ranges import PUNCTUATION_TABLE, join_surrogates

logger = logging.getLogger(__name__)


@dataclass
class ExtractorOptions:
    """提取配置"""
    normalize_unicode: bool = True
    remove_duplicates: bool = False            # 不合并简繁异体，如 国/國 都会保留
    remove_punctuation: bool = True
    include_characters: CharacterInput = ""
    exclude_characters: CharacterInput = ""


_OPTION_NAMES = frozenset(f.name for f in fields(ExtractorOptions))

# 兼容驼峰命名的配置键
_OPTION_ALIASES = {
    'normalizeUnicode': 'normalize_unicode',
    'removeDuplicates': 'remove_duplicates',
    'removePunctuation': 'remove_punctuation',
    'includeCharacters': 'include_characters',
    'excludeCharacters': 'exclude_characters',
}

OptionsInput = Optional[Union[ExtractorOptions, Mapping[str, Any]]]


def resolve_options(options: OptionsInput = None, **overrides) -> ExtractorOptions:
    """
    合并配置对象与关键字参数

    Args:
        options: ExtractorOptions、配置字典或 None
        **overrides: 覆盖单项配置

    Returns:
        完整的 ExtractorOptions，未知配置项会被忽略
    """
    if options is None:
        values = {}
    elif isinstance(options, ExtractorOptions):
        values = {name: getattr(options, name) for name in _OPTION_NAMES}
    elif isinstance(options, Mapping):
        values = dict(options)
    else:
        logger.warning(f"Ignoring unsupported options object: {type(options).__name__}")
        values = {}

    values.update(overrides)

    resolved = {}
    for key, value in values.items():
        name = _OPTION_ALIASES.get(key, key)
        if name not in _OPTION_NAMES:
            logger.warning(f"Ignoring unknown extractor option: {key!r}")
            continue
        resolved[name] = value

    return ExtractorOptions(**resolved)


def filter_characters(
    text: str,
    allowed: Callable[[str], bool],
    denied: Callable[[str], bool],
) -> Iterator[str]:
    """
    逐码位过滤，保持原有顺序

    Args:
        text: 输入文本
        allowed: 允许判定
        denied: 拒绝判定 (优先于 allowed)

    Yields:
        通过过滤的字符
    """
    for char in text:
        if allowed(char) and not denied(char):
            yield char


class ChineseExtractor:
    """
    中文字符提取器

    配置在构造时解析并固定，适合用同一组配置处理大量文本。
    构造后只读，可在多线程间共享。

    用法:
        extractor = ChineseExtractor(remove_duplicates=True)
        result = extractor.extract("重复重复甲乙甲乙")
        # result: "重复甲乙"
    """

    def __init__(self, options: OptionsInput = None, **overrides):
        """
        初始化提取器

        Args:
            options: ExtractorOptions 或配置字典，为 None 时使用默认配置
            **overrides: 覆盖单项配置
        """
        self.options = resolve_options(options, **overrides)

        self.normalize_unicode = bool(self.options.normalize_unicode)
        self.remove_duplicates = bool(self.options.remove_duplicates)
        self.remove_punctuation = bool(self.options.remove_punctuation)

        self.include_set = to_char_set(self.options.include_characters)
        self.exclude_set = to_char_set(self.options.exclude_characters)
        self._literal_set = self.include_set | self.exclude_set

        self._allowed, self._denied = build_matchers(
            self.remove_punctuation, self.include_set, self.exclude_set
        )
        self.normalizer = UnicodeNormalizer() if self.normalize_unicode else None

    def allowed(self, char: str) -> bool:
        """字符是否在区间表或白名单内"""
        return self._allowed(char)

    def denied(self, char: str) -> bool:
        """字符是否在黑名单内"""
        return self._denied(char)

    def accepts(self, char: str) -> bool:
        """字符是否会出现在输出中 (不考虑归一化)"""
        return self._allowed(char) and not self._denied(char)

    def is_protected(self, char: str) -> bool:
        """
        字符是否免于归一化

        白名单/黑名单中按字面列出的字符保持原样；保留标点时，
        中文标点也保持原样 (否则 '！' 会被归一化为 '!' 而丢失)。
        """
        if char in self._literal_set:
            return True
        return not self.remove_punctuation and char in PUNCTUATION_TABLE

    def extract(self, text: str) -> str:
        """
        提取中文字符

        Args:
            text: 输入文本

        Returns:
            提取结果，没有匹配字符时返回空字符串
        """
        if not isinstance(text, str):
            if text is not None:
                logger.debug(f"Ignoring non-string input: {type(text).__name__}")
            return ''
        if not text:
            return ''

        text = join_surrogates(text)

        if self.normalizer:
            text = self.normalizer.normalize(text, self.is_protected)

        result = ''.join(filter_characters(text, self._allowed, self._denied))

        if self.remove_duplicates:
            result = remove_duplicates(result)

        return result

    __call__ = extract

    @classmethod
    def from_config(cls, config) -> 'ChineseExtractor':
        """
        从配置对象创建提取器

        Args:
            config: 包含提取配置的对象 (如 Settings)

        Returns:
            ChineseExtractor 实例
        """
        options = ExtractorOptions(
            normalize_unicode=getattr(config, 'normalize_unicode', True),
            remove_duplicates=getattr(config, 'remove_duplicates', False),
            remove_punctuation=getattr(config, 'remove_punctuation', True),
            include_characters=getattr(config, 'include_characters', ''),
            exclude_characters=getattr(config, 'exclude_characters', ''),
        )
        return cls(options)

    def __repr__(self) -> str:
        return (
            f"ChineseExtractor(normalize_unicode={self.normalize_unicode}, "
            f"remove_duplicates={self.remove_duplicates}, "
            f"remove_punctuation={self.remove_punctuation}, "
            f"include={len(self.include_set)} chars, exclude={len(self.exclude_set)} chars)"
        )


def extract_chinese(text: str, options: OptionsInput = None, **overrides) -> str:
    """
    便捷函数: 提取中文字符

    Args:
        text: 输入文本
        options: ExtractorOptions 或配置字典
        **overrides: normalize_unicode / remove_duplicates / remove_punctuation /
                     include_characters / exclude_characters

    Returns:
        提取结果
    """
    return ChineseExtractor(options, **overrides).extract(text)


# 全局缓存
_default_extractor = None


def get_default_extractor(reload: bool = False) -> ChineseExtractor:
    """
    获取按应用配置 (环境变量 / .env) 构建的共享提取器

    Args:
        reload: 是否重新读取配置

    Returns:
        ChineseExtractor 实例
    """
    global _default_extractor
    if _default_extractor is None or reload:
        from hanzi_filter.config import Settings, settings
        config = Settings() if reload else settings
        _default_extractor = ChineseExtractor.from_config(config)
        logger.info(f"Default extractor ready: {_default_extractor!r}")
    return _default_extractor


if __name__ == "__main__":
    extractor = ChineseExtractor()

    test_cases = [
        "全民制作人们大家好",
        "Super idol的笑容都没你的甜八月正午的阳光都没你耀眼",
        "🎵跳rap籃球music雞你太💄",
        "漢字（中文）、漢字（日本語）、한글（한국어）",
        "\uf90a\uf90b\uf90c\uf90e金喇奈癩",
    ]

    print("=== 中文提取测试 ===")
    for text in test_cases:
        print(f"{text!r} -> {extractor.extract(text)!r}")
