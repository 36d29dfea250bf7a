# coding: utf-8
"""
Unicode 兼容性归一化 (NFKC)

将全角字符、兼容汉字、康熙部首等兼容编码折叠为标准形式，例如:
    '！' -> '!'
    '\\uf90a' -> '金'
    '\\u2f00' -> '一'

受保护字符 (用户白名单/黑名单中按字面列出的字符) 不参与归一化:
文本被切分为"受保护字符"和"未受保护字符连续段"，受保护字符原样输出，
每个连续段整体做 NFKC。因此段内的一对多展开 (如 '㍿' -> '株式会社')
照常生效，而组合字符不会跨越受保护字符与前一个字符合成。

用法示例:
    from hanzi_filter.core.text_processor import UnicodeNormalizer

    normalizer = UnicodeNormalizer()
    normalizer.normalize('\\uf90a！', protected={'！'})  # '金！'
"""

__all__ = ['UnicodeNormalizer', 'normalize_text']

import unicodedata
from typing import Callable, Container, Optional, Union

Protected = Optional[Union[Container[str], Callable[[str], bool]]]


def _as_predicate(protected: Protected) -> Optional[Callable[[str], bool]]:
    if protected is None:
        return None
    if callable(protected):
        return protected
    return protected.__contains__


def normalize_text(text: str, protected: Protected = None, form: str = 'NFKC') -> str:
    """
    归一化文本，受保护字符保持原样

    Args:
        text: 输入文本
        protected: 受保护字符集合，或 `char -> bool` 判定函数
        form: 归一化形式，默认 NFKC

    Returns:
        归一化后的文本
    """
    if not text:
        return text

    is_protected = _as_predicate(protected)
    if is_protected is None:
        return unicodedata.normalize(form, text)

    parts = []
    run_start = 0
    for index, char in enumerate(text):
        if not is_protected(char):
            continue
        if run_start < index:
            parts.append(unicodedata.normalize(form, text[run_start:index]))
        parts.append(char)
        run_start = index + 1

    if run_start < len(text):
        parts.append(unicodedata.normalize(form, text[run_start:]))

    return ''.join(parts)


class UnicodeNormalizer:
    """
    Unicode 归一化器

    用法:
        normalizer = UnicodeNormalizer()
        result = normalizer.normalize("\\u2f00\\u2f59")
        # result: "一爿"
    """

    def __init__(self, form: str = 'NFKC'):
        """
        初始化归一化器

        Args:
            form: 归一化形式 (NFC/NFD/NFKC/NFKD)
        """
        if form not in ('NFC', 'NFD', 'NFKC', 'NFKD'):
            raise ValueError(f"Unsupported normalization form: {form}")
        self.form = form

    def normalize(self, text: str, protected: Protected = None) -> str:
        """
        归一化文本

        Args:
            text: 输入文本
            protected: 不参与归一化的字符集合或判定函数

        Returns:
            归一化后的文本
        """
        return normalize_text(text, protected, self.form)

    def is_normalized(self, text: str) -> bool:
        """检测文本是否已经是归一化形式"""
        return unicodedata.is_normalized(self.form, text)
