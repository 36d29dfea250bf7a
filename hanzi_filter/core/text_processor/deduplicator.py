# coding: utf-8
"""
重复字符移除

按码位从左到右保留每个字符的第一次出现。
简体与繁体是不同码位，例如 '国' 和 '國' 会同时保留。
"""

__all__ = ['remove_duplicates']


def remove_duplicates(text: str) -> str:
    """
    移除重复字符，保留首次出现

    Args:
        text: 输入文本

    Returns:
        去重后的文本

    Examples:
        >>> remove_duplicates("反反复复圈圈")
        '反复圈'
    """
    if not text:
        return text
    return ''.join(dict.fromkeys(text))
