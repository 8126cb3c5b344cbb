#!/usr/bin/env python3
"""
例句定位工具

在原文中找到词语出现的位置，向前后扩展到句子分隔符，截取上下文。
默认只使用第一次出现的位置；同一个词多次出现时不做区分。
"""

from typing import List, Optional

from .cleaning import collapse_whitespace

DEFAULT_DELIMITERS = "。！？\n!?…"


def _find_occurrence(text: str, word: str, occurrence: int) -> int:
    """返回第 occurrence 次（从0开始，不重叠）出现的位置，不存在返回-1"""
    index = -1
    start = 0
    for _ in range(occurrence + 1):
        index = text.find(word, start)
        if index == -1:
            return -1
        start = index + len(word)
    return index


def _excerpt_at(text: str, index: int, back_limit: int, forward_limit: int, delimiters: str) -> str:
    # 向前扫描：停在分隔符之后、文本开头或 back_limit 步
    start = index
    steps = 0
    while start > 0 and text[start - 1] not in delimiters and steps < back_limit:
        start -= 1
        steps += 1

    # 向后扫描：停在分隔符上（包含该字符）、文本末尾或 forward_limit 步
    end = index
    steps = 0
    while end < len(text) and text[end] not in delimiters and steps < forward_limit:
        end += 1
        steps += 1

    return collapse_whitespace(text[start:end + 1])


def locate_sentence(
    text: str,
    word: str,
    *,
    occurrence: int = 0,
    back_limit: int = 100,
    forward_limit: int = 150,
    delimiters: str = DEFAULT_DELIMITERS,
) -> Optional[str]:
    """
    查找词语所在的句子

    Args:
        text: 原文
        word: 目标词
        occurrence: 使用第几次出现（从0开始）
        back_limit: 向前最多扫描的字符数
        forward_limit: 向后最多扫描的字符数
        delimiters: 句子分隔符

    Returns:
        空白折叠后的句子片段；词语不存在时返回None
    """
    if not text or not word or occurrence < 0:
        return None

    index = _find_occurrence(text, word, occurrence)
    if index == -1:
        return None
    return _excerpt_at(text, index, back_limit, forward_limit, delimiters)


def locate_all_sentences(
    text: str,
    word: str,
    *,
    back_limit: int = 100,
    forward_limit: int = 150,
    delimiters: str = DEFAULT_DELIMITERS,
) -> List[str]:
    """返回词语每一次出现（不重叠）对应的句子片段"""
    if not text or not word:
        return []

    excerpts = []
    index = text.find(word)
    while index != -1:
        excerpts.append(_excerpt_at(text, index, back_limit, forward_limit, delimiters))
        index = text.find(word, index + len(word))
    return excerpts
