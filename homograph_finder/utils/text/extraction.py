#!/usr/bin/env python3
"""
候选词抽取与交集匹配

候选词是连续汉字（CJK统一表意文字 U+4E00-U+9FFF）的最长串。
假名、标点、拉丁字母、数字、空白等只作为分隔符，不做分词、归一化或词典查询，
因此简繁异体（如 手纸/手紙）不会被视为同一个词。
"""

import re
from functools import lru_cache
from typing import Iterable, List, Pattern

_HAN_CLASS = r"[\u4e00-\u9fff]"


@lru_cache(maxsize=8)
def _han_run_pattern(min_length: int) -> Pattern[str]:
    return re.compile(f"{_HAN_CLASS}{{{min_length},}}")


def extract_candidates(text: str, min_length: int = 2) -> List[str]:
    """
    抽取文本中长度不小于 min_length 的汉字串，去重

    Args:
        text: 任意文本
        min_length: 最短长度（默认2，单字过于常见，不作为候选）

    Returns:
        按首次出现顺序排列的不重复候选词
    """
    if not text:
        return []
    # dict 保持插入顺序，兼作有序集合
    return list(dict.fromkeys(_han_run_pattern(min_length).findall(text)))


def intersect_candidates(a: Iterable[str], b: Iterable[str]) -> List[str]:
    """
    求两组候选词的交集

    结果按 a 的遍历顺序排列，每个词只出现一次；不按频率、长度或字母排序。
    """
    b_set = set(b)
    return [word for word in dict.fromkeys(a) if word in b_set]
