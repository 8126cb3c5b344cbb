#!/usr/bin/env python3
"""
结果组装：为分类结果补全原文中的例句
"""

from dataclasses import replace
from typing import Any, Iterable, List

from .models import ClassifiedEntry
from ..utils.text import locate_sentence


def assemble_entries(partials: Iterable[ClassifiedEntry], cn_text: str, jp_text: str,
                     **locator_kwargs: Any) -> List[ClassifiedEntry]:
    """每个词只保留第一个条目，并用第一次出现的位置填充 source_cn_sentence/source_jp_sentence"""
    entries: List[ClassifiedEntry] = []
    seen = set()
    for partial in partials:
        if partial.word in seen:
            continue
        seen.add(partial.word)
        entries.append(replace(
            partial,
            source_cn_sentence=locate_sentence(cn_text, partial.word, **locator_kwargs),
            source_jp_sentence=locate_sentence(jp_text, partial.word, **locator_kwargs),
        ))
    return entries
