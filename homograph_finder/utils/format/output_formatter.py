#!/usr/bin/env python3
"""
输出格式化工具
"""

import json
from typing import List, Optional

from ...core.models import AnalysisResult, ClassifiedEntry, HomographType

TYPE_LABELS = {
    HomographType.SAME: "同義 (SAME)",
    HomographType.RELATED: "類義 (RELATED)",
    HomographType.DIFFERENT: "同形異義 (DIFFERENT)",
}


def filter_entries(
    entries: List[ClassifiedEntry],
    only_type: Optional[HomographType] = None,
    search: str = "",
) -> List[ClassifiedEntry]:
    """
    按类型和关键字筛选条目

    Args:
        entries: 条目列表
        only_type: 只保留该类型，None 表示全部
        search: 关键字，匹配词语本身或中日释义（释义不区分大小写）

    Returns:
        筛选后的条目（保持原顺序）
    """
    query = (search or "").strip()
    lowered = query.lower()
    result = []
    for entry in entries:
        if only_type is not None and entry.type != only_type:
            continue
        if query and not (
            query in entry.word
            or lowered in entry.cn_meaning.lower()
            or lowered in entry.jp_meaning.lower()
        ):
            continue
        result.append(entry)
    return result


def format_result_json(result: AnalysisResult, entries: Optional[List[ClassifiedEntry]] = None) -> str:
    """把分析结果格式化为JSON（entries 传入时替换结果中的条目）"""
    data = result.to_dict()
    if entries is not None:
        data['entries'] = [entry.to_dict() for entry in entries]
    return json.dumps(data, ensure_ascii=False, indent=2)


def format_result_text(result: AnalysisResult, entries: Optional[List[ClassifiedEntry]] = None) -> str:
    """把分析结果格式化为纯文本报告"""
    entries = result.entries if entries is None else entries
    stats = result.stats
    lines = [
        f"状态: {result.status.value}",
        f"中文候选词: {stats.cn_word_count}",
        f"日文候选词: {stats.jp_word_count}",
        f"共通词: {stats.intersection_count}",
        f"已提交: {stats.submitted_count}",
        f"已分析: {stats.processed_count}",
    ]
    if result.message:
        lines.append(f"消息: {result.message}")
    if result.rejected:
        lines.append(f"被拒绝的条目: {len(result.rejected)}")

    for entry in entries:
        lines.append("")
        lines.append(f"【{entry.word}】 {TYPE_LABELS[entry.type]}")
        lines.append(f"  中文: {entry.cn_pronunciation}  {entry.cn_meaning}")
        lines.append(f"  日本語: {entry.jp_pronunciation}  {entry.jp_meaning}")
        lines.append(f"  例(中): {entry.cn_example}")
        lines.append(f"  例(日): {entry.jp_example}")
        if entry.source_cn_sentence:
            lines.append(f"  原文(中): {entry.source_cn_sentence}")
        if entry.source_jp_sentence:
            lines.append(f"  原文(日): {entry.source_jp_sentence}")

    return "\n".join(lines)
