#!/usr/bin/env python3
"""
格式化工具模块
"""

from .output_formatter import TYPE_LABELS, filter_entries, format_result_json, format_result_text

__all__ = [
    'TYPE_LABELS',
    'filter_entries',
    'format_result_json',
    'format_result_text'
]
