#!/usr/bin/env python3
"""
统一工具模块接口
"""

# 文本处理工具
from .text import (
    clean_model_output,
    collapse_whitespace,
    extract_candidates,
    intersect_candidates,
    locate_sentence,
    locate_all_sentences
)

# 文件处理工具
from .file import (
    load_yaml_mapping,
    natural_sort_key,
    find_text_files
)

__all__ = [
    # 文本处理
    'clean_model_output',
    'collapse_whitespace',
    'extract_candidates',
    'intersect_candidates',
    'locate_sentence',
    'locate_all_sentences',

    # 文件处理
    'load_yaml_mapping',
    'natural_sort_key',
    'find_text_files'
]
