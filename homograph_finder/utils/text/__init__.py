#!/usr/bin/env python3
"""
文本处理工具模块
"""

from .cleaning import clean_model_output, collapse_whitespace
from .extraction import extract_candidates, intersect_candidates
from .locator import DEFAULT_DELIMITERS, locate_sentence, locate_all_sentences

__all__ = [
    'clean_model_output',
    'collapse_whitespace',
    'extract_candidates',
    'intersect_candidates',
    'DEFAULT_DELIMITERS',
    'locate_sentence',
    'locate_all_sentences'
]
