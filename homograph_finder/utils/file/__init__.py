#!/usr/bin/env python3
"""
文件处理工具模块
"""

from .yaml_parser import load_yaml_mapping
from .filename_utils import natural_sort_key, find_text_files

__all__ = [
    'load_yaml_mapping',
    'natural_sort_key',
    'find_text_files'
]
