#!/usr/bin/env python3
"""
文件查找工具
"""

import glob
import re
from pathlib import Path
from typing import Iterable, List


def natural_sort_key(filename: str) -> List:
    """自然排序键函数，正确处理数字（file2 排在 file10 之前）"""
    parts = re.split(r'(\d+)', filename)
    return [int(part) if part.isdigit() else part for part in parts]


def find_text_files(inputs: Iterable[str], pattern: str = "*.txt") -> List[Path]:
    """
    展开输入列表为文件路径列表，保持输入顺序

    Args:
        inputs: 文件路径、目录或通配符
        pattern: 目录中匹配的文件模式

    Returns:
        文件路径列表（目录内按自然顺序，重复路径只保留第一次出现）
    """
    files: List[Path] = []

    for input_path in inputs:
        path = Path(input_path)

        if path.is_file():
            files.append(path)
        elif path.is_dir():
            txt_files = sorted(
                (p for p in path.glob(pattern) if p.is_file()),
                key=lambda x: natural_sort_key(x.name),
            )
            files.extend(txt_files)
        else:
            # 尝试glob模式
            glob_files = sorted(glob.glob(str(input_path)), key=natural_sort_key)
            files.extend(Path(f) for f in glob_files if Path(f).is_file())

    seen = set()
    unique: List[Path] = []
    for file_path in files:
        key = file_path.resolve()
        if key in seen:
            continue
        seen.add(key)
        unique.append(file_path)
    return unique
