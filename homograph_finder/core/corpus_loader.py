#!/usr/bin/env python3
"""
语料加载模块
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import CorpusReadError, MissingInputError
from .logger import UnifiedLogger
from ..utils.file import find_text_files


def read_text_file(path: Path) -> str:
    """以UTF-8读取文本文件（兼容BOM）"""
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusReadError(f"读取文件失败: {path}: {e}") from e


class CorpusLoader:
    """把一种语言的多个文件拼接为一个文本"""

    def __init__(self, logger: Optional[UnifiedLogger] = None, max_workers: int = 4):
        self.logger = logger or UnifiedLogger.create_console_only()
        self.max_workers = max_workers

    def resolve(self, inputs: Iterable[str], label: str) -> List[Path]:
        """展开输入；没有任何文件时抛出 MissingInputError"""
        files = find_text_files(inputs)
        if not files:
            raise MissingInputError(f"没有找到{label}语料文件")
        self.logger.info(f"{label}语料: {len(files)} 个文件")
        return files

    def load(self, files: List[Path], label: str = "") -> str:
        """
        并行读取文件并按选择顺序用换行拼接

        Args:
            files: 文件列表
            label: 语言标签（用于日志）

        Returns:
            拼接后的文本
        """
        if not files:
            return ""

        workers = max(1, min(self.max_workers, len(files)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map 保持输入顺序
            texts = list(executor.map(read_text_file, files))

        text = "\n".join(texts)
        self.logger.info(f"{label}语料读取完成: {len(text)} 字符")
        return text
