#!/usr/bin/env python3
"""
统一日志系统模块
"""

import logging
import sys
from datetime import datetime
from enum import Enum, auto
from pathlib import Path
from typing import Optional


_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}


class UnifiedLogger:
    """统一日志系统类"""

    class LogMode(Enum):
        CONSOLE = auto()
        FILE = auto()
        BOTH = auto()
        NONE = auto()

    def __init__(self, logger: Optional[logging.Logger] = None, log_file_path: Optional[Path] = None,
                 level: str = 'INFO', debug_to_console: bool = True):
        """
        初始化统一日志系统

        Args:
            logger: Python logging.Logger 对象，如果为None则只输出到控制台
            log_file_path: 日志文件路径
            level: 控制台最低输出级别
            debug_to_console: 是否将 debug 级别输出到控制台
        """
        self.logger = logger
        self.log_file_path = log_file_path
        self.level = _LEVELS.get(level.upper(), logging.INFO)
        self.debug_to_console = debug_to_console

    @classmethod
    def create_console_only(cls, level: str = 'INFO') -> 'UnifiedLogger':
        """创建仅控制台输出的日志器"""
        return cls(logger=None, level=level)

    @classmethod
    def create_silent(cls) -> 'UnifiedLogger':
        """创建不输出任何内容的日志器（测试用）"""
        return cls(logger=None, level='CRITICAL', debug_to_console=False)

    @classmethod
    def create_for_run(cls, log_dir: Path, level: str = 'INFO', name: str = 'homograph') -> 'UnifiedLogger':
        """
        创建文件和控制台双重输出的日志器

        Args:
            log_dir: 日志目录
            level: 控制台最低输出级别（文件始终记录DEBUG）
            name: 日志文件名前缀

        Returns:
            UnifiedLogger 实例
        """
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime('%Y%m%d-%H%M%S')
        log_file = log_dir / f"{name}_{ts}.log"

        logger = logging.getLogger(f'{name}_{ts}')
        logger.setLevel(logging.DEBUG)
        logger.handlers.clear()
        logger.propagate = False

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s'))
        logger.addHandler(file_handler)

        # 文件模式下 debug 只写文件
        return cls(logger=logger, log_file_path=log_file, level=level, debug_to_console=False)

    def _emit(self, level: str, message: str, mode: Optional['UnifiedLogger.LogMode']) -> None:
        # 默认模式映射
        if mode is None:
            if level == 'DEBUG' and not self.debug_to_console:
                mode = UnifiedLogger.LogMode.FILE
            else:
                mode = UnifiedLogger.LogMode.BOTH

        to_console = mode in (UnifiedLogger.LogMode.CONSOLE, UnifiedLogger.LogMode.BOTH)
        to_file = mode in (UnifiedLogger.LogMode.FILE, UnifiedLogger.LogMode.BOTH)
        numeric = _LEVELS.get(level, logging.INFO)

        if to_console and numeric >= self.level:
            # 控制台输出走 stderr，stdout 留给报告
            print(f"[{level}] {message}", file=sys.stderr)
            sys.stderr.flush()
        if to_file and self.logger:
            self.logger.log(numeric, message)

    def info(self, message: str, mode: Optional['UnifiedLogger.LogMode'] = None) -> None:
        """输出INFO级别消息"""
        self._emit('INFO', message, mode)

    def warning(self, message: str, mode: Optional['UnifiedLogger.LogMode'] = None) -> None:
        """输出WARNING级别消息"""
        self._emit('WARNING', message, mode)

    def error(self, message: str, mode: Optional['UnifiedLogger.LogMode'] = None) -> None:
        """输出ERROR级别消息"""
        self._emit('ERROR', message, mode)

    def debug(self, message: str, mode: Optional['UnifiedLogger.LogMode'] = None) -> None:
        """输出DEBUG级别消息"""
        self._emit('DEBUG', message, mode)

    def log(self, level: str, message: str, mode: Optional['UnifiedLogger.LogMode'] = None) -> None:
        """输出指定级别消息"""
        self._emit(level.upper(), message, mode)

    def close(self) -> None:
        """关闭文件处理器"""
        if self.logger:
            for handler in list(self.logger.handlers):
                handler.close()
                self.logger.removeHandler(handler)

    def get_log_file_path(self) -> Optional[Path]:
        """获取日志文件路径"""
        return self.log_file_path
