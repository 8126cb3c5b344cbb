#!/usr/bin/env python3
"""
同形语分析配置管理模块
"""

import argparse
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union, get_type_hints

import yaml

from .errors import ConfigError
from ..utils.file import load_yaml_mapping
from ..utils.text import DEFAULT_DELIMITERS


def _check_field(name: str, expected: Any, value: Any) -> Any:
    """检查单个配置项的类型，int 可用于 float 字段，str 可用于 Path 字段"""
    optional = False
    if getattr(expected, '__origin__', None) is Union:
        optional = type(None) in expected.__args__
        expected = next(a for a in expected.__args__ if a is not type(None))

    if value is None:
        if optional:
            return None
        raise ConfigError(f"配置项 {name} 不能为空")

    # bool 是 int 的子类，需要单独排除
    is_bool = isinstance(value, bool)
    if expected is bool and is_bool:
        return value
    if expected is int and isinstance(value, int) and not is_bool:
        return value
    if expected is float and isinstance(value, (int, float)) and not is_bool:
        return float(value)
    if expected is Path and isinstance(value, (str, Path)):
        return Path(value)
    if expected is str and isinstance(value, str):
        return value

    raise ConfigError(
        f"配置项 {name} 类型错误: 需要 {expected.__name__}，实际为 {type(value).__name__} ({value!r})"
    )


@dataclass
class HomographConfig:
    """分析配置类，集中管理模型参数与各项策略常量"""

    # 模型配置
    model: str = "Qwen/Qwen3-32B"
    base_url: str = "http://localhost:8000/v1"
    api_key: str = field(default_factory=lambda: os.environ.get("OPENAI_API_KEY", "dummy"))
    temperature: float = 0.2
    # <=0 表示不限制（交由模型/服务端决定）
    max_tokens: int = 0
    # 使用 response_format 的 JSON schema 约束输出；不支持的服务端可关闭
    structured_output: bool = True
    # None 表示使用客户端默认超时
    request_timeout: Optional[float] = None
    # 传输层重试次数；应用层不做自动重试
    max_retries: int = 0

    # 抽取与匹配策略
    batch_size: int = 50
    min_run_length: int = 2

    # 例句定位策略
    back_scan_chars: int = 100
    forward_scan_chars: int = 150
    sentence_delimiters: str = DEFAULT_DELIMITERS

    # 文件读取
    read_workers: int = 4

    # 日志配置
    log_dir: Path = Path("logs")
    log_to_file: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        # YAML 中的值没有经过 argparse 的类型转换，这里统一检查
        for name, expected in get_type_hints(type(self)).items():
            setattr(self, name, _check_field(name, expected, getattr(self, name)))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'HomographConfig':
        """从YAML配置文件创建配置对象，未出现的键使用默认值"""
        try:
            data = load_yaml_mapping(path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(f"无法读取配置文件 {path}: {e}") from e
        return cls().merged(**data)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'HomographConfig':
        """从命令行参数创建配置对象（--config 文件优先加载，显式参数覆盖）"""
        config_file = getattr(args, 'config', None)
        base = cls.from_yaml(config_file) if config_file else cls()

        overrides: Dict[str, Any] = {}
        for f in fields(cls):
            value = getattr(args, f.name, None)
            if value is not None:
                overrides[f.name] = value
        return base.merged(**overrides)

    def merged(self, **overrides: Any) -> 'HomographConfig':
        """返回覆盖了指定字段的新配置对象"""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigError(f"未知配置项: {', '.join(unknown)}")
        return replace(self, **overrides)

    def locator_kwargs(self) -> Dict[str, Any]:
        """例句定位参数"""
        return {
            'back_limit': self.back_scan_chars,
            'forward_limit': self.forward_scan_chars,
            'delimiters': self.sentence_delimiters,
        }

    def validate(self) -> List[str]:
        """验证配置参数，返回错误列表"""
        errors = []

        if not self.model:
            errors.append("模型名称不能为空")

        if self.temperature < 0 or self.temperature > 2:
            errors.append("temperature 必须在 0-2 之间")

        if self.batch_size <= 0:
            errors.append("batch_size 必须大于 0")

        if self.min_run_length < 1:
            errors.append("min_run_length 必须大于等于 1")

        if self.back_scan_chars < 0:
            errors.append("back_scan_chars 不能为负数")

        if self.forward_scan_chars < 0:
            errors.append("forward_scan_chars 不能为负数")

        if not self.sentence_delimiters:
            errors.append("sentence_delimiters 不能为空")

        if self.max_retries < 0:
            errors.append("max_retries 不能为负数")

        if self.request_timeout is not None and self.request_timeout <= 0:
            errors.append("request_timeout 必须大于 0")

        if self.read_workers <= 0:
            errors.append("read_workers 必须大于 0")

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"未知日志级别: {self.log_level}")

        return errors
