#!/usr/bin/env python3
"""
YAML配置解析工具
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml


def load_yaml_mapping(path: Union[str, Path]) -> Dict[str, Any]:
    """
    读取YAML文件并返回顶层映射

    空文件返回空字典；顶层不是映射时抛出 ValueError。
    解析错误（yaml.YAMLError）与IO错误（OSError）原样抛出，由调用方处理。
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML顶层必须是映射: {path}")
    return data
