#!/usr/bin/env python3
"""
文本清理工具
"""

import re

_THINK_BLOCKS = (
    re.compile(r'<think>.*?</think>', flags=re.DOTALL),
    re.compile(r'<thinking>.*?</thinking>', flags=re.DOTALL),
    re.compile(r'<reasoning>.*?</reasoning>', flags=re.DOTALL),
)
_CODE_FENCE = re.compile(r'^```[A-Za-z0-9_-]*\s*\n(.*?)\n?```\s*$', flags=re.DOTALL)


def clean_model_output(text: str) -> str:
    """
    清理模型输出，去除思考部分与Markdown代码块标记

    Args:
        text: 模型原始输出

    Returns:
        清理后的文本
    """
    if not text or not text.strip():
        return ''

    # 去除 <think>...</think> 等思考标记
    for pattern in _THINK_BLOCKS:
        text = pattern.sub('', text)
    # 未闭合的 <think>：保留最后一个 </think> 之后的内容
    if '</think>' in text:
        text = text.rsplit('</think>', 1)[1]

    text = text.strip()

    # 去除 ```json ... ``` 包裹
    match = _CODE_FENCE.match(text)
    if match:
        text = match.group(1).strip()

    return text


def collapse_whitespace(text: str) -> str:
    """将连续空白折叠为一个空格并去除首尾空白"""
    return re.sub(r'\s+', ' ', text).strip()
