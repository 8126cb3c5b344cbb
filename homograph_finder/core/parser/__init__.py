"""
解析器模块

包含各种解析器组件，用于处理模型输出。
"""

from .classification_output_parser import ClassificationOutputParser

__all__ = ['ClassificationOutputParser']
