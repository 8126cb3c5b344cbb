"""
分类请求的Prompt构建组件
"""

from .builder import PromptBuilder, DEFAULT_PREFACE_FILE

__all__ = ['PromptBuilder', 'DEFAULT_PREFACE_FILE']
