"""
日中同形语（同形異義語）发现工具

比较中文与日文语料，抽取共通的汉字词，交给模型分类，并从原文中定位例句。
"""

from .core import (
    HomographConfig,
    HomographPipeline,
    HomographClassifier,
    HomographType,
    RunStatus,
    ClassifiedEntry,
    ProcessingStats,
    AnalysisResult,
)
from .utils.text import extract_candidates, intersect_candidates, locate_sentence, locate_all_sentences

__version__ = "0.1.0"

__all__ = [
    'HomographConfig',
    'HomographPipeline',
    'HomographClassifier',
    'HomographType',
    'RunStatus',
    'ClassifiedEntry',
    'ProcessingStats',
    'AnalysisResult',
    'extract_candidates',
    'intersect_candidates',
    'locate_sentence',
    'locate_all_sentences',
    '__version__'
]
