#!/usr/bin/env python3
"""
同形语分析核心模块
"""

# 导入所有核心组件
from .config import HomographConfig
from .errors import (
    HomographError,
    ConfigError,
    MissingInputError,
    CorpusReadError,
    GatewayError,
    ResponseFormatError,
    PipelineBusyError,
)
from .models import (
    HomographType,
    RunStatus,
    ClassifiedEntry,
    RejectedEntry,
    ProcessingStats,
    AnalysisResult,
    CandidateMatch,
    ClassificationOutcome,
)
from .logger import UnifiedLogger
from .corpus_loader import CorpusLoader
from .classifier import HomographClassifier
from .assembler import assemble_entries
from .pipeline import HomographPipeline, select_batch

__all__ = [
    'HomographConfig',
    'HomographError',
    'ConfigError',
    'MissingInputError',
    'CorpusReadError',
    'GatewayError',
    'ResponseFormatError',
    'PipelineBusyError',
    'HomographType',
    'RunStatus',
    'ClassifiedEntry',
    'RejectedEntry',
    'ProcessingStats',
    'AnalysisResult',
    'CandidateMatch',
    'ClassificationOutcome',
    'UnifiedLogger',
    'CorpusLoader',
    'HomographClassifier',
    'assemble_entries',
    'HomographPipeline',
    'select_batch'
]
