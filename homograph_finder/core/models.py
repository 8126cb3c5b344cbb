#!/usr/bin/env python3
"""
数据模型
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class HomographType(str, Enum):
    """中日词义关系"""
    SAME = "SAME"            # 词义相同（如 学生）
    RELATED = "RELATED"      # 相关但有细微差别（如 先生）
    DIFFERENT = "DIFFERENT"  # 同形异义（如 手紙）

    @classmethod
    def parse(cls, value: Any) -> Optional['HomographType']:
        """严格解析：只接受 SAME / RELATED / DIFFERENT 原样的值，其他返回None"""
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class RunStatus(str, Enum):
    """一次分析流程所处的阶段"""
    IDLE = "IDLE"
    READING_FILES = "READING_FILES"
    ANALYZING = "ANALYZING"
    COMPLETE = "COMPLETE"
    ERROR = "ERROR"


# 网关返回的每个条目必须包含的字段（type 单独校验）
TEXT_FIELDS = (
    "word",
    "cn_pronunciation",
    "jp_pronunciation",
    "cn_meaning",
    "jp_meaning",
    "cn_example",
    "jp_example",
)


@dataclass(frozen=True)
class ClassifiedEntry:
    """
    一个共通词的分类结果

    网关产生的条目不含 source_* 字段；结果组装阶段再从原文中补全上下文。
    """
    word: str
    cn_pronunciation: str
    jp_pronunciation: str
    cn_meaning: str
    jp_meaning: str
    type: HomographType
    cn_example: str
    jp_example: str
    source_cn_sentence: Optional[str] = None
    source_jp_sentence: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            'word': self.word,
            'cn_pronunciation': self.cn_pronunciation,
            'jp_pronunciation': self.jp_pronunciation,
            'cn_meaning': self.cn_meaning,
            'jp_meaning': self.jp_meaning,
            'type': self.type.value,
            'cn_example': self.cn_example,
            'jp_example': self.jp_example,
            'source_cn_sentence': self.source_cn_sentence,
            'source_jp_sentence': self.source_jp_sentence,
        }


@dataclass(frozen=True)
class RejectedEntry:
    """网关返回但未通过校验的条目"""
    raw: Any
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {'raw': self.raw, 'reason': self.reason}


@dataclass
class ProcessingStats:
    """处理统计"""
    cn_word_count: int = 0
    jp_word_count: int = 0
    intersection_count: int = 0
    submitted_count: int = 0
    processed_count: int = 0

    def to_dict(self) -> Dict[str, int]:
        """转换为展示层使用的键名"""
        return {
            'cnWordCount': self.cn_word_count,
            'jpWordCount': self.jp_word_count,
            'intersectionCount': self.intersection_count,
            'submittedCount': self.submitted_count,
            'processedCount': self.processed_count,
        }


@dataclass
class AnalysisResult:
    """一次分析流程的结果"""
    status: RunStatus
    entries: List[ClassifiedEntry] = field(default_factory=list)
    stats: ProcessingStats = field(default_factory=ProcessingStats)
    message: Optional[str] = None
    rejected: List[RejectedEntry] = field(default_factory=list)

    @property
    def is_error(self) -> bool:
        return self.status == RunStatus.ERROR

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status.value,
            'message': self.message,
            'stats': self.stats.to_dict(),
            'entries': [entry.to_dict() for entry in self.entries],
            'rejected': [item.to_dict() for item in self.rejected],
        }


@dataclass
class CandidateMatch:
    """抽取与匹配阶段的结果"""
    cn_candidates: List[str]
    jp_candidates: List[str]
    shared: List[str]
    batch: List[str]

    def stats(self, processed_count: int = 0) -> ProcessingStats:
        return ProcessingStats(
            cn_word_count=len(self.cn_candidates),
            jp_word_count=len(self.jp_candidates),
            intersection_count=len(self.shared),
            submitted_count=len(self.batch),
            processed_count=processed_count,
        )


@dataclass
class ClassificationOutcome:
    """分类网关的返回：有效条目与被拒绝的条目"""
    entries: List[ClassifiedEntry] = field(default_factory=list)
    rejected: List[RejectedEntry] = field(default_factory=list)
