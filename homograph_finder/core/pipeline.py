#!/usr/bin/env python3
"""
同形语分析流程控制模块

读取语料 → 抽取候选词（中/日） → 求交集 → 分类网关 → 定位例句 → 组装结果
"""

import threading
from typing import List, Optional, Sequence

from .assembler import assemble_entries
from .classifier import HomographClassifier
from .config import HomographConfig
from .corpus_loader import CorpusLoader
from .errors import ConfigError, HomographError, PipelineBusyError
from .logger import UnifiedLogger
from .models import AnalysisResult, CandidateMatch, ProcessingStats, RunStatus
from ..utils.text import extract_candidates, intersect_candidates

NO_SHARED_VOCABULARY_MESSAGE = "指定されたファイル間で共通する漢字語彙が見つかりませんでした。"
PARTIAL_RESULT_MESSAGE = "{missing} 語の分析結果がモデルから返されませんでした（{submitted} 語中）。"


def select_batch(words: Sequence[str], batch_size: int) -> List[str]:
    """按匹配顺序取前 batch_size 个词"""
    return list(words[:batch_size])


class HomographPipeline:
    """同形语分析流程控制类"""

    def __init__(self, config: HomographConfig, classifier: Optional[HomographClassifier] = None,
                 logger: Optional[UnifiedLogger] = None):
        """
        初始化分析流程

        Args:
            config: 分析配置
            classifier: 分类网关（默认按配置创建）
            logger: 日志器
        """
        self.config = config
        self.logger = logger or UnifiedLogger.create_console_only(config.log_level)
        self._classifier = classifier
        self.loader = CorpusLoader(self.logger, max_workers=config.read_workers)
        self._run_lock = threading.Lock()
        self._status = RunStatus.IDLE
        self.last_result: Optional[AnalysisResult] = None

    @property
    def classifier(self) -> HomographClassifier:
        """延迟创建分类网关"""
        if self._classifier is None:
            self._classifier = HomographClassifier(self.config, self.logger)
        return self._classifier

    @property
    def status(self) -> RunStatus:
        return self._status

    def _set_status(self, status: RunStatus) -> None:
        if status != self._status:
            self.logger.debug(f"状态: {self._status.value} -> {status.value}")
        self._status = status

    def _check_config(self) -> None:
        errors = self.config.validate()
        if errors:
            for error in errors:
                self.logger.error(f"配置错误: {error}")
            raise ConfigError("; ".join(errors))

    def match(self, cn_text: str, jp_text: str) -> CandidateMatch:
        """抽取两种语料的候选词并求交集"""
        cn_candidates = extract_candidates(cn_text, self.config.min_run_length)
        jp_candidates = extract_candidates(jp_text, self.config.min_run_length)
        self.logger.info(f"候选词: 中文 {len(cn_candidates)} 个, 日文 {len(jp_candidates)} 个")

        shared = intersect_candidates(cn_candidates, jp_candidates)
        batch = select_batch(shared, self.config.batch_size)
        self.logger.info(f"共通词: {len(shared)} 个")
        if len(batch) < len(shared):
            self.logger.info(f"超过批次上限，只分析前 {len(batch)} 个（其余 {len(shared) - len(batch)} 个仅计入统计）")

        return CandidateMatch(cn_candidates=cn_candidates, jp_candidates=jp_candidates,
                              shared=shared, batch=batch)

    def classify(self, match: CandidateMatch, cn_text: str, jp_text: str) -> AnalysisResult:
        """调用分类网关并组装结果；GatewayError 向上抛出"""
        self._set_status(RunStatus.ANALYZING)
        outcome = self.classifier.classify(match.batch)
        entries = assemble_entries(outcome.entries, cn_text, jp_text, **self.config.locator_kwargs())

        message = None
        missing = len(match.batch) - len(outcome.entries)
        if missing > 0:
            self.logger.warning(f"模型未返回 {missing} 个词语的有效结果")
            message = PARTIAL_RESULT_MESSAGE.format(missing=missing, submitted=len(match.batch))

        return AnalysisResult(
            status=RunStatus.COMPLETE,
            entries=entries,
            stats=match.stats(processed_count=len(outcome.entries)),
            message=message,
            rejected=list(outcome.rejected),
        )

    def _finish(self, match: CandidateMatch, cn_text: str, jp_text: str) -> AnalysisResult:
        if not match.shared:
            self.logger.info("没有共通词，跳过分类")
            return AnalysisResult(status=RunStatus.IDLE, stats=match.stats(),
                                  message=NO_SHARED_VOCABULARY_MESSAGE)

        result = self.classify(match, cn_text, jp_text)
        self.logger.info(
            f"分析完成: 共通词 {result.stats.intersection_count} 个, "
            f"已分析 {result.stats.processed_count} 个"
        )
        return result

    def analyze_texts(self, cn_text: str, jp_text: str) -> AnalysisResult:
        """
        分析两段文本

        没有共通词时返回 IDLE 状态的结果（不调用分类网关）；
        配置非法时抛出 ConfigError，分类网关失败时抛出 GatewayError。
        """
        try:
            self._check_config()
            result = self._finish(self.match(cn_text, jp_text), cn_text, jp_text)
        except HomographError:
            self._set_status(RunStatus.ERROR)
            raise
        self._set_status(result.status)
        return result

    def run(self, cn_inputs: Sequence[str], jp_inputs: Sequence[str]) -> AnalysisResult:
        """
        运行完整分析流程

        Args:
            cn_inputs: 中文输入文件/目录/通配符
            jp_inputs: 日文输入文件/目录/通配符

        Returns:
            分析结果；流程中的 HomographError 转换为 ERROR 状态的结果

        Raises:
            PipelineBusyError: 已有流程在运行
        """
        if not self._run_lock.acquire(blocking=False):
            raise PipelineBusyError("已有分析流程在运行")

        try:
            self.last_result = None
            result = self._run(cn_inputs, jp_inputs)
            self._set_status(result.status)
            self.last_result = result
            return result
        finally:
            self._run_lock.release()

    def _run(self, cn_inputs: Sequence[str], jp_inputs: Sequence[str]) -> AnalysisResult:
        match: Optional[CandidateMatch] = None
        try:
            self._check_config()

            # 两种语料都确认存在后才开始读取
            cn_files = self.loader.resolve(cn_inputs or [], "中文")
            jp_files = self.loader.resolve(jp_inputs or [], "日文")

            self._set_status(RunStatus.READING_FILES)
            cn_text = self.loader.load(cn_files, "中文")
            jp_text = self.loader.load(jp_files, "日文")

            match = self.match(cn_text, jp_text)
            return self._finish(match, cn_text, jp_text)
        except HomographError as e:
            self.logger.error(f"分析失败: {e}")
            stats = match.stats() if match is not None else ProcessingStats()
            return AnalysisResult(status=RunStatus.ERROR, stats=stats, message=str(e))

    def reset(self) -> None:
        """丢弃上一次的结果，回到初始状态"""
        if self._run_lock.locked():
            raise PipelineBusyError("分析流程运行中，无法重置")
        self.last_result = None
        self._set_status(RunStatus.IDLE)
