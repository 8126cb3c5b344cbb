#!/usr/bin/env python3
"""
HomographPipeline单元测试

用假的分类网关代替模型调用，覆盖完整流程与各个失败分支。
"""

from typing import List, Optional, Set

import pytest

from .config import HomographConfig
from .errors import ConfigError, GatewayError, PipelineBusyError
from .logger import UnifiedLogger
from .models import ClassificationOutcome, ClassifiedEntry, HomographType, RejectedEntry, RunStatus
from .pipeline import NO_SHARED_VOCABULARY_MESSAGE, HomographPipeline, select_batch
from ..utils.text import extract_candidates

CN_TEXT = "科学、手纸、问题，科学很重要。"
JP_TEXT = "これは科学の手紙の問題です。"


class FakeClassifier:
    """记录调用并为提交的词语返回固定条目"""

    def __init__(self, only: Optional[Set[str]] = None, fail_times: int = 0):
        self.only = only
        self.fail_times = fail_times
        self.calls: List[List[str]] = []

    def classify(self, words: List[str]) -> ClassificationOutcome:
        self.calls.append(list(words))
        if self.fail_times > 0:
            self.fail_times -= 1
            raise GatewayError("模型服务不可用")

        outcome = ClassificationOutcome()
        for word in words:
            if self.only is not None and word not in self.only:
                outcome.rejected.append(RejectedEntry(raw={"word": word}, reason="测试拒绝"))
                continue
            outcome.entries.append(ClassifiedEntry(
                word=word,
                cn_pronunciation="pinyin",
                jp_pronunciation="よみ",
                cn_meaning="意味",
                jp_meaning="意味",
                type=HomographType.SAME,
                cn_example=f"{word}。",
                jp_example=f"{word}。",
            ))
        return outcome


def _write(tmp_path, name: str, text: str) -> str:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def _pipeline(classifier: FakeClassifier, **overrides) -> HomographPipeline:
    config = HomographConfig(**overrides)
    return HomographPipeline(config, classifier=classifier, logger=UnifiedLogger.create_silent())


def _generated_words(count: int) -> List[str]:
    return [chr(0x4E00 + 2 * i) + chr(0x4E01 + 2 * i) for i in range(count)]


class TestSelectBatch:
    def test_keeps_order_and_caps(self):
        assert select_batch(["甲乙", "丙丁", "戊己"], 2) == ["甲乙", "丙丁"]
        assert select_batch(["甲乙"], 50) == ["甲乙"]


class TestHomographPipeline:
    """分析流程测试类"""

    def test_end_to_end(self, tmp_path):
        classifier = FakeClassifier()
        pipeline = _pipeline(classifier)

        result = pipeline.run([_write(tmp_path, "cn.txt", CN_TEXT)], [_write(tmp_path, "jp.txt", JP_TEXT)])

        assert result.status == RunStatus.COMPLETE
        assert classifier.calls == [["科学"]]
        assert result.stats.cn_word_count == 4
        assert result.stats.jp_word_count == 3
        assert result.stats.intersection_count == 1
        assert result.stats.submitted_count == 1
        assert result.stats.processed_count == 1

        entry = result.entries[0]
        assert entry.word == "科学"
        assert entry.source_cn_sentence == CN_TEXT
        assert entry.source_jp_sentence == JP_TEXT
        assert result.message is None
        assert pipeline.status == RunStatus.COMPLETE
        assert pipeline.last_result is result

    def test_multiple_files_are_joined(self, tmp_path):
        classifier = FakeClassifier()
        pipeline = _pipeline(classifier)
        cn = [_write(tmp_path, "cn1.txt", "科学"), _write(tmp_path, "cn2.txt", "学生")]
        jp = [_write(tmp_path, "jp.txt", "学生と科学")]

        result = pipeline.run(cn, jp)

        # 文件之间以换行连接，不会拼成一个候选词
        assert classifier.calls == [["科学", "学生"]]
        assert result.stats.cn_word_count == 2

    def test_maximal_runs_give_no_intersection(self, tmp_path):
        classifier = FakeClassifier()
        pipeline = _pipeline(classifier)
        cn = _write(tmp_path, "cn.txt", "这是科学研究的手纸问题，科学很重要。")
        jp = _write(tmp_path, "jp.txt", JP_TEXT)

        result = pipeline.run([cn], [jp])

        assert result.status == RunStatus.IDLE
        assert result.message == NO_SHARED_VOCABULARY_MESSAGE
        assert result.entries == []
        assert result.stats.cn_word_count == 2
        assert result.stats.jp_word_count == 3
        assert result.stats.intersection_count == 0
        assert classifier.calls == []

    def test_empty_texts_give_no_intersection(self):
        classifier = FakeClassifier()
        result = _pipeline(classifier).analyze_texts("", "")

        assert result.status == RunStatus.IDLE
        assert result.stats.cn_word_count == 0
        assert classifier.calls == []

    def test_batch_cap(self):
        words = _generated_words(60)
        text = "、".join(words)
        classifier = FakeClassifier()

        result = _pipeline(classifier).analyze_texts(text, text)

        assert classifier.calls == [words[:50]]
        assert result.stats.intersection_count == 60
        assert result.stats.submitted_count == 50
        assert result.stats.processed_count == 50
        assert [e.word for e in result.entries] == words[:50]

    def test_custom_batch_size(self):
        words = _generated_words(5)
        text = "、".join(words)
        classifier = FakeClassifier()

        result = _pipeline(classifier, batch_size=3).analyze_texts(text, text)

        assert classifier.calls == [words[:3]]
        assert result.stats.submitted_count == 3

    def test_partial_result(self):
        classifier = FakeClassifier(only={"科学"})

        result = _pipeline(classifier).analyze_texts("科学、学生。", "科学と学生。")

        assert result.status == RunStatus.COMPLETE
        assert result.stats.intersection_count == 2
        assert result.stats.submitted_count == 2
        assert result.stats.processed_count == 1
        assert [e.word for e in result.entries] == ["科学"]
        assert len(result.rejected) == 1
        # 部分结果也体现在消息中
        assert result.message is not None
        assert "1 語" in result.message

    def test_entries_are_shared_words(self):
        cn = "学生、科学。先生，你好！"
        jp = "先生と学生が科学を学ぶ。"

        result = _pipeline(FakeClassifier()).analyze_texts(cn, jp)

        cn_set = set(extract_candidates(cn))
        jp_set = set(extract_candidates(jp))
        assert result.entries
        for entry in result.entries:
            assert entry.word in cn_set and entry.word in jp_set
            assert entry.word in entry.source_cn_sentence
            assert entry.word in entry.source_jp_sentence

    def test_gateway_error_then_retry(self, tmp_path):
        classifier = FakeClassifier(fail_times=1)
        pipeline = _pipeline(classifier)
        cn = [_write(tmp_path, "cn.txt", CN_TEXT)]
        jp = [_write(tmp_path, "jp.txt", JP_TEXT)]

        failed = pipeline.run(cn, jp)

        assert failed.status == RunStatus.ERROR
        assert failed.is_error
        assert "模型服务不可用" in failed.message
        assert failed.entries == []
        assert failed.stats.intersection_count == 1
        assert pipeline.status == RunStatus.ERROR

        retried = pipeline.run(cn, jp)

        assert retried.status == RunStatus.COMPLETE
        assert [e.word for e in retried.entries] == ["科学"]
        assert len(classifier.calls) == 2

    def test_analyze_texts_raises_gateway_error(self):
        pipeline = _pipeline(FakeClassifier(fail_times=1))
        with pytest.raises(GatewayError):
            pipeline.analyze_texts(CN_TEXT, JP_TEXT)
        assert pipeline.status == RunStatus.ERROR

    def test_missing_inputs(self, tmp_path):
        classifier = FakeClassifier()
        pipeline = _pipeline(classifier)

        result = pipeline.run([], [_write(tmp_path, "jp.txt", JP_TEXT)])

        assert result.status == RunStatus.ERROR
        assert result.stats.cn_word_count == 0
        assert classifier.calls == []

    def test_nonexistent_input_files(self, tmp_path):
        result = _pipeline(FakeClassifier()).run([str(tmp_path / "cn.txt")], [str(tmp_path / "jp.txt")])
        assert result.status == RunStatus.ERROR

    def test_invalid_config(self, tmp_path):
        classifier = FakeClassifier()
        pipeline = _pipeline(classifier, batch_size=0)

        result = pipeline.run([_write(tmp_path, "cn.txt", CN_TEXT)], [_write(tmp_path, "jp.txt", JP_TEXT)])

        assert result.status == RunStatus.ERROR
        assert "batch_size" in result.message
        assert classifier.calls == []

    def test_concurrent_run_rejected(self, tmp_path):
        pipeline = _pipeline(FakeClassifier())
        cn = [_write(tmp_path, "cn.txt", CN_TEXT)]
        jp = [_write(tmp_path, "jp.txt", JP_TEXT)]

        pipeline._run_lock.acquire()
        try:
            with pytest.raises(PipelineBusyError):
                pipeline.run(cn, jp)
            with pytest.raises(PipelineBusyError):
                pipeline.reset()
        finally:
            pipeline._run_lock.release()

        assert pipeline.run(cn, jp).status == RunStatus.COMPLETE

    def test_reset(self, tmp_path):
        pipeline = _pipeline(FakeClassifier())
        pipeline.run([_write(tmp_path, "cn.txt", CN_TEXT)], [_write(tmp_path, "jp.txt", JP_TEXT)])

        pipeline.reset()

        assert pipeline.last_result is None
        assert pipeline.status == RunStatus.IDLE

    def test_result_to_dict(self):
        result = _pipeline(FakeClassifier()).analyze_texts(CN_TEXT, JP_TEXT)
        data = result.to_dict()

        assert data["status"] == "COMPLETE"
        assert data["stats"] == {
            "cnWordCount": 4,
            "jpWordCount": 3,
            "intersectionCount": 1,
            "submittedCount": 1,
            "processedCount": 1,
        }
        assert data["entries"][0]["type"] == "SAME"
        assert data["entries"][0]["source_cn_sentence"] == CN_TEXT

    def test_analyze_texts_checks_config(self):
        classifier = FakeClassifier()
        pipeline = _pipeline(classifier, batch_size=-1)

        with pytest.raises(ConfigError, match="batch_size"):
            pipeline.analyze_texts("科学、学生。", "科学と学生。")

        assert classifier.calls == []
        assert pipeline.status == RunStatus.ERROR
