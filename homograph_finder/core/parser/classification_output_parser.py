"""
分类输出解析器

负责把模型输出解析为 ClassifiedEntry 列表，支持以下格式：
1. 纯 JSON 数组：[{...}, {...}]
2. 包裹对象：{"entries": [{...}]}（或只有一个列表值的任意键）
3. 以上两种外面再套 <think> 思考段或 ```json 代码块

整体无法解析时抛出 ResponseFormatError；单个条目不合格时只拒绝该条目。
"""

import json
import logging
from typing import Any, Iterable, List, Optional, Tuple

from ..errors import ResponseFormatError
from ..models import TEXT_FIELDS, ClassificationOutcome, ClassifiedEntry, HomographType, RejectedEntry
from ...utils.text import clean_model_output


class ClassificationOutputParser:
    """分类输出解析器"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, raw_text: str, submitted_words: Iterable[str]) -> ClassificationOutcome:
        """
        解析模型输出

        Args:
            raw_text: 模型原始输出
            submitted_words: 本次提交给模型的词语

        Returns:
            ClassificationOutcome: 有效条目（按模型输出顺序）与被拒绝条目
        """
        items = self._load_items(raw_text)
        submitted = set(submitted_words)
        outcome = ClassificationOutcome()
        seen = set()

        for item in items:
            entry, reason = self._build_entry(item)
            if entry is None:
                self._reject(outcome, item, reason)
                continue
            if entry.word not in submitted:
                self._reject(outcome, item, f"词语未在提交列表中: {entry.word}")
                continue
            if entry.word in seen:
                self._reject(outcome, item, f"重复词语: {entry.word}")
                continue
            seen.add(entry.word)
            outcome.entries.append(entry)

        self.logger.debug(f"解析结果: {len(outcome.entries)}个有效条目，{len(outcome.rejected)}个被拒绝")
        return outcome

    def _reject(self, outcome: ClassificationOutcome, item: Any, reason: str) -> None:
        self.logger.warning(f"拒绝条目: {reason}")
        outcome.rejected.append(RejectedEntry(raw=item, reason=reason))

    def _load_items(self, raw_text: str) -> List[Any]:
        """把模型输出解析为条目列表"""
        text = clean_model_output(raw_text or '')
        if not text:
            raise ResponseFormatError("模型返回内容为空")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ResponseFormatError(f"模型返回内容不是合法JSON: {e}") from e

        if isinstance(data, list):
            return data

        if isinstance(data, dict):
            if isinstance(data.get('entries'), list):
                return data['entries']
            list_values = [v for v in data.values() if isinstance(v, list)]
            if len(list_values) == 1:
                return list_values[0]

        raise ResponseFormatError(f"模型返回的JSON不是条目数组: {type(data).__name__}")

    def _build_entry(self, item: Any) -> Tuple[Optional[ClassifiedEntry], str]:
        """校验单个条目，返回 (条目, 拒绝原因)"""
        if not isinstance(item, dict):
            return None, f"条目不是对象: {type(item).__name__}"

        missing = [name for name in TEXT_FIELDS if not isinstance(item.get(name), str)]
        if missing:
            return None, f"缺少字段或类型错误: {', '.join(missing)}"

        word = item['word'].strip()
        if not word:
            return None, "word 为空"

        homograph_type = HomographType.parse(item.get('type'))
        if homograph_type is None:
            return None, f"未知的 type: {item.get('type')!r}"

        return ClassifiedEntry(
            word=word,
            cn_pronunciation=item['cn_pronunciation'],
            jp_pronunciation=item['jp_pronunciation'],
            cn_meaning=item['cn_meaning'],
            jp_meaning=item['jp_meaning'],
            type=homograph_type,
            cn_example=item['cn_example'],
            jp_example=item['jp_example'],
        ), ""
