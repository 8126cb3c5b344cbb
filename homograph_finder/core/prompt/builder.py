#!/usr/bin/env python3
"""
分类请求的Prompt构建器
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models import TEXT_FIELDS, HomographType

ASSETS_DIR = Path(__file__).parent / "assets"
DEFAULT_PREFACE_FILE = ASSETS_DIR / "preface_homograph.txt"

_FIELD_DESCRIPTIONS = {
    "cn_pronunciation": "Chinese Pinyin",
    "jp_pronunciation": "Japanese Furigana/Reading",
    "cn_meaning": "Meaning of the word in Chinese context, EXPLAINED IN JAPANESE.",
    "jp_meaning": "Meaning of the word in Japanese context, EXPLAINED IN JAPANESE.",
    "cn_example": "A short example sentence in Chinese containing the word.",
    "jp_example": "A short example sentence in Japanese containing the word.",
}


class PromptBuilder:
    """分类请求的Prompt构建器"""

    def __init__(self, preface_file: Optional[Path] = None):
        """
        初始化Prompt构建器

        Args:
            preface_file: 系统提示文件，默认使用包内 assets/preface_homograph.txt
        """
        self.preface_file = Path(preface_file) if preface_file else DEFAULT_PREFACE_FILE
        self._system_content: Optional[str] = None

    @property
    def system_content(self) -> str:
        """读取系统提示（只读取一次）"""
        if self._system_content is None:
            with open(self.preface_file, 'r', encoding='utf-8') as f:
                self._system_content = f.read().strip()
        return self._system_content

    def build_messages(self, words: List[str]) -> List[Dict[str, str]]:
        """
        构建对话消息

        Args:
            words: 要分类的词语（已按批次上限截断）

        Returns:
            消息列表
        """
        user_content = (
            "The list of words to analyze is:\n"
            f"{json.dumps(words, ensure_ascii=False)}"
        )
        return [
            {"role": "system", "content": self.system_content},
            {"role": "user", "content": user_content},
        ]

    @staticmethod
    def response_format() -> Dict[str, Any]:
        """结构化输出使用的 JSON schema"""
        properties: Dict[str, Any] = {}
        for name in TEXT_FIELDS:
            prop: Dict[str, Any] = {"type": "string"}
            if name in _FIELD_DESCRIPTIONS:
                prop["description"] = _FIELD_DESCRIPTIONS[name]
            properties[name] = prop
        properties["type"] = {
            "type": "string",
            "enum": [t.value for t in HomographType],
            "description": "Relationship between meanings. DIFFERENT implies the meanings "
                           "are completely different (False Friends/同形異義語).",
        }

        entry_schema = {
            "type": "object",
            "properties": properties,
            "required": list(TEXT_FIELDS) + ["type"],
        }
        return {
            "type": "json_schema",
            "json_schema": {
                "name": "homograph_entries",
                "schema": {
                    "type": "object",
                    "properties": {"entries": {"type": "array", "items": entry_schema}},
                    "required": ["entries"],
                },
            },
        }
