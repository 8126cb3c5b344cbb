#!/usr/bin/env python3
"""
分类网关模块

把共通词列表发送给 OpenAI 兼容接口的模型，解析返回的结构化结果。
"""

import time
from typing import Any, Dict, List, Optional

from openai import OpenAI, OpenAIError

from .config import HomographConfig
from .errors import GatewayError
from .logger import UnifiedLogger
from .models import ClassificationOutcome
from .parser import ClassificationOutputParser
from .prompt import PromptBuilder


class HomographClassifier:
    """分类网关类"""

    def __init__(self, config: HomographConfig, logger: Optional[UnifiedLogger] = None,
                 client: Optional[Any] = None, prompt_builder: Optional[PromptBuilder] = None):
        """
        初始化分类网关

        Args:
            config: 分析配置
            logger: 日志器
            client: OpenAI 客户端（测试时可注入假的客户端）
            prompt_builder: Prompt构建器
        """
        self.config = config
        self.logger = logger or UnifiedLogger.create_console_only(config.log_level)
        self.client = client if client is not None else self._create_client(config)
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.parser = ClassificationOutputParser(self.logger)

    @staticmethod
    def _create_client(config: HomographConfig) -> OpenAI:
        kwargs: Dict[str, Any] = {
            'base_url': config.base_url,
            'api_key': config.api_key,
            'max_retries': config.max_retries,
        }
        # 未配置时沿用客户端默认超时
        if config.request_timeout is not None:
            kwargs['timeout'] = config.request_timeout
        return OpenAI(**kwargs)

    def classify(self, words: List[str]) -> ClassificationOutcome:
        """
        对词语进行分类

        Args:
            words: 共通词列表（超过 batch_size 的部分不会发送）

        Returns:
            ClassificationOutcome，条目不含原文例句

        Raises:
            GatewayError: 调用失败或返回内容无法解析
        """
        if not words:
            return ClassificationOutcome()

        batch = list(words[:self.config.batch_size])
        if len(batch) < len(words):
            self.logger.warning(f"词语数量 {len(words)} 超过批次上限，只发送前 {len(batch)} 个")

        messages = self.prompt_builder.build_messages(batch)
        request = self._build_request(messages)

        self.logger.info(f"调用模型 {self.config.model}，词语数: {len(batch)}")
        self.logger.debug(f"提交词语: {batch}")
        start = time.perf_counter()
        try:
            resp = self.client.chat.completions.create(**request)
        except OpenAIError as e:
            self.logger.error(f"模型调用失败: {e}")
            raise GatewayError(f"分类模型调用失败: {e}") from e
        finally:
            elapsed = time.perf_counter() - start
            self.logger.info(f"模型调用耗时: {elapsed:.2f}s")

        content = self._extract_content(resp)
        self._log_usage(resp)
        self.logger.debug(f"模型原始输出:\n{content}")

        outcome = self.parser.parse(content, batch)
        self.logger.info(f"分类完成: {len(outcome.entries)}/{len(batch)} 个词语有效")
        return outcome

    def _build_request(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        request: Dict[str, Any] = {
            'model': self.config.model,
            'messages': messages,
            'temperature': self.config.temperature,
            'stream': False,
        }
        if self.config.max_tokens > 0:
            request['max_tokens'] = self.config.max_tokens
        if self.config.structured_output:
            request['response_format'] = self.prompt_builder.response_format()
        return request

    def _extract_content(self, resp: Any) -> str:
        try:
            content = resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise GatewayError(f"模型响应结构异常: {e}") from e
        if content is None:
            raise GatewayError("模型响应中没有内容")
        return content

    def _log_usage(self, resp: Any) -> None:
        usage = getattr(resp, 'usage', None)
        if usage is None:
            return
        self.logger.info(
            f"Token统计: 输入 {getattr(usage, 'prompt_tokens', '?')}, "
            f"输出 {getattr(usage, 'completion_tokens', '?')}, "
            f"总计 {getattr(usage, 'total_tokens', '?')}"
        )
