#!/usr/bin/env python3
"""
命令行接口模块
"""

import argparse
from pathlib import Path
from typing import List

from ..core.models import HomographType


def create_argument_parser() -> argparse.ArgumentParser:
    """创建命令行参数解析器

    与配置项同名的参数默认值都是 None，表示沿用配置文件或 HomographConfig 的默认值。
    """
    parser = argparse.ArgumentParser(description="比较中日语料，找出同形词并由模型分析词义异同")

    # 输入文件
    parser.add_argument("--cn", dest="cn_inputs", nargs="+", default=[], help="中文输入文件/目录/通配符")
    parser.add_argument("--jp", dest="jp_inputs", nargs="+", default=[], help="日文输入文件/目录/通配符")
    parser.add_argument("--config", type=Path, default=None, help="YAML 配置文件路径")

    # 模型配置
    parser.add_argument("--model", default=None, help="使用的模型名称")
    parser.add_argument("--base-url", dest="base_url", default=None, help="OpenAI 兼容接口地址")
    parser.add_argument("--api-key", dest="api_key", default=None, help="API Key（默认读取 OPENAI_API_KEY）")
    parser.add_argument("--temperature", type=float, default=None, help="生成温度")
    parser.add_argument("--max-tokens", dest="max_tokens", type=int, default=None, help="最大生成token数，<=0 表示不限制")
    parser.add_argument("--no-structured-output", dest="structured_output", action="store_false", default=None,
                        help="不使用 response_format JSON schema（服务端不支持结构化输出时使用）")
    parser.add_argument("--request-timeout", dest="request_timeout", type=float, default=None, help="单次请求超时（秒）")
    parser.add_argument("--max-retries", dest="max_retries", type=int, default=None, help="传输层重试次数，默认0")

    # 抽取与定位策略
    parser.add_argument("--batch-size", dest="batch_size", type=int, default=None, help="一次提交给模型的最大词数，默认50")
    parser.add_argument("--min-run-length", dest="min_run_length", type=int, default=None, help="候选词最短汉字数，默认2")
    parser.add_argument("--back-scan-chars", dest="back_scan_chars", type=int, default=None, help="例句向前扫描字符数，默认100")
    parser.add_argument("--forward-scan-chars", dest="forward_scan_chars", type=int, default=None, help="例句向后扫描字符数，默认150")
    parser.add_argument("--read-workers", dest="read_workers", type=int, default=None, help="并行读取文件的线程数")

    # 输出配置
    parser.add_argument("--format", dest="output_format", choices=["text", "json"], default="text", help="输出格式")
    parser.add_argument("--output", type=Path, default=None, help="输出文件路径（默认输出到标准输出）")
    parser.add_argument("--only-type", dest="only_type", choices=[t.value for t in HomographType], default=None,
                        help="只输出指定类型")
    parser.add_argument("--search", default="", help="按词语或释义筛选")

    # 日志配置
    parser.add_argument("--log-dir", dest="log_dir", default=None, help="日志目录")
    parser.add_argument("--log-file", dest="log_to_file", action="store_true", default=None, help="同时写入日志文件")
    parser.add_argument("--log-level", dest="log_level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        default=None, help="日志级别")

    return parser


def validate_args(args: argparse.Namespace) -> List[str]:
    """验证命令行参数"""
    errors = []

    if not args.cn_inputs or not args.jp_inputs:
        errors.append("请同时指定中文（--cn）和日文（--jp）输入文件")

    if args.config and not args.config.exists():
        errors.append(f"配置文件不存在: {args.config}")

    if args.temperature is not None and (args.temperature < 0 or args.temperature > 2):
        errors.append("temperature 必须在 0-2 之间")

    if args.batch_size is not None and args.batch_size <= 0:
        errors.append("batch-size 必须大于 0")

    if args.output and args.output.exists() and args.output.is_dir():
        errors.append(f"输出路径是目录: {args.output}")

    return errors
