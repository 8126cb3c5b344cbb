#!/usr/bin/env python3
"""
日中同形语分析器 - 命令行入口
"""

import sys
from typing import List, Optional

from .cli import create_argument_parser, validate_args
from .core import ConfigError, HomographConfig, HomographPipeline, HomographType, RunStatus, UnifiedLogger
from .utils.format import filter_entries, format_result_json, format_result_text


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # 验证参数
    errors = validate_args(args)
    if errors:
        for error in errors:
            print(f"错误: {error}", file=sys.stderr)
        return 1

    # 创建配置对象
    try:
        config = HomographConfig.from_args(args)
    except ConfigError as e:
        print(f"错误: {e}", file=sys.stderr)
        return 1

    if config.log_to_file:
        logger = UnifiedLogger.create_for_run(config.log_dir, level=config.log_level)
        logger.info(f"📝 日志文件路径: {logger.get_log_file_path()}")
    else:
        logger = UnifiedLogger.create_console_only(config.log_level)

    try:
        pipeline = HomographPipeline(config, logger=logger)
        result = pipeline.run(args.cn_inputs, args.jp_inputs)
    finally:
        logger.close()

    only_type = HomographType(args.only_type) if args.only_type else None
    entries = filter_entries(result.entries, only_type=only_type, search=args.search)
    if args.output_format == "json":
        report = format_result_json(result, entries)
    else:
        report = format_result_text(result, entries)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(report + "\n")
    else:
        print(report)

    return 1 if result.status == RunStatus.ERROR else 0


if __name__ == "__main__":
    sys.exit(main())
