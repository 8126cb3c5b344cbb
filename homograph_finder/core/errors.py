#!/usr/bin/env python3
"""
异常定义模块
"""


class HomographError(Exception):
    """同形语分析流程的基础异常"""


class ConfigError(HomographError):
    """配置参数非法或配置文件无法解析"""


class MissingInputError(HomographError):
    """中文或日文语料缺失（在读取任何文件之前抛出）"""


class CorpusReadError(HomographError):
    """语料文件无法读取或解码"""


class GatewayError(HomographError):
    """分类网关调用失败（传输错误、空响应等）"""


class ResponseFormatError(GatewayError):
    """分类网关返回的数据无法解析为条目列表"""


class PipelineBusyError(HomographError):
    """已有分析流程在运行"""
