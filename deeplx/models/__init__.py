"""
/**
 * @file deeplx/models/__init__.py
 * @description 数据模型导出。
 */
"""

from .translate_request_model import TranslateRequest
from .translate_result_model import TranslateResult, UpstreamEnvelope

__all__ = ["TranslateRequest", "TranslateResult", "UpstreamEnvelope"]
