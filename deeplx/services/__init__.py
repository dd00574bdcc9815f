"""
/**
 * @file deeplx/services/__init__.py
 * @description 业务服务层导出。
 */
"""

from .deepl_client_service import DeepLClient
from .payload_service import EncodingError, build_payload
from .translation_service import translate

__all__ = [
    "DeepLClient",
    "EncodingError",
    "build_payload",
    "translate",
]
