"""
/**
 * @file deeplx/config/__init__.py
 * @description 配置模块导出。
 */
"""

from .settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
