"""
/**
 * @file deeplx/__init__.py
 * @description DeepL 网页接口转发网关。
 */
"""
