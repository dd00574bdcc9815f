"""
/**
 * @file deeplx/models/translate_request_model.py
 * @description 翻译请求模型（Pydantic）。字段缺省为空串，语言默认值由请求合成器补齐。
 */
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TranslateRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = ""
    source_lang: str = ""
    target_lang: str = ""
