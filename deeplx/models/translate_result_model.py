"""
/**
 * @file deeplx/models/translate_result_model.py
 * @description 对外翻译结果模型，以及上游 LMT_handle_texts 响应的解析模型。
 */
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class TranslateResult(BaseModel):
    code: int
    message: str
    data: Optional[str] = None
    source_lang: Optional[str] = None
    target_lang: Optional[str] = None
    alternatives: Optional[List[str]] = None

    def to_payload(self) -> Dict[str, Any]:
        # only success results carry the optional fields
        return self.model_dump(exclude_none=True)


class UpstreamAlternative(BaseModel):
    text: str = ""

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, v):
        return "" if v is None else v


class UpstreamText(BaseModel):
    text: str = ""
    alternatives: List[UpstreamAlternative] = Field(default_factory=list)

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, v):
        return "" if v is None else v

    @field_validator("alternatives", mode="before")
    @classmethod
    def _null_alternatives(cls, v):
        return [] if v is None else v


class UpstreamResult(BaseModel):
    texts: List[UpstreamText] = Field(default_factory=list)

    @field_validator("texts", mode="before")
    @classmethod
    def _null_texts(cls, v):
        return [] if v is None else v


class UpstreamError(BaseModel):
    code: Optional[int] = None
    message: str = ""


class UpstreamEnvelope(BaseModel):
    result: UpstreamResult = Field(default_factory=UpstreamResult)
    error: Optional[UpstreamError] = None

    @field_validator("result", mode="before")
    @classmethod
    def _null_result(cls, v):
        return {} if v is None else v
