"""
/**
 * @file deeplx/controllers/translate_controller.py
 * @description 翻译控制器：POST /translate，HTTP 状态码与结果 code 一致。
 */
"""

import logging

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from deeplx.models.translate_request_model import TranslateRequest
from deeplx.services import translate as translate_text


router = APIRouter()
logger = logging.getLogger("deeplx.translate")

# statuses that must not carry a message body
_BODYLESS_STATUSES = {204, 205, 304}


@router.get("/translate", response_class=PlainTextResponse)
def translate_hint():
    return "Please use POST method :)"


@router.post("/translate")
def translate(req: TranslateRequest):
    result = translate_text(req)
    if result.code < 200 or result.code in _BODYLESS_STATUSES:
        logger.warning(f"Dropping body for bodyless status {result.code}: {result.message}")
        return Response(status_code=result.code)
    return JSONResponse(status_code=result.code, content=result.to_payload())
