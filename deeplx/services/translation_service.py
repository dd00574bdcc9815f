"""
/**
 * @file deeplx/services/translation_service.py
 * @description 翻译网关：合成请求、调用上游并把嵌套响应整理为对外结果。
 */
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

import requests
from pydantic import ValidationError

from deeplx.models.translate_request_model import TranslateRequest
from deeplx.models.translate_result_model import TranslateResult, UpstreamEnvelope
from deeplx.services.deepl_client_service import DeepLClient
from deeplx.services.payload_service import EncodingError, build_payload


logger = logging.getLogger("deeplx.translation")

MSG_NO_TEXT = "No Translate Text Found"
MSG_BUILD_FAILED = "Failed to build request body"
MSG_REQUEST_FAILED = "Request failed"
MSG_DECODE_FAILED = "Failed to decode response"
MSG_SUCCESS = "success"
MSG_TOO_MANY_REQUESTS = "Too many requests, please try again later."
MSG_UNKNOWN_ERROR = "Unknown error."


class ResponseShapeError(ValueError):
    """A 200 reply decoded but carried no translation."""


def _decode_reply(response: requests.Response) -> UpstreamEnvelope:
    envelope = UpstreamEnvelope.model_validate(response.json())
    if not envelope.result.texts:
        if envelope.error is not None:
            logger.warning(f"Upstream returned error {envelope.error.code}: {envelope.error.message}")
        raise ResponseShapeError("upstream result contains no texts")
    return envelope


def _error_message(status_code: int) -> str:
    if status_code == 429:
        return MSG_TOO_MANY_REQUESTS
    return MSG_UNKNOWN_ERROR


def translate(
    request: TranslateRequest,
    client: Optional[DeepLClient] = None,
    rng: Any = None,
    clock: Optional[Callable[[], int]] = None,
) -> TranslateResult:
    if not request.text:
        return TranslateResult(code=404, message=MSG_NO_TEXT)

    try:
        body = build_payload(request.text, request.source_lang, request.target_lang, rng=rng, clock=clock)
    except EncodingError as e:
        logger.error(f"Error building request body: {e}")
        return TranslateResult(code=500, message=MSG_BUILD_FAILED)

    h = client or DeepLClient()
    try:
        response = h.post_payload(body)
    except requests.RequestException as e:
        logger.error(f"Error making HTTP request: {e}")
        return TranslateResult(code=500, message=MSG_REQUEST_FAILED)

    with response:
        if response.status_code != 200:
            logger.warning(f"Upstream responded with status {response.status_code}")
            return TranslateResult(code=response.status_code, message=_error_message(response.status_code))

        try:
            envelope = _decode_reply(response)
        except (ValueError, ValidationError) as e:
            logger.error(f"Error decoding response: {e}")
            return TranslateResult(code=500, message=MSG_DECODE_FAILED)

    first = envelope.result.texts[0]
    return TranslateResult(
        code=200,
        message=MSG_SUCCESS,
        data=first.text,
        source_lang=request.source_lang,
        target_lang=request.target_lang,
        alternatives=[alt.text for alt in first.alternatives],
    )
