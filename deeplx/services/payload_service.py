"""
/**
 * @file deeplx/services/payload_service.py
 * @description 请求合成器：生成与官方客户端一致的 LMT_handle_texts 请求体（id、时间戳、字段顺序、method 空格）。
 */
"""

from __future__ import annotations

import json
import random
import time
from typing import Any, Callable, Dict, Optional


JSONRPC_VERSION = "2.0"
METHOD_NAME = "LMT_handle_texts"
MAX_ALTERNATIVES = 3
SPLITTING_MODE = "newlines"

REQUEST_ID_MIN = 100_000_000
REQUEST_ID_MAX = 199_999_999

_METHOD_COMPACT = '"method":"'
_METHOD_SPACED = '"method" : "'
_METHOD_SPACE_AFTER = '"method": "'


class EncodingError(Exception):
    """The outbound payload could not be serialized."""


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


def generate_request_id(rng: Any = None) -> int:
    h = rng or random
    return h.randint(REQUEST_ID_MIN, REQUEST_ID_MAX)


def derive_timestamp(text: str, now_ms: int) -> int:
    """
    The upstream checks that the timestamp lines up with the number of
    ``i`` characters in the text: with ``c`` occurrences the value is
    bumped to ``now - now % (c + 1) + (c + 1)``.
    """
    count = text.count("i")
    if count == 0:
        return now_ms
    step = count + 1
    return now_ms - (now_ms % step) + step


def use_spaced_method(request_id: int) -> bool:
    return (request_id + 5) % 29 == 0 or (request_id + 5) % 29 == 3 or (request_id + 3) % 13 == 0


def _build_config(text: str, source_lang: str, target_lang: str, request_id: int, timestamp: int) -> Dict[str, Any]:
    # key order is part of the wire format
    return {
        "jsonrpc": JSONRPC_VERSION,
        "method": METHOD_NAME,
        "id": request_id,
        "params": {
            "texts": [{"text": text, "requestAlternatives": MAX_ALTERNATIVES}],
            "timestamp": timestamp,
            "splitting": SPLITTING_MODE,
            "lang": {
                "source_lang_user_selected": (source_lang or "auto").upper(),
                "target_lang": (target_lang or "en").upper(),
            },
        },
    }


def build_payload(
    text: str,
    source_lang: str,
    target_lang: str,
    rng: Any = None,
    clock: Optional[Callable[[], int]] = None,
) -> str:
    request_id = generate_request_id(rng)
    timestamp = derive_timestamp(text, (clock or _wall_clock_ms)())
    config = _build_config(text, source_lang, target_lang, request_id, timestamp)

    try:
        body = json.dumps(config, ensure_ascii=False, separators=(",", ":"))
        body.encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"failed to marshal request config: {e}") from e

    if use_spaced_method(request_id):
        return body.replace(_METHOD_COMPACT, _METHOD_SPACED, 1)
    return body.replace(_METHOD_COMPACT, _METHOD_SPACE_AFTER, 1)
