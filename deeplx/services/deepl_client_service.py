"""
/**
 * @file deeplx/services/deepl_client_service.py
 * @description 上游 JSON-RPC 调用封装：单次 POST，不重试。
 */
"""

from __future__ import annotations

from typing import Dict, Optional

import requests

from deeplx.config import Settings, load_settings


CONTENT_TYPE = "application/json; charset=utf-8"


class DeepLClient:
    def __init__(self, settings: Optional[Settings] = None):
        # settings are fetched per call so a config reload takes effect
        self._initial_settings = settings

    @property
    def settings(self) -> Settings:
        return self._initial_settings or load_settings()

    @property
    def endpoint(self) -> str:
        return self.settings.upstream_endpoint

    @property
    def timeout(self) -> Optional[float]:
        return self.settings.request_timeout

    def _get_headers(self) -> Dict[str, str]:
        return {"Content-Type": CONTENT_TYPE}

    def post_payload(self, body: str) -> requests.Response:
        """Send a pre-serialized body as-is; the caller must close the response."""
        return requests.post(
            self.endpoint,
            data=body.encode("utf-8"),
            headers=self._get_headers(),
            timeout=self.timeout,
        )
