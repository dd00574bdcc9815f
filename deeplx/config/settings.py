"""
/**
 * @file deeplx/config/settings.py
 * @description 网关固定配置：上游地址、监听地址与端口均为常量，不读取环境变量或配置文件。
 */
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


DEFAULT_ENDPOINT = "https://ideepl.vercel.app/jsonrpc"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_IDENTIFICATION = "Developed by StardustAlN. More info: https://github.com/StardustAlN/DeepLX-Go"


@dataclass(frozen=True)
class Settings:
    upstream_endpoint: str = DEFAULT_ENDPOINT
    # None keeps the transport default (no timeout)
    request_timeout: Optional[float] = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    identification: str = DEFAULT_IDENTIFICATION


_SETTINGS = Settings()


def load_settings() -> Settings:
    return _SETTINGS
