"""
/**
 * @file deeplx/controllers/health_controller.py
 * @description 首页标识与健康检查控制器。
 */
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from deeplx.config import load_settings


router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def index():
    return load_settings().identification


@router.get("/health")
def health():
    settings = load_settings()
    return {"status": "ok", "upstream": settings.upstream_endpoint}
