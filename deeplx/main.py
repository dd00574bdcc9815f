"""
/**
 * @file deeplx/main.py
 * @description FastAPI 应用入口（仅装配路由与异常处理）。
 */
"""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from deeplx.config import load_settings
from deeplx.controllers import health_router, translate_router
from deeplx.models import TranslateResult

app = FastAPI()
logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("deeplx")


@app.on_event("startup")
async def startup_event():
    settings = load_settings()
    logger.info(f"Relaying translations to {settings.upstream_endpoint}")


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Error parsing request body: {exc.errors()}")
    result = TranslateResult(code=400, message="Invalid request body")
    return JSONResponse(status_code=400, content=result.to_payload())


app.include_router(health_router)
app.include_router(translate_router)


def run() -> None:
    settings = load_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
