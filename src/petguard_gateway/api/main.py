from __future__ import annotations

import json
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from ..config import GatewaySettings
from ..envelope import error_envelope, handle_request
from ..llm.client_base import BackendClient
from ..llm.gemini_client import GeminiBackendClient

log = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def create_app(
    client: Optional[BackendClient] = None,
    settings: Optional[GatewaySettings] = None,
) -> FastAPI:
    """
    Build the gateway app. The backend client is created once here and
    shared read-only by every request.
    """
    settings = settings or GatewaySettings.from_env()
    if client is None:
        client = GeminiBackendClient(api_key=settings.api_key, timeout_ms=settings.request_timeout_ms)

    app = FastAPI(
        title="PetGuard Gateway",
        version="0.1.0",
        description="Action router in front of the Gemini generative backend.",
    )

    @app.options("/")
    async def preflight():
        return PlainTextResponse("ok", headers=CORS_HEADERS)

    @app.post("/")
    async def gateway(request: Request):
        """
        Run one action: body is {action, payload}; reply is the envelope.
        """
        raw = await request.body()
        try:
            body = json.loads(raw or b"null")
        except ValueError as e:
            log.warning("Rejected unparseable request body: %s", e)
            return JSONResponse(
                error_envelope(f"Invalid JSON body: {e}"), status_code=500, headers=CORS_HEADERS
            )

        status, envelope = await run_in_threadpool(
            handle_request, body, client=client, settings=settings
        )
        return JSONResponse(envelope, status_code=status, headers=CORS_HEADERS)

    return app


def build_app() -> FastAPI:
    """Factory for `uvicorn --factory`; reads settings from the environment."""
    settings = GatewaySettings.from_env()
    logging.basicConfig(level=settings.log_level)
    return create_app(settings=settings)

