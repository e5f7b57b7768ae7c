"""
HTTP relay service: streams chat replies from OpenAI and validates API keys.
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse

from .. import __version__
from ..auth.api_key_manager import KeyValidator
from ..config import settings
from ..relay.chat_relay import ChatRelay
from ..relay.models import ChatRequest, ValidationResult
from ..utils import AuthError, InputError


logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger("mindchat.api")

app = FastAPI(title="MindChat Relay", version=__version__)

# CORS: allow local frontends during development
if settings.is_development():
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

chat_relay = ChatRelay()
key_validator = KeyValidator()


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _validation_response(result: ValidationResult, status_code: int) -> JSONResponse:
    return JSONResponse(result.model_dump(exclude_none=True), status_code=status_code)


@app.post("/api/chat")
async def chat(request: Request):
    try:
        payload = await request.json()
        if not isinstance(payload, dict):
            raise ValueError("Request body must be a JSON object")

        if not payload.get("apiKey"):
            return _error_response("API key is required", 401)

        chat_request = ChatRequest.model_validate(payload)
        chunks = await run_in_threadpool(
            chat_relay.open_stream, chat_request.messages, chat_request.api_key
        )
    except AuthError as e:
        return _error_response(str(e), 401)
    except Exception as e:
        logger.exception("Chat API Error: %s", e)
        return _error_response(str(e) or "Failed to process request", 500)

    return StreamingResponse(chunks, media_type="text/plain; charset=utf-8")


@app.post("/api/validate")
async def validate(request: Request):
    try:
        payload = await request.json()
        api_key = payload.get("apiKey") if isinstance(payload, dict) else None
        result = await run_in_threadpool(key_validator.validate, api_key)
    except InputError as e:
        return _validation_response(ValidationResult(valid=False, error=str(e)), 400)
    except Exception as e:
        logger.exception("Validation error: %s", e)
        return _validation_response(ValidationResult(valid=False, error="Invalid API key"), 400)

    return _validation_response(result, 200 if result.valid else 400)


@app.get("/health")
def health():
    return {"status": "ok"}


def run_server():
    """Entry point for the relay service."""
    uvicorn.run(app, host=settings.api.host, port=settings.api.port)


if __name__ == "__main__":
    run_server()
