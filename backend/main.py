from dotenv import load_dotenv
load_dotenv()

import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from errors import ConfigError, ValidationError
from gemini.client import build_client
from gemini.config import Settings
from gemini.fallback import FallbackInvoker
from models.prompt import ErrorResponse
from routes import chat, evaluate, health

logger = logging.getLogger(__name__)


async def _validation_error(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=str(exc)).model_dump(exclude_none=True),
    )


async def _bad_body(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Invalid request body", details=str(exc.errors())).model_dump(),
    )


def create_app(settings: Optional[Settings] = None, client=None) -> FastAPI:
    """
    Build the relay app.

    settings defaults to Settings.from_env() (raises ConfigError without
    GEMINI_API_KEY). client defaults to a real google-genai client; tests
    pass a fake.
    """
    if settings is None:
        settings = Settings.from_env()
    if client is None:
        client = build_client(settings.api_key)

    app = FastAPI(title="Prompt Relay API", version="0.1.0")
    app.state.settings = settings
    app.state.invoker = FallbackInvoker(client, settings.models)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _bad_body)

    app.include_router(chat.router)
    app.include_router(evaluate.router)
    app.include_router(health.router)

    return app


def run():
    """Console entrypoint: validate config, then serve until interrupted."""
    try:
        settings = Settings.from_env()
    except ConfigError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Error: %s", exc)
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings)
    logger.info("Server running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
