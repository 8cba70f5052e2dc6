import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from gemini.fallback import FallbackInvoker
from gemini.tasks import PlainTextTask
from models.prompt import ChatResponse, ErrorResponse, PromptRequest
from routes.deps import get_invoker, require_prompt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


# ---------- Endpoint ----------

@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    body: Optional[PromptRequest] = Body(default=None),
    invoker: FallbackInvoker = Depends(get_invoker),
):
    """
    Forwards the prompt to Gemini, falling back through the model chain,
    and returns the generated text as-is.
    """
    prompt = require_prompt(body)

    try:
        text = await invoker.run(PlainTextTask(prompt))
    except Exception as exc:
        logger.exception("Error in /api/chat")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Failed to generate content", details=str(exc)
            ).model_dump(),
        )

    return ChatResponse(text=text)
