import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from gemini.fallback import FallbackInvoker
from gemini.tasks import FencedJsonTask
from models.prompt import ErrorResponse, PromptRequest
from routes.deps import get_invoker, require_prompt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["evaluate"])


# ---------- Endpoint ----------

@router.post(
    "/evaluate",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def evaluate(
    body: Optional[PromptRequest] = Body(default=None),
    invoker: FallbackInvoker = Depends(get_invoker),
):
    """
    Asks Gemini for a JSON evaluation and returns the parsed value unwrapped.

    The model is expected to answer with a ```json fenced block. A reply
    that still isn't valid JSON after stripping the fences counts as a
    failed attempt, so the next model in the chain gets a turn.
    """
    prompt = require_prompt(body)

    try:
        evaluation = await invoker.run(FencedJsonTask(prompt))
    except Exception as exc:
        logger.exception("Error in /api/evaluate")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Failed to evaluate conversation", details=str(exc)
            ).model_dump(),
        )

    return JSONResponse(content=evaluation)
