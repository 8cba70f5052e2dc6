"""
Shared route dependencies.

The invoker lives on app.state (set up by main.create_app) so tests can
swap in a fake Gemini client without touching module globals.
"""

from typing import Optional

from fastapi import Request

from errors import ValidationError
from gemini.fallback import FallbackInvoker
from models.prompt import PromptRequest


def get_invoker(request: Request) -> FallbackInvoker:
    return request.app.state.invoker


def require_prompt(body: Optional[PromptRequest]) -> str:
    """Return the prompt or raise ValidationError if it is missing or empty."""
    if body is None or not body.prompt:
        raise ValidationError("Prompt is required")
    return body.prompt
