from typing import Optional
from pydantic import BaseModel


class PromptRequest(BaseModel):
    prompt: Optional[str] = None    # required, checked by the route so a miss is a 400


class ChatResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
