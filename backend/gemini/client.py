"""
Gemini model handles.

A ModelHandle binds the shared google-genai client to one candidate model
name. The fallback invoker builds a fresh handle per attempt and hands it
to a generation task.

Edge cases handled:
  - SDK errors (quota, unavailable, unknown model, bad key, network):
    re-raised as GenerationError so the invoker can move on
  - Safety-blocked or empty (None / "") responses: GenerationError, same treatment
"""

import logging
from typing import Optional

from google import genai

from errors import GenerationError

logger = logging.getLogger(__name__)


def build_client(api_key: str) -> genai.Client:
    """Create the google-genai client shared by every request."""
    return genai.Client(api_key=api_key)


def _extract_text(response) -> Optional[str]:
    """
    Pull text out of a generate_content response, handling:
      - Normal text responses (returned untouched, whitespace included)
      - Responses whose .text accessor raises or is None
      - Text only reachable through candidates[].content.parts[]
        (all text parts of the first candidate that has any, joined)
    """
    try:
        text = response.text
        if text is not None and text != "":
            return text
    except (ValueError, AttributeError):
        pass

    try:
        for candidate in response.candidates or []:
            if not (candidate.content and candidate.content.parts):
                continue
            texts = [
                part.text for part in candidate.content.parts
                if getattr(part, "text", None)
            ]
            if texts:
                return "".join(texts)
    except (AttributeError, TypeError):
        pass

    return None


class ModelHandle:
    """One candidate model, ready to generate."""

    def __init__(self, client: genai.Client, name: str):
        self.client = client
        self.name = name

    def __repr__(self) -> str:
        return f"ModelHandle({self.name!r})"

    async def generate(self, prompt: str) -> str:
        """Send a single prompt and return the generated text."""
        try:
            response = await self.client.aio.models.generate_content(
                model=self.name,
                contents=prompt,
            )
        except Exception as exc:
            raise GenerationError(str(exc), model=self.name) from exc

        text = _extract_text(response)
        if text is None:
            raise GenerationError(
                f"Model {self.name} returned an empty response", model=self.name
            )
        return text
