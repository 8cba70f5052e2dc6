"""
Shared Gemini fallback invoker.

FallbackInvoker.run() tries a generation task against each model in the
candidate list, in order. Every GenerationError is logged and the next
model is tried immediately; there is no backoff and no classification of
retryable vs. fatal failures. The first success wins. If every model
fails, the last error is raised.
"""

import logging
from typing import Any, Sequence

from google import genai

from errors import GenerationError
from gemini.client import ModelHandle
from gemini.config import FALLBACK_MODELS
from gemini.tasks import GenerationTask

logger = logging.getLogger(__name__)


class FallbackInvoker:
    def __init__(self, client: genai.Client, models: Sequence[str] = FALLBACK_MODELS):
        self.client = client
        self.models = tuple(models)

    def get_model(self, name: str) -> ModelHandle:
        return ModelHandle(self.client, name)

    async def run(self, task: GenerationTask) -> Any:
        """
        Run `task` against each candidate model in priority order.

        Args:
            task: a GenerationTask; its run() receives a fresh ModelHandle

        Returns:
            Whatever the first successful task.run() returned.

        Raises:
            GenerationError: the last model's error, or a generic one if
            there were no models to try.
        """
        last_error = None

        for name in self.models:
            logger.info("Attempting with model: %s", name)
            try:
                return await task.run(self.get_model(name))
            except GenerationError as exc:
                logger.warning("Failed with model %s: %s", name, exc)
                last_error = exc

        logger.error("All models in fallback chain failed: %s", list(self.models))
        raise last_error or GenerationError("All fallback models failed")
