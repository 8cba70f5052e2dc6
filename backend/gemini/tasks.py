"""
Generation tasks handed to the fallback invoker.

A task captures the prompt plus what to do with the model's text:
  - PlainTextTask   returns the text as-is (chat)
  - FencedJsonTask  strips ```json fences and parses the rest (evaluate)

Tasks raise GenerationError on failure, so a model that answers with
unparseable JSON is skipped just like one that errors out.
"""

import json
import math
import re
from typing import Any

from errors import ParseError

_FENCE_RE = re.compile(r"```json|```")


def strip_code_fences(text: str) -> str:
    """Remove every ```json / ``` marker and trim surrounding whitespace."""
    return _FENCE_RE.sub("", text).strip()


class GenerationTask:
    def __init__(self, prompt: str):
        self.prompt = prompt

    async def run(self, model) -> Any:
        raise NotImplementedError


class PlainTextTask(GenerationTask):
    async def run(self, model) -> str:
        return await model.generate(self.prompt)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"{literal} is out of range for a JSON number")
    return value


class FencedJsonTask(GenerationTask):
    async def run(self, model) -> Any:
        text = await model.generate(self.prompt)
        try:
            return json.loads(
                strip_code_fences(text),
                parse_constant=_reject_constant,
                parse_float=_finite_float,
            )
        except ValueError as exc:
            raise ParseError(str(exc), model=getattr(model, "name", None)) from exc
