import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from errors import GenerationError
from gemini.client import ModelHandle


def _client(response=None, error=None):
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=response, side_effect=error)
    return client


class TestModelHandle:
    def test_returns_response_text(self):
        client = _client(SimpleNamespace(text="hello", candidates=[]))
        handle = ModelHandle(client, "gemini-flash-latest")

        assert asyncio.run(handle.generate("prompt")) == "hello"
        client.aio.models.generate_content.assert_awaited_once_with(
            model="gemini-flash-latest", contents="prompt"
        )

    def test_sdk_error_becomes_generation_error(self):
        cause = RuntimeError("404 NOT_FOUND model gone")
        handle = ModelHandle(_client(error=cause), "old-model")

        with pytest.raises(GenerationError) as info:
            asyncio.run(handle.generate("p"))

        assert str(info.value) == "404 NOT_FOUND model gone"
        assert info.value.model == "old-model"
        assert info.value.__cause__ is cause

    def test_falls_back_to_candidate_parts(self):
        part = SimpleNamespace(text="from parts")
        candidate = SimpleNamespace(content=SimpleNamespace(parts=[part]))
        handle = ModelHandle(_client(SimpleNamespace(text=None, candidates=[candidate])), "m")

        assert asyncio.run(handle.generate("p")) == "from parts"

    def test_empty_response_is_a_failure(self):
        handle = ModelHandle(_client(SimpleNamespace(text=None, candidates=None)), "m")

        with pytest.raises(GenerationError, match="empty response"):
            asyncio.run(handle.generate("p"))

    def test_whitespace_text_returned_untouched(self):
        handle = ModelHandle(_client(SimpleNamespace(text="  \n", candidates=[])), "m")

        assert asyncio.run(handle.generate("p")) == "  \n"

    def test_joins_every_text_part(self):
        parts = [SimpleNamespace(text="first "), SimpleNamespace(text=None), SimpleNamespace(text="second")]
        candidate = SimpleNamespace(content=SimpleNamespace(parts=parts))
        handle = ModelHandle(_client(SimpleNamespace(text="", candidates=[candidate])), "m")

        assert asyncio.run(handle.generate("p")) == "first second"
