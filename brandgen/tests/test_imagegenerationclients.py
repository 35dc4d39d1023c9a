"""Tests for the provider clients in :mod:`brandgen.aiservices`."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from types import SimpleNamespace

import httpx
import pytest
from openai import APIConnectionError, APIStatusError, APITimeoutError

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from brandgen.aiservices.ideogramimagegenerationclient import IdeogramImageGenerationClient
from brandgen.aiservices.openaiimagegenerationclient import OpenAIImageGenerationClient
from brandgen.config import Settings
from brandgen.errors import ProviderError, ProviderTimeoutError

IDEOGRAM_URL = "https://api.ideogram.ai/generate"


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, ideogram_api_key="ideo-key", **overrides)


def _ideogram(handler) -> IdeogramImageGenerationClient:
    return IdeogramImageGenerationClient(
        _settings(),
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


# ---------------------------------------------------------------------------
# Ideogram
# ---------------------------------------------------------------------------

def test_ideogram_sends_square_v2_request_and_returns_first_url() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["api_key"] = request.headers["Api-Key"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={"data": [{"url": "https://ideogram.ai/img/1.png"}, {"url": "https://ideogram.ai/img/2.png"}]},
        )

    url = _ideogram(handler).generate("a logo")

    assert url == "https://ideogram.ai/img/1.png"
    assert seen["url"] == IDEOGRAM_URL
    assert seen["api_key"] == "ideo-key"
    assert seen["body"] == {
        "image_request": {
            "prompt": "a logo",
            "aspect_ratio": "ASPECT_1_1",
            "model": "V_2",
            "magic_prompt_option": "AUTO",
        }
    }


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"data": []},
        {"data": [{}]},
        {"data": [{"url": ""}]},
        {"data": ["not-a-dict"]},
        [],
    ],
)
def test_ideogram_success_without_url_returns_none(body) -> None:
    client = _ideogram(lambda request: httpx.Response(200, json=body))

    assert client.generate("a logo") is None


def test_ideogram_non_success_raises_provider_error_with_payload() -> None:
    client = _ideogram(lambda request: httpx.Response(422, text='{"detail":"prompt rejected"}'))

    with pytest.raises(ProviderError) as exc_info:
        client.generate("a logo")

    assert exc_info.value.status == 422
    assert exc_info.value.details == 'Ideogram API error: {"detail":"prompt rejected"}'


def test_ideogram_invalid_json_raises_provider_error() -> None:
    client = _ideogram(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(ProviderError):
        client.generate("a logo")


def test_ideogram_timeout_raises_provider_timeout_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(ProviderTimeoutError):
        _ideogram(handler).generate("a logo")


def test_ideogram_connection_failure_raises_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ProviderError) as exc_info:
        _ideogram(handler).generate("a logo")

    assert not isinstance(exc_info.value, ProviderTimeoutError)


# ---------------------------------------------------------------------------
# OpenAI
# ---------------------------------------------------------------------------

class _FakeImages:
    def __init__(self, result=None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.kwargs: dict = {}

    def generate(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        return self.result


def _openai(images: _FakeImages) -> OpenAIImageGenerationClient:
    return OpenAIImageGenerationClient(
        _settings(image_provider="openai"),
        client=SimpleNamespace(images=images),
    )


_OPENAI_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/images/generations")


def test_openai_returns_hosted_url() -> None:
    images = _FakeImages(SimpleNamespace(data=[SimpleNamespace(url="https://oaidalle.example/1.png")]))

    assert _openai(images).generate("a logo") == "https://oaidalle.example/1.png"
    assert images.kwargs == {
        "model": "dall-e-3",
        "prompt": "a logo",
        "size": "1024x1024",
        "n": 1,
        "response_format": "url",
    }


@pytest.mark.parametrize(
    "result",
    [
        SimpleNamespace(data=[]),
        SimpleNamespace(data=None),
        SimpleNamespace(data=[SimpleNamespace(url=None)]),
    ],
)
def test_openai_without_url_returns_none(result) -> None:
    assert _openai(_FakeImages(result)).generate("a logo") is None


def test_openai_status_error_raises_provider_error() -> None:
    error = APIStatusError(
        "content policy violation",
        response=httpx.Response(400, request=_OPENAI_REQUEST),
        body=None,
    )

    with pytest.raises(ProviderError) as exc_info:
        _openai(_FakeImages(error=error)).generate("a logo")

    assert exc_info.value.status == 400
    assert "content policy violation" in exc_info.value.details


def test_openai_timeout_raises_provider_timeout_error() -> None:
    with pytest.raises(ProviderTimeoutError):
        _openai(_FakeImages(error=APITimeoutError(request=_OPENAI_REQUEST))).generate("a logo")


def test_openai_connection_error_raises_provider_error() -> None:
    with pytest.raises(ProviderError):
        _openai(_FakeImages(error=APIConnectionError(request=_OPENAI_REQUEST))).generate("a logo")


def test_openai_without_key_fails_on_generate(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    client = OpenAIImageGenerationClient(_settings(image_provider="openai", openai_api_key=""))

    with pytest.raises(ProviderError) as exc_info:
        client.generate("a logo")

    assert not isinstance(exc_info.value, ProviderTimeoutError)
    assert "not configured" in exc_info.value.details
