# aiservices/openaiimagegenerationclient.py
from __future__ import annotations

import logging
from typing import Any, Optional

from openai import APIConnectionError, APIStatusError, APITimeoutError, OpenAI, OpenAIError

from ..config import Settings, get_settings
from ..errors import ProviderError, ProviderTimeoutError
from .imagegenerationclient import ImageGenerationClient

logger = logging.getLogger(__name__)


class OpenAIImageGenerationClient(ImageGenerationClient):
    """
    Alternate provider backed by the OpenAI Images API.

    Requests hosted URLs (``response_format="url"``) so the result has the
    same shape as the Ideogram provider and can be passed to the download
    endpoint unchanged.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Any = None) -> None:
        self.settings = settings or get_settings()
        # The SDK client is built on first use so a missing key fails the
        # generation request, not the service construction.
        self._client = client

    @property
    def model(self) -> str:
        return self.settings.openai_image_model

    def _get_client(self) -> Any:
        if self._client is None:
            api_key = self.settings.openai_api_key.get_secret_value()
            try:
                # max_retries=0: failures surface to the caller, never retried.
                self._client = OpenAI(
                    api_key=api_key or None,
                    timeout=self.settings.provider_timeout_seconds,
                    max_retries=0,
                )
            except OpenAIError as exc:
                raise ProviderError(f"OpenAI Images API is not configured: {exc}") from exc
        return self._client

    def generate(self, prompt: str) -> Optional[str]:
        client = self._get_client()
        try:
            response = client.images.generate(
                model=self.settings.openai_image_model,
                prompt=prompt,
                size=self.settings.openai_image_size,
                n=1,
                response_format="url",
            )
        except APITimeoutError as exc:
            raise ProviderTimeoutError(
                f"OpenAI Images API did not respond within {self.settings.provider_timeout_seconds:g}s"
            ) from exc
        except APIStatusError as exc:
            logger.error("OpenAI Images API response not OK: %s %s", exc.status_code, exc.message)
            raise ProviderError(f"OpenAI Images API error: {exc.message}", status=exc.status_code) from exc
        except APIConnectionError as exc:
            raise ProviderError(f"OpenAI Images API request failed: {exc}") from exc

        data = getattr(response, "data", None) or []
        if not data:
            return None
        return getattr(data[0], "url", None) or None

    def close(self) -> None:
        close = getattr(self._client, "close", None)
        if callable(close):
            close()
