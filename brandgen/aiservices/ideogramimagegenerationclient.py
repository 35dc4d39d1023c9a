from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..config import Settings, get_settings
from ..errors import ProviderError, ProviderTimeoutError
from .imagegenerationclient import ImageGenerationClient

logger = logging.getLogger(__name__)


class IdeogramImageGenerationClient(ImageGenerationClient):
    """Calls the Ideogram ``/generate`` endpoint for a single square image."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._client = http_client or httpx.Client(
            timeout=httpx.Timeout(self.settings.provider_timeout_seconds)
        )

    @property
    def model(self) -> str:
        return self.settings.ideogram_model

    def generate(self, prompt: str) -> Optional[str]:
        payload = {
            "image_request": {
                "prompt": prompt,
                "aspect_ratio": self.settings.ideogram_aspect_ratio,
                "model": self.settings.ideogram_model,
                "magic_prompt_option": self.settings.ideogram_magic_prompt_option,
            }
        }
        headers = {
            "Api-Key": self.settings.ideogram_api_key.get_secret_value(),
            "Content-Type": "application/json",
        }

        try:
            response = self._client.post(self.settings.ideogram_api_url, json=payload, headers=headers)
        except httpx.TimeoutException as exc:
            raise ProviderTimeoutError(
                f"Ideogram API did not respond within {self.settings.provider_timeout_seconds:g}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(f"Ideogram API request failed: {exc}") from exc

        if not response.is_success:
            logger.error("Ideogram API response not OK: %s %s", response.status_code, response.text)
            raise ProviderError(f"Ideogram API error: {response.text}", status=response.status_code)

        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError(f"Ideogram API returned invalid JSON: {response.text[:200]}") from exc

        return _first_image_url(data)

    def close(self) -> None:
        self._client.close()


def _first_image_url(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    images = data.get("data")
    if not isinstance(images, list) or not images:
        return None
    first = images[0]
    if not isinstance(first, dict):
        return None
    url = first.get("url")
    return url if isinstance(url, str) and url else None
