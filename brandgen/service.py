"""Domain logic for turning brand form data into generated logo images."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional

import httpx

from .config import Settings, get_settings
from .errors import DownloadError, GenerationFailedError, ValidationError
from .prompts import VARIATION_COUNT, get_brand_prompt
from .utils import BRAND_PREFIX, build_brand_name
from .aiservices.imagegenerationclient import ImageGenerationClient
from .aiservices.ideogramimagegenerationclient import IdeogramImageGenerationClient
from .aiservices.openaiimagegenerationclient import OpenAIImageGenerationClient
from .schemas import BrandRequest

logger = logging.getLogger(__name__)


class BrandGenerationService:
    """High-level orchestrator for the logo generation flow."""

    def __init__(
        self,
        settings: Settings | None = None,
        image_client: Optional[ImageGenerationClient] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.settings = settings or get_settings()
        if image_client is not None:
            self._image_client = image_client
        elif self.settings.image_provider == "openai":
            self._image_client = OpenAIImageGenerationClient(self.settings)
        else:
            self._image_client = IdeogramImageGenerationClient(self.settings)
        self._http_client = http_client or httpx.Client(
            timeout=httpx.Timeout(self.settings.download_timeout_seconds),
            follow_redirects=True,
        )

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------
    def build_prompts(self, request: BrandRequest) -> List[str]:
        brand_name = build_brand_name(request)
        return [
            get_brand_prompt(
                brand_name,
                request.suffix,
                request.style,
                request.brand_theme,
                request.description,
                index,
            )
            for index in range(VARIATION_COUNT)
        ]

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self, request: BrandRequest) -> List[str]:
        """Generate one logo per variation slot and return their URLs.

        Provider failures abort the whole request; a slot whose response
        lacks an image URL is skipped.

        Raises:
            ValidationError: brand name or suffix is missing.
            ProviderError: the provider rejected one of the calls.
            ProviderTimeoutError: a provider call timed out.
            GenerationFailedError: no slot produced an image URL.
        """
        brand_name = build_brand_name(request)
        if brand_name.strip() in ("", BRAND_PREFIX.strip()) or not request.suffix.strip():
            raise ValidationError("Brand name and suffix are required")

        image_urls: List[str] = []
        for index, prompt in enumerate(self.build_prompts(request)):
            logger.info("Making request %s with prompt: %s", index + 1, prompt)
            url = self._image_client.generate(prompt)
            if url is None:
                logger.warning("Request %s returned no image URL; skipping slot", index + 1)
                continue
            image_urls.append(url)

        logger.info("Generated %s image(s): %s", len(image_urls), image_urls)
        if not image_urls:
            raise GenerationFailedError("Failed to generate any images")
        return image_urls

    # ------------------------------------------------------------------
    # Download
    # ------------------------------------------------------------------
    def download_image(self, url: str) -> bytes:
        """Fetch a generated image so it can be served as an attachment."""
        try:
            response = self._http_client.get(url)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Download error for %s: %s", url, exc)
            raise DownloadError(f"Failed to fetch image: {exc}") from exc
        return response.content

    def close(self) -> None:
        self._image_client.close()
        self._http_client.close()


@lru_cache
def get_brand_service() -> BrandGenerationService:
    return BrandGenerationService(get_settings())
