"""Typed failures raised while generating or downloading brand images.

Every error carries the HTTP status and the ``error``/``details`` pair the
API reports to the caller, so the FastAPI layer can render them uniformly.
"""

from __future__ import annotations

from typing import Dict, Optional


class BrandGenerationError(Exception):
    """Base class for all user-facing failures of the brand backend."""

    status_code: int = 500
    error: str = "Image generation failed"

    def __init__(self, details: Optional[str] = None, headers: Optional[Dict[str, str]] = None) -> None:
        super().__init__(details or self.error)
        self.details = details
        self.headers = headers

    def to_payload(self) -> dict:
        payload = {"error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(BrandGenerationError):
    """The request is missing the brand name or the team suffix."""

    status_code = 400
    error = "Missing required fields"


class QuotaExceededError(BrandGenerationError):
    status_code = 429
    error = "Rate limit exceeded. Please try again in 1 hour."


class ProviderError(BrandGenerationError):
    """The image provider answered with a non-success response."""

    def __init__(self, details: Optional[str] = None, status: Optional[int] = None) -> None:
        super().__init__(details)
        self.status = status


class ProviderTimeoutError(ProviderError):
    """The image provider did not answer within the configured timeout."""


class GenerationFailedError(BrandGenerationError):
    """Every variation slot finished without a usable image URL."""


class DownloadError(BrandGenerationError):
    error = "Failed to download image"
