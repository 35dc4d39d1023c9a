from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

class ImageGenerationClient(ABC):
    """Abstract interface for an image generation client.

    Implementations must provide synchronous generation methods
    used by the rest of the application. Failures of the provider are
    raised as ``ProviderError`` / ``ProviderTimeoutError``.
    """

    @property
    @abstractmethod
    def model(self) -> str:  # pragma: no cover - interface
        """Identifier of the provider model used for every request."""

    @abstractmethod
    def generate(self, prompt: str) -> Optional[str]:
        """Generate an image from a prompt and return its URL.

        Returns None when the provider answered successfully but did not
        include a usable image URL.
        """

    def close(self) -> None:
        """Release any network resources held by the client."""
