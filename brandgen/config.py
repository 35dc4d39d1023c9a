from functools import lru_cache
from typing import List, Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the brand image backend."""

    #----------------------------------------------------------
    # Image provider settings
    #----------------------------------------------------------
    image_provider: Literal["ideogram", "openai"] = Field(
        default="ideogram",
        description="Which external image generation API to call for each logo variation.",
    )

    ideogram_api_key: SecretStr = Field(
        default="",
        validation_alias=AliasChoices("brandgen_ideogram_api_key", "ideogram_api_key"),
        description="API key for authenticating with the Ideogram generate endpoint.",
    )

    ideogram_api_url: str = Field(
        default="https://api.ideogram.ai/generate",
        description="URL of the Ideogram image generation endpoint.",
    )

    ideogram_model: str = Field(
        default="V_2",
        description="Ideogram model identifier sent with every request.",
    )

    ideogram_aspect_ratio: str = Field(
        default="ASPECT_1_1",
        description="Aspect ratio requested from Ideogram. Logos are always square.",
    )

    ideogram_magic_prompt_option: str = Field(
        default="AUTO",
        description="Ideogram magic prompt setting.",
    )

    openai_api_key: SecretStr = Field(
        default="",
        description="API key for the OpenAI Images endpoint when image_provider is 'openai'.",
    )

    openai_image_model: str = Field(
        default="dall-e-3",
        description="OpenAI image model used when image_provider is 'openai'.",
    )

    openai_image_size: str = Field(
        default="1024x1024",
        description="Square output size requested from OpenAI.",
    )

    #----------------------------------------------------------
    # Request handling
    #----------------------------------------------------------
    provider_timeout_seconds: float = Field(
        default=60.0,
        gt=0.0,
        description="Upper bound for a single image generation call.",
    )
    download_timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        description="Upper bound for fetching a generated image for download.",
    )
    quota_limit: int = Field(
        default=3,
        ge=1,
        description="Generation requests admitted per client within one quota window.",
    )
    quota_window_seconds: float = Field(
        default=3600.0,
        gt=0.0,
        description="Length of the per-client quota window.",
    )

    #----------------------------------------------------------
    # Server settings
    #----------------------------------------------------------
    allowed_origins: List[str] = Field(
        default=["http://localhost:5173"],
        description="Origins allowed to call the API from a browser.",
    )
    host: str = Field(default="0.0.0.0")
    port: int = Field(
        default=3000,
        validation_alias=AliasChoices("brandgen_port", "port"),
    )
    log_level: str = Field(default="info")

    model_config = SettingsConfigDict(
        env_prefix="BRANDGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def provider_api_key(self) -> str:
        if self.image_provider == "openai":
            return self.openai_api_key.get_secret_value()
        return self.ideogram_api_key.get_secret_value()

    @property
    def provider_model(self) -> str:
        if self.image_provider == "openai":
            return self.openai_image_model
        return self.ideogram_model


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
