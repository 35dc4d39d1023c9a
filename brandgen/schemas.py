"""Pydantic models shared by the FastAPI endpoints."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError


class NameOption(str, Enum):
    """Which name-shortening rule applies. Only one can be active at a time."""

    NONE = "none"
    ABBREVIATED = "abbreviated"
    FIRST_ONLY = "firstOnly"
    LAST_ONLY = "lastOnly"


# Legacy form flags in the order they take precedence.
_LEGACY_NAME_FLAGS = (
    ("useAbbreviatedName", NameOption.ABBREVIATED),
    ("useFirstNameOnly", NameOption.FIRST_ONLY),
    ("useLastNameOnly", NameOption.LAST_ONLY),
)


_BOOL_ADAPTER = TypeAdapter(bool)


def _legacy_flag(key: str, value: Any) -> bool:
    if value is None:
        return False
    try:
        return _BOOL_ADAPTER.validate_python(value)
    except PydanticValidationError as exc:
        raise ValueError(f"{key} must be a boolean") from exc


class BrandRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prefix: bool = Field(default=False, description='Prepend "The " to the brand name')
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    suffix: str = Field(default="", description="Team, Group, Mortgage Team or Mortgage Group")
    style: Optional[str] = Field(default=None, description="General style of the logo")
    brand_theme: Optional[str] = Field(default=None, alias="brandTheme")
    description: Optional[str] = Field(default=None, max_length=200)
    name_option: NameOption = Field(default=NameOption.NONE, alias="nameOption")

    @field_validator("prefix", mode="before")
    @classmethod
    def _coerce_prefix(cls, value: Any) -> Any:
        # The web form sends the literal prefix text ("The") or an empty string.
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return value

    @field_validator("first_name", "last_name", "suffix", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @model_validator(mode="before")
    @classmethod
    def _fold_legacy_name_flags(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        enabled = [option for key, option in _LEGACY_NAME_FLAGS if _legacy_flag(key, data.pop(key, False))]
        if data.get("nameOption") is None and data.get("name_option") is None:
            data.pop("nameOption", None)
            data.pop("name_option", None)
            if enabled:
                data["nameOption"] = enabled[0]
        return data


class GenerateBrandResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_urls: List[str] = Field(..., alias="imageUrls")


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
