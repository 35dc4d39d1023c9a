from urllib.parse import urlparse

from .schemas import BrandRequest, NameOption

BRAND_PREFIX = "The "


def build_brand_name(request: BrandRequest) -> str:
    """
    Build the display name rendered in the logo.

    Args:
        request (BrandRequest): The submitted form data.

    Returns:
        str: The name, e.g. "The JD", "Jane" or "Jane Doe". Missing fields
        simply leave gaps; this never fails.
    """
    prefix = BRAND_PREFIX if request.prefix else ""
    first_name = request.first_name
    last_name = request.last_name
    option = request.name_option

    if option is NameOption.ABBREVIATED and first_name and last_name:
        return f"{prefix}{first_name[0]}{last_name[0]}"
    if option is NameOption.FIRST_ONLY:
        return f"{prefix}{first_name}"
    if option is NameOption.LAST_ONLY:
        return f"{prefix}{last_name}"

    # Abbreviation without both names falls back to the full name.
    first_part = f"{first_name} " if first_name else ""
    return f"{prefix}{first_part}{last_name}"


def is_http_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)
