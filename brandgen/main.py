"""FastAPI entry point exposing the brand image REST API."""

from __future__ import annotations

import logging
import math
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from .config import get_settings
from .errors import BrandGenerationError, QuotaExceededError
from .quotaservice.quotaservice import QuotaGate, QuotaStatus, get_quota_gate
from .schemas import BrandRequest, ErrorResponse, GenerateBrandResponse
from .service import BrandGenerationService, get_brand_service
from .utils import is_http_url

logger = logging.getLogger(__name__)

DOWNLOAD_FILENAME = "brand-image.png"


def _client_identity(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def _rate_limit_headers(quota: QuotaStatus) -> dict[str, str]:
    return {
        "RateLimit-Limit": str(quota.limit),
        "RateLimit-Remaining": str(quota.remaining),
        "RateLimit-Reset": str(math.ceil(quota.reset_after)),
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(
        "%s API Key: %s",
        settings.image_provider.capitalize(),
        "Found" if settings.provider_api_key else "Not found",
    )
    yield
    if get_brand_service.cache_info().currsize:
        get_brand_service().close()


app = FastAPI(title="Brand Image Backend", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BrandGenerationError)
async def brand_generation_error_handler(request: Request, exc: BrandGenerationError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload(), headers=exc.headers)


@app.get("/health", summary="Health Check Endpoint")
async def healthcheck():
    settings = get_settings()
    return {
        "status": "ok",
        "provider": settings.image_provider,
        "model": settings.provider_model,
        "apiKeyConfigured": bool(settings.provider_api_key),
    }


@app.post(
    "/api/generate-brand",
    response_model=GenerateBrandResponse,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Generate four logo variations for a brand",
)
async def generate_brand(
    payload: BrandRequest,
    request: Request,
    response: Response,
    service: BrandGenerationService = Depends(get_brand_service),
    quota: QuotaGate = Depends(get_quota_gate),
):
    identity = _client_identity(request)
    if not quota.admit(identity):
        logger.warning("Rate limit exceeded for %s", identity)
        raise QuotaExceededError(headers=_rate_limit_headers(quota.status(identity)))
    response.headers.update(_rate_limit_headers(quota.status(identity)))

    logger.info("Received request body: %s", payload.model_dump(by_alias=True))

    try:
        image_urls = await run_in_threadpool(service.generate, payload)
    except BrandGenerationError:
        raise
    except Exception as exc:
        logger.exception("Image generation failed for %s", identity)
        raise BrandGenerationError(str(exc)) from exc

    return GenerateBrandResponse(image_urls=image_urls)


@app.get(
    "/api/download-image",
    response_class=Response,
    summary="Download a generated image as a PNG attachment",
)
async def download_image(
    url: Optional[str] = None,
    service: BrandGenerationService = Depends(get_brand_service),
):
    if not url or not url.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Image URL is required")
    if not is_http_url(url):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Image URL must be an http(s) URL")

    content = await run_in_threadpool(service.download_image, url)
    return Response(
        content=content,
        media_type="image/png",
        headers={"Content-Disposition": f"attachment; filename={DOWNLOAD_FILENAME}"},
    )


__all__ = ["app"]


if __name__ == "__main__":  # pragma: no cover - convenience entry point
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run("brandgen.main:app", host=settings.host, port=settings.port, log_level=settings.log_level)
