"""Entry point for the FastAPI-powered anime catalog bridge."""

from __future__ import annotations
import logging
from contextlib import AsyncExitStack, asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from . import __version__
from .config import settings
from .errors import EmptyResultError, FallbackUnavailableError
from .models import SAMPLE_RECORDS
from .services.aggregator import Aggregator
from .services.anime_catalog import AnimeCatalogService
from .services.extractor import ItemExtractor
from .services.fallback import FallbackStore
from .services.fetcher import PageFetcher
from .sources import MEGA_PLAN, SERIES_PLAN

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app: FastAPI


@asynccontextmanager
async def lifespan(fastapi_app: FastAPI):
    exit_stack = AsyncExitStack()
    http_client = await exit_stack.enter_async_context(
        httpx.AsyncClient(timeout=httpx.Timeout(20.0, connect=10.0))
    )
    fastapi_app.state.catalog_service = build_catalog_service(http_client)
    logger.info("Anime scraper server running on port %s", settings.server_port)

    try:
        yield
    finally:  # pragma: no cover - teardown path exercised at runtime
        await exit_stack.aclose()


def build_catalog_service(http_client: httpx.AsyncClient) -> AnimeCatalogService:
    fetcher = PageFetcher(http_client, user_agent=settings.user_agent)
    extractor = ItemExtractor(settings.source_origin)
    return AnimeCatalogService(
        settings,
        Aggregator(fetcher, extractor),
        FallbackStore(settings.fallback_path),
    )


def create_app() -> FastAPI:
    fastapi_app = FastAPI(
        title=settings.app_name,
        description="Scrapes anime listings and republishes them for media catalog clients",
        version=__version__,
        lifespan=lifespan,
    )

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_routes(fastapi_app)
    return fastapi_app


def get_catalog_service(app: FastAPI) -> AnimeCatalogService:
    service = getattr(app.state, "catalog_service", None)
    if not isinstance(service, AnimeCatalogService):
        raise RuntimeError("Catalog service not initialised")
    return service


def _zip_response(payload: bytes, filename: str) -> Response:
    return Response(
        content=payload,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def _error_response(error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": error, "message": message})


def register_routes(fastapi_app: FastAPI) -> None:
    @fastapi_app.get("/series.zip")
    async def series_zip() -> Response:
        service = get_catalog_service(fastapi_app)
        try:
            archive = await service.series_archive()
        except EmptyResultError as exc:
            logger.error("Error building series archive: %s", exc)
            return _error_response("Failed to fetch anime data", str(exc))
        return _zip_response(archive, SERIES_PLAN.download_filename or "series.zip")

    @fastapi_app.get("/anime.json")
    async def anime_json() -> Response:
        service = get_catalog_service(fastapi_app)
        try:
            content = service.fallback_json()
        except FallbackUnavailableError as exc:
            logger.error("Error serving anime.json: %s", exc)
            return _error_response("Failed to load anime data", str(exc))
        logger.info("Served anime.json successfully")
        return Response(content=content, media_type="application/json")

    @fastapi_app.get("/anime/recently-updated")
    async def recently_updated() -> JSONResponse:
        service = get_catalog_service(fastapi_app)
        try:
            records = await service.recently_updated()
        except EmptyResultError as exc:
            logger.error("Error scraping recently updated anime: %s", exc)
            return _error_response("Failed to fetch anime data", str(exc))
        logger.info("Found %s anime items", len(records))
        return JSONResponse([record.model_dump() for record in records])

    @fastapi_app.get("/anime/comprehensive")
    async def comprehensive() -> JSONResponse:
        service = get_catalog_service(fastapi_app)
        try:
            result = await service.comprehensive()
        except OSError as exc:
            logger.error("Error in comprehensive scrape: %s", exc)
            return _error_response("Comprehensive scrape failed", str(exc))
        return JSONResponse(
            {
                "message": "Comprehensive scrape completed",
                "total_anime": result.total,
                "anime": [record.model_dump() for record in result.records],
            }
        )

    @fastapi_app.get("/anime/mega-scrape")
    async def mega_scrape() -> Response:
        service = get_catalog_service(fastapi_app)
        try:
            archive, result = await service.mega_archive()
        except OSError as exc:
            logger.error("Error in MEGA scrape: %s", exc)
            return _error_response("MEGA scrape failed", str(exc))
        logger.info("MEGA anime ZIP served with %s titles", result.total)
        return _zip_response(
            archive, MEGA_PLAN.download_filename or "mega_anime_collection.zip"
        )

    @fastapi_app.get("/health")
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok", "message": "Anime scraper is running"}

    @fastapi_app.get("/test")
    async def sample_data() -> JSONResponse:
        return JSONResponse([record.model_dump() for record in SAMPLE_RECORDS])


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.environment == "development",
    )
