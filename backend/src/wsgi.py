import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from routes.news import router as news_router
from settings import settings
from utils.news import NewsClient

logging.basicConfig(
    level=settings.app.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http = httpx.AsyncClient(timeout=settings.news.timeout)
    app.state.news = NewsClient(
        app.state.http,
        api_key=settings.news.api_key,
        base_url=settings.news.url,
        language=settings.news.language,
        country=settings.news.country,
    )
    logger.info("news client ready (%s)", settings.news.url)
    try:
        yield
    finally:
        await app.state.http.aclose()


def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="News Reader API",
        version="1.0.0",
        routes=app.routes,
        description="API docs",
    )
    openapi_schema["servers"] = [{"url": "/api"}]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app = FastAPI(
    title="News Reader API",
    root_path="/api",
    lifespan=lifespan,
    **(
        {
            "docs_url": "/docs",
            "redoc_url": "/redoc",
            "openapi_url": "/openapi.json"
        }
        if settings.app.debug else {"docs_url": None, "redoc_url": None, "openapi_url": None}
    )
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.app.url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.openapi = custom_openapi
app.include_router(news_router)


@app.get("/health")
def health():
    return {"ok": True, "ts": datetime.now(timezone.utc).isoformat()}
