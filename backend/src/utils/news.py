import logging
from datetime import datetime
from typing import Optional, List, Tuple

import httpx

from schemes.news import ArticleOut, NewsPage
from utils.enums import Category, SortBy
from utils.time import time_since, InvalidTimestamp

logger = logging.getLogger(__name__)

REMOVED_TITLE = "[Removed]"


class NewsAPIError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NewsClient:
    """
    Thin async wrapper over a NewsAPI.org-compatible v2 endpoint.

    Searches go to /everything, plain listings to /top-headlines.
    No caching, no retries: any failure surfaces as NewsAPIError.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: str,
        base_url: str,
        language: str = "en",
        country: str = "us",
    ):
        self._http = http
        self._api_key = api_key
        self._base = base_url.rstrip("/")
        self._language = language
        self._country = country

    def _request_for(
        self, *,
        q: Optional[str],
        category: Optional[Category],
        sort_by: SortBy,
        page: int,
        page_size: int,
    ) -> Tuple[str, dict]:
        params = {"page": page, "pageSize": page_size}
        if q:
            params.update(q=q, language=self._language, sortBy=str(sort_by))
            return f"{self._base}/everything", params
        params["country"] = self._country
        if category:
            params["category"] = str(category)
        return f"{self._base}/top-headlines", params

    async def fetch(
        self,
        q: Optional[str] = None,
        category: Optional[Category] = None,
        page: int = 1,
        page_size: int = 12,
        sort_by: SortBy = SortBy.PUBLISHED_AT,
    ) -> Tuple[List[dict], int]:
        url, params = self._request_for(
            q=q, category=category, sort_by=sort_by, page=page, page_size=page_size
        )
        try:
            resp = await self._http.get(url, params=params, headers={"X-Api-Key": self._api_key})
        except httpx.HTTPError as e:
            logger.warning("news api request to %s failed: %s", url, e)
            raise NewsAPIError(f"news api unreachable: {e}") from e

        try:
            data = resp.json()
        except ValueError:
            data = None

        if not isinstance(data, dict):
            logger.warning("news api returned non-json body (status %s)", resp.status_code)
            raise NewsAPIError("news api returned an invalid response", resp.status_code)

        if resp.is_error or data.get("status") == "error":
            message = data.get("message") or f"news api error {resp.status_code}"
            logger.warning("news api error %s: %s", resp.status_code, message)
            raise NewsAPIError(message, resp.status_code)

        articles = data.get("articles") or []
        total = int(data.get("totalResults") or 0)
        logger.info("news api: %d/%d articles (q=%r, category=%s, page=%d)", len(articles), total, q, category, page)
        return articles, total


def to_article(raw: dict, now: Optional[datetime] = None) -> ArticleOut:
    published_at = raw.get("publishedAt")
    label = None
    if published_at:
        try:
            label = time_since(published_at, now)
        except InvalidTimestamp as e:
            logger.warning("skipping time label for %s: %s", raw.get("url"), e)

    return ArticleOut(
        title=raw.get("title") or "",
        url=raw.get("url") or "",
        description=raw.get("description"),
        image_url=raw.get("urlToImage"),
        source=(raw.get("source") or {}).get("name"),
        author=raw.get("author"),
        published_at=published_at,
        time_since=label,
    )


def build_page(
    raw_articles: List[dict],
    total: int,
    *,
    page: int,
    page_size: int,
    now: Optional[datetime] = None,
) -> NewsPage:
    items = [
        to_article(raw, now)
        for raw in raw_articles
        if raw.get("title") != REMOVED_TITLE
    ]
    return NewsPage(
        items=items,
        page=page,
        page_size=page_size,
        total=total,
        has_next=page * page_size < total,
    )
