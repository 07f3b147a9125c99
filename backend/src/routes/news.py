from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from schemes.news import NewsPage
from utils.enums import Category, SortBy
from utils.news import NewsClient, NewsAPIError, build_page

router = APIRouter(prefix="/news", tags=["news"])


def get_news_client(request: Request) -> NewsClient:
    return request.app.state.news


def get_now() -> datetime:
    return datetime.now(timezone.utc)


@router.get("", response_model=NewsPage)
async def list_news(
    client: NewsClient = Depends(get_news_client),
    now: datetime = Depends(get_now),

    # фильтры
    q: Optional[str] = Query(None, min_length=2),
    category: Optional[Category] = Query(None),
    sort: SortBy = Query(SortBy.PUBLISHED_AT),

    # пагинация
    page: int = Query(1, ge=1),
    page_size: int = Query(12, ge=1, le=100),
):
    try:
        articles, total = await client.fetch(
            q=q, category=category, page=page, page_size=page_size, sort_by=sort
        )
    except NewsAPIError as e:
        raise HTTPException(502, e.message)

    # один "now" на всю страницу
    return build_page(articles, total, page=page, page_size=page_size, now=now)
