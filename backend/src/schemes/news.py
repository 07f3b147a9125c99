from typing import List, Optional

from schemes.base import Page
from pydantic import BaseModel


class ArticleOut(BaseModel):
    title: str
    url: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    source: Optional[str] = None
    author: Optional[str] = None
    published_at: Optional[str] = None
    time_since: Optional[str] = None


class NewsPage(Page):
    items: List[ArticleOut]
