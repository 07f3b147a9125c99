from enum import StrEnum


class Category(StrEnum):
    BUSINESS = "business"
    ENTERTAINMENT = "entertainment"
    GENERAL = "general"
    HEALTH = "health"
    SCIENCE = "science"
    SPORTS = "sports"
    TECHNOLOGY = "technology"


class SortBy(StrEnum):
    PUBLISHED_AT = "publishedAt"
    RELEVANCY = "relevancy"
    POPULARITY = "popularity"


__all__ = ["Category", "SortBy"]
