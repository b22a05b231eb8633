from .article import (
    ArticleCreate,
    ArticleCreated,
    ArticleDetail,
    ArticleFilters,
    ArticleListItem,
    ArticleUpdate,
    BaseArticle,
    BatchSaveResult,
    LanguageInfo,
    PaginatedArticles,
    PaginationInfo,
    SitemapEntry,
)

# Define the public API of this module
__all__ = [
    "ArticleCreate",
    "ArticleCreated",
    "ArticleDetail",
    "ArticleFilters",
    "ArticleListItem",
    "ArticleUpdate",
    "BaseArticle",
    "BatchSaveResult",
    "LanguageInfo",
    "PaginatedArticles",
    "PaginationInfo",
    "SitemapEntry",
]
