"""
Article Routes

Three APIRouter objects exported from this module:

articles_router  (prefix: /api/v1/articles)
    GET    /                 → paginated listing (one locale, or "all")
    GET    /all              → every article seen through one locale
    POST   /                 → save a new article
    POST   /batch            → save many articles, per-item results
    GET    /{slug}           → article detail in a locale
    PUT    /{slug}           → partial update / translation upsert
    DELETE /{slug}           → delete article and its translations

sitemap_router  (prefix: /api/v1/sitemaps)
    GET    /                 → sitemap ids (one per locale)
    GET    /{locale}         → sitemap entries for a locale

i18n_router  (prefix: /api/v1/i18n)
    GET    /languages        → supported languages

Fixed paths (/all, /batch) are declared before /{slug} to avoid shadowing.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker  # noqa: TC002

from article_cms.config import settings
from article_cms.database import get_db, get_session_factory
from article_cms.exceptions import ArticleNotFoundError
from article_cms.i18n.locale import ALL_LANGUAGES, get_language_info
from article_cms.schemas.article import (
    ArticleCreate,
    ArticleCreated,
    ArticleDetail,
    ArticleFilters,
    ArticleListItem,
    ArticleUpdate,
    BatchSaveResult,
    LanguageInfo,
    PaginatedArticles,
    SitemapEntry,
)
from article_cms.services.article_listing_service import get_paginated_articles
from article_cms.services.article_service import (
    delete_article,
    get_all_articles,
    get_article_by_slug,
    save_batch_articles,
    save_generated_article,
    update_article,
)
from article_cms.services.sitemap_service import build_sitemap, sitemap_ids
from article_cms.utils.pagination import PaginationParams
from article_cms.utils.query_filters import ArticleStatusFilter

articles_router = APIRouter(tags=["Articles"])
sitemap_router = APIRouter(tags=["Sitemap"])
i18n_router = APIRouter(tags=["Internationalization"])
logger = logging.getLogger(__name__)


def _require_supported_locale(locale: str | None) -> None:
    if locale is not None and locale not in settings.supported_languages:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Locale '{locale}' is not in supported_languages.",
        )


# ── Article routes ─────────────────────────────────────────────────────────────


@articles_router.get("/", response_model=PaginatedArticles)
async def list_articles_route(
    locale: str | None = Query(None, description="Locale to list when no language filter is given"),
    language: str | None = Query(None, description=f"Locale code or '{ALL_LANGUAGES}'"),
    search: str | None = Query(None),
    status_filter: ArticleStatusFilter = Query(ArticleStatusFilter.ALL, alias="status"),
    pagination: PaginationParams = Depends(),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> PaginatedArticles:
    """Paginated article listing with search and publish-status filters."""
    filters = ArticleFilters(language=language, search=search, status=status_filter)
    return await get_paginated_articles(
        session_factory,
        locale=locale,
        page=pagination.page,
        page_size=pagination.page_size,
        filters=filters,
    )


@articles_router.get("/all", response_model=list[ArticleListItem])
async def list_all_articles_route(
    locale: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
) -> list[ArticleListItem]:
    """Every article in ``locale``, falling back to the default-locale text."""
    return await get_all_articles(db, locale)


@articles_router.post("/", response_model=ArticleCreated, status_code=status.HTTP_201_CREATED)
async def create_article_route(
    payload: ArticleCreate,
    publish: bool = Query(True, description="Publish immediately instead of saving a draft"),
    db: AsyncSession = Depends(get_db),
) -> ArticleCreated:
    post = await save_generated_article(db, payload, publish_immediately=publish)
    return ArticleCreated.model_validate(post)


@articles_router.post("/batch", response_model=list[BatchSaveResult])
async def create_articles_batch_route(
    payload: list[ArticleCreate],
    publish: bool = Query(True),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> list[BatchSaveResult]:
    """Save several articles; each item reports success or its error."""
    return await save_batch_articles(session_factory, payload, publish_immediately=publish)


@articles_router.get("/{slug}", response_model=ArticleDetail)
async def get_article_route(
    slug: str,
    locale: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
) -> ArticleDetail:
    article = await get_article_by_slug(db, slug, locale)
    if article is None:
        raise ArticleNotFoundError(slug)
    return article


@articles_router.put("/{slug}", response_model=ArticleDetail)
async def update_article_route(
    slug: str,
    payload: ArticleUpdate,
    db: AsyncSession = Depends(get_db),
) -> ArticleDetail:
    """Update an article, or create/update its translation when ``locale`` is not the default."""
    _require_supported_locale(payload.locale)
    return await update_article(db, slug, payload)


@articles_router.delete("/{slug}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article_route(
    slug: str,
    db: AsyncSession = Depends(get_db),
) -> None:
    deleted = await delete_article(db, slug)
    if not deleted:
        raise ArticleNotFoundError(slug)


# ── Sitemap routes ─────────────────────────────────────────────────────────────


@sitemap_router.get("/", response_model=list[str])
async def list_sitemaps_route() -> list[str]:
    return sitemap_ids()


@sitemap_router.get("/{locale}", response_model=list[SitemapEntry])
async def get_sitemap_route(
    locale: str,
    db: AsyncSession = Depends(get_db),
) -> list[SitemapEntry]:
    _require_supported_locale(locale)
    return await build_sitemap(db, locale)


# ── i18n info routes ───────────────────────────────────────────────────────────


@i18n_router.get("/languages", response_model=list[LanguageInfo])
async def list_supported_languages() -> list[LanguageInfo]:
    """List all supported languages with name and RTL flag."""
    return [LanguageInfo(**get_language_info(code)) for code in settings.supported_languages]
