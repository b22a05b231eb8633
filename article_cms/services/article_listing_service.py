"""
Article Listing Service

Paginated, searchable article listing across the default locale (``posts``)
and its translations (``post_translations``).

Three paths:
    default locale  : posts only, LIMIT/OFFSET pushed to SQL
    other locale    : translations joined to their post, LIMIT/OFFSET in SQL
    ALL_LANGUAGES   : both sources loaded in full, merged, sorted by
                       creation time (newest first) and sliced in memory

Every fetch runs its row query and its count query concurrently, each on its
own session from the injected session factory. Database errors propagate.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from article_cms.config import settings
from article_cms.i18n.locale import ALL_LANGUAGES, is_default_locale, resolve_locale
from article_cms.models.post import Post
from article_cms.models.post_translation import PostTranslation
from article_cms.schemas.article import (
    ArticleFilters,
    ArticleListItem,
    PaginatedArticles,
    PaginationInfo,
)
from article_cms.utils.pagination import calculate_total_pages, resolve_pagination
from article_cms.utils.query_filters import (
    build_like_search,
    build_status_condition,
    combine_conditions,
    normalize_search,
    push_condition,
)

logger = logging.getLogger(__name__)

POST_SEARCH_COLUMNS = (Post.title, Post.slug, Post.excerpt)
# Translations are also found through the base post's title and slug
TRANSLATION_SEARCH_COLUMNS = (
    PostTranslation.title,
    PostTranslation.slug,
    PostTranslation.excerpt,
    Post.title,
    Post.slug,
)


@dataclass
class SourcePage:
    """Rows from one source plus the source's total under the same filters."""

    articles: list[ArticleListItem]
    total_items: int


def _post_conditions(filters: ArticleFilters) -> list:
    conditions: list = []
    push_condition(conditions, build_like_search(POST_SEARCH_COLUMNS, normalize_search(filters.search)))
    push_condition(conditions, build_status_condition(filters.status, Post.published_at))
    return conditions


def _translation_conditions(filters: ArticleFilters, locale: str | None) -> list:
    conditions: list = []
    if locale:
        conditions.append(PostTranslation.locale == locale)
    push_condition(conditions, build_like_search(TRANSLATION_SEARCH_COLUMNS, normalize_search(filters.search)))
    # Publish state always comes from the base post
    push_condition(conditions, build_status_condition(filters.status, Post.published_at))
    return conditions


async def _rows(session_factory: async_sessionmaker[AsyncSession], stmt) -> list:
    async with session_factory() as session:
        result = await session.execute(stmt)
        return list(result.all())


async def _count(session_factory: async_sessionmaker[AsyncSession], stmt) -> int:
    async with session_factory() as session:
        result = await session.execute(stmt)
        return result.scalar() or 0


async def fetch_posts(
    session_factory: async_sessionmaker[AsyncSession],
    filters: ArticleFilters,
    limit: int | None = None,
    offset: int | None = None,
) -> SourcePage:
    """
    Fetch default-locale articles, newest first.

    Args:
        session_factory: Factory for request-scoped sessions
        filters: Search and status filters
        limit: Page size; None loads every matching row
        offset: Rows to skip; None starts at the first row

    Returns:
        SourcePage whose total ignores limit/offset
    """
    where = combine_conditions(_post_conditions(filters))

    stmt = select(Post)
    count_stmt = select(func.count()).select_from(Post)
    if where is not None:
        stmt = stmt.where(where)
        count_stmt = count_stmt.where(where)

    stmt = stmt.order_by(Post.created_at.desc(), Post.id.desc())
    if limit is not None:
        stmt = stmt.limit(limit)
    if offset is not None:
        stmt = stmt.offset(offset)

    rows, total_items = await asyncio.gather(
        _rows(session_factory, stmt),
        _count(session_factory, count_stmt),
    )

    return SourcePage(
        articles=[ArticleListItem.from_rows(post) for (post,) in rows],
        total_items=total_items,
    )


async def fetch_translations(
    session_factory: async_sessionmaker[AsyncSession],
    filters: ArticleFilters,
    locale: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> SourcePage:
    """
    Fetch translated articles joined to their base post, newest translation first.

    ``locale`` restricts the result to one language; None keeps every
    translation. Search spans the translation and the base post, and the
    status filter applies to the base post.
    """
    where = combine_conditions(_translation_conditions(filters, locale))

    stmt = select(PostTranslation, Post).join(Post, PostTranslation.post_id == Post.id)
    count_stmt = (
        select(func.count())
        .select_from(PostTranslation)
        .join(Post, PostTranslation.post_id == Post.id)
    )
    if where is not None:
        stmt = stmt.where(where)
        count_stmt = count_stmt.where(where)

    stmt = stmt.order_by(PostTranslation.created_at.desc(), PostTranslation.id.desc())
    if limit is not None:
        stmt = stmt.limit(limit)
    if offset is not None:
        stmt = stmt.offset(offset)

    rows, total_items = await asyncio.gather(
        _rows(session_factory, stmt),
        _count(session_factory, count_stmt),
    )

    return SourcePage(
        articles=[ArticleListItem.from_rows(post, translation) for translation, post in rows],
        total_items=total_items,
    )


def merge_by_recency(*sources: list[ArticleListItem]) -> list[ArticleListItem]:
    """Concatenate item lists and order them newest first, ties broken by id (descending)."""
    combined = [item for source in sources for item in source]
    combined.sort(key=lambda item: (item.created_at, item.id), reverse=True)
    return combined


async def get_paginated_articles(
    session_factory: async_sessionmaker[AsyncSession],
    locale: str | None = None,
    page=1,
    page_size=10,
    filters: ArticleFilters | None = None,
) -> PaginatedArticles:
    """
    List articles for one locale, or for every locale when the language is ALL_LANGUAGES.

    ``filters.language`` takes precedence over ``locale``; with neither, the
    default locale is listed. Page and page size are normalized, never rejected.

    Returns:
        PaginatedArticles with the requested page and its pagination info
    """
    filters = filters or ArticleFilters()
    window = resolve_pagination(
        page,
        page_size,
        min_page_size=settings.article_page_size_min,
        max_page_size=settings.article_page_size_max,
    )
    language = filters.language or locale

    if language == ALL_LANGUAGES:
        # No SQL pagination here: global ordering needs both sources in full
        posts_page, translations_page = await asyncio.gather(
            fetch_posts(session_factory, filters),
            fetch_translations(session_factory, filters),
        )
        combined = merge_by_recency(posts_page.articles, translations_page.articles)
        articles = combined[window.offset:window.offset + window.page_size]
        total_items = posts_page.total_items + translations_page.total_items
        path = "combined"
    else:
        resolved_locale = resolve_locale(language)
        if is_default_locale(resolved_locale):
            source = await fetch_posts(session_factory, filters, window.limit, window.offset)
            path = "posts"
        else:
            source = await fetch_translations(
                session_factory, filters, resolved_locale, window.limit, window.offset
            )
            path = "translations"
        articles = source.articles
        total_items = source.total_items

    logger.debug(
        "Listed %d of %d articles via %s path",
        len(articles),
        total_items,
        path,
        extra={
            "locale": language,
            "status_filter": filters.status.value,
            "page": window.page,
            "page_size": window.page_size,
            "total_items": total_items,
        },
    )

    return PaginatedArticles(
        articles=articles,
        pagination=PaginationInfo(
            current_page=window.page,
            page_size=window.page_size,
            total_items=total_items,
            total_pages=calculate_total_pages(total_items, window.page_size),
        ),
    )
