"""
Article Service

Read and write operations for articles outside of the paginated listing.

Functions:
    get_article_by_slug  : detail view of one article in a locale
    get_all_articles     : every article, seen through one locale
    update_article       : patch the post, or upsert its translation
    delete_article       : remove a post together with its translations
    save_generated_article: insert a new post
    save_batch_articles  : insert many posts, reporting per-item outcome
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy import and_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from article_cms.config import settings
from article_cms.exceptions import (
    ArticleNotFoundError,
    DatabaseError,
    DuplicateResourceError,
    ValidationError,
)
from article_cms.i18n.locale import is_default_locale, resolve_locale
from article_cms.models.post import Post
from article_cms.models.post_translation import PostTranslation
from article_cms.schemas.article import (
    ArticleCreate,
    ArticleDetail,
    ArticleListItem,
    ArticleUpdate,
    BatchSaveResult,
)
from article_cms.utils.slugify import slugify

logger = logging.getLogger(__name__)

# Fields copied verbatim from an ArticleUpdate when the caller sends them
TEXT_FIELDS = ("title", "content", "excerpt")


async def get_article_by_slug(
    db: AsyncSession,
    slug: str,
    locale: str | None = None,
) -> ArticleDetail | None:
    """Fetch an article by its base slug, resolved for ``locale``. Returns None if not found."""
    locale = resolve_locale(locale)
    result = await db.execute(
        select(Post, PostTranslation)
        .outerjoin(
            PostTranslation,
            and_(PostTranslation.post_id == Post.id, PostTranslation.locale == locale),
        )
        .where(Post.slug == slug)
        .limit(1)
    )
    row = result.first()
    if row is None:
        return None

    post, translation = row
    return ArticleDetail.from_rows(post, translation, locale)


async def get_all_articles(db: AsyncSession, locale: str | None = None) -> list[ArticleListItem]:
    """Return every post, using its ``locale`` translation where one exists.

    Ordering and ``created_at`` follow the post, not the translation.
    """
    locale = resolve_locale(locale)
    result = await db.execute(
        select(Post, PostTranslation)
        .outerjoin(
            PostTranslation,
            and_(PostTranslation.post_id == Post.id, PostTranslation.locale == locale),
        )
        .order_by(Post.created_at.desc(), Post.id.desc())
    )
    return [
        ArticleListItem.from_rows(post, translation, created_at_source="post")
        for post, translation in result.all()
    ]


async def _get_post(db: AsyncSession, slug: str) -> Post:
    result = await db.execute(select(Post).where(Post.slug == slug))
    post = result.scalars().first()
    if post is None:
        raise ArticleNotFoundError(slug)
    return post


async def _commit(db: AsyncSession, operation: str, slug: str) -> None:
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.warning("Slug conflict during %s: %s", operation, slug)
        raise DuplicateResourceError("Article", "slug", slug) from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Error during {operation} of article {slug}: {str(e)}")
        raise DatabaseError(f"Failed to {operation} article", operation=operation) from e


def _has_slug(value: str | None) -> bool:
    return value is not None and value.strip() != ""


async def update_article(db: AsyncSession, slug: str, data: ArticleUpdate) -> ArticleDetail:
    """
    Apply a partial update to the article ``slug`` in ``data.locale``.

    Default locale: only fields present in ``data`` are written to the post;
    ``published_at`` and ``cover_image_url`` may be explicitly set to None and a
    non-blank, different ``slug`` renames the post.

    Other locales: an existing translation is patched the same way; a missing
    one is created, each absent field falling back to the post's value.

    Raises:
        ArticleNotFoundError: if no post has ``slug``.
        DuplicateResourceError: if a new slug is already taken.
    """
    target_locale = resolve_locale(data.locale)
    sent = data.model_fields_set
    now = datetime.now(timezone.utc)

    post = await _get_post(db, slug)

    if is_default_locale(target_locale):
        for field in TEXT_FIELDS:
            if field in sent and getattr(data, field) is not None:
                setattr(post, field, getattr(data, field))
        if "cover_image_url" in sent:
            post.cover_image_url = data.cover_image_url
        if "published_at" in sent:
            post.published_at = data.published_at

        next_slug = slug
        if "slug" in sent and _has_slug(data.slug) and data.slug != post.slug:
            post.slug = data.slug
            next_slug = data.slug

        post.updated_at = now
        await _commit(db, "update", next_slug)
        logger.info("Article updated: slug=%s locale=%s", next_slug, target_locale)
        return await get_article_by_slug(db, next_slug, target_locale)

    result = await db.execute(
        select(PostTranslation).where(
            PostTranslation.post_id == post.id,
            PostTranslation.locale == target_locale,
        )
    )
    translation = result.scalars().first()

    if translation is not None:
        for field in TEXT_FIELDS:
            if field in sent and getattr(data, field) is not None:
                setattr(translation, field, getattr(data, field))
        if "cover_image_url" in sent:
            translation.cover_image_url = data.cover_image_url
        if "slug" in sent and _has_slug(data.slug):
            translation.slug = data.slug
        translation.updated_at = now
        action = "updated"
    else:
        db.add(
            PostTranslation(
                post_id=post.id,
                locale=target_locale,
                slug=data.slug if _has_slug(data.slug) else post.slug,
                title=data.title if data.title is not None else post.title,
                excerpt=data.excerpt if data.excerpt is not None else post.excerpt,
                content=data.content if data.content is not None else post.content,
                cover_image_url=data.cover_image_url if data.cover_image_url is not None else post.cover_image_url,
                created_at=now,
                updated_at=now,
            )
        )
        action = "created"

    await _commit(db, "update", slug)
    logger.info("Translation %s: slug=%s locale=%s", action, slug, target_locale)
    return await get_article_by_slug(db, slug, target_locale)


async def delete_article(db: AsyncSession, slug: str) -> bool:
    """Delete a post and its translations.

    Returns True if a post was deleted, False if none had ``slug``.
    """
    result = await db.execute(
        select(Post).options(selectinload(Post.translations)).where(Post.slug == slug)
    )
    post = result.scalars().first()
    if post is None:
        return False

    translation_count = len(post.translations)
    await db.delete(post)
    await db.commit()
    logger.info("Article deleted: slug=%s translations=%d", slug, translation_count)
    return True


async def save_generated_article(
    db: AsyncSession,
    article: ArticleCreate,
    publish_immediately: bool = True,
) -> Post:
    """
    Insert a new default-locale post.

    Args:
        db: Database session
        article: Article fields; a missing slug is derived from the title
        publish_immediately: Set ``published_at`` to now, otherwise save a draft

    Returns:
        The saved Post

    Raises:
        ValidationError: if no usable slug can be derived
        DuplicateResourceError: if the slug is already taken
    """
    slug = article.slug.strip() if _has_slug(article.slug) else slugify(article.title)
    if not slug:
        raise ValidationError("Article slug cannot be empty", field="slug")

    now = datetime.now(timezone.utc)
    post = Post(
        slug=slug,
        title=article.title,
        excerpt=article.excerpt,
        content=article.content,
        cover_image_url=article.cover_image_url,
        published_at=now if publish_immediately else None,
        created_at=now,
        updated_at=now,
    )
    db.add(post)
    await _commit(db, "create", slug)
    await db.refresh(post)
    logger.info(f"Article created successfully: {post.id} ({slug})")
    return post


async def _save_one(
    session_factory: async_sessionmaker[AsyncSession],
    article: ArticleCreate,
    publish_immediately: bool,
) -> BatchSaveResult:
    async with session_factory() as session:
        try:
            await save_generated_article(session, article, publish_immediately)
        except (DuplicateResourceError, DatabaseError, ValidationError) as e:
            return BatchSaveResult(title=article.title, status="error", error=e.message)
    return BatchSaveResult(title=article.title, status="success")


async def save_batch_articles(
    session_factory: async_sessionmaker[AsyncSession],
    articles: list[ArticleCreate],
    publish_immediately: bool = True,
) -> list[BatchSaveResult]:
    """Save every article not explicitly deselected, one result per saved item.

    Items are written in chunks of ``settings.article_batch_size``; items within
    a chunk run concurrently on separate sessions, so one failure does not
    affect the others.
    """
    to_save = [article for article in articles if article.selected is not False]
    batch_size = max(1, settings.article_batch_size)
    results: list[BatchSaveResult] = []

    for start in range(0, len(to_save), batch_size):
        chunk = to_save[start:start + batch_size]
        results.extend(
            await asyncio.gather(*(_save_one(session_factory, article, publish_immediately) for article in chunk))
        )

    failed = sum(1 for result in results if result.status == "error")
    logger.info("Batch save finished: saved=%d failed=%d", len(results) - failed, failed)
    return results
