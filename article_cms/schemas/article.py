from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, ConfigDict, Field

from article_cms.config import settings
from article_cms.utils.query_filters import ArticleStatusFilter

if TYPE_CHECKING:
    from article_cms.models.post import Post
    from article_cms.models.post_translation import PostTranslation

ArticleSource = Literal["default", "translation"]


class ArticleFilters(BaseModel):
    language: str | None = Field(None, description="Locale code, or 'all' to merge every locale.")
    search: str | None = Field(None, description="Case-insensitive substring over title, slug and excerpt.")
    status: ArticleStatusFilter = Field(ArticleStatusFilter.ALL, description="all, published or draft.")


class ArticleListItem(BaseModel):
    """One row of an article listing: a Post, or a Post seen through one of its translations."""

    id: str
    post_id: str
    translation_id: str | None = None
    source: ArticleSource
    slug: str
    title: str
    excerpt: str
    content: str
    cover_image_url: str | None = None
    created_at: datetime
    published_at: datetime | None = None
    locale: str

    @classmethod
    def from_rows(
        cls,
        post: Post,
        translation: PostTranslation | None = None,
        created_at_source: Literal["post", "translation"] = "translation",
    ) -> ArticleListItem:
        """Merge a Post with an optional translation; translated fields win when present."""
        if translation is None:
            return cls(
                id=post.id,
                post_id=post.id,
                source="default",
                slug=post.slug,
                title=post.title,
                excerpt=post.excerpt,
                content=post.content,
                cover_image_url=post.cover_image_url,
                created_at=post.created_at,
                published_at=post.published_at,
                locale=settings.default_locale,
            )

        return cls(
            id=translation.id,
            post_id=post.id,
            translation_id=translation.id,
            source="translation",
            slug=translation.slug,
            title=translation.title,
            excerpt=translation.excerpt,
            content=translation.content,
            cover_image_url=(
                translation.cover_image_url if translation.cover_image_url is not None else post.cover_image_url
            ),
            created_at=post.created_at if created_at_source == "post" else translation.created_at,
            published_at=post.published_at,
            locale=translation.locale,
        )


class BaseArticle(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    slug: str
    title: str
    excerpt: str
    content: str
    cover_image_url: str | None = None
    published_at: datetime | None = None
    created_at: datetime
    updated_at: datetime | None = None


class ArticleDetail(BaseModel):
    """A single article resolved for a locale, with the untranslated Post alongside."""

    id: str
    post_id: str
    translation_id: str | None = None
    slug: str
    base_slug: str
    locale: str
    default_locale: str
    is_default_locale: bool
    title: str
    excerpt: str
    content: str
    cover_image_url: str | None = None
    published_at: datetime | None = None
    created_at: datetime
    updated_at: datetime | None = None
    base_article: BaseArticle

    @classmethod
    def from_rows(cls, post: Post, translation: PostTranslation | None, locale: str) -> ArticleDetail:
        default_locale = settings.default_locale
        is_default = locale == default_locale or translation is None
        active = post if is_default else translation

        return cls(
            id=post.id,
            post_id=post.id,
            translation_id=translation.id if translation is not None else None,
            slug=active.slug or post.slug,
            base_slug=post.slug,
            locale=default_locale if is_default else locale,
            default_locale=default_locale,
            is_default_locale=is_default,
            title=active.title,
            excerpt=active.excerpt,
            content=active.content,
            cover_image_url=active.cover_image_url if active.cover_image_url is not None else post.cover_image_url,
            published_at=post.published_at,
            created_at=post.created_at,
            updated_at=active.updated_at or post.updated_at,
            base_article=BaseArticle.model_validate(post),
        )


class PaginationInfo(BaseModel):
    current_page: int
    page_size: int
    total_items: int
    total_pages: int


class PaginatedArticles(BaseModel):
    articles: list[ArticleListItem]
    pagination: PaginationInfo


class ArticleUpdate(BaseModel):
    """Partial update. Only fields the caller actually sends are applied."""

    locale: str | None = None
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    cover_image_url: str | None = None
    published_at: datetime | None = None
    slug: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "locale": "ja",
                "title": "更新されたタイトル",
                "excerpt": "短い説明",
            }
        }
    )


class ArticleCreate(BaseModel):
    title: str = Field(..., min_length=1)
    slug: str | None = Field(None, description="Derived from the title when omitted.")
    content: str
    excerpt: str
    cover_image_url: str | None = None
    selected: bool | None = Field(None, description="Batch saves skip items explicitly set to false.")


class ArticleCreated(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    slug: str
    title: str
    published_at: datetime | None = None
    created_at: datetime


class BatchSaveResult(BaseModel):
    title: str
    status: Literal["success", "error"]
    error: str | None = None


class SitemapEntry(BaseModel):
    url: str


class LanguageInfo(BaseModel):
    code: str
    name: str
    is_rtl: bool
