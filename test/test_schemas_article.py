"""
Tests for article schemas

Row merging for listing items and detail views, and request model validation.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from article_cms.models.post import Post
from article_cms.models.post_translation import PostTranslation
from article_cms.schemas.article import (
    ArticleCreate,
    ArticleDetail,
    ArticleFilters,
    ArticleListItem,
    ArticleUpdate,
)
from article_cms.utils.query_filters import ArticleStatusFilter

POST_CREATED = datetime(2024, 1, 1, 12, 0)
TRANSLATION_CREATED = datetime(2024, 2, 1, 12, 0)


@pytest.fixture
def post():
    return Post(
        id="post-1",
        slug="hello-world",
        title="Hello World",
        excerpt="About hello",
        content="Body",
        cover_image_url="https://cdn.example.com/hello.png",
        published_at=POST_CREATED,
        created_at=POST_CREATED,
        updated_at=POST_CREATED,
    )


@pytest.fixture
def translation():
    return PostTranslation(
        id="tr-1",
        post_id="post-1",
        locale="ja",
        slug="konnichiwa",
        title="こんにちは",
        excerpt="紹介",
        content="本文",
        cover_image_url=None,
        created_at=TRANSLATION_CREATED,
        updated_at=TRANSLATION_CREATED,
    )


class TestArticleListItem:
    def test_from_post(self, post):
        item = ArticleListItem.from_rows(post)

        assert item.id == item.post_id == "post-1"
        assert item.translation_id is None
        assert item.source == "default"
        assert item.locale == "en"
        assert item.created_at == POST_CREATED

    def test_translated_fields_win(self, post, translation):
        item = ArticleListItem.from_rows(post, translation)

        assert item.id == "tr-1"
        assert item.post_id == "post-1"
        assert item.translation_id == "tr-1"
        assert item.source == "translation"
        assert item.title == "こんにちは"
        assert item.slug == "konnichiwa"
        assert item.locale == "ja"
        assert item.created_at == TRANSLATION_CREATED

    def test_cover_image_and_publish_state_from_post(self, post, translation):
        post.published_at = None
        item = ArticleListItem.from_rows(post, translation)

        assert item.cover_image_url == "https://cdn.example.com/hello.png"
        assert item.published_at is None

    def test_translation_cover_image_preferred(self, post, translation):
        translation.cover_image_url = "https://cdn.example.com/ja.png"
        item = ArticleListItem.from_rows(post, translation)

        assert item.cover_image_url == "https://cdn.example.com/ja.png"

    def test_empty_translation_cover_image_is_kept(self, post, translation):
        """Only a missing cover image falls back to the post's"""
        translation.cover_image_url = ""
        item = ArticleListItem.from_rows(post, translation)

        assert item.cover_image_url == ""

    def test_created_at_from_post(self, post, translation):
        item = ArticleListItem.from_rows(post, translation, created_at_source="post")

        assert item.created_at == POST_CREATED


class TestArticleDetail:
    def test_default_locale_ignores_translation(self, post, translation):
        detail = ArticleDetail.from_rows(post, translation, "en")

        assert detail.title == "Hello World"
        assert detail.is_default_locale is True
        assert detail.translation_id == "tr-1"

    def test_translated_view(self, post, translation):
        detail = ArticleDetail.from_rows(post, translation, "ja")

        assert detail.id == "post-1"
        assert detail.slug == "konnichiwa"
        assert detail.base_slug == "hello-world"
        assert detail.locale == "ja"
        assert detail.default_locale == "en"
        assert detail.is_default_locale is False
        assert detail.content == "本文"
        assert detail.updated_at == TRANSLATION_CREATED
        assert detail.base_article.title == "Hello World"

    def test_translated_view_cover_image(self, post, translation):
        assert ArticleDetail.from_rows(post, translation, "ja").cover_image_url == "https://cdn.example.com/hello.png"

        translation.cover_image_url = ""
        assert ArticleDetail.from_rows(post, translation, "ja").cover_image_url == ""

    def test_missing_translation_falls_back(self, post):
        detail = ArticleDetail.from_rows(post, None, "ja")

        assert detail.locale == "en"
        assert detail.is_default_locale is True
        assert detail.title == "Hello World"


class TestRequestModels:
    def test_filters_default_status(self):
        assert ArticleFilters().status == ArticleStatusFilter.ALL

    def test_filters_reject_unknown_status(self):
        with pytest.raises(ValidationError):
            ArticleFilters(status="archived")

    def test_update_tracks_sent_fields(self):
        update = ArticleUpdate(title="New", published_at=None)

        assert update.model_fields_set == {"title", "published_at"}

    def test_create_requires_title(self):
        with pytest.raises(ValidationError):
            ArticleCreate(title="", content="Body", excerpt="Short")

    def test_create_selected_is_optional(self):
        assert ArticleCreate(title="T", content="Body", excerpt="Short").selected is None
