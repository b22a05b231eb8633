"""
Tests for sitemap generation
"""

from utils.mock_utils import create_test_post, create_test_translation

from article_cms.config import settings
from article_cms.services.sitemap_service import STATIC_ROUTES, build_sitemap, sitemap_ids

BASE_URL = "https://example.com"


class TestSitemapIds:
    def test_one_per_supported_language(self):
        assert sitemap_ids() == settings.supported_languages

    def test_returns_a_copy(self):
        ids = sitemap_ids()
        ids.append("xx")
        assert "xx" not in settings.supported_languages


class TestBuildSitemap:
    async def test_default_locale_has_no_prefix(self, test_db):
        await create_test_post(test_db, "Hello World")

        urls = [entry.url for entry in await build_sitemap(test_db, "en", BASE_URL)]

        assert urls == [
            "https://example.com",
            "https://example.com/blogs",
            "https://example.com/voice",
            "https://example.com/voice-design",
            "https://example.com/blog/hello-world",
        ]

    async def test_translated_slugs_under_locale_prefix(self, test_db):
        first = await create_test_post(test_db, "First", created_minute=0)
        await create_test_post(test_db, "Second", created_minute=10)
        await create_test_translation(test_db, first, "ja", "最初", slug="saisho")

        urls = [entry.url for entry in await build_sitemap(test_db, "ja", BASE_URL)]

        assert urls[: len(STATIC_ROUTES)] == [
            "https://example.com/ja",
            "https://example.com/ja/blogs",
            "https://example.com/ja/voice",
            "https://example.com/ja/voice-design",
        ]
        assert urls[len(STATIC_ROUTES):] == [
            "https://example.com/ja/blog/second",
            "https://example.com/ja/blog/saisho",
        ]

    async def test_trailing_slash_in_base_url(self, test_db):
        entries = await build_sitemap(test_db, "fr", "https://example.com/")

        assert entries[0].url == "https://example.com/fr"

    async def test_configured_base_url_by_default(self, test_db):
        entries = await build_sitemap(test_db, "en")

        assert entries[0].url == settings.site_base_url.rstrip("/")
        assert len(entries) == len(STATIC_ROUTES)
