"""
Sitemap Service

One sitemap per supported locale: the static site pages followed by every
article, both under the locale's URL prefix.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from article_cms.config import settings
from article_cms.i18n.locale import locale_path_prefix
from article_cms.schemas.article import SitemapEntry
from article_cms.services.article_service import get_all_articles

logger = logging.getLogger(__name__)

STATIC_ROUTES = ("", "/blogs", "/voice", "/voice-design")


def sitemap_ids() -> list[str]:
    """Sitemap identifiers, one per supported locale."""
    return list(settings.supported_languages)


async def build_sitemap(db: AsyncSession, locale: str, base_url: str | None = None) -> list[SitemapEntry]:
    base_url = (base_url or settings.site_base_url).rstrip("/")
    prefix = f"{base_url}{locale_path_prefix(locale)}"

    entries = [SitemapEntry(url=f"{prefix}{route}") for route in STATIC_ROUTES]

    articles = await get_all_articles(db, locale)
    entries.extend(SitemapEntry(url=f"{prefix}/blog/{article.slug}") for article in articles)

    logger.debug("Built sitemap for %s with %d articles", locale, len(articles))
    return entries
