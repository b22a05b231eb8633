"""
PostTranslation model

Stores per-locale translations for Post records using the
translation-table pattern. Each row contains all translatable
fields for one (post, locale) pair.

One canonical Post row + zero or many PostTranslation rows.
Translations carry no publish state of their own; listing and
detail views always read ``published_at`` from the parent Post.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from article_cms.database import Base
from article_cms.models.post import new_id, utcnow


class PostTranslation(Base):
    """Per-locale translation of a Post record."""

    __tablename__ = "post_translations"

    id = Column(String(36), primary_key=True, default=new_id)
    post_id = Column(
        String(36),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    locale = Column(String(10), nullable=False, index=True)  # e.g. "zh", "ja"

    # ── Translatable fields (mirrors Post) ────────────────────────────────────
    slug = Column(String, nullable=False)  # locale-specific slug (no global uniqueness)
    title = Column(String, nullable=False)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    cover_image_url = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # ── Relationships ─────────────────────────────────────────────────────────
    post = relationship("Post", back_populates="translations")

    __table_args__ = (
        # One translation per (post, locale) pair
        UniqueConstraint("post_id", "locale", name="uq_post_translation_locale"),
        Index("idx_pt_locale_created", "locale", "created_at"),
    )
