"""
Query filter helpers

Builds the WHERE predicates used by the article listing: case-insensitive
substring search over a set of text columns and the published/draft status
filter. All user text goes through bound LIKE parameters with ``%`` and
``_`` escaped.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence

from sqlalchemy import and_, func, or_
from sqlalchemy.sql.elements import ColumnElement


class ArticleStatusFilter(str, enum.Enum):
    ALL = "all"
    PUBLISHED = "published"
    DRAFT = "draft"


def push_condition(conditions: list[ColumnElement], condition: ColumnElement | None) -> None:
    """Append ``condition`` unless it is None."""
    if condition is not None:
        conditions.append(condition)


def combine_conditions(conditions: Sequence[ColumnElement]) -> ColumnElement | None:
    """AND all conditions together; None when there is nothing to filter on."""
    if not conditions:
        return None
    if len(conditions) == 1:
        return conditions[0]
    return and_(*conditions)


def normalize_search(value: str | None) -> str:
    """Trimmed, lower-cased search text ("" when there is nothing to search for)."""
    return (value or "").strip().lower()


def build_like_search(
    columns: Sequence,
    value: str | None,
    case_insensitive: bool = True,
) -> ColumnElement | None:
    """
    Substring match of ``value`` against any of ``columns``.

    Args:
        columns: Text columns to search
        value: Raw search text; blank means no predicate
        case_insensitive: Compare ``lower(column)`` against the lower-cased text

    Returns:
        A single predicate (OR across columns), or None
    """
    if not value or not columns:
        return None
    trimmed = value.strip()
    if not trimmed:
        return None

    needle = trimmed.lower() if case_insensitive else trimmed
    comparators = [
        (func.lower(column) if case_insensitive else column).contains(needle, autoescape=True)
        for column in columns
    ]
    return comparators[0] if len(comparators) == 1 else or_(*comparators)


def build_status_condition(status: ArticleStatusFilter | str | None, published_column) -> ColumnElement | None:
    """Published requires a publish timestamp, draft requires none, all adds nothing."""
    if status is None:
        return None
    status = ArticleStatusFilter(status)
    if status is ArticleStatusFilter.PUBLISHED:
        return published_column.is_not(None)
    if status is ArticleStatusFilter.DRAFT:
        return published_column.is_(None)
    return None
