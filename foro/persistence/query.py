"""Predicate builder for post queries.

Every read path of the PostgreSQL repository, and ``count``, builds its WHERE
clause here. Soft-deleted posts are excluded by default, explicitly, rather
than by a hook on the driver.

The in-memory counterpart is ``PostFilter.matches``; keep the two in step.
"""

from typing import Optional

from sqlalchemy import ColumnElement, column, func, literal, or_, select
from sqlalchemy.dialects.postgresql import JSONB

from foro.domain.repository.post import PostFilter, Visibility
from foro.persistence.tables import posts_table


def visibility_condition(visibility: Visibility) -> Optional[ColumnElement[bool]]:
    """Build the soft-delete condition for a visibility.

    Returns:
        The condition, or None when every post is visible
    """
    if visibility is Visibility.ACTIVE:
        return posts_table.c.deleted_at.is_(None)
    if visibility is Visibility.DELETED:
        return posts_table.c.deleted_at.is_not(None)
    return None


def tag_value_contains(term: str) -> ColumnElement[bool]:
    """Any tag value contains ``term``, ignoring case.

    Renders as an EXISTS over ``jsonb_array_elements(posts.tags)``.
    """
    tag = func.jsonb_array_elements(posts_table.c.tags).table_valued(
        column("value", JSONB), name="tag"
    )
    return (
        select(literal(1))
        .select_from(tag)
        .where(tag.c.value["value"].astext.icontains(term, autoescape=True))
        .exists()
    )


def search_condition(term: str) -> ColumnElement[bool]:
    """Title, body or any tag value contains ``term``, ignoring case.

    The term is matched literally: LIKE wildcards in it are escaped.
    """
    return or_(
        posts_table.c.title.icontains(term, autoescape=True),
        posts_table.c.body.icontains(term, autoescape=True),
        tag_value_contains(term),
    )


def build_post_conditions(
    filters: Optional[PostFilter] = None,
) -> list[ColumnElement[bool]]:
    """Build the WHERE conditions for a filter set.

    Args:
        filters: Filters to apply (None for active posts)

    Returns:
        Conditions to AND together
    """
    filters = filters or PostFilter()
    conditions: list[ColumnElement[bool]] = []

    visible = visibility_condition(filters.visibility)
    if visible is not None:
        conditions.append(visible)

    if filters.author_id is not None:
        # JSONB containment: authors @> '[{"id": "..."}]'
        conditions.append(posts_table.c.authors.contains([{"id": filters.author_id}]))

    if filters.tag is not None:
        conditions.append(tag_value_contains(filters.tag))

    if filters.date_from is not None:
        conditions.append(posts_table.c.created_at >= filters.date_from)

    if filters.date_to is not None:
        conditions.append(posts_table.c.created_at <= filters.date_to)

    if filters.search is not None:
        conditions.append(search_condition(filters.search))

    return conditions
