"""PostgreSQL implementation of Post repository.

Posts are stored one row per document with JSONB collections. Two
identifiers are in play: the application ``id`` (UUID, unique) and the
``store_id`` the database assigns on insert.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional

import logfire
from sqlalchemy import ColumnElement, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from foro.domain.error import NotFoundError, PersistenceError
from foro.domain.model import Post
from foro.domain.repository.post import PostFilter, PostRepository, Visibility
from foro.domain.value import parse_post_id, parse_store_id, utcnow
from foro.persistence.mappers import post_to_dict, row_to_post
from foro.persistence.query import build_post_conditions, visibility_condition
from foro.persistence.tables import posts_table

# Newest first; store_id breaks ties so pages never overlap
NEWEST_FIRST = (posts_table.c.created_at.desc(), posts_table.c.store_id.desc())
RECENTLY_DELETED_FIRST = (
    posts_table.c.deleted_at.desc(),
    posts_table.c.store_id.desc(),
)


def _offset(page: int, limit: int) -> int:
    return max(page - 1, 0) * limit


def _describe(filters: Optional[PostFilter]) -> dict:
    return filters.model_dump(mode="json", exclude_none=True) if filters else {}


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Wrap store failures in PersistenceError labelled with the operation."""
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error(
            "Post store operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise PersistenceError(operation, e) from e


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_one(
        self, condition: ColumnElement[bool], visibility: Visibility
    ) -> Optional[Post]:
        stmt = select(posts_table).where(condition)
        visible = visibility_condition(visibility)
        if visible is not None:
            stmt = stmt.where(visible)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_post(dict(row)) if row else None

    async def _resolve(self, identifier: str, visibility: Visibility) -> Optional[Post]:
        """Look a post up by store identifier, then by application identifier."""
        post = None

        store_id = parse_store_id(identifier)
        if store_id is not None:
            post = await self._fetch_one(posts_table.c.store_id == store_id, visibility)

        if post is None:
            post_id = parse_post_id(identifier)
            if post_id is not None:
                post = await self._fetch_one(posts_table.c.id == post_id, visibility)

        return post

    async def _fetch_page(
        self,
        filters: Optional[PostFilter],
        page: int,
        limit: int,
        order_by=NEWEST_FIRST,
    ) -> List[Post]:
        stmt = (
            select(posts_table)
            .where(*build_post_conditions(filters))
            .order_by(*order_by)
            .limit(limit)
            .offset(_offset(page, limit))
        )
        result = await self.session.execute(stmt)
        return [row_to_post(dict(row)) for row in result.mappings().all()]

    async def save(self, post: Post) -> Post:
        """Save a post (insert or update by store identifier)."""
        with logfire.span(
            "post_repository.save",
            post_id=str(post.id),
            store_id=post.store_id,
            title=post.title,
        ), _store_errors("save"):
            values = post_to_dict(post)

            if post.store_id is not None:
                logfire.info(
                    "Updating existing post",
                    post_id=str(post.id),
                    store_id=post.store_id,
                )
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.store_id == post.store_id)
                    .values(**values)
                    .returning(posts_table)
                )
                result = await self.session.execute(stmt)
                row = result.mappings().first()
                if row is None:
                    logfire.warn(
                        "No stored post to update", store_id=post.store_id
                    )
                    raise NotFoundError("Post", str(post.store_id))
            else:
                logfire.info(
                    "Inserting new post",
                    post_id=str(post.id),
                    authors=[a.id for a in post.authors],
                    tags=[t.value for t in post.tags],
                )
                stmt = insert(posts_table).values(**values).returning(posts_table)
                result = await self.session.execute(stmt)
                row = result.mappings().one()

            await self.session.flush()
            saved = row_to_post(dict(row))
            logfire.info(
                "Post saved successfully",
                post_id=str(saved.id),
                store_id=saved.store_id,
            )
            return saved

    async def find_by_id(
        self, identifier: str, include_deleted: bool = False
    ) -> Optional[Post]:
        """Find a post by store or application identifier."""
        with logfire.span(
            "post_repository.find_by_id",
            identifier=identifier,
            include_deleted=include_deleted,
        ), _store_errors("find"):
            visibility = Visibility.ALL if include_deleted else Visibility.ACTIVE
            post = await self._resolve(identifier, visibility)

            if not post:
                logfire.warn("Post not found", identifier=identifier)
            return post

    async def find_all(
        self,
        page: int = 1,
        limit: int = 10,
        filters: Optional[PostFilter] = None,
    ) -> List[Post]:
        """Find posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            page=page,
            limit=limit,
            filters=_describe(filters),
        ), _store_errors("find"):
            posts = await self._fetch_page(filters, page, limit)
            logfire.info("Found posts", count=len(posts))
            return posts

    async def find_by_author(
        self, author_id: str, page: int = 1, limit: int = 10
    ) -> List[Post]:
        """Find active posts by a specific author."""
        return await self.find_all(page, limit, PostFilter(author_id=author_id))

    async def find_by_tag(self, tag: str, page: int = 1, limit: int = 10) -> List[Post]:
        """Find active posts by tag."""
        return await self.find_all(page, limit, PostFilter(tag=tag))

    async def search(self, query: str, page: int = 1, limit: int = 10) -> List[Post]:
        """Search active posts by title, body and tag values."""
        with logfire.span(
            "post_repository.search", query=query, page=page, limit=limit
        ), _store_errors("search"):
            posts = await self._fetch_page(PostFilter(search=query), page, limit)
            logfire.info("Search results", query=query, count=len(posts))
            return posts

    async def find_deleted(self, page: int = 1, limit: int = 10) -> List[Post]:
        """Find soft-deleted posts, most recently deleted first."""
        with logfire.span(
            "post_repository.find_deleted", page=page, limit=limit
        ), _store_errors("find"):
            return await self._fetch_page(
                PostFilter(deleted=True), page, limit, order_by=RECENTLY_DELETED_FIRST
            )

    async def count(self, filters: Optional[PostFilter] = None) -> int:
        """Count posts matching the given filters."""
        with logfire.span(
            "post_repository.count", filters=_describe(filters)
        ), _store_errors("count"):
            stmt = (
                select(func.count())
                .select_from(posts_table)
                .where(*build_post_conditions(filters))
            )
            result = await self.session.execute(stmt)
            count = result.scalar() or 0
            logfire.info("Post count", count=count)
            return count

    async def _set_deleted_at(self, identifier: str, operation: str, deleted: bool):
        with logfire.span(
            f"post_repository.{operation}", identifier=identifier
        ), _store_errors(operation):
            post = await self._resolve(identifier, Visibility.ALL)
            if post is None:
                logfire.warn("Post not found", identifier=identifier)
                return None

            deleted_at = max(utcnow(), post.created_at) if deleted else None
            stmt = (
                update(posts_table)
                .where(posts_table.c.store_id == post.store_id)
                .values(deleted_at=deleted_at)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()

            if row is None:
                return None
            logfire.info(
                "Post deleted flag changed",
                post_id=str(post.id),
                deleted=deleted,
            )
            return row_to_post(dict(row))

    async def soft_delete(self, identifier: str) -> Optional[Post]:
        """Mark a post as deleted."""
        return await self._set_deleted_at(identifier, "soft_delete", deleted=True)

    async def restore(self, identifier: str) -> Optional[Post]:
        """Clear a post's deleted mark."""
        return await self._set_deleted_at(identifier, "restore", deleted=False)

    async def delete(self, identifier: str) -> bool:
        """Delete a post (hard delete)."""
        with logfire.span(
            "post_repository.delete", identifier=identifier
        ), _store_errors("delete"):
            post = await self._resolve(identifier, Visibility.ALL)
            if post is None:
                return False

            stmt = delete(posts_table).where(posts_table.c.store_id == post.store_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0
