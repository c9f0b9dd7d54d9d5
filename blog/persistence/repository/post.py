"""SQL implementation of Post repository."""

from collections import defaultdict
from typing import Any, List, Optional

import logfire
from sqlalchemy import Select, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import NewPost, Post
from blog.domain.repository.post import PostFilter, PostRepository
from blog.domain.value import PostId
from blog.persistence.database import store_errors
from blog.persistence.mappers import post_to_row, row_to_post, tags_to_rows
from blog.persistence.tables import post_tags_table, posts_table

# Columns an update may write directly on the posts table
_SCALAR_FIELDS = ("title", "body")


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_tags_for_posts(self, post_ids: list[int]) -> dict[int, list[str]]:
        """Fetch tags for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> ordered list of tag names
        """
        if not post_ids:
            return {}

        stmt = (
            select(post_tags_table.c.post_id, post_tags_table.c.name)
            .where(post_tags_table.c.post_id.in_(post_ids))
            .order_by(post_tags_table.c.post_id, post_tags_table.c.position)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[int, list[str]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[row.post_id].append(row.name)

        return post_tag_map

    @staticmethod
    def _apply_filter(stmt: Select, post_filter: PostFilter) -> Select:
        """Restrict a posts query to the filter's tag and username."""
        if post_filter.tag is not None:
            tagged = select(post_tags_table.c.post_id).where(
                post_tags_table.c.name == post_filter.tag
            )
            stmt = stmt.where(posts_table.c.id.in_(tagged))
        if post_filter.username is not None:
            stmt = stmt.where(posts_table.c.username == post_filter.username)
        return stmt

    async def _replace_tags(self, post_id: PostId, tags: List[str]) -> None:
        await self.session.execute(
            delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
        )
        if tags:
            await self.session.execute(
                insert(post_tags_table), tags_to_rows(post_id, tags)
            )

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            with store_errors("find_by_id"):
                stmt = select(posts_table).where(posts_table.c.id == post_id)
                result = await self.session.execute(stmt)
                row = result.fetchone()

                if not row:
                    return None

                post_tag_map = await self._fetch_tags_for_posts([post_id])
                return row_to_post(row._asdict(), tags=post_tag_map.get(post_id, []))

    async def find_all(
        self,
        post_filter: PostFilter,
        limit: int,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts newest first with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            tag=post_filter.tag,
            username=post_filter.username,
            limit=limit,
            offset=offset,
        ):
            with store_errors("find_all"):
                stmt = self._apply_filter(select(posts_table), post_filter)
                stmt = stmt.order_by(desc(posts_table.c.id)).limit(limit).offset(offset)

                result = await self.session.execute(stmt)
                post_rows = result.fetchall()

                if not post_rows:
                    logfire.info("No posts found")
                    return []

                post_tag_map = await self._fetch_tags_for_posts(
                    [row.id for row in post_rows]
                )

                posts = [
                    row_to_post(row._asdict(), tags=post_tag_map.get(row.id, []))
                    for row in post_rows
                ]
                logfire.info("Found posts", count=len(posts))
                return posts

    async def count(self, post_filter: PostFilter) -> int:
        """Count posts matching the given filter."""
        with logfire.span(
            "post_repository.count",
            tag=post_filter.tag,
            username=post_filter.username,
        ):
            with store_errors("count"):
                stmt = self._apply_filter(
                    select(func.count()).select_from(posts_table), post_filter
                )
                result = await self.session.execute(stmt)
                return result.scalar() or 0

    async def insert(self, post: NewPost) -> Post:
        """Insert a post and its tags."""
        with logfire.span(
            "post_repository.insert", title=post.title, tags=post.tags
        ):
            with store_errors("insert"):
                stmt = (
                    insert(posts_table)
                    .values(**post_to_row(post))
                    .returning(posts_table.c.id)
                )
                result = await self.session.execute(stmt)
                post_id = PostId(result.scalar_one())

                if post.tags:
                    await self.session.execute(
                        insert(post_tags_table), tags_to_rows(post_id, post.tags)
                    )

                await self.session.flush()
                logfire.info("Post inserted", post_id=post_id)
                return Post(id=post_id, **post.model_dump())

    async def insert_many(self, posts: List[NewPost]) -> List[Post]:
        """Insert posts one by one so ids follow list order."""
        return [await self.insert(post) for post in posts]

    async def update(self, post_id: PostId, changes: dict[str, Any]) -> Optional[Post]:
        """Replace the supplied fields of a post."""
        with logfire.span(
            "post_repository.update", post_id=post_id, fields=sorted(changes)
        ):
            with store_errors("update"):
                values = {k: changes[k] for k in _SCALAR_FIELDS if k in changes}

                if values:
                    stmt = (
                        update(posts_table)
                        .where(posts_table.c.id == post_id)
                        .values(**values)
                        .returning(posts_table.c.id)
                    )
                    result = await self.session.execute(stmt)
                    found = result.fetchone() is not None
                else:
                    stmt = select(posts_table.c.id).where(posts_table.c.id == post_id)
                    result = await self.session.execute(stmt)
                    found = result.fetchone() is not None

                if not found:
                    logfire.warn("Post not found for update", post_id=post_id)
                    return None

                if "tags" in changes:
                    await self._replace_tags(post_id, changes["tags"])

                await self.session.flush()

        return await self.find_by_id(post_id)

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post and its tags (hard delete)."""
        with logfire.span("post_repository.delete", post_id=post_id):
            with store_errors("delete"):
                await self.session.execute(
                    delete(post_tags_table).where(post_tags_table.c.post_id == post_id)
                )
                result = await self.session.execute(
                    delete(posts_table).where(posts_table.c.id == post_id)
                )
                await self.session.flush()
                return result.rowcount > 0
