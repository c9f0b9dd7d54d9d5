"""Unit tests for PostService."""

import pytest

from blog.config import PostSettings
from blog.domain.error import InvalidPageError
from blog.domain.repository import PostFilter, PostRepository
from blog.domain.service import PostService
from blog.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import ALICE, BOB, make_new_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class RecordingPostRepository(InMemoryPostRepository):
    """In-memory repository that records which queries were made."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    async def find_all(self, post_filter, limit, offset=0):
        self.calls.append("find_all")
        return await super().find_all(post_filter, limit, offset)

    async def count(self, post_filter):
        self.calls.append("count")
        return await super().count(post_filter)


async def seed(service: PostService, n: int, **kwargs) -> list:
    return [
        await service.create_post(make_new_post(title=f"Post {i}", **kwargs))
        for i in range(n)
    ]


class TestListPage:
    """Tests for PostService.list_page."""

    @pytest.mark.asyncio
    async def test_newest_first(self, unit_env):
        service = await unit_env.get(PostService)
        created = await seed(service, 3)

        page = await service.list_page(PostFilter(), 1)

        assert [p.id for p in page.posts] == [p.id for p in reversed(created)]

    @pytest.mark.asyncio
    async def test_pages_do_not_overlap(self, unit_env):
        service = await unit_env.get(PostService)
        await seed(service, 15)

        first = await service.list_page(PostFilter(), 1)
        second = await service.list_page(PostFilter(), 2)

        assert len(first.posts) == 10
        assert len(second.posts) == 5
        assert not {p.id for p in first.posts} & {p.id for p in second.posts}
        assert first.posts[-1].id > second.posts[0].id

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "total,expected_last_page",
        [(0, 0), (1, 1), (10, 1), (11, 2), (20, 2), (21, 3)],
    )
    async def test_last_page_is_ceiling_of_total_over_page_size(
        self, unit_env, total, expected_last_page
    ):
        service = await unit_env.get(PostService)
        await seed(service, total)

        page = await service.list_page(PostFilter(), 1)

        assert page.last_page == expected_last_page

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty(self, unit_env):
        service = await unit_env.get(PostService)
        await seed(service, 3)

        page = await service.list_page(PostFilter(), 5)

        assert page.posts == []
        assert page.last_page == 1

    @pytest.mark.asyncio
    async def test_tag_and_username_filters_are_combined(self, unit_env):
        service = await unit_env.get(PostService)
        await service.create_post(make_new_post(tags=["x"], user=ALICE))
        await service.create_post(make_new_post(tags=["x"], user=BOB))
        await service.create_post(make_new_post(tags=["y"], user=ALICE))

        page = await service.list_page(PostFilter(tag="x", username="alice"), 1)

        assert len(page.posts) == 1
        assert page.posts[0].user == ALICE
        assert page.posts[0].tags == ["x"]
        assert page.last_page == 1

    @pytest.mark.asyncio
    async def test_last_page_counts_only_matching_posts(self, unit_env):
        service = await unit_env.get(PostService)
        await seed(service, 12, tags=["x"])
        await seed(service, 5, tags=["y"])

        page = await service.list_page(PostFilter(tag="y"), 1)

        assert len(page.posts) == 5
        assert page.last_page == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page", [0, -1])
    async def test_page_below_one_makes_no_query(self, page):
        repository = RecordingPostRepository()
        service = PostService(post_repository=repository, settings=PostSettings())

        with pytest.raises(InvalidPageError):
            await service.list_page(PostFilter(), page)

        assert repository.calls == []


class TestPreviewBody:
    """Tests for PostService.preview_body."""

    def make_service(self) -> PostService:
        return PostService(
            post_repository=InMemoryPostRepository(), settings=PostSettings()
        )

    @pytest.mark.parametrize("length", [0, 1, 199, 200])
    def test_short_bodies_are_untouched(self, length):
        body = "a" * length
        assert self.make_service().preview_body(body) == body

    @pytest.mark.parametrize("length", [201, 500])
    def test_long_bodies_are_cut_to_200_plus_marker(self, length):
        body = "".join(str(i % 10) for i in range(length))

        preview = self.make_service().preview_body(body)

        assert preview == body[:200] + " ..."

    def test_preview_length_comes_from_settings(self):
        service = PostService(
            post_repository=InMemoryPostRepository(),
            settings=PostSettings(body_preview_length=5, body_preview_suffix="~"),
        )

        assert service.preview_body("abcdefgh") == "abcde~"


class TestUpdateAndDelete:
    """Tests for PostService.update_post and delete_post."""

    @pytest.mark.asyncio
    async def test_update_changes_only_supplied_fields(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(
            make_new_post(title="Old", body="Keep me", tags=["a"])
        )

        updated = await service.update_post(post.id, {"title": "New"})

        assert updated.title == "New"
        assert updated.body == "Keep me"
        assert updated.tags == ["a"]
        assert updated.user == post.user

    @pytest.mark.asyncio
    async def test_update_missing_post_returns_none(self, unit_env):
        service = await unit_env.get(PostService)

        assert await service.update_post(12345, {"title": "New"}) is None

    @pytest.mark.asyncio
    async def test_delete_is_silent_when_post_is_gone(self, unit_env):
        service = await unit_env.get(PostService)
        repository = await unit_env.get(PostRepository)
        post = await service.create_post(make_new_post())

        await service.delete_post(post.id)
        await service.delete_post(post.id)

        assert await repository.find_by_id(post.id) is None
