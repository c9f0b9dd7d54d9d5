"""Unit tests for DeletePostUseCase."""

import pytest

from blog.application.pipeline import PostContext
from blog.application.usecase.post import DeletePostUseCase
from blog.domain.repository import PostRepository
from blog.domain.service import PostService
from tests.conftest import ALICE, make_new_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeletePostUseCase:
    @pytest.mark.asyncio
    async def test_deletes_the_guarded_post(self, unit_env):
        service = await unit_env.get(PostService)
        repository = await unit_env.get(PostRepository)
        post = await service.create_post(make_new_post(user=ALICE))
        use_case = await unit_env.get(DeletePostUseCase)

        await use_case.execute(PostContext(user=ALICE, post=post))

        assert await repository.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_post_already_removed_still_succeeds(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(make_new_post(user=ALICE))
        use_case = await unit_env.get(DeletePostUseCase)
        context = PostContext(user=ALICE, post=post)

        await service.delete_post(post.id)

        # No error although nothing matched
        await use_case.execute(context)

    @pytest.mark.asyncio
    async def test_other_posts_are_kept(self, unit_env):
        service = await unit_env.get(PostService)
        repository = await unit_env.get(PostRepository)
        doomed = await service.create_post(make_new_post(user=ALICE))
        kept = await service.create_post(make_new_post(user=ALICE))
        use_case = await unit_env.get(DeletePostUseCase)

        await use_case.execute(PostContext(user=ALICE, post=doomed))

        assert await repository.find_by_id(kept.id) == kept
