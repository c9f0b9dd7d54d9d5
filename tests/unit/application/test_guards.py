"""Unit tests for the guard pipeline and the post guards."""

import pytest

from blog.application.guard import AuthenticateGuard, OwnershipGuard, ResolvePostGuard
from blog.application.pipeline import PostContext, run_guards
from blog.domain.error import (
    InvalidIdentifierError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
)
from blog.domain.service import JWTService, PostService
from tests.conftest import ALICE, BOB, make_new_post, token_for
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRunGuards:
    """Tests for run_guards."""

    @pytest.mark.asyncio
    async def test_each_guard_sees_the_previous_result(self):
        seen = []

        class Tag:
            def __init__(self, token):
                self.token = token

            async def __call__(self, context):
                seen.append(context.token)
                return context.model_copy(update={"token": self.token})

        result = await run_guards(PostContext(token="start"), [Tag("a"), Tag("b")])

        assert seen == ["start", "a"]
        assert result.token == "b"

    @pytest.mark.asyncio
    async def test_first_rejection_stops_the_pipeline(self):
        calls = []

        class Reject:
            async def __call__(self, context):
                calls.append("reject")
                raise NotAuthenticatedError("no")

        class Record:
            async def __call__(self, context):
                calls.append("record")
                return context

        with pytest.raises(NotAuthenticatedError):
            await run_guards(PostContext(), [Record(), Reject(), Record()])

        assert calls == ["record", "reject"]

    @pytest.mark.asyncio
    async def test_initial_context_is_not_mutated(self, unit_env):
        authenticate = await unit_env.get(AuthenticateGuard)
        context = PostContext(token=token_for(ALICE))

        result = await run_guards(context, [authenticate])

        assert context.user is None
        assert result.user == ALICE


class TestAuthenticateGuard:
    @pytest.mark.asyncio
    async def test_attaches_user(self, unit_env):
        guard = await unit_env.get(AuthenticateGuard)

        context = await guard(PostContext(token=token_for(BOB)))

        assert context.user == BOB

    @pytest.mark.asyncio
    async def test_rejects_missing_token(self, unit_env):
        guard = await unit_env.get(AuthenticateGuard)

        with pytest.raises(NotAuthenticatedError):
            await guard(PostContext())

    @pytest.mark.asyncio
    async def test_rejects_invalid_token(self, unit_env):
        guard = AuthenticateGuard(jwt_service=await unit_env.get(JWTService))

        with pytest.raises(NotAuthenticatedError):
            await guard(PostContext(token="garbage"))


class TestResolvePostGuard:
    @pytest.mark.asyncio
    async def test_attaches_post(self, unit_env):
        service = await unit_env.get(PostService)
        post = await service.create_post(make_new_post())
        guard = await unit_env.get(ResolvePostGuard)

        context = await guard(PostContext(raw_post_id=str(post.id)))

        assert context.post == post

    @pytest.mark.asyncio
    async def test_malformed_id_is_rejected_before_lookup(self, unit_env):
        guard = await unit_env.get(ResolvePostGuard)

        with pytest.raises(InvalidIdentifierError):
            await guard(PostContext(raw_post_id="abc"))

    @pytest.mark.asyncio
    async def test_absent_post_is_not_found(self, unit_env):
        guard = await unit_env.get(ResolvePostGuard)

        with pytest.raises(NotFoundError) as exc_info:
            await guard(PostContext(raw_post_id="999"))

        assert exc_info.value.resource == "Post"


class TestOwnershipGuard:
    @pytest.mark.asyncio
    async def test_owner_passes(self, unit_env):
        post = await (await unit_env.get(PostService)).create_post(
            make_new_post(user=ALICE)
        )
        context = PostContext(user=ALICE, post=post)

        assert await OwnershipGuard()(context) == context

    @pytest.mark.asyncio
    async def test_non_owner_is_rejected(self, unit_env):
        post = await (await unit_env.get(PostService)).create_post(
            make_new_post(user=ALICE)
        )

        with pytest.raises(NotAuthorizedError):
            await OwnershipGuard()(PostContext(user=BOB, post=post))

    @pytest.mark.asyncio
    async def test_requires_earlier_guards(self):
        with pytest.raises(RuntimeError):
            await OwnershipGuard()(PostContext())
