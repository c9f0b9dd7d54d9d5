"""Test configuration and fixtures."""

import logfire
import pytest
from fastapi.testclient import TestClient

from blog.config import AuthSettings
from blog.domain.model import Author, NewPost
from blog.domain.value import UserId
from blog.interface.api.app import create_app
from blog.util.jwt import create_token
from tests.di import build_test_container

ALICE = Author(id=UserId("user-alice"), username="alice")
BOB = Author(id=UserId("user-bob"), username="bob")


def make_new_post(
    title: str = "Test Post",
    body: str = "Some content",
    tags: list[str] | None = None,
    user: Author = ALICE,
) -> NewPost:
    """Helper for building posts to store in tests."""
    return NewPost(
        title=title,
        body=body,
        tags=["python"] if tags is None else tags,
        user=user,
    )


def token_for(author: Author) -> str:
    """Issue an access token signed with the default settings."""
    return create_token(author.id, author.username, AuthSettings())


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Keep spans local and off the console during tests."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def client():
    """Test client for the full app backed by in-memory persistence."""
    app = create_app(build_test_container())
    with TestClient(app) as test_client:
        yield test_client
