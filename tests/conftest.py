from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from posts_service.app import create_app
from posts_service.errors import StoreUnavailable
from posts_service.schemas import Post


class InMemoryPostStore:
    """Dict-backed stand-in for PostStore with the same upsert/no-op semantics."""

    table_name = "post"

    def __init__(self):
        self.items: Dict[str, dict] = {}
        self.calls: List[str] = []

    def scan(self) -> List[Post]:
        self.calls.append("scan")
        return [Post(**item) for item in self.items.values()]

    def put(self, post: Post) -> Post:
        self.calls.append("put")
        self.items[post.id] = post.model_dump(exclude_none=True)
        return post

    def update_content(self, post_id: str, content: str) -> Post:
        self.calls.append("update")
        item = self.items.setdefault(post_id, {"id": post_id})
        item["content"] = content
        return Post(**item)

    def delete(self, post_id: str) -> None:
        self.calls.append("delete")
        self.items.pop(post_id, None)


class UnavailablePostStore:
    table_name = "post"

    def scan(self):
        raise StoreUnavailable("Could not fetch posts")

    def put(self, post):
        raise StoreUnavailable("Could not create post")

    def update_content(self, post_id, content):
        raise StoreUnavailable("Could not update post")

    def delete(self, post_id):
        raise StoreUnavailable("Could not delete post")


@pytest.fixture
def store():
    return InMemoryPostStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))


@pytest.fixture
def failing_client():
    return TestClient(create_app(store=UnavailablePostStore()))
