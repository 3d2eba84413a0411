from typing import Any, Dict, List, Optional

import boto3
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError as SchemaError

from . import config
from .errors import StoreUnavailable
from .schemas import Post


_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def create_dynamodb_client(
    region: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    max_pool_connections: Optional[int] = None,
):
    """
    Build a low-level DynamoDB client connected to DynamoDB Local or AWS.

    The client (unlike a boto3 resource) is safe to share between the
    worker threads FastAPI runs sync handlers on. Configure with:
      - DYNAMODB_URL (e.g., http://127.0.0.1:8000 for local)
      - AWS_REGION (default: us-east-1)
      - AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY (optional)
      - DYNAMODB_MAX_POOL_CONNECTIONS (default: 10)
    """
    session = boto3.session.Session()
    return session.client(
        "dynamodb",
        region_name=region or config.AWS_REGION,
        endpoint_url=endpoint_url or config.DYNAMODB_URL,
        aws_access_key_id=config.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=config.AWS_SECRET_ACCESS_KEY,
        config=Config(max_pool_connections=max_pool_connections or config.MAX_POOL_CONNECTIONS),
    )


def serialize_item(item: Dict[str, Any]) -> Dict[str, Any]:
    return {key: _serializer.serialize(value) for key, value in item.items()}


def deserialize_item(item: Dict[str, Any]) -> Dict[str, Any]:
    return {key: _deserializer.deserialize(value) for key, value in item.items()}


def item_to_post(item: Dict[str, Any]) -> Post:
    """Build a Post from a stored item; non-string attributes (e.g. N user_id) become strings."""
    values = deserialize_item(item)
    return Post(**{
        field: str(values[field])
        for field in ("id", "user_id", "content")
        if values.get(field) is not None
    })


class PostStore:
    """
    Posts table access. One instance (and one client) per process.

    Table schema:
      - id (HASH, S)
    Item attributes: id, user_id, content
    """

    def __init__(self, client, table_name: str = config.POSTS_TABLE):
        self.client = client
        self.table_name = table_name

    @classmethod
    def from_env(cls) -> "PostStore":
        return cls(create_dynamodb_client(), config.POSTS_TABLE)

    def _key(self, post_id: str) -> Dict[str, Any]:
        return {"id": _serializer.serialize(post_id)}

    def scan(self) -> List[Post]:
        """Read every item, following LastEvaluatedKey until the table is exhausted."""
        try:
            paginator = self.client.get_paginator("scan")
            items = []
            for page in paginator.paginate(TableName=self.table_name):
                items.extend(page.get("Items", []))
        except (BotoCoreError, ClientError) as e:
            raise StoreUnavailable("Could not fetch posts") from e
        try:
            return [item_to_post(item) for item in items]
        except SchemaError as e:
            raise StoreUnavailable("Could not fetch posts") from e

    def put(self, post: Post) -> Post:
        # Unconditional: the id is freshly generated, so no attribute_not_exists guard
        try:
            self.client.put_item(
                TableName=self.table_name,
                Item=serialize_item(post.model_dump(exclude_none=True)),
            )
        except (BotoCoreError, ClientError) as e:
            raise StoreUnavailable("Could not create post") from e
        return post

    def update_content(self, post_id: str, content: str) -> Post:
        """
        Set ``content`` on the item keyed by ``post_id`` and return the item as stored.

        There is no existence condition: an unknown id yields a new item
        holding only ``id`` and ``content``.
        """
        try:
            resp = self.client.update_item(
                TableName=self.table_name,
                Key=self._key(post_id),
                UpdateExpression="SET #content = :content",
                ExpressionAttributeNames={"#content": "content"},
                ExpressionAttributeValues={":content": _serializer.serialize(content)},
                ReturnValues="ALL_NEW",
            )
        except (BotoCoreError, ClientError) as e:
            raise StoreUnavailable("Could not update post") from e
        try:
            return item_to_post(resp["Attributes"])
        except SchemaError as e:
            raise StoreUnavailable("Could not update post") from e

    def delete(self, post_id: str) -> None:
        """Delete the item keyed by ``post_id``; a missing item is not an error."""
        try:
            self.client.delete_item(TableName=self.table_name, Key=self._key(post_id))
        except (BotoCoreError, ClientError) as e:
            raise StoreUnavailable("Could not delete post") from e
