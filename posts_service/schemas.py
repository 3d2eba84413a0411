import uuid
from typing import Optional

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    # Presence is checked in the route
    user_id: Optional[str] = None
    content: Optional[str] = None


class PostUpdate(BaseModel):
    content: Optional[str] = None


class Post(BaseModel):
    id: str
    user_id: Optional[str] = Field(default=None, description="Absent on records created by an update")
    content: Optional[str] = None


class ErrorOut(BaseModel):
    error: str


def new_post(user_id: str, content: str) -> Post:
    """Build a post with a freshly generated id."""
    return Post(id=str(uuid.uuid4()), user_id=user_id, content=content)
