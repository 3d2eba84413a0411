"""
Posts Service

CRUD over a single DynamoDB table of posts. Each route maps to exactly one
store call; the store is built once at startup and shared by all requests.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, FastAPI, Depends, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .db import PostStore
from .errors import PostServiceError, StoreUnavailable, ValidationError
from .schemas import ErrorOut, Post, PostCreate, PostUpdate, new_post


logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorOut},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorOut},
}


def get_post_store(request: Request) -> PostStore:
    return request.app.state.store


router = APIRouter(responses=ERROR_RESPONSES)


@router.get("/posts", response_model=List[Post], response_model_exclude_none=True)
def list_posts(store: PostStore = Depends(get_post_store)):
    return store.scan()


@router.post(
    "/posts",
    response_model=Post,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_post(data: PostCreate, store: PostStore = Depends(get_post_store)):
    if not data.content or not data.user_id:
        raise ValidationError("content and user_id are required")
    post = store.put(new_post(data.user_id, data.content))
    logger.info("Created post %s for user %s", post.id, post.user_id)
    return post


@router.put("/posts/{post_id}", response_model=Post, response_model_exclude_none=True)
def update_post(post_id: str, data: PostUpdate, store: PostStore = Depends(get_post_store)):
    if not data.content:
        raise ValidationError("Content is required")
    post = store.update_content(post_id, data.content)
    logger.info("Updated post %s", post_id)
    return post


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: str, store: PostStore = Depends(get_post_store)):
    # Idempotent: deleting an unknown id still answers 204
    store.delete(post_id)
    logger.info("Deleted post %s", post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/health")
def health_check():
    """Health check endpoint; does not contact DynamoDB."""
    return {"status": "ok", "service": "posts"}


def create_app(store: Optional[PostStore] = None) -> FastAPI:
    """
    Build the application around ``store``.

    When no store is given, one is built from the environment on startup so
    importing this module never touches AWS.
    """
    app = FastAPI(title="Posts Service")
    app.state.store = store

    @app.on_event("startup")
    async def on_startup():
        if app.state.store is None:
            app.state.store = PostStore.from_env()
            logger.info("Using DynamoDB table %s", app.state.store.table_name)

    @app.exception_handler(PostServiceError)
    async def post_service_error_handler(request: Request, exc: PostServiceError):
        if isinstance(exc, StoreUnavailable):
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("%s %s failed", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )

    app.include_router(router)
    return app


app = create_app()
