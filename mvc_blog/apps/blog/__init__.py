"""Blog app."""

from .controllers.post_controller import PostController
from .models.post import Post
from .schemas.post import PostCreate, PostRead, PostUpdate
from .views.post_view import JsonPostView, PostView, get_view

__all__ = [
    "Post",
    "PostCreate",
    "PostRead",
    "PostUpdate",
    "PostView",
    "JsonPostView",
    "PostController",
    "get_view",
]
