"""Post views."""

from typing import Dict, Optional, TextIO, Type

from mvc_blog.apps.blog.schemas.post import PostRead
from mvc_blog.core.bases.base_view import BaseView
from mvc_blog.core.exceptions import ValidationException
from mvc_blog.core.response.handlers import success_response
from mvc_blog.core.response.schemas import ErrorDetail


class PostView(BaseView):
    """Console view printing a post as labelled lines."""

    def print_post_details(self, title: str, content: str, author: str) -> None:
        self.write_lines(
            "Post:",
            f"Title: {title}",
            f"Content: {content}",
            f"Author: {author}",
        )


class JsonPostView(PostView):
    """View printing a post as a JSON success envelope, one document per line."""

    def print_post_details(self, title: str, content: str, author: str) -> None:
        response = success_response(
            data=PostRead(title=title, content=content, author=author),
            message="Post details",
        )
        self.write_lines(response.model_dump_json())


VIEWS: Dict[str, Type[PostView]] = {
    "console": PostView,
    "json": JsonPostView,
}


def get_view(name: str, sink: Optional[TextIO] = None) -> PostView:
    """Build a post view by name."""
    view_class = VIEWS.get(name.lower())
    if view_class is None:
        raise ValidationException(
            f"Unknown view '{name}'",
            [
                ErrorDetail(
                    field="view",
                    code="UNKNOWN_VIEW",
                    message=f"Expected one of: {', '.join(VIEWS)}",
                    target=name,
                )
            ],
        )
    return view_class(sink=sink)
