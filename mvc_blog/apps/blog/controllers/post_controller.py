"""Post controller."""

from mvc_blog.apps.blog.models.post import Post
from mvc_blog.apps.blog.schemas.post import PostUpdate
from mvc_blog.apps.blog.views.post_view import PostView
from mvc_blog.core.bases.base_controller import BaseController


class PostController(BaseController[Post, PostView]):
    """Post controller class."""

    fields = ("title", "content", "author")

    def __init__(self, post: Post, view: PostView):
        super().__init__(post, view)

    def set_post_title(self, title: str) -> None:
        self.set_field("title", title)

    def get_post_title(self) -> str:
        return self.get_field("title")

    def set_post_content(self, content: str) -> None:
        self.set_field("content", content)

    def get_post_content(self) -> str:
        return self.get_field("content")

    def set_post_author(self, author: str) -> None:
        self.set_field("author", author)

    def get_post_author(self) -> str:
        return self.get_field("author")

    def update_post(self, update_data: PostUpdate) -> None:
        """Apply a partial update; fields left as None keep their value."""
        self.apply_update(update_data)

    def update_view(self) -> None:
        """Push the post's current state to the view."""
        self.logger.debug("Rendering post with %s", self._view.__class__.__name__)
        self._view.print_post_details(
            self._model.title, self._model.content, self._model.author
        )
