"""Entry point wiring a post, a view and a controller together."""

from typing import Optional

from mvc_blog.apps.blog import Post, PostController, PostView, get_view
from mvc_blog.core.config import settings
from mvc_blog.core.logging import configure_logging, get_logger

logger = get_logger("main")


def build_controller(
    post: Optional[Post] = None, view: Optional[PostView] = None
) -> PostController:
    """Build a controller, filling missing parts from settings."""
    if post is None:
        post = Post(
            title=settings.POST_TITLE,
            content=settings.POST_CONTENT,
            author=settings.POST_AUTHOR,
        )
    if view is None:
        view = get_view(settings.DEFAULT_VIEW)
    return PostController(post, view)


def run_demo(
    view: Optional[PostView] = None, updated_title: Optional[str] = None
) -> PostController:
    """Render the post, change its title, render it again."""
    controller = build_controller(view=view)
    controller.update_view()

    if updated_title is None:
        updated_title = settings.UPDATED_TITLE
    controller.set_post_title(updated_title)
    controller.update_view()
    logger.info("Demo finished")
    return controller


def main() -> None:
    configure_logging(settings.get_log_level())
    run_demo()


if __name__ == "__main__":
    main()
