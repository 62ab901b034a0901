import typer
from typing import Optional

from mvc_blog.apps.blog import Post, PostCreate, get_view
from mvc_blog.core.config import settings
from mvc_blog.core.exceptions import AppException
from mvc_blog.core.logging import configure_logging
from mvc_blog.core.response.handlers import exception_response
from mvc_blog.core.services.field_service import FieldService
from mvc_blog.main import build_controller, run_demo

app = typer.Typer(help="CLI for the MVC blog demo.")


# ---------------------------
# Helpers
# ---------------------------
def fail(exc: AppException):
    """Print an error envelope and exit with status 1."""
    print(exception_response(exc).model_dump_json())
    raise typer.Exit(1)


@app.callback()
def setup():
    configure_logging(settings.get_log_level())


# ---------------------------
# Commands
# ---------------------------
@app.command()
def demo(
    view: Optional[str] = typer.Option(None, "--view", "-v", help="View name: console or json"),
    updated_title: Optional[str] = typer.Option(None, "--updated-title", help="Title set between the two renders"),
):
    """Render the post, update its title and render it again."""
    try:
        run_demo(view=get_view(view or settings.DEFAULT_VIEW), updated_title=updated_title)
    except AppException as e:
        fail(e)


@app.command()
def render(
    title: str = typer.Option(..., "--title", "-t"),
    content: str = typer.Option(..., "--content", "-c"),
    author: str = typer.Option(..., "--author", "-a"),
    view: Optional[str] = typer.Option(None, "--view", "-v", help="View name: console or json"),
):
    """Render a single post once."""
    try:
        post = Post.from_create(PostCreate(title=title, content=content, author=author))
        build_controller(post, get_view(view or settings.DEFAULT_VIEW)).update_view()
    except AppException as e:
        fail(e)


@app.command()
def fields():
    """Describe the fields of the Post model."""
    print(FieldService.get_model_definition(Post).model_dump_json(indent=2))


@app.command()
def version():
    """Show project name and version."""
    print(f"{settings.PROJECT_NAME} {settings.PROJECT_VERSION}")


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()
