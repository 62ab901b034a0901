import pytest

from mvc_blog.apps.blog import PostUpdate
from mvc_blog.core.exceptions import ValidationException

FIRST_RENDER = (
    "Post:\n"
    "Title: My First Post\n"
    "Content: This is my first post content.\n"
    "Author: Author\n"
)


@pytest.mark.parametrize("name", ["title", "content", "author"])
def test_accessors_delegate_to_post(controller, post, name):
    getattr(controller, f"set_post_{name}")("new value")
    assert getattr(post, name) == "new value"
    assert getattr(controller, f"get_post_{name}")() == "new value"


def test_update_view_renders_current_state(controller, sink):
    controller.update_view()
    assert sink.getvalue() == FIRST_RENDER


def test_update_view_is_idempotent(controller, sink):
    controller.update_view()
    controller.update_view()
    assert sink.getvalue() == FIRST_RENDER * 2


def test_single_field_change_reflected_on_next_render(controller, sink):
    controller.update_view()
    controller.set_post_title("My Updated Post")
    controller.update_view()
    second = sink.getvalue()[len(FIRST_RENDER):]
    assert second == FIRST_RENDER.replace("My First Post", "My Updated Post")


def test_setters_do_not_render(controller, sink):
    controller.set_post_author("Someone")
    assert sink.getvalue() == ""


def test_model_and_view_are_shared(controller, post, view):
    assert controller.model is post
    assert controller.view is view


def test_update_post_partial(controller):
    controller.update_post(PostUpdate(content="New body"))
    assert controller.get_post_title() == "My First Post"
    assert controller.get_post_content() == "New body"
    assert controller.get_post_author() == "Author"


def test_invalid_value_raises_validation_exception(controller):
    with pytest.raises(ValidationException) as exc_info:
        controller.set_post_title(None)
    assert exc_info.value.error_details[0].field == "title"
    assert controller.get_post_title() == "My First Post"


def test_unknown_field_rejected(controller):
    with pytest.raises(ValidationException):
        controller.set_field("published", "yes")
    with pytest.raises(ValidationException):
        controller.get_field("id")


def test_snapshot(controller):
    assert controller.snapshot() == {
        "title": "My First Post",
        "content": "This is my first post content.",
        "author": "Author",
    }
