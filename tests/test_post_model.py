import pytest
from pydantic import ValidationError

from mvc_blog.apps.blog import Post, PostCreate


@pytest.mark.parametrize("field", ["title", "content", "author"])
@pytest.mark.parametrize("value", ["", "plain", "  padded  ", "line\nbreak", "ünïcødé"])
def test_field_round_trip(post, field, value):
    setattr(post, field, value)
    assert getattr(post, field) == value


def test_setting_one_field_leaves_others(post):
    post.title = "Other"
    assert post.content == "This is my first post content."
    assert post.author == "Author"


def test_non_text_assignment_rejected_and_value_kept(post):
    with pytest.raises(ValidationError):
        post.title = 42
    assert post.title == "My First Post"


def test_from_create():
    post = Post.from_create(PostCreate(title="T", content="C", author="A"))
    assert (post.title, post.content, post.author) == ("T", "C", "A")
