import io

import pytest

from mvc_blog.apps.blog import Post, PostController, PostView


@pytest.fixture
def post():
    return Post(title="My First Post", content="This is my first post content.", author="Author")


@pytest.fixture
def sink():
    return io.StringIO()


@pytest.fixture
def view(sink):
    return PostView(sink=sink)


@pytest.fixture
def controller(post, view):
    return PostController(post, view)
