"""Post model."""

from pydantic import BaseModel, ConfigDict, Field

from mvc_blog.apps.blog.schemas.post import PostCreate


class Post(BaseModel):
    """Post model class."""

    model_config = ConfigDict(validate_assignment=True, strict=True)

    title: str = Field(description="Post title")
    content: str = Field(description="Post body")
    author: str = Field(description="Post author")

    @classmethod
    def from_create(cls, create_data: PostCreate) -> "Post":
        return cls(**create_data.model_dump())
