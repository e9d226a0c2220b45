"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ArticleCreate(BaseModel):
    """Schema for creating a new article. Unknown fields are dropped."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    description: str | None = Field(None, max_length=300, examples=["A short summary"])
    body: str = Field(..., min_length=1, examples=["The full text of the article."])
    published: bool = False


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=300)
    body: str | None = Field(None, min_length=1)
    published: bool | None = None

    @field_validator("title", "body", "published")
    @classmethod
    def _not_null(cls, value):
        # omitted means "unchanged"; only description may be cleared with null
        if value is None:
            raise ValueError("may not be null")
        return value


class ArticleResponse(BaseModel):
    """Schema returned to the client, serialized with camelCase keys."""

    id: int
    title: str
    description: str | None
    body: str
    published: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
