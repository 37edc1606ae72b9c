"""Book catalog schemas."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Book(BaseModel):
    """A book record as stored in the catalog."""

    title: str = Field(description="Book title")
    author: str = Field(description="Book author")
    year: Optional[str] = Field(default=None, description="Publication year")
    reviews: dict[str, str] = Field(
        default_factory=dict,
        description="Review text keyed by reviewer",
    )

    @field_validator("reviews", mode="before")
    @classmethod
    def _absent_reviews_are_empty(cls, value):
        return {} if value is None else value


class BookMatch(Book):
    """A book returned from an author or title search, paired with its ISBN."""

    id: str = Field(description="Catalog identifier (ISBN)")


class MessageResponse(BaseModel):
    """Error body returned for every failed lookup."""

    message: str
