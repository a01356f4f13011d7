"""Blog schemas mirroring the Strapi article payload."""

from pydantic import BaseModel, ConfigDict, Field


class Article(BaseModel):
    """A blog article."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    document_id: str | None = Field(None, alias="documentId")
    title: str
    description: str | None = None
    content: str | None = None
    slug: str
    created_at: str | None = Field(None, alias="createdAt")
    updated_at: str | None = Field(None, alias="updatedAt")
    published_at: str | None = Field(None, alias="publishedAt")


class Pagination(BaseModel):
    page: int = 1
    page_size: int = Field(25, alias="pageSize")
    page_count: int = Field(0, alias="pageCount")
    total: int = 0

    model_config = ConfigDict(populate_by_name=True)


class ArticleMeta(BaseModel):
    pagination: Pagination = Field(default_factory=Pagination)


class ArticleList(BaseModel):
    """A page of articles."""

    data: list[Article] = Field(default_factory=list)
    meta: ArticleMeta = Field(default_factory=ArticleMeta)
