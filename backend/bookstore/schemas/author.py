"""Request and response bodies for /api/authors (camelCase on the wire)."""

from pydantic import ConfigDict, Field

from bookstore.schemas.common import CamelModel


class AuthorResponse(CamelModel):
    id: int = Field(description="Author identifier")
    first_name: str = Field(description="Author's given name")
    last_name: str = Field(description="Author's family name")


class AuthorFields(CamelModel):
    first_name: str = Field(min_length=1, max_length=100, description="Author's given name")
    last_name: str = Field(min_length=1, max_length=100, description="Author's family name")


class AuthorCreate(AuthorFields):
    model_config = ConfigDict(extra="forbid")


class AuthorUpdate(AuthorFields):
    id: int = Field(ge=1, description="Identifier of the author being replaced")
