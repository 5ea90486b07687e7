"""Book schemas."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Owner ids arrive as numbers or numeric strings and are compared after coercion
OwnerRef = int | float | str | None


def _owner_field():
    return Field(None, validation_alias=AliasChoices("ownerId", "owner_id"))


class BookCreate(BaseModel):
    """Create a new book."""

    title: str | None = None
    author: str | None = None
    year: int | None = None
    owner_id: OwnerRef = _owner_field()


class BookUpdate(BaseModel):
    """Overwrite a book's fields; owner_id is the caller's claimed identity."""

    title: str | None = None
    author: str | None = None
    year: int | None = None
    owner_id: OwnerRef = _owner_field()


class BookDelete(BaseModel):
    """Delete request body."""

    owner_id: OwnerRef = _owner_field()


class BookResponse(BaseModel):
    """Book response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    author: str
    year: int | None
    owner_id: int | None = Field(
        None,
        validation_alias=AliasChoices("ownerId", "owner_id"),
        serialization_alias="ownerId",
    )


class MessageResponse(BaseModel):
    """Plain acknowledgement or error message."""

    message: str
