"""Pydantic schemas for Genre."""

from pydantic import Field

from rental_api.domain.schemas.common import CamelModel, PyObjectId


class GenreWrite(CamelModel):
    name: str = Field(min_length=5, max_length=50)


class GenreRead(CamelModel):
    id: PyObjectId = Field(alias="_id")
    name: str
