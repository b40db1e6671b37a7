"""Pydantic schemas for Movie."""

from pydantic import Field

from rental_api.core.validation import ObjectIdStr
from rental_api.domain.schemas.common import CamelModel, PyObjectId
from rental_api.domain.schemas.genre import GenreRead


class MovieWrite(CamelModel):
    title: str = Field(min_length=5, max_length=255)
    genre_id: ObjectIdStr
    number_in_stock: int = Field(ge=0, le=255)
    daily_rental_rate: float = Field(ge=0, le=255)


class MovieRead(CamelModel):
    id: PyObjectId = Field(alias="_id")
    title: str
    genre: GenreRead
    number_in_stock: int
    daily_rental_rate: float
