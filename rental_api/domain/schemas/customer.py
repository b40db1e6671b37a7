"""Pydantic schemas for Customer."""

from pydantic import Field

from rental_api.domain.schemas.common import CamelModel, PyObjectId


class CustomerWrite(CamelModel):
    name: str = Field(min_length=5, max_length=50)
    phone: str = Field(min_length=5, max_length=50)
    is_gold: bool = False


class CustomerRead(CamelModel):
    id: PyObjectId = Field(alias="_id")
    name: str
    phone: str
    is_gold: bool
