"""Pydantic schemas for Rental and Return."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from rental_api.core.validation import ObjectIdStr
from rental_api.domain.schemas.common import CamelModel, PyObjectId


class RentalRequest(CamelModel):
    """Body of both POST /api/rentals and POST /api/returns."""
    customer_id: ObjectIdStr
    movie_id: ObjectIdStr


class RentalCustomerRead(CamelModel):
    id: PyObjectId = Field(alias="_id")
    name: str
    phone: str
    is_gold: bool = False


class RentalMovieRead(CamelModel):
    id: PyObjectId = Field(alias="_id")
    title: str
    daily_rental_rate: float


class RentalRead(CamelModel):
    id: PyObjectId = Field(alias="_id")
    customer: RentalCustomerRead
    movie: RentalMovieRead
    date_out: datetime
    date_returned: Optional[datetime] = None
    rental_fee: Optional[float] = None
