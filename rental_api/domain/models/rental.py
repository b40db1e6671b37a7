"""Rental document — stored in the 'rentals' collection.

A rental embeds snapshots of the customer and the movie as they were when
it was created; later edits to either are not reflected here.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from rental_api.domain.models.base import DocumentModel, Snapshot, UtcDatetime, as_utc, utcnow

SECONDS_PER_DAY = 24 * 60 * 60


class CustomerSnapshot(Snapshot):
    name: str
    phone: str
    is_gold: bool = False


class MovieSnapshot(Snapshot):
    title: str
    daily_rental_rate: float


def rental_days(date_out: datetime, date_returned: datetime) -> int:
    """Whole days elapsed between checkout and return; a started day is not billed."""
    elapsed = as_utc(date_returned) - as_utc(date_out)
    return max(int(elapsed.total_seconds() // SECONDS_PER_DAY), 0)


def calculate_rental_fee(date_out: datetime, date_returned: datetime, daily_rental_rate: float) -> float:
    return rental_days(date_out, date_returned) * daily_rental_rate


class Rental(DocumentModel):
    collection_name: ClassVar[str] = "rentals"

    customer: CustomerSnapshot
    movie: MovieSnapshot
    date_out: UtcDatetime = Field(default_factory=utcnow)
    date_returned: Optional[UtcDatetime] = None
    rental_fee: Optional[float] = None

    @property
    def is_open(self) -> bool:
        return self.date_returned is None

    def returned(self, at: Optional[datetime] = None) -> "Rental":
        """Copy of this rental stamped as returned, with its fee computed."""
        date_returned = as_utc(at) if at else utcnow()
        return self.model_copy(
            update={
                "date_returned": date_returned,
                "rental_fee": calculate_rental_fee(
                    self.date_out, date_returned, self.movie.daily_rental_rate
                ),
            }
        )

    def __repr__(self):
        return f"<Rental {self.id} {self.customer.name} / {self.movie.title}>"
