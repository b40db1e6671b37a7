"""Base for documents stored in the Mongo collections."""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Dict

from bson import ObjectId
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def as_utc(value: datetime) -> datetime:
    """Mongo hands back naive UTC datetimes; make them aware."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class DocumentModel(BaseModel):
    """A pydantic model that maps 1:1 to a camelCase Mongo document."""

    collection_name: ClassVar[str]

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    id: ObjectId = Field(default_factory=ObjectId, alias="_id")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_document(cls, document: Dict[str, Any]):
        return cls.model_validate(document)


class Snapshot(BaseModel):
    """Copy of a referenced document embedded in another one."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    id: ObjectId = Field(alias="_id")
