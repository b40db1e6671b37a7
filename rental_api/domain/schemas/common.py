"""Shared bits for the API schemas."""

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

# ObjectId rendered as its hex string in responses
PyObjectId = Annotated[str, BeforeValidator(str)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
