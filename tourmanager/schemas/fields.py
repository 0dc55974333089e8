"""Custom field values attached to entities.

``fields`` is an open map of user-defined field names to tagged values. The
``type`` tag selects the value kind; no field name is special.
"""

from typing import Annotated, Dict, List, Literal, Union

from pydantic import BaseModel, Field


class StringFieldValue(BaseModel):
    type: Literal["string", "rich_text", "url", "color", "date", "date_time"]
    value: str


class NumberFieldValue(BaseModel):
    type: Literal["number"]
    value: Union[int, float]


class BooleanFieldValue(BaseModel):
    type: Literal["boolean"]
    value: bool


class SelectionFieldValue(BaseModel):
    type: Literal["select"]
    value: List[str] = Field(default_factory=list)


FieldValue = Annotated[
    Union[StringFieldValue, NumberFieldValue, BooleanFieldValue, SelectionFieldValue],
    Field(discriminator="type"),
]

FieldData = Dict[str, FieldValue]
