from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# No type checks: prices, quantities and ratings are stored as submitted.


class Toy(BaseModel):
    model_config = ConfigDict(extra="allow")

    toy_name: Optional[Any] = None
    seller_name: Optional[Any] = None
    seller_email: Optional[Any] = None
    sub_category: Optional[Any] = None
    price: Optional[Any] = None
    quantity: Optional[Any] = None
    rating: Optional[Any] = None
    review: Optional[Any] = None
    description: Optional[Any] = None
    toy_img: Optional[Any] = None


class ToyUpdate(BaseModel):
    """The fields an owner may edit from the "my toys" page."""

    toy_name: Optional[Any] = None
    toy_img: Optional[Any] = None
    price: Optional[Any] = None
    sub_category: Optional[Any] = None
    quantity: Optional[Any] = None
    rating: Optional[Any] = None
    review: Optional[Any] = None
    description: Optional[Any] = None


class WriteResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acknowledged: bool


class InsertResult(WriteResult):
    inserted_id: Optional[str] = None


class UpdateResult(WriteResult):
    matched_count: int
    modified_count: int
    upserted_count: int
    upserted_id: Optional[str] = None


class DeleteResult(WriteResult):
    deleted_count: int
