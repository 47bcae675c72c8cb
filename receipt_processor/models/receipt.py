# receipt_processor/models/receipt.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List


class Item(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    short_description: str = Field(alias="shortDescription")
    price: str


class Receipt(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    items: List[Item]
    total: str


class ProcessResponse(BaseModel):
    id: str


class PointsResponse(BaseModel):
    points: str
