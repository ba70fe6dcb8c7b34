
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from .models import ReceiptFields, ReceiptItem

# Wire format uses camelCase; every field may be omitted or null
class ReceiptItemInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_description: Optional[str] = Field(default="", alias="shortDescription")
    price: Optional[str] = ""

    @field_validator("short_description", "price", mode="after")
    @classmethod
    def _none_to_empty(cls, v):
        return v or ""

class ReceiptInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    retailer: Optional[str] = ""
    purchase_date: Optional[str] = Field(default="", alias="purchaseDate")
    purchase_time: Optional[str] = Field(default="", alias="purchaseTime")
    items: Optional[List[ReceiptItemInput]] = Field(default_factory=list)
    total: Optional[str] = ""

    @field_validator("retailer", "purchase_date", "purchase_time", "total", mode="after")
    @classmethod
    def _none_to_empty(cls, v):
        return v or ""

    @field_validator("items", mode="after")
    @classmethod
    def _none_to_list(cls, v):
        return v or []

    def to_fields(self) -> ReceiptFields:
        return ReceiptFields(
            retailer=self.retailer,
            purchase_date=self.purchase_date,
            purchase_time=self.purchase_time,
            items=tuple(ReceiptItem(short_description=i.short_description, price=i.price)
                        for i in self.items),
            total=self.total,
        )

class ProcessResponse(BaseModel):
    id: str

class PointsResponse(BaseModel):
    points: int
