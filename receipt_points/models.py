from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

# ----------------------------
# Line items
# ----------------------------
@dataclass(frozen=True)
class ReceiptItem:
    short_description: str = ""
    price: str = ""           # decimal amount, kept as text

# ----------------------------
# Caller-supplied receipt fields (no id yet)
# ----------------------------
@dataclass(frozen=True)
class ReceiptFields:
    retailer: str = ""
    purchase_date: str = ""   # YYYY-MM-DD
    purchase_time: str = ""   # HH:MM, 24h
    items: Tuple[ReceiptItem, ...] = field(default_factory=tuple)
    total: str = ""           # decimal amount, kept as text

# ----------------------------
# Stored receipt
# ----------------------------
@dataclass(frozen=True)
class Receipt(ReceiptFields):
    id: str = ""

    @classmethod
    def from_fields(cls, receipt_id: str, fields: ReceiptFields) -> Receipt:
        return cls(
            id=receipt_id,
            retailer=fields.retailer,
            purchase_date=fields.purchase_date,
            purchase_time=fields.purchase_time,
            items=tuple(fields.items),
            total=fields.total,
        )
