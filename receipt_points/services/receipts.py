# receipt_points/services/receipts.py
from __future__ import annotations
from typing import Sequence

from ..models import ReceiptFields
from ..rules.engine import score_receipt
from ..rules.ruleset import DEFAULT_RULES, Rule
from ..store.repository import ReceiptRepository
from ..utils.logging import logger

class ReceiptNotFound(LookupError):
    def __init__(self, receipt_id: str):
        super().__init__(f"Receipt not found: {receipt_id}")
        self.receipt_id = receipt_id

def submit_receipt(repository: ReceiptRepository, fields: ReceiptFields) -> str:
    receipt_id = repository.insert(fields)
    logger.info("Stored receipt %s (retailer=%r, items=%d)", receipt_id, fields.retailer, len(fields.items))
    return receipt_id

def get_points(repository: ReceiptRepository, receipt_id: str, rules: Sequence[Rule] = DEFAULT_RULES) -> int:
    """
    Score a stored receipt.
    Raises ReceiptNotFound for an unknown id; nothing is scored in that case.
    """
    receipt = repository.get(receipt_id)
    if receipt is None:
        logger.info("Receipt %s not found", receipt_id)
        raise ReceiptNotFound(receipt_id)
    points = score_receipt(receipt, rules)
    logger.info("Receipt %s scored %s", receipt_id, points)
    return points
