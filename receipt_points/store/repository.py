# receipt_points/store/repository.py
import threading, uuid
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional

from ..models import Receipt, ReceiptFields

def new_receipt_id() -> str:
    return str(uuid.uuid4())

class ReceiptRepository(ABC):
    """Keyed holder of receipts: insert with a generated id, look up by id. No update or delete."""

    @abstractmethod
    def insert(self, fields: ReceiptFields) -> str: ...

    @abstractmethod
    def get(self, receipt_id: str) -> Optional[Receipt]: ...

    @abstractmethod
    def __len__(self) -> int: ...

class InMemoryReceiptRepository(ReceiptRepository):
    def __init__(self, id_factory: Callable[[], str] = new_receipt_id):
        self._id_factory = id_factory
        self._receipts: Dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def insert(self, fields: ReceiptFields) -> str:
        with self._lock:
            receipt_id = self._id_factory()
            # never overwrite an existing entry, draw again instead
            while receipt_id in self._receipts:
                receipt_id = self._id_factory()
            self._receipts[receipt_id] = Receipt.from_fields(receipt_id, fields)
        return receipt_id

    def get(self, receipt_id: str) -> Optional[Receipt]:
        # single dict lookup of an immutable value; sees either pre- or post-insert state
        return self._receipts.get(receipt_id)

    def __len__(self) -> int:
        return len(self._receipts)
