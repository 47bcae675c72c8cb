# receipt_processor/services/processor.py

from typing import Callable, Optional
from uuid import uuid4
from receipt_processor.models.receipt import Receipt
from receipt_processor.services.score import score
from receipt_processor.services.store import ResultStore
import logging

logger = logging.getLogger("receipt_processor.processor")


def generate_receipt_id() -> str:
    return str(uuid4())


class ReceiptProcessor:
    def __init__(self, store: ResultStore, id_factory: Callable[[], str] = generate_receipt_id):
        self.store = store
        self.id_factory = id_factory

    def process(self, receipt: Receipt) -> str:
        """Score a receipt and store the result under a fresh id"""
        points = score(receipt)
        receipt_id = self.id_factory()
        self.store.put(receipt_id, points)
        logger.info(f"Processed receipt {receipt_id} from {receipt.retailer!r}: {points} points")
        return receipt_id

    def get_points(self, receipt_id: str) -> Optional[int]:
        points = self.store.get(receipt_id)
        if points is None:
            logger.debug(f"No points stored for receipt {receipt_id}")
        return points
