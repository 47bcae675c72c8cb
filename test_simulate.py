# test_simulate.py
import random
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List

from receipt_processor.models.receipt import Receipt
from receipt_processor.services.processor import ReceiptProcessor
from receipt_processor.services.score import score
from receipt_processor.services.store import ResultStore
from test_score import CORNER_MARKET_RECEIPT, TARGET_RECEIPT

RETAILERS = ["Target", "Walgreens", "M&M Corner Market", "Costco #42", "7-Eleven"]


def random_receipt(rng: random.Random) -> Receipt:
    items = [
        {"shortDescription": "x" * rng.randint(0, 12), "price": f"{rng.randint(0, 5000) / 100:.2f}"}
        for _ in range(rng.randint(0, 6))
    ]
    return Receipt.model_validate({
        "retailer": rng.choice(RETAILERS),
        "purchaseDate": f"2022-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}",
        "purchaseTime": f"{rng.randint(0, 23):02d}:{rng.randint(0, 59):02d}",
        "items": items,
        "total": f"{rng.randint(0, 10000) / 100:.2f}",
    })


def simulate_customer(processor: ReceiptProcessor, seed: int) -> List[Dict]:
    rng = random.Random(seed)
    results = []
    for _ in range(20):
        receipt = random_receipt(rng)
        receipt_id = processor.process(receipt)
        results.append({
            "id": receipt_id,
            "expected": score(receipt),
            "points": processor.get_points(receipt_id),
        })
    return results


def test_concurrent_customers_all_see_their_points():
    processor = ReceiptProcessor(ResultStore())

    with ThreadPoolExecutor(max_workers=8) as executor:
        batches = list(executor.map(lambda seed: simulate_customer(processor, seed), range(25)))

    results = [r for batch in batches for r in batch]
    assert len({r["id"] for r in results}) == len(results) == 500
    assert len(processor.store) == 500
    for r in results:
        assert r["points"] == r["expected"]
        assert r["points"] >= 0
        # Stored values never change after the write
        assert processor.get_points(r["id"]) == r["expected"]


def test_random_receipts_are_never_negative_and_deterministic():
    rng = random.Random(1234)
    for _ in range(200):
        receipt = random_receipt(rng)
        assert score(receipt) >= 0
        assert score(receipt) == score(receipt)


def test_known_receipts_under_load():
    processor = ReceiptProcessor(ResultStore())
    receipts = [Receipt.model_validate(TARGET_RECEIPT), Receipt.model_validate(CORNER_MARKET_RECEIPT)] * 100

    with ThreadPoolExecutor(max_workers=8) as executor:
        ids = list(executor.map(processor.process, receipts))

    points = [processor.get_points(receipt_id) for receipt_id in ids]
    assert points == [28, 109] * 100
