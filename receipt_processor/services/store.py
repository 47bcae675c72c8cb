# receipt_processor/services/store.py

from typing import Dict, Optional
import threading


class ResultStore:
    """
    Identifier -> points mapping shared by all request handlers.
    A single lock guards the dict; it is held only for one dict operation.
    """

    def __init__(self):
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        # Ids are fresh uuid4 values, so a collision just overwrites
        with self._lock:
            self._points[receipt_id] = points

    def get(self, receipt_id: str) -> Optional[int]:
        """Return the stored points, or None if the id is unknown"""
        with self._lock:
            return self._points.get(receipt_id)

    def __contains__(self, receipt_id: str) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
