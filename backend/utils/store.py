# utils/store.py
"""
In-memory record store

Stands in for the hosted backend the dashboard used for persistence.
One `Collection` per entity, each keyed by record id. Records are plain
dicts; callers get copies so nothing outside the store mutates it.
"""

import copy
import random
import string
import threading
from typing import Any, Callable, Dict, List, Optional

from utils.logger import logger


class RecordNotFoundError(KeyError):
    """Lookup of an id that is not in the collection"""

    def __init__(self, collection: str, record_id: str):
        super().__init__(f"{collection} record not found: {record_id}")
        self.collection = collection
        self.record_id = record_id


def generate_id(length: int = 9) -> str:
    """Short random id, same shape the dashboard used for appointment ids"""
    alphabet = string.ascii_lowercase + string.digits
    return "".join(random.choices(alphabet, k=length))


class Collection:
    """A named table of dict records"""

    def __init__(self, name: str):
        self.name = name
        self._records: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def insert(self, record: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            record_id = record.get("id")
            if not record_id:
                record_id = generate_id()
                while record_id in self._records:
                    record_id = generate_id()
            stored = {**record, "id": record_id}
            self._records[record_id] = stored
        logger.debug(f"💾 [{self.name}] insert {record_id}")
        return copy.deepcopy(stored)

    def get(self, record_id: str) -> Dict[str, Any]:
        record = self._records.get(record_id)
        if record is None:
            raise RecordNotFoundError(self.name, record_id)
        return copy.deepcopy(record)

    def find(self, record_id: str) -> Optional[Dict[str, Any]]:
        record = self._records.get(record_id)
        return copy.deepcopy(record) if record is not None else None

    def patch(self, record_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            if record_id not in self._records:
                raise RecordNotFoundError(self.name, record_id)
            self._records[record_id].update({k: v for k, v in updates.items() if k != "id"})
            patched = copy.deepcopy(self._records[record_id])
        logger.debug(f"✏️ [{self.name}] patch {record_id}: {list(updates)}")
        return patched

    def delete(self, record_id: str) -> None:
        with self._lock:
            if record_id not in self._records:
                raise RecordNotFoundError(self.name, record_id)
            del self._records[record_id]
        logger.info(f"🗑️ [{self.name}] delete {record_id}")

    def all(self) -> List[Dict[str, Any]]:
        return [copy.deepcopy(r) for r in self._records.values()]

    def filter(self, predicate: Callable[[Dict[str, Any]], bool]) -> List[Dict[str, Any]]:
        return [r for r in self.all() if predicate(r)]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        return len(self._records)


# Global collections (in-memory)
_collections: Dict[str, Collection] = {}


def get_collection(name: str) -> Collection:
    """Collection singleton per name"""
    if name not in _collections:
        _collections[name] = Collection(name)
    return _collections[name]


def reset_store() -> None:
    """Drop every record in every collection (used by tests)"""
    for collection in _collections.values():
        collection.clear()
