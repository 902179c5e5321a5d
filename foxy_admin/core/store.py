# File: foxy_admin/core/store.py
from __future__ import annotations

import json
import logging
import os
import re
import threading
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger("foxy_admin.store")

PRODUCTS = "products"
ORDERS = "orders"
COMPLETED_ORDERS = "completed_orders"
BADGE_QUOTES = "badge_quotes"

_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


class StoreError(RuntimeError):
    """A collection file exists but cannot be read or written."""


def is_valid_id(doc_id: str) -> bool:
    return bool(_ID_RE.match(doc_id or ""))


class JsonStore:
    """
    One JSON file per collection under `data_dir`, each holding a list of
    documents keyed by "id". Writes go through a temp file and os.replace.
    """

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir)
        self._lock = threading.RLock()

    def _path(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def _read(self, collection: str) -> List[Dict[str, Any]]:
        path = self._path(collection)
        if not path.exists():
            return []
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StoreError(f"cannot read {path.name}: {e}") from e
        if not isinstance(data, list):
            raise StoreError(f"{path.name} must hold a JSON list")
        return data

    def _write(self, collection: str, docs: List[Dict[str, Any]]) -> None:
        path = self._path(collection)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(".json.tmp")
            tmp.write_text(json.dumps(docs, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            raise StoreError(f"cannot write {path.name}: {e}") from e

    def all(self, collection: str) -> List[Dict[str, Any]]:
        with self._lock:
            return self._read(collection)

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            for doc in self._read(collection):
                if doc.get("id") == doc_id:
                    return doc
        return None

    def insert(self, collection: str, doc: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            docs = self._read(collection)
            new = {**doc, "id": doc.get("id") or uuid.uuid4().hex}
            docs.append(new)
            self._write(collection, docs)
        logger.info("Inserted %s into %s", new["id"], collection)
        return new

    def update(self, collection: str, doc_id: str, fields: Dict[str, Any]) -> bool:
        with self._lock:
            docs = self._read(collection)
            for doc in docs:
                if doc.get("id") == doc_id:
                    doc.update(fields)
                    self._write(collection, docs)
                    return True
        return False

    def delete(self, collection: str, doc_id: str) -> bool:
        with self._lock:
            docs = self._read(collection)
            kept = [d for d in docs if d.get("id") != doc_id]
            if len(kept) == len(docs):
                return False
            self._write(collection, kept)
        logger.info("Deleted %s from %s", doc_id, collection)
        return True
