"""Collection stores for user documents.

Two backends share one small interface (create / read_all / update / delete):
`SupabaseStore` talks to the hosted database, `JsonFileStore` keeps a JSON file
per collection for local development. Backend failures surface as `StoreError`.
"""
from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from typing import Any, Dict, List, Optional

from supabase import Client, create_client

from domain.models import now_iso
from services.config import Settings
from utils.ids import create_id_with_prefix

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Transport, permission or missing-document failure reported by a store."""


PROTECTED_KEYS = frozenset({'id', 'createdAt'})


def mutable_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in fields.items() if k not in PROTECTED_KEYS}


def check_ids(docs: List[Any], source: str) -> List[Dict[str, Any]]:
    """Reject documents the rest of the app cannot address."""
    for doc in docs:
        if not isinstance(doc, dict) or doc.get('id') in (None, ''):
            raise StoreError(f"Document without id in {source}")
    return docs


class UserStore:
    """Operations over one named collection."""

    collection: str

    def create(self, fields: Dict[str, Any]) -> str:
        raise NotImplementedError

    def read_all(self) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def update(self, doc_id: str, fields: Dict[str, Any]) -> None:
        raise NotImplementedError

    def delete(self, doc_id: str) -> None:
        raise NotImplementedError


class SupabaseStore(UserStore):
    def __init__(self, client: Client, collection: str = "users") -> None:
        self.client = client
        self.collection = collection

    def create(self, fields: Dict[str, Any]) -> str:
        payload = {**fields, "createdAt": now_iso()}
        try:
            res = self.client.table(self.collection).insert(payload).execute()
        except Exception as exc:
            raise StoreError(f"Insert into {self.collection} failed: {exc}") from exc
        rows = res.data or []
        if not rows or "id" not in rows[0]:
            # The row may exist already; a retry would duplicate it.
            logger.warning("Insert into %s returned no id, response rows: %r", self.collection, rows)
            raise StoreError(
                f"Insert into {self.collection} was sent but no id came back; "
                "reload the user list before retrying")
        doc_id = str(rows[0]["id"])
        logger.info("Created document %s in %s", doc_id, self.collection)
        return doc_id

    def read_all(self) -> List[Dict[str, Any]]:
        try:
            res = self.client.table(self.collection).select("*").execute()
        except Exception as exc:
            raise StoreError(f"Read of {self.collection} failed: {exc}") from exc
        rows = check_ids(res.data or [], self.collection)
        logger.debug("Read %d documents from %s", len(rows), self.collection)
        return rows

    def update(self, doc_id: str, fields: Dict[str, Any]) -> None:
        try:
            res = self.client.table(self.collection).update(mutable_fields(fields)).eq("id", doc_id).execute()
        except Exception as exc:
            raise StoreError(f"Update of {doc_id} failed: {exc}") from exc
        if not res.data:
            raise StoreError(f"No document to update: {doc_id}")
        logger.info("Updated document %s in %s", doc_id, self.collection)

    def delete(self, doc_id: str) -> None:
        try:
            res = self.client.table(self.collection).delete().eq("id", doc_id).execute()
        except Exception as exc:
            raise StoreError(f"Delete of {doc_id} failed: {exc}") from exc
        if not res.data:
            raise StoreError(f"No document to delete: {doc_id}")
        logger.info("Deleted document %s from %s", doc_id, self.collection)


class JsonFileStore(UserStore):
    """One JSON array per collection under `data_dir`, rewritten atomically."""

    def __init__(self, data_dir: str, collection: str = "users") -> None:
        self.data_dir = os.path.normpath(data_dir)
        self.collection = collection

    @property
    def path(self) -> str:
        return os.path.join(self.data_dir, f"{self.collection}.json")

    def _load(self) -> List[Dict[str, Any]]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StoreError(f"Cannot read {self.path}: {exc}") from exc
        if not isinstance(data, list):
            raise StoreError(f"Unexpected content in {self.path}")
        return check_ids(data, self.path)

    def _atomic_write(self, data: List[Dict[str, Any]]):
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            tmp_fd, tmp_path = tempfile.mkstemp(prefix='tmp_', suffix='.json', dir=self.data_dir)
            with os.fdopen(tmp_fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            shutil.move(tmp_path, self.path)
        except OSError as exc:
            raise StoreError(f"Cannot write {self.path}: {exc}") from exc

    def _index(self, data: List[Dict[str, Any]], doc_id: str) -> int:
        idx = next((i for i, d in enumerate(data) if d.get('id') == doc_id), None)
        if idx is None:
            raise StoreError(f"No document with id {doc_id}")
        return idx

    def create(self, fields: Dict[str, Any]) -> str:
        data = self._load()
        doc_id = create_id_with_prefix('u', {d.get('id') for d in data})
        data.append({**fields, 'id': doc_id, 'createdAt': now_iso()})
        self._atomic_write(data)
        logger.info("Created document %s in %s", doc_id, self.path)
        return doc_id

    def read_all(self) -> List[Dict[str, Any]]:
        return self._load()

    def update(self, doc_id: str, fields: Dict[str, Any]) -> None:
        data = self._load()
        idx = self._index(data, doc_id)
        data[idx].update(mutable_fields(fields))
        self._atomic_write(data)
        logger.info("Updated document %s in %s", doc_id, self.path)

    def delete(self, doc_id: str) -> None:
        data = self._load()
        del data[self._index(data, doc_id)]
        self._atomic_write(data)
        logger.info("Deleted document %s from %s", doc_id, self.path)


# Process-wide store, built once from settings
_STORE_SINGLETON: Optional[UserStore] = None


def build_store(settings: Settings) -> UserStore:
    if settings.STORE_BACKEND == "file":
        return JsonFileStore(settings.DATA_DIR, settings.USERS_COLLECTION)
    settings.require_supabase()
    client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    return SupabaseStore(client, settings.USERS_COLLECTION)


def get_store(settings: Settings) -> UserStore:
    global _STORE_SINGLETON
    if _STORE_SINGLETON is None:
        _STORE_SINGLETON = build_store(settings)
        logger.info("Using %s store for collection '%s'",
                    settings.STORE_BACKEND, settings.USERS_COLLECTION)
    return _STORE_SINGLETON


def reset_store():
    global _STORE_SINGLETON
    _STORE_SINGLETON = None
