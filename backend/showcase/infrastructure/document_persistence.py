"""Document Persistence — whole-collection load/save keyed by store identifier.

Invariants:
    - load_all on an absent key returns [] (first use is not an error)
    - save_all replaces the collection inside one transaction (no partial writes)
    - A malformed payload fails soft: logged as a warning, loaded as []
    - lock(key) is re-entrant and shared by every caller holding this instance

Design Decisions:
    - One row per store (models/document.py) instead of one row per entity:
      the stores own their collections, persistence only moves documents
    - Payload is plain JSON text; the JSON encoder is the stdlib one, the same
      way the structured log formatter encodes records
    - Per-key RLock: single-writer per store even when sync routes run in
      worker threads; re-entrant so a store can call its own locked helpers
"""

import json
import logging
import threading
from contextlib import AbstractContextManager

from showcase.infrastructure.database import DatabaseSessionManager
from showcase.models.document import StoredDocument

logger = logging.getLogger(__name__)


class SqlDocumentPersistence:
    """DocumentPersistence over a SQLAlchemy documents table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def lock(self, store_key: str) -> AbstractContextManager:
        with self._locks_guard:
            return self._locks.setdefault(store_key, threading.RLock())

    def load_all(self, store_key: str) -> list[dict]:
        with self._db.session() as session:
            row = session.get(StoredDocument, store_key)
            raw = row.payload if row else None
        if raw is None:
            return []
        return _decode_payload(store_key, raw)

    def save_all(self, store_key: str, documents: list[dict]) -> None:
        payload = json.dumps(documents, ensure_ascii=False)
        with self._db.session() as session:
            row = session.get(StoredDocument, store_key)
            if row is None:
                session.add(StoredDocument(store_key=store_key, payload=payload))
            else:
                row.payload = payload
            session.commit()
        logger.debug(
            f"Saved {len(documents)} document(s)", extra={"store_key": store_key},
        )

    def exists(self, store_key: str) -> bool:
        with self._db.session() as session:
            return session.get(StoredDocument, store_key) is not None

    def delete(self, store_key: str) -> None:
        with self._db.session() as session:
            row = session.get(StoredDocument, store_key)
            if row is not None:
                session.delete(row)
                session.commit()


def _decode_payload(store_key: str, raw: str) -> list[dict]:
    """Parse a stored payload; anything but a JSON list of objects reads as []."""
    try:
        documents = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(
            "Corrupt document payload (not JSON), reading as empty",
            extra={"store_key": store_key},
        )
        return []
    if not isinstance(documents, list) or not all(
        isinstance(d, dict) for d in documents
    ):
        logger.warning(
            "Corrupt document payload (not a list of objects), reading as empty",
            extra={"store_key": store_key},
        )
        return []
    return documents
