# soilsense/app/stores/memory.py
import copy
import threading
from typing import Any, Dict, Iterable, List, Optional

from soilsense.core.errors import DuplicateRecordError

# -----------------------------
# In-memory stand-ins for the document database and the user collection.
# Both are swapped out through app.di when a real backend is wired in.
# -----------------------------

class InMemoryDocumentStore:
    def __init__(self, key_field: str = "id", seed: Optional[Iterable[Dict[str, Any]]] = None):
        self._key_field = key_field
        self._docs: List[Dict[str, Any]] = []
        self._lock = threading.Lock()
        for doc in seed or ():
            self._insert(doc)

    def _insert(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        key = doc.get(self._key_field)
        with self._lock:
            if key is not None and any(d.get(self._key_field) == key for d in self._docs):
                raise DuplicateRecordError(f"{self._key_field} '{key}' already exists")
            saved = copy.deepcopy(doc)
            self._docs.append(saved)
            return copy.deepcopy(saved)

    async def find_all(self) -> List[Dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._docs)

    async def insert(self, doc: Dict[str, Any]) -> Dict[str, Any]:
        return self._insert(doc)

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)


class InMemoryUserDirectory:
    def __init__(self, users: Optional[Iterable[Dict[str, Any]]] = None):
        self._users = [copy.deepcopy(u) for u in users or ()]

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        email = (email or "").lower().strip()
        for u in self._users:
            if (u.get("email") or "").lower().strip() == email:
                return copy.deepcopy(u)
        return None

    async def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        for u in self._users:
            if str(u.get("id") or u.get("_id")) == str(user_id):
                return copy.deepcopy(u)
        return None
