"""
In-memory database

Collections are plain lists of dicts living in process memory. Nothing is
persisted; restarting the process (or calling ``db.reset()``) brings back the
seed catalog and empties everything else.

    from database import db, create_document, get_documents
"""

import copy
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from seed_data import BLOG_POSTS, PRODUCTS

logger = logging.getLogger(__name__)


def _matches(doc: Dict[str, Any], query: Dict[str, Any]) -> bool:
    return all(doc.get(k) == v for k, v in query.items())


class Collection:
    """A list-backed collection with an auto-incrementing integer id."""

    def __init__(self, name: str):
        self.name = name
        self._docs: List[Dict[str, Any]] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._docs)

    def insert_one(self, doc: Dict[str, Any]) -> int:
        if doc.get("id") is None:
            doc["id"] = self._next_id
        self._next_id = max(self._next_id, doc["id"]) + 1
        self._docs.append(doc)
        return doc["id"]

    def find_one(self, query: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
        query = query or {}
        for doc in self._docs:
            if _matches(doc, query):
                return doc
        return None

    def find(self, query: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        query = query or {}
        return [doc for doc in self._docs if _matches(doc, query)]

    def update_one(self, query: Dict[str, Any], values: Dict[str, Any]) -> bool:
        doc = self.find_one(query)
        if doc is None:
            return False
        doc.update(values)
        return True

    def clear(self) -> None:
        self._docs = []
        self._next_id = 1


class Database:
    def __init__(self, name: str = "animestore"):
        self.name = name
        self._collections: Dict[str, Collection] = {}
        self.reset()

    def __getitem__(self, name: str) -> Collection:
        if name not in self._collections:
            self._collections[name] = Collection(name)
        return self._collections[name]

    def list_collection_names(self) -> List[str]:
        return sorted(self._collections)

    def reset(self) -> None:
        """Drop every collection and reseed the catalog and blog."""
        self._collections = {}
        for product in PRODUCTS:
            self["product"].insert_one(copy.deepcopy(product))
        for post in BLOG_POSTS:
            self["blog_post"].insert_one(copy.deepcopy(post))
        logger.debug("Seeded %d products and %d blog posts", len(PRODUCTS), len(BLOG_POSTS))


db = Database()


def create_document(collection_name: str, data: Dict[str, Any]) -> int:
    """Insert a copy of ``data`` stamped with ``created_at`` and return its id."""
    doc = dict(data)
    doc.setdefault("created_at", datetime.now(timezone.utc))
    return db[collection_name].insert_one(doc)


def get_documents(collection_name: str, filter_dict: Optional[Dict[str, Any]] = None, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """Return deep copies of matching documents so callers cannot mutate the store."""
    docs = db[collection_name].find(filter_dict)
    if limit is not None:
        docs = docs[:limit]
    return [copy.deepcopy(d) for d in docs]
