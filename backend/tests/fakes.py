"""In-memory stand-ins for the parts of the Motor API the repositories use."""

import asyncio
from copy import deepcopy
from types import SimpleNamespace
from typing import Any

from bson import ObjectId
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError


class FakeCursor:
    def __init__(self, docs: list[dict]):
        self._docs = docs

    async def to_list(self, length: int | None = None) -> list[dict]:
        docs = self._docs if not length else self._docs[:length]
        return [deepcopy(doc) for doc in docs]


class FakeCollection:
    """Equality-filter collection that enforces unique indexes like MongoDB."""

    def __init__(self, name: str):
        self.name = name
        self.docs: list[dict] = []
        self.indexes: dict[str, dict[str, Any]] = {}

    async def create_index(self, keys, unique: bool = False, name: str | None = None) -> str:
        name = name or "_".join(f"{field}_{direction}" for field, direction in keys)
        self.indexes[name] = {"keys": list(keys), "unique": unique}
        return name

    @staticmethod
    def _matches(doc: dict, filter: dict) -> bool:
        return all(doc.get(key) == value for key, value in filter.items())

    def _check_unique(self, doc: dict, ignore_id: ObjectId | None = None) -> None:
        for index in self.indexes.values():
            if not index["unique"]:
                continue
            fields = [field for field, _ in index["keys"]]
            for other in self.docs:
                if other["_id"] == ignore_id:
                    continue
                if all(other.get(f) == doc.get(f) for f in fields):
                    raise DuplicateKeyError(f"E11000 duplicate key error collection: {self.name}", 11000)

    async def insert_one(self, doc: dict):
        doc.setdefault("_id", ObjectId())
        self._check_unique(doc)
        self.docs.append(deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def find_one(self, filter: dict) -> dict | None:
        for doc in self.docs:
            if self._matches(doc, filter):
                return deepcopy(doc)
        return None

    def find(self, filter: dict | None = None, skip: int = 0, limit: int = 0) -> FakeCursor:
        matched = [doc for doc in self.docs if self._matches(doc, filter or {})][skip:]
        return FakeCursor(matched[:limit] if limit else matched)

    async def count_documents(self, filter: dict, limit: int | None = None) -> int:
        count = sum(1 for doc in self.docs if self._matches(doc, filter))
        return min(count, limit) if limit else count

    async def replace_one(self, filter: dict, replacement: dict):
        for i, doc in enumerate(self.docs):
            if self._matches(doc, filter):
                new_doc = {**deepcopy(replacement), "_id": doc["_id"]}
                self._check_unique(new_doc, ignore_id=doc["_id"])
                self.docs[i] = new_doc
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, filter: dict):
        for i, doc in enumerate(self.docs):
            if self._matches(doc, filter):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase:
    def __init__(self, name: str = "evently"):
        self.name = name
        self.collections: dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


class FakeAdmin:
    def __init__(self, client: "FakeMongoClient"):
        self._client = client

    async def command(self, name: str) -> dict:
        # Yield so concurrent acquirers overlap with the in-flight ping
        await asyncio.sleep(0.01)
        if self._client.unreachable:
            raise ServerSelectionTimeoutError("No servers found yet")
        self._client.commands.append(name)
        return {"ok": 1.0}


class FakeMongoClient:
    def __init__(self, uri: str, unreachable: bool = False, **kwargs):
        self.uri = uri
        self.options = kwargs
        self.unreachable = unreachable
        self.commands: list[str] = []
        self.closed = False
        self.admin = FakeAdmin(self)
        self.databases: dict[str, FakeDatabase] = {}

    def __getitem__(self, name: str) -> FakeDatabase:
        if name not in self.databases:
            self.databases[name] = FakeDatabase(name)
        return self.databases[name]

    def close(self) -> None:
        self.closed = True
