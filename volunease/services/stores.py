from typing import Any, Mapping

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.results import DeleteResult, UpdateResult

from ..db import POSTS, REQUESTS
from ..errors import NotFound
from ..utils import to_object_id

CAPACITY_FIELD = "volunNumber"


class DocumentStore:
    """Identity-keyed access to one Mongo collection."""

    not_found_message = "Document not found"

    def __init__(self, collection: Collection):
        self.collection = collection

    def _oid(self, doc_id: str):
        oid = to_object_id(doc_id)
        if oid is None:
            raise NotFound(self.not_found_message)
        return oid

    def insert(self, doc: Mapping[str, Any]) -> str:
        result = self.collection.insert_one(dict(doc))
        return str(result.inserted_id)

    def find_by_id(self, doc_id: str) -> dict:
        doc = self.collection.find_one({"_id": self._oid(doc_id)})
        if not doc:
            raise NotFound(self.not_found_message)
        return doc

    def find_many(
        self,
        filter: Mapping[str, Any] | None = None,
        sort: list[tuple[str, int]] | None = None,
        skip: int = 0,
        limit: int = 0,
    ) -> list[dict]:
        cursor = self.collection.find(dict(filter or {}))
        if sort:
            cursor = cursor.sort(sort)
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def update_by_id(self, doc_id: str, fields: Mapping[str, Any]) -> UpdateResult:
        result = self.collection.update_one({"_id": self._oid(doc_id)}, {"$set": dict(fields)})
        if result.matched_count == 0:
            raise NotFound(self.not_found_message)
        return result

    def delete_by_id(self, doc_id: str) -> DeleteResult:
        result = self.collection.delete_one({"_id": self._oid(doc_id)})
        if result.deleted_count == 0:
            raise NotFound(self.not_found_message)
        return result

    def delete_many(self, filter: Mapping[str, Any]) -> int:
        return self.collection.delete_many(dict(filter)).deleted_count

    def count(self) -> int:
        # metadata based, may lag behind recent writes
        return self.collection.estimated_document_count()


class PostStore(DocumentStore):
    not_found_message = "Volunteer Post not found"

    @classmethod
    def from_db(cls, db: Database) -> "PostStore":
        return cls(db[POSTS])

    def latest(self, n: int = 6) -> list[dict]:
        return self.find_many(sort=[("_id", DESCENDING)], limit=n)

    def page(self, page: int, size: int) -> list[dict]:
        """Return the 1-based ``page`` of posts in the collection's natural order."""
        return self.find_many(skip=(page - 1) * size, limit=size)

    def by_owner(self, uid: str) -> list[dict]:
        return self.find_many({"uid": uid})

    def take_slot(self, post_id: str) -> bool:
        """Atomically take one slot; False when the post is exhausted or gone."""
        result = self.collection.update_one(
            {"_id": self._oid(post_id), CAPACITY_FIELD: {"$gt": 0}},
            {"$inc": {CAPACITY_FIELD: -1}},
        )
        return result.modified_count == 1

    def release_slot(self, post_id: str) -> bool:
        oid = to_object_id(post_id)
        if oid is None:
            return False
        result = self.collection.update_one({"_id": oid}, {"$inc": {CAPACITY_FIELD: 1}})
        return result.modified_count == 1


class RequestStore(DocumentStore):
    not_found_message = "Volunteer request not found"

    @classmethod
    def from_db(cls, db: Database) -> "RequestStore":
        return cls(db[REQUESTS])

    def ensure_indexes(self) -> None:
        """One request per (post, volunteer); idempotent."""
        self.collection.create_index(
            [("postId", ASCENDING), ("volunteerId", ASCENDING)],
            unique=True,
            name="postId_volunteerId_unique",
        )

    def find_match(self, post_id: str, volunteer_id: str) -> dict | None:
        return self.collection.find_one({"postId": post_id, "volunteerId": volunteer_id})

    def by_volunteer(self, volunteer_id: str) -> list[dict]:
        return self.find_many({"volunteerId": volunteer_id})

    def delete_for_post(self, post_id: str) -> int:
        return self.delete_many({"postId": post_id})
