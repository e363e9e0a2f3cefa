from typing import Any

from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: str) -> ObjectId | None:
    """Parse a path id into an ObjectId, or None when it is not one."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def serialize_doc(doc: dict[str, Any] | None) -> dict[str, Any] | None:
    """Return a JSON-friendly copy of a Mongo document (ObjectIds as strings)."""
    if doc is None:
        return None
    out = {}
    for key, value in doc.items():
        out[key] = str(value) if isinstance(value, ObjectId) else value
    return out


def serialize_docs(docs) -> list[dict[str, Any]]:
    return [serialize_doc(d) for d in docs]
