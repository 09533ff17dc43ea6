"""
Domain models for the password collection.

A password record is an arbitrary JSON object; only the store-assigned `_id`
is known to the service. Acknowledgements mirror the document-store driver
results and serialize with the driver's camelCase keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bson import ObjectId

PasswordRecord = dict[str, Any]
"""One stored password entry (site, username, password, id, ...). No schema."""

ID_FIELD = "_id"


@dataclass
class InsertResult:
    """Acknowledgement for a single insert."""

    inserted_id: Any
    """Hex string of a store-generated ObjectId, or the client-supplied _id as given."""
    acknowledged: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"acknowledged": self.acknowledged, "insertedId": self.inserted_id}


@dataclass
class DeleteResult:
    """Acknowledgement for a single delete. deleted_count is 0 (no match) or 1."""

    deleted_count: int
    acknowledged: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"acknowledged": self.acknowledged, "deletedCount": self.deleted_count}


def render_id(value: Any) -> Any:
    """Store-generated ObjectIds go on the wire as hex; client-supplied ids keep their JSON value."""
    if isinstance(value, ObjectId):
        return str(value)
    return value


def same_value(stored: Any, wanted: Any) -> bool:
    """
    Equality with document-store typing: booleans never equal numbers,
    and lists and embedded documents compare element by element.
    """
    if isinstance(stored, bool) or isinstance(wanted, bool):
        return isinstance(stored, bool) and isinstance(wanted, bool) and stored == wanted
    if isinstance(stored, dict) and isinstance(wanted, dict):
        return stored.keys() == wanted.keys() and all(same_value(stored[k], wanted[k]) for k in wanted)
    if isinstance(stored, list) and isinstance(wanted, list):
        return len(stored) == len(wanted) and all(same_value(s, w) for s, w in zip(stored, wanted))
    if isinstance(stored, (dict, list)) or isinstance(wanted, (dict, list)):
        return False
    return stored == wanted


def matches(document: PasswordRecord, record_filter: PasswordRecord) -> bool:
    """
    Return True if every field of record_filter equals the same field of document.

    Extra fields on the document are ignored, and a None filter value also matches
    a missing field, as a document-store equality filter does. An empty filter matches anything.
    """
    return all(same_value(document.get(key), value) for key, value in record_filter.items())
