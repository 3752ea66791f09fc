"""
Document helpers for the course platform.

Users and courses are schemaless MongoDB documents. These helpers convert
identifiers and driver results into JSON-ready dicts shaped like the MongoDB
driver's own JSON output.
"""

from typing import Any, Dict, Optional
from bson import ObjectId
from bson.errors import InvalidId
from fastapi.encoders import jsonable_encoder
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


def parse_object_id(value: str) -> ObjectId:
    """
    Parse a storage identifier from a path parameter.

    Raises:
        InvalidId: ``value`` is not a 24 character hex string
    """
    if not ObjectId.is_valid(value):
        raise InvalidId(f"Invalid id: {value}")
    return ObjectId(value)


def _jsonable(value: Any) -> Any:
    return jsonable_encoder(value, custom_encoder={ObjectId: str})


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Render a stored document as JSON, with ObjectIds as hex strings."""
    if document is None:
        return None
    return _jsonable(document)


def serialize_insert_result(result: InsertOneResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": _jsonable(result.inserted_id),
    }


def serialize_update_result(result: UpdateResult) -> Dict[str, Any]:
    upserted_id = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 0 if upserted_id is None else 1,
        "upsertedId": _jsonable(upserted_id),
    }


def serialize_delete_result(result: DeleteResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count,
    }


def without_identifier(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Drop ``_id`` from a ``$set`` payload; the storage identifier is immutable."""
    return {key: value for key, value in fields.items() if key != "_id"}
