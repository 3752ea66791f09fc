"""
Document models for the course platform.

Users and courses are schemaless MongoDB documents; this package holds the
helpers that turn identifiers and driver results into JSON.
"""

from .document import (
    parse_object_id,
    serialize_document,
    serialize_insert_result,
    serialize_update_result,
    serialize_delete_result,
    without_identifier
)

__all__ = [
    "parse_object_id",
    "serialize_document",
    "serialize_insert_result",
    "serialize_update_result",
    "serialize_delete_result",
    "without_identifier"
]
