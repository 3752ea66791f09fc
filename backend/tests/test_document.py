from __future__ import annotations

from datetime import datetime

import pytest
from bson import ObjectId
from bson.errors import InvalidId

from app.models.document import parse_object_id, serialize_document, without_identifier


def test_serialize_document_renders_nested_object_ids():
    course_id = ObjectId()
    author_id = ObjectId()
    lesson_ids = [ObjectId(), ObjectId()]
    document = {
        "_id": course_id,
        "author": {"_id": author_id, "name": "Ada"},
        "lessons": lesson_ids,
        "published": datetime(2024, 5, 1, 12, 30),
    }

    assert serialize_document(document) == {
        "_id": str(course_id),
        "author": {"_id": str(author_id), "name": "Ada"},
        "lessons": [str(lesson_id) for lesson_id in lesson_ids],
        "published": "2024-05-01T12:30:00",
    }


def test_serialize_document_passes_none_through():
    assert serialize_document(None) is None


def test_parse_object_id():
    object_id = ObjectId()

    assert parse_object_id(str(object_id)) == object_id
    with pytest.raises(InvalidId):
        parse_object_id("abc")


def test_without_identifier_drops_only_id():
    assert without_identifier({"_id": "x", "title": "Intro"}) == {"title": "Intro"}
