"""
Courses router for the course platform.

Create, list, read, update and delete course documents. Writes require a
valid credential; reads are public.
"""

from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends
from pymongo.collection import Collection
import logging

from app.core.database import get_course_collection
from app.models.document import (
    parse_object_id,
    serialize_delete_result,
    serialize_document,
    serialize_insert_result,
    serialize_update_result,
    without_identifier
)
from app.routers.auth import get_current_email


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
def create_course(
    course_data: Dict[str, Any] = Body(...),
    current_email: str = Depends(get_current_email),
    courses: Collection = Depends(get_course_collection)
) -> Dict[str, Any]:
    """
    Add a new course.
    """
    result = courses.insert_one(dict(course_data))
    logger.info(f"Course {result.inserted_id} created by {current_email}")
    return serialize_insert_result(result)


@router.get("")
def list_courses(
    courses: Collection = Depends(get_course_collection)
) -> List[Dict[str, Any]]:
    """
    List all courses.
    """
    return [serialize_document(course) for course in courses.find()]


@router.get("/{course_id}")
def get_course(
    course_id: str,
    courses: Collection = Depends(get_course_collection)
) -> Optional[Dict[str, Any]]:
    """
    Get a course by id.
    """
    course = courses.find_one({"_id": parse_object_id(course_id)})
    return serialize_document(course)


@router.patch("/{course_id}")
def update_course(
    course_id: str,
    course_data: Dict[str, Any] = Body(...),
    current_email: str = Depends(get_current_email),
    courses: Collection = Depends(get_course_collection)
) -> Dict[str, Any]:
    """
    Update fields of a course.
    """
    result = courses.update_one(
        {"_id": parse_object_id(course_id)},
        {"$set": without_identifier(course_data)}
    )
    logger.info(f"Course {course_id} updated by {current_email}")
    return serialize_update_result(result)


@router.delete("/{course_id}")
def delete_course(
    course_id: str,
    current_email: str = Depends(get_current_email),
    courses: Collection = Depends(get_course_collection)
) -> Dict[str, Any]:
    """
    Delete a course.
    """
    result = courses.delete_one({"_id": parse_object_id(course_id)})
    logger.info(f"Course {course_id} deleted by {current_email}")
    return serialize_delete_result(result)
