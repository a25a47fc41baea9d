from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from codeed.features.courses.dependencies.course import get_course_service
from codeed.features.courses.schemas.course import (
    CourseCreate,
    CourseFilter,
    CourseResponse,
    CourseUpdate,
)
from codeed.features.courses.services.course_service import CourseService
from codeed.platform.response import api_response

router = APIRouter(prefix="/courses", tags=["Courses"])


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_course(
    request: CourseCreate,
    course_service: CourseService = Depends(get_course_service),
):
    course = await course_service.create_course(request)
    return api_response(
        data=CourseResponse.model_validate(course),
        message="Course created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("", response_model=dict)
async def find_courses(
    title: Optional[str] = Query(None, description="Partial, case-insensitive"),
    tags: list[str] = Query([], description="Matches courses having any of the tags"),
    is_published: Optional[bool] = Query(None),
    author_id: Optional[str] = Query(None),
    course_service: CourseService = Depends(get_course_service),
):
    filters = CourseFilter(title=title, tags=tags, is_published=is_published, author_id=author_id)
    courses = await course_service.find_courses(filters)
    return api_response(
        data=[CourseResponse.model_validate(course) for course in courses],
        message="Courses retrieved successfully",
    )


@router.get("/{course_id}", response_model=dict)
async def get_course(
    course_id: str,
    course_service: CourseService = Depends(get_course_service),
):
    course = await course_service.get_course_by_id(course_id)
    return api_response(data=CourseResponse.model_validate(course), message="Course retrieved successfully")


@router.patch("/{course_id}", response_model=dict)
async def update_course(
    course_id: str,
    request: CourseUpdate,
    course_service: CourseService = Depends(get_course_service),
):
    course = await course_service.update_course(course_id, request)
    return api_response(data=CourseResponse.model_validate(course), message="Course updated successfully")


@router.delete("/{course_id}", response_model=dict)
async def delete_course(
    course_id: str,
    course_service: CourseService = Depends(get_course_service),
):
    await course_service.delete_course(course_id)
    return api_response(message="Course deleted successfully")
