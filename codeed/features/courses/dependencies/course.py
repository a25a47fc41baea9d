from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from codeed.features.courses.repositories.course import CourseRepository
from codeed.features.courses.services.course_service import CourseService
from codeed.platform.db.session import get_db


def get_course_service(db: AsyncSession = Depends(get_db)) -> CourseService:
    return CourseService(CourseRepository(db))
