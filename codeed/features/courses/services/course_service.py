from codeed.features.courses.models.course import Course
from codeed.features.courses.repositories.course import CourseRepository
from codeed.features.courses.schemas.course import CourseCreate, CourseFilter, CourseUpdate
from codeed.platform.logger import get_logger

logger = get_logger(__name__)


class CourseService:
    def __init__(self, repository: CourseRepository):
        self.repository = repository

    async def create_course(self, data: CourseCreate) -> Course:
        logger.info(f"Creating course: title={data.title} author_id={data.author_id}")
        return await self.repository.create(data)

    async def get_course_by_id(self, course_id: str) -> Course:
        return await self.repository.get_by_id(course_id)

    async def update_course(self, course_id: str, data: CourseUpdate) -> Course:
        logger.info(f"Updating course: id={course_id}")
        await self.repository.update_by_id(course_id, data.changes())
        return await self.repository.get_by_id(course_id)

    async def delete_course(self, course_id: str) -> None:
        logger.info(f"Deleting course: id={course_id}")
        await self.repository.delete_by_id(course_id)

    async def find_courses(self, filters: CourseFilter) -> list[Course]:
        return await self.repository.find(filters)
