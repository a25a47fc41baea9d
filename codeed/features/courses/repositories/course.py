from codeed.features.courses.models.course import Course, CourseTag
from codeed.features.courses.schemas.course import CourseCreate, CourseFilter
from codeed.platform.db.repository import SoftDeleteRepository
from codeed.platform.utils.ids import parse_id


class CourseRepository(SoftDeleteRepository[Course]):
    model = Course
    entity = "course"

    async def create(self, data: CourseCreate) -> Course:
        values = data.model_dump()
        values["author_id"] = parse_id(data.author_id, "author")
        return await self.insert(Course(**values))

    async def find(self, filters: CourseFilter) -> list[Course]:
        criteria = []
        if filters.title:
            criteria.append(Course.title.icontains(filters.title, autoescape=True))
        if filters.tags:
            criteria.append(Course.tag_links.any(CourseTag.name.in_(filters.tags)))
        if filters.is_published is not None:
            criteria.append(Course.is_published == filters.is_published)
        if filters.author_id:
            criteria.append(Course.author_id == parse_id(filters.author_id, "author"))
        return await self.find_where(*criteria, order_by=(Course.created_at,))
