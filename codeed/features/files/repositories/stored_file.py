from codeed.features.files.models.stored_file import StoredFile
from codeed.features.files.schemas.stored_file import StoredFileFilter
from codeed.platform.db.repository import SoftDeleteRepository


class StoredFileRepository(SoftDeleteRepository[StoredFile]):
    model = StoredFile
    entity = "file"

    async def create(self, record: StoredFile) -> StoredFile:
        return await self.insert(record)

    async def find(self, filters: StoredFileFilter) -> list[StoredFile]:
        criteria = []
        if filters.filename:
            criteria.append(StoredFile.filename.icontains(filters.filename, autoescape=True))
        return await self.find_where(*criteria, order_by=(StoredFile.created_at,))
