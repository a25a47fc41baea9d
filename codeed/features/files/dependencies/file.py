from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from codeed.features.files.repositories.stored_file import StoredFileRepository
from codeed.features.files.services.file_service import FileService
from codeed.features.files.utils.storage import LocalStorage
from codeed.platform.config import Settings, get_app_settings
from codeed.platform.db.session import get_db


def get_file_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> FileService:
    return FileService(
        StoredFileRepository(db),
        LocalStorage(settings.UPLOAD_DIR),
        settings.MAX_UPLOAD_SIZE,
    )
