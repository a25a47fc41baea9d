from pathlib import Path

from fastapi import UploadFile

from codeed.features.files.models.stored_file import StoredFile
from codeed.features.files.repositories.stored_file import StoredFileRepository
from codeed.features.files.schemas.stored_file import StoredFileFilter, UploadedFile
from codeed.features.files.utils.storage import LocalStorage, storage_key_for
from codeed.platform.exceptions import FileTooLargeError, NotFoundError
from codeed.platform.logger import get_logger
from codeed.platform.utils.ids import new_id

logger = get_logger(__name__)


class FileService:
    def __init__(self, repository: StoredFileRepository, storage: LocalStorage, max_size: int):
        self.repository = repository
        self.storage = storage
        self.max_size = max_size

    async def upload(self, files: list[UploadFile]) -> list[UploadedFile]:
        """
        Store every file and return their ids in upload order.

        All sizes are checked before anything is written, so an oversized
        file rejects the whole batch.
        """
        for upload in files:
            # size is known once the multipart body is parsed
            if upload.size is not None and upload.size > self.max_size:
                self._reject(upload.filename, upload.size)

        payloads = []
        for upload in files:
            contents = await upload.read()
            if len(contents) > self.max_size:
                self._reject(upload.filename, len(contents))
            payloads.append((upload, contents))

        uploaded = []
        for upload, contents in payloads:
            record = await self._store(upload, contents)
            uploaded.append(UploadedFile(filename=record.filename, file_id=record.id))
        return uploaded

    def _reject(self, filename, size: int) -> None:
        logger.warning(f"Rejected upload {filename}: {size} bytes")
        raise FileTooLargeError(f"File too large. Maximum size is {self.max_size} bytes")

    async def _store(self, upload: UploadFile, contents: bytes) -> StoredFile:
        file_id = new_id()
        filename = Path(upload.filename or "file").name
        record = StoredFile(
            id=file_id,
            filename=filename,
            content_type=upload.content_type or "application/octet-stream",
            size=len(contents),
            storage_key=storage_key_for(file_id, filename),
        )
        self.storage.save(record.storage_key, contents)
        try:
            await self.repository.create(record)
        except Exception:
            self.storage.delete(record.storage_key)
            raise
        logger.info(f"Stored file {filename} as {record.storage_key}")
        return record

    async def get_file(self, file_id: str) -> tuple[StoredFile, Path]:
        record = await self.repository.get_by_id(file_id)
        if not self.storage.exists(record.storage_key):
            logger.error(f"Blob missing for file {record.id}: {record.storage_key}")
            raise NotFoundError("File content not found")
        return record, self.storage.path_for(record.storage_key)

    async def delete_file(self, file_id: str) -> None:
        record = await self.repository.get_by_id(file_id)
        await self.repository.delete_by_id(record.id)
        self.storage.delete(record.storage_key)
        logger.info(f"Deleted file: id={record.id}")

    async def find_files(self, filters: StoredFileFilter) -> list[StoredFile]:
        return await self.repository.find(filters)
