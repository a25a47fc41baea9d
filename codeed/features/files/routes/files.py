from typing import List, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from fastapi.responses import FileResponse

from codeed.features.files.dependencies.file import get_file_service
from codeed.features.files.schemas.stored_file import StoredFileFilter, StoredFileResponse
from codeed.features.files.services.file_service import FileService
from codeed.platform.response import api_response

router = APIRouter(prefix="/files", tags=["Files"])


@router.post("/upload", response_model=dict, status_code=status.HTTP_201_CREATED)
async def upload_files(
    files: List[UploadFile] = File(...),
    file_service: FileService = Depends(get_file_service),
):
    uploaded = await file_service.upload(files)
    return api_response(
        data=uploaded,
        message="Files uploaded successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("", response_model=dict)
async def find_files(
    filename: Optional[str] = Query(None, description="Partial, case-insensitive"),
    file_service: FileService = Depends(get_file_service),
):
    files = await file_service.find_files(StoredFileFilter(filename=filename))
    return api_response(
        data=[StoredFileResponse.model_validate(f) for f in files],
        message="Files retrieved successfully",
    )


@router.get("/{file_id}")
async def download_file(
    file_id: str,
    file_service: FileService = Depends(get_file_service),
):
    record, path = await file_service.get_file(file_id)
    return FileResponse(path, media_type=record.content_type, filename=record.filename)


@router.delete("/{file_id}", response_model=dict)
async def delete_file(
    file_id: str,
    file_service: FileService = Depends(get_file_service),
):
    await file_service.delete_file(file_id)
    return api_response(message="File deleted successfully")
