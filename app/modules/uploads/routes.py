import logging
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from app.modules.uploads.schemas import ImageUploadResponse, ResumeUploadResponse
from app.modules.uploads.service import UploadService
from app.modules.uploads.storage import CloudinaryStorage
from app.core.dependencies import require_admin
from typing import Dict, Optional

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/uploads", tags=["uploads"])


def get_storage() -> CloudinaryStorage:
    try:
        return CloudinaryStorage()
    except ValueError as e:
        logger.error(str(e))
        raise HTTPException(status_code=503, detail="File storage is not configured")


def get_upload_service(storage: CloudinaryStorage = Depends(get_storage)) -> UploadService:
    return UploadService(storage)


@router.post("/image", response_model=ImageUploadResponse)
async def upload_image(
    image: Optional[UploadFile] = File(None),
    admin: Dict = Depends(require_admin),
    service: UploadService = Depends(get_upload_service)
):
    """Upload an image (max 5MB) to the portfolio folder"""
    if image is None:
        raise HTTPException(status_code=400, detail="No image file provided")
    return await service.upload_image(image)


@router.post("/resume", response_model=ResumeUploadResponse)
async def upload_resume(
    resume: Optional[UploadFile] = File(None),
    admin: Dict = Depends(require_admin),
    service: UploadService = Depends(get_upload_service)
):
    """Upload a resume PDF (max 10MB)"""
    if resume is None:
        raise HTTPException(status_code=400, detail="No PDF file provided")
    return await service.upload_resume(resume)


@router.delete("/image/{public_id:path}")
async def delete_image(
    public_id: str,
    admin: Dict = Depends(require_admin),
    service: UploadService = Depends(get_upload_service)
):
    return service.delete_file(public_id)
