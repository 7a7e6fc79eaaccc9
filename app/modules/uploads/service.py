import logging
import time
from fastapi import HTTPException, UploadFile
from cloudinary.exceptions import Error as CloudinaryError
from app.modules.uploads.schemas import ImageUploadResponse, ResumeUploadResponse
from app.modules.uploads.storage import CloudinaryStorage

logger = logging.getLogger(__name__)

MAX_IMAGE_BYTES = 5 * 1024 * 1024
MAX_RESUME_BYTES = 10 * 1024 * 1024
PDF_CONTENT_TYPE = "application/pdf"


async def read_limited(file: UploadFile, max_bytes: int) -> bytes:
    """Read at most max_bytes; 413 if the upload is larger"""
    content = await file.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB"
        )
    return content


class UploadService:
    def __init__(self, storage: CloudinaryStorage):
        self.storage = storage

    async def upload_image(self, file: UploadFile) -> ImageUploadResponse:
        if not (file.content_type or "").startswith("image/"):
            raise HTTPException(status_code=400, detail="Only image files are allowed!")
        content = await read_limited(file, MAX_IMAGE_BYTES)
        if not content:
            raise HTTPException(status_code=400, detail="No image file provided")

        try:
            result = self.storage.upload_image(content)
        except CloudinaryError:
            raise HTTPException(status_code=500, detail="Failed to upload image")

        logger.info("Uploaded image %s (%d bytes)", result.get("public_id"), len(content))
        return ImageUploadResponse(
            url=result["secure_url"],
            publicId=result["public_id"],
            width=result.get("width"),
            height=result.get("height"),
        )

    async def upload_resume(self, file: UploadFile) -> ResumeUploadResponse:
        if file.content_type != PDF_CONTENT_TYPE:
            raise HTTPException(status_code=400, detail="Only PDF files are allowed for resume!")
        content = await read_limited(file, MAX_RESUME_BYTES)
        if not content:
            raise HTTPException(status_code=400, detail="No PDF file provided")

        public_id = f"resume_{int(time.time() * 1000)}"
        try:
            result = self.storage.upload_pdf(content, public_id)
        except CloudinaryError:
            raise HTTPException(status_code=500, detail="Failed to upload resume")

        logger.info("Uploaded resume %s", result.get("public_id"))
        return ResumeUploadResponse(
            url=result["secure_url"],
            publicId=result["public_id"],
            originalName=file.filename,
        )

    def delete_file(self, public_id: str, resource_type: str = "image") -> dict:
        try:
            deleted = self.storage.delete(public_id, resource_type=resource_type)
        except CloudinaryError:
            raise HTTPException(status_code=500, detail="Failed to delete image")

        if not deleted:
            raise HTTPException(status_code=404, detail="Image not found")
        return {"message": "Image deleted successfully"}
