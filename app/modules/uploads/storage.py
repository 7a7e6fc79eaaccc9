import io
import logging
from typing import Any, Dict, List, Optional

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from app.config import settings

logger = logging.getLogger(__name__)

IMAGE_FOLDER = "portfolio"
RESUME_FOLDER = "portfolio/resumes"

IMAGE_TRANSFORMATION: List[Dict[str, Any]] = [
    {"width": 1200, "height": 800, "crop": "limit"},
    {"quality": "auto"},
    {"fetch_format": "auto"},
]


class CloudinaryStorage:
    def __init__(self):
        if not settings.cloudinary_configured:
            raise ValueError("Cloudinary cloud name, API key and secret must be configured")

        cloudinary.config(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=settings.cloudinary_api_secret,
            secure=True,
        )

    def upload_image(self, content: bytes) -> Dict[str, Any]:
        """Upload an image, capped at 1200x800, and return Cloudinary's result"""
        try:
            return cloudinary.uploader.upload(
                io.BytesIO(content),
                resource_type="image",
                folder=IMAGE_FOLDER,
                transformation=IMAGE_TRANSFORMATION,
            )
        except CloudinaryError as e:
            logger.error(f"Cloudinary upload error: {e}")
            raise

    def upload_pdf(self, content: bytes, public_id: str, folder: Optional[str] = None) -> Dict[str, Any]:
        try:
            return cloudinary.uploader.upload(
                io.BytesIO(content),
                resource_type="auto",
                folder=folder or RESUME_FOLDER,
                public_id=public_id,
                format="pdf",
            )
        except CloudinaryError as e:
            logger.error(f"Cloudinary upload error: {e}")
            raise

    def delete(self, public_id: str, resource_type: str = "image") -> bool:
        """Delete an asset; False when Cloudinary has no such public id"""
        try:
            result = cloudinary.uploader.destroy(public_id, resource_type=resource_type)
        except CloudinaryError as e:
            logger.error(f"Failed to delete {public_id} from Cloudinary: {e}")
            raise
        return result.get("result") == "ok"
