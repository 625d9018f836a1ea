from fastapi import APIRouter, Depends, File, UploadFile

from app.core.config import settings
from app.core.security import get_current_user
from app.models.user import User
from app.services.uploads import store_image

router = APIRouter(prefix="/api/v1", tags=["upload"])


@router.post("/upload")
async def upload_image(image: UploadFile = File(...), user: User = Depends(get_current_user)):
    # one byte past the limit is enough for the size check to fail
    data = await image.read(settings.UPLOAD_MAX_BYTES + 1)
    stored = store_image(data, image.filename or "upload", image.content_type)
    return {
        "success": True,
        "imageUrl": stored.url,
        "url": stored.url,
        "size": stored.size,
        "message": "Image uploaded successfully",
    }
